"""Readers for KITTI-style Velodyne scans and depth images."""

from __future__ import annotations

import logging

import numpy as np
from PIL import Image

from depthcluster.cloud import Cloud
from depthcluster.rich_point import RichPoint

_LOG = logging.getLogger(__name__)

# Per-ring depth corrections for the 64 rings, kept as whole millimetres;
# every ring additionally carries a common bias of -0.125 mm.
_RING_OFFSETS_MM = (
    26, -6, 32, 2, 30, -196, 50, -34, 4, 6,
    36, -64, 36, 2, -24, -62, 40, -20, 76, -24,
    -4, -58, -32, -58, 22, -32, 60, -44, 76, -4,
    22, 6, -36, -22, -4, -58, -26, -30, 46, 36,
    -26, 42, -86, -60, 32, -10, -24, -48, -38, 40,
    -26, 38, -20, 52, -14, 20, -2, 28, 6, 22,
    24, 86, 86, 116,
)
_COMMON_BIAS_M = -0.000125

MOOSMAN_CORRECTIONS: tuple[float, ...] = tuple(
    offset / 1000.0 + _COMMON_BIAS_M for offset in _RING_OFFSETS_MM
)


def read_kitti_cloud(path: str) -> Cloud:
    """Read a binary scan of little-endian float32 quadruples (x, y, z, intensity).

    Intensity is ignored; a trailing incomplete record is dropped.
    """
    with open(path, "rb") as handle:
        data = np.frombuffer(handle.read(), dtype="<f4")
    usable = (data.size // 4) * 4
    records = data[:usable].reshape(-1, 4)
    return Cloud(points=(RichPoint(float(x), float(y), float(z)) for x, y, z, _ in records))


def read_kitti_cloud_txt(path: str) -> Cloud:
    """Read a text scan with one ``x y z intensity`` line per point.

    Lines that do not split into exactly four space-separated fields are skipped.
    """
    _LOG.info("Reading cloud from %s.", path)
    cloud = Cloud()
    with open(path, encoding="utf-8") as handle:
        for line in handle:
            fields = line.rstrip("\n").split(" ")
            if len(fields) != 4:
                _LOG.error("format of line is wrong.")
                continue
            x, y, z = (float(value) for value in fields[:3])
            cloud.append(RichPoint(x, y, z))
    return cloud


def fix_kitti_depth(original: np.ndarray) -> np.ndarray:
    """Subtract the per-row correction from every valid depth (>= 0.001 m)."""
    depth = np.array(original, dtype=np.float32)
    if depth.ndim != 2:
        raise ValueError("depth image must be two-dimensional")
    if depth.shape[0] > len(MOOSMAN_CORRECTIONS):
        raise ValueError(
            f"depth image has {depth.shape[0]} rows, at most "
            f"{len(MOOSMAN_CORRECTIONS)} are supported"
        )
    corrections = np.asarray(MOOSMAN_CORRECTIONS[: depth.shape[0]], dtype=np.float32)
    valid = depth >= 0.001
    depth -= np.where(valid, corrections[:, None], np.float32(0.0))
    return depth


def mat_from_depth_png(path: str) -> np.ndarray:
    """Load a 16-bit depth PNG (units of 1/500 m) as corrected metres."""
    with Image.open(path) as image:
        raw = np.array(image)
    depth = raw.astype(np.float32) / np.float32(500.0)
    return fix_kitti_depth(depth)