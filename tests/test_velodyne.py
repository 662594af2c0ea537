import struct

import numpy as np
import pytest
from PIL import Image

from depthcluster.velodyne import (
    fix_kitti_depth,
    mat_from_depth_png,
    read_kitti_cloud,
    read_kitti_cloud_txt,
)


def test_full_64_ring_image_gets_pinned_corrections():
    fixed = fix_kitti_depth(np.ones((64, 1), dtype=np.float32))
    assert fixed.shape == (64, 1)
    assert fixed[0, 0] == pytest.approx(1.0 - 0.025875, abs=1e-6)
    assert fixed[5, 0] == pytest.approx(1.0 + 0.196125, abs=1e-6)
    assert fixed[63, 0] == pytest.approx(1.0 - 0.115875, abs=1e-6)


def test_read_binary_cloud(tmp_path):
    path = tmp_path / "scan.bin"
    path.write_bytes(struct.pack("<8f", 1.5, 2.5, -3.0, 0.7, 4.0, 5.0, 6.0, 0.1))
    cloud = read_kitti_cloud(str(path))
    assert len(cloud) == 2
    assert (cloud[0].x, cloud[0].y, cloud[0].z) == (1.5, 2.5, -3.0)
    assert (cloud[1].x, cloud[1].y, cloud[1].z) == (4.0, 5.0, 6.0)
    assert cloud[1].ring == 0


def test_read_binary_cloud_drops_partial_record(tmp_path):
    path = tmp_path / "scan.bin"
    path.write_bytes(struct.pack("<6f", 1.0, 2.0, 3.0, 0.0, 9.0, 9.0))
    cloud = read_kitti_cloud(str(path))
    assert len(cloud) == 1


def test_read_binary_missing_file(tmp_path):
    with pytest.raises(OSError):
        read_kitti_cloud(str(tmp_path / "missing.bin"))


def test_read_text_cloud_skips_bad_lines(tmp_path):
    path = tmp_path / "scan.txt"
    path.write_text("1.5 2.5 3.5 0.2\nbad line\n-1 0 2 9\n", encoding="utf-8")
    cloud = read_kitti_cloud_txt(str(path))
    assert len(cloud) == 2
    assert (cloud[0].x, cloud[0].y, cloud[0].z) == (1.5, 2.5, 3.5)
    assert (cloud[1].x, cloud[1].y, cloud[1].z) == (-1.0, 0.0, 2.0)


def test_fix_depth_leaves_invalid_and_corrects_valid():
    original = np.array([[0.0, 10.0], [0.0005, 20.0]], dtype=np.float32)
    fixed = fix_kitti_depth(original)
    assert fixed[0, 0] == 0.0
    assert fixed[1, 0] == np.float32(0.0005)
    assert fixed[0, 1] == pytest.approx(10.0 - 0.025875, abs=1e-5)
    assert fixed[1, 1] == pytest.approx(20.0 + 0.006125, abs=1e-5)
    assert original[0, 1] == 10.0


def test_fix_depth_rejects_too_many_rows():
    with pytest.raises(ValueError):
        fix_kitti_depth(np.ones((65, 2), dtype=np.float32))


def test_depth_png_round_trip(tmp_path):
    raw = np.array([[0, 5000, 10000], [2500, 0, 500]], dtype=np.uint16)
    path = tmp_path / "depth.png"
    Image.fromarray(raw).save(path)
    depth = mat_from_depth_png(str(path))
    assert depth.shape == (2, 3)
    assert depth[0, 0] == 0.0
    assert depth[1, 1] == 0.0
    assert depth[0, 1] == pytest.approx(10.0 - 0.025875, abs=1e-5)
    assert depth[1, 2] == pytest.approx(1.0 + 0.006125, abs=1e-5)