# depthcluster

Building blocks for working with LiDAR scans: angles, points, poses,
point clouds, bounding boxes, and readers for KITTI scan and depth-image
files. It also holds the base of a small command-line argument model.

## Modules

- `depthcluster.radians`: `Radians`, an immutable angle in radians
  (`value`, `valid`). Build one with `deg()`, `rad()`,
  `Radians.from_degrees()` or `Radians.from_radians()`. It supports `+`,
  `-`, multiplication and division by a number, division by another angle
  (giving a float), negation, `abs()`, `to_degrees()`, `floor()` (down to
  whole degrees) and `normalized(start, end)`, which shifts the angle by
  whole periods into a range (0 to 360 degrees by default). `<` and `>`
  allow a tolerance of one single-precision epsilon, so
  `deg(90) < deg(90)` and `deg(90) > deg(90)` are both false.
- `depthcluster.rich_point`: `RichPoint`, a dataclass with `x`, `y`, `z`
  and the `ring` index of the laser that measured it; `as_array()`,
  `from_array()`, `dist_to_sensor_2d()` and `dist_to_sensor_3d()`.
- `depthcluster.pose`: `Pose`, a 4x4 transform matrix with a `likelihood`
  in [0, 1]. Properties `x`, `y`, `z` and `theta` can be read and set;
  `from_2d()`, `from_matrix()`, `from_vector6()` / `to_vector6()`
  (translation plus X-Y-Z Euler angles), `set_pitch()`, `set_roll()`,
  `set_yaw()`, `to_local_frame_of()`, `in_local_frame_of()`, `apply()` to
  a point, `format_2d()`, `format_3d()`. `pose * pose` composes two poses,
  `pose * point` transforms a point, and `-pose` gives a pure translation
  by the negated translation.
- `depthcluster.cloud`: `Cloud`, an ordered list of `RichPoint`s with a
  `pose` and a `sensor_pose`. It supports `len()`, indexing, iteration,
  `append()`, `resize()`, `copy()`, `transform_in_place()` and
  `transform()`. A `projection` attribute can hold any object; it is
  cloned (via its `clone()` method, or a deep copy) by `copy()` and
  cleared when the points are transformed.
- `depthcluster.bbox`: `Bbox`, an axis-aligned box with `min_point`,
  `max_point`, `center`, `scale` and `volume`. `Bbox.from_cloud()`,
  `intersect()`, `intersects()` and `move_by(pose)`. A box without
  positive extent on every axis has zero center and scale and a volume of
  `Bbox.WRONG_VOLUME` (-1.0).
- `depthcluster.timer`: `Timer`, whose `measure(units)` returns whole
  `Units.MICRO` or `Units.MILLI` elapsed since the last start or
  measurement, and restarts it.
- `depthcluster.folder_reader`: `FolderReader(folder_path, ending_with,
  starting_with, order)` collects the files of a folder matching a prefix
  and suffix; with `Order.SORTED` they are ordered by the last number in
  each path (`num_from_string()`). A missing folder raises
  `FileNotFoundError`. Hand out paths with `next_file_path()` (which
  returns `None` when none are left) or by iterating; `all_file_paths`
  lists all of them.
- `depthcluster.velodyne`: `read_kitti_cloud()` reads binary scans of
  little-endian float32 `x y z intensity` records; `read_kitti_cloud_txt()`
  reads the text form, skipping malformed lines; `mat_from_depth_png()`
  loads a 16-bit depth PNG (1/500 m per unit) as a float32 array in metres
  and applies `fix_kitti_depth()`, which subtracts the per-row
  `MOOSMAN_CORRECTIONS` from valid depths (images of up to 64 rows).
- `depthcluster.arg_errors`: `ArgException` and its subclasses
  `ArgParseException`, `CmdLineParseException` and
  `SpecificationException`, plus `ExitException`.
- `depthcluster.arg`: the abstract `Arg` base class (flag and name
  checks, `short_id()`, `long_id()`, `description`, `is_set`,
  `trim_flag()`, the shared delimiter and ignore-rest state), the
  `Visitor` hook, and `extract_value(text, value_type)`, which converts a
  string to exactly one value of a type.

## Installation

```
pip install depthcluster
```

## Example

```python
from depthcluster.bbox import Bbox
from depthcluster.pose import Pose
from depthcluster.radians import deg
from depthcluster.velodyne import read_kitti_cloud

cloud = read_kitti_cloud("scan_000000.bin")
print(len(cloud), "points")

box = Bbox.from_cloud(cloud)
print("volume:", box.volume, "center:", box.center)

moved = cloud.transform(Pose.from_2d(1.0, 2.0, deg(90).value))
```

## What it does not do

- It does not cluster anything: there is no segmentation of clouds into
  objects, and no range-image projection. `Cloud.projection` is only a
  place to keep one.
- `Arg` is abstract and there is no parser that ties arguments together,
  so the package offers no ready command-line interface and installs no
  commands.

## Running the tests

```
pip install depthcluster[test]
pytest
```