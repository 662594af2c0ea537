import math

import numpy as np
import pytest

from depthcluster.pose import Pose
from depthcluster.rich_point import RichPoint


def test_default_pose_is_identity():
    pose = Pose()
    np.testing.assert_allclose(pose.matrix, np.eye(4))
    assert pose.likelihood == 1.0


def test_from_2d_sets_translation_and_theta():
    pose = Pose.from_2d(1.0, 2.0, 0.5)
    assert pose.x == 1.0
    assert pose.y == 2.0
    assert pose.z == 0.0
    assert pose.theta == pytest.approx(0.5)


def test_negative_theta_recovered():
    assert Pose.from_2d(0.0, 0.0, -0.8).theta == pytest.approx(-0.8)


def test_from_matrix_rejects_wrong_shape():
    with pytest.raises(ValueError):
        Pose.from_matrix(np.eye(3))


def test_likelihood_out_of_range_raises_and_keeps_old_value():
    pose = Pose()
    pose.likelihood = 0.3
    with pytest.raises(ValueError):
        pose.likelihood = 1.5
    assert pose.likelihood == 0.3


def test_local_frame_of_itself_is_identity():
    pose = Pose.from_2d(3.0, -1.0, 1.2)
    np.testing.assert_allclose(pose.in_local_frame_of(pose).matrix, np.eye(4), atol=1e-12)


def test_composition_with_local_frame_restores_pose():
    pose = Pose.from_vector6([1.0, 2.0, 3.0, 0.3, 0.2, 0.1])
    other = Pose.from_2d(-2.0, 0.5, 0.7)
    restored = other * pose.in_local_frame_of(other)
    np.testing.assert_allclose(restored.matrix, pose.matrix, atol=1e-12)


def test_to_local_frame_of_in_place_keeps_likelihood():
    pose = Pose.from_2d(1.0, 1.0, 0.0)
    pose.likelihood = 0.4
    pose.to_local_frame_of(Pose.from_2d(1.0, 1.0, 0.0))
    assert pose.likelihood == 0.4
    np.testing.assert_allclose(pose.matrix, np.eye(4), atol=1e-12)


def test_apply_rotates_point():
    pose = Pose.from_2d(0.0, 0.0, math.pi / 2)
    np.testing.assert_allclose(pose.apply([1.0, 0.0, 0.0]), [0.0, 1.0, 0.0], atol=1e-12)


def test_mul_with_rich_point_matches_apply():
    pose = Pose.from_vector6([0.5, -1.0, 2.0, 0.1, 0.2, 0.3])
    point = RichPoint(1.0, 2.0, 3.0)
    np.testing.assert_allclose(pose * point, pose.apply([1.0, 2.0, 3.0]))


def test_apply_preserves_distances():
    pose = Pose.from_vector6([4.0, 5.0, 6.0, 0.4, -0.3, 1.1])
    a, b = np.array([1.0, 2.0, 3.0]), np.array([-2.0, 0.5, 7.0])
    assert np.linalg.norm(pose.apply(a) - pose.apply(b)) == pytest.approx(np.linalg.norm(a - b))


def test_vector6_round_trip():
    vector = [1.0, 2.0, 3.0, 0.3, 0.2, 0.1]
    np.testing.assert_allclose(Pose.from_vector6(vector).to_vector6(), vector, atol=1e-12)


def test_vector6_matrix_round_trip():
    pose = Pose.from_vector6([0.0, 0.0, 0.0, -0.9, 0.4, 2.5])
    again = Pose.from_vector6(pose.to_vector6())
    np.testing.assert_allclose(again.matrix, pose.matrix, atol=1e-12)


def test_negation_negates_translation_only():
    pose = Pose.from_vector6([1.0, -2.0, 3.0, 0.3, 0.2, 0.1])
    negated = -pose
    np.testing.assert_allclose(negated.matrix[:3, 3], [-1.0, 2.0, -3.0])
    np.testing.assert_allclose(negated.matrix[:3, :3], np.eye(3))


@pytest.mark.parametrize("setter", ["set_pitch", "set_roll", "set_yaw"])
def test_single_axis_rotations_are_orthonormal(setter):
    pose = Pose()
    getattr(pose, setter)(0.7)
    rotation = pose.matrix[:3, :3]
    np.testing.assert_allclose(rotation @ rotation.T, np.eye(3), atol=1e-12)
    assert np.linalg.det(rotation) == pytest.approx(1.0)


def test_set_yaw_matches_theta():
    pose = Pose()
    pose.set_yaw(0.25)
    assert pose.theta == pytest.approx(0.25)


def test_format_2d_and_3d():
    pose = Pose.from_2d(1.0, 2.0, 0.5)
    pose.z = 3.0
    assert pose.format_2d() == "[1.000000, 2.000000, 0.500000]"
    assert pose.format_3d() == "[1.000000, 2.000000, 3.000000]"