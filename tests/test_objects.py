"""Tests for the object capability interface and producer helpers."""

import pytest

from competition_field import (
    GamePieceInFlight,
    GamePieceOnField,
    ObjectOn2dField,
    ObjectOnField,
    OpponentRobotOnField,
    Pose2d,
    Pose3d,
    RobotOnField,
    Rotation3d,
)


class TestCapabilityInterface:
    def test_abstract_base_cannot_be_instantiated(self):
        with pytest.raises(TypeError):
            ObjectOnField()

    def test_3d_object_defaults_off_plane(self):
        class Drone(ObjectOnField):
            type_name = "Drone"

            def pose3d(self):
                return Pose3d(0, 0, 2)

        assert Drone().on_2d_field() is False

    def test_2d_object_derives_pose3d(self):
        class Cone(ObjectOn2dField):
            type_name = "Cone"

            def __init__(self):
                self.pose = Pose2d(1, 2, 0.5)

            def pose2d(self):
                return self.pose

        cone = Cone()
        assert cone.on_2d_field() is True
        assert cone.pose3d() == Pose3d(1, 2, 0, Rotation3d(yaw=0.5))

        # derived on every read, never cached
        cone.pose = Pose2d(4, 4, 0)
        assert cone.pose3d().x == 4


class TestProducers:
    def test_robot_reads_supplier(self):
        poses = iter([Pose2d(1, 1), Pose2d(2, 2)])
        robot = RobotOnField(lambda: next(poses))
        assert robot.type_name == "Robot"
        assert robot.pose2d() == Pose2d(1, 1)
        assert robot.pose2d() == Pose2d(2, 2)

    def test_game_piece_on_field(self):
        note = GamePieceOnField("Note", Pose2d(1, 2))
        note.set_pose(Pose2d(3, 4))
        assert note.type_name == "Note"
        assert note.on_2d_field()
        assert note.pose3d() == Pose3d(3, 4, 0)

    def test_game_piece_in_flight(self):
        note = GamePieceInFlight("NoteInFlight", Pose3d(1, 2, 3))
        assert not note.on_2d_field()
        note.set_pose(Pose3d(2, 2, 2))
        assert note.pose3d() == Pose3d(2, 2, 2)

    def test_opponent_robot(self):
        opponent = OpponentRobotOnField(2, Pose2d(15, 4, 3.14))
        assert opponent.type_name == "OpponentRobot"
        assert opponent.robot_id == 2
        assert opponent.pose2d() == Pose2d(15, 4, 3.14)

    def test_equal_poses_are_distinct_objects(self):
        a = GamePieceOnField("Note", Pose2d(1, 2))
        b = GamePieceOnField("Note", Pose2d(1, 2))
        assert a != b
        assert len({a, b}) == 2
