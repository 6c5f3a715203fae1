"""Capability interface for anything drawn on the competition field."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable

from competition_field.core.geometry import Pose2d, Pose3d


class ObjectOnField(ABC):
    """
    Object whose pose is rendered to the dashboard and recorded to telemetry.

    Objects are grouped by ``type_name``: objects sharing a type name are
    drawn on the same dashboard layer and logged to the same channel.
    Producers own these objects; the field only holds references.
    """

    @property
    @abstractmethod
    def type_name(self) -> str:
        """Grouping key, e.g. "Note" or "OpponentRobot"."""
        ...

    @abstractmethod
    def pose3d(self) -> Pose3d:
        """Current spatial pose. Queried every publish cycle."""
        ...

    def on_2d_field(self) -> bool:
        """True if the object has a meaningful pose on the field plane."""
        return False


class ObjectOn2dField(ObjectOnField):
    """Object that natively lives on the field plane."""

    @abstractmethod
    def pose2d(self) -> Pose2d:
        """Current planar pose."""
        ...

    def pose3d(self) -> Pose3d:
        return self.pose2d().to_pose3d()

    def on_2d_field(self) -> bool:
        return True


class RobotOnField(ObjectOn2dField):
    """
    Robot whose pose comes from a supplier (usually the pose estimator).

    Usage:
        robot = RobotOnField(drive.get_pose)
        field = CompetitionField(robot)
    """

    def __init__(self, pose_supplier: Callable[[], Pose2d], type_name: str = "Robot") -> None:
        self._pose_supplier = pose_supplier
        self._type_name = type_name

    @property
    def type_name(self) -> str:
        return self._type_name

    def pose2d(self) -> Pose2d:
        return self._pose_supplier()


class GamePieceOnField(ObjectOn2dField):
    """Game piece resting on the carpet."""

    def __init__(self, type_name: str, pose: Pose2d) -> None:
        self._type_name = type_name
        self._pose = pose

    @property
    def type_name(self) -> str:
        return self._type_name

    def pose2d(self) -> Pose2d:
        return self._pose

    def set_pose(self, pose: Pose2d) -> None:
        self._pose = pose

    def __repr__(self) -> str:
        return f"GamePieceOnField({self._type_name!r}, {self._pose!r})"


class GamePieceInFlight(ObjectOnField):
    """Game piece off the ground (shot or held); only logged in 3D."""

    def __init__(self, type_name: str, pose: Pose3d) -> None:
        self._type_name = type_name
        self._pose = pose

    @property
    def type_name(self) -> str:
        return self._type_name

    def pose3d(self) -> Pose3d:
        return self._pose

    def set_pose(self, pose: Pose3d) -> None:
        self._pose = pose

    def __repr__(self) -> str:
        return f"GamePieceInFlight({self._type_name!r}, {self._pose!r})"


class OpponentRobotOnField(ObjectOn2dField):
    """Opponent robot at a fixed or externally updated pose."""

    TYPE_NAME = "OpponentRobot"

    def __init__(self, robot_id: int, pose: Pose2d) -> None:
        self.robot_id = robot_id
        self._pose = pose

    @property
    def type_name(self) -> str:
        return self.TYPE_NAME

    def pose2d(self) -> Pose2d:
        return self._pose

    def set_pose(self, pose: Pose2d) -> None:
        self._pose = pose

    def __repr__(self) -> str:
        return f"OpponentRobotOnField({self.robot_id}, {self._pose!r})"
