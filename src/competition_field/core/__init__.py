"""Core types for the competition field."""

from competition_field.core.errors import (
    CompetitionFieldError,
    ConfigError,
    InvalidObjectError,
)
from competition_field.core.geometry import Pose2d, Pose3d, Rotation3d, poses_to_array
from competition_field.core.objects import (
    GamePieceInFlight,
    GamePieceOnField,
    ObjectOn2dField,
    ObjectOnField,
    OpponentRobotOnField,
    RobotOnField,
)
from competition_field.core.topics import Topics

__all__ = [
    "CompetitionFieldError",
    "ConfigError",
    "GamePieceInFlight",
    "GamePieceOnField",
    "InvalidObjectError",
    "ObjectOn2dField",
    "ObjectOnField",
    "OpponentRobotOnField",
    "Pose2d",
    "Pose3d",
    "RobotOnField",
    "Rotation3d",
    "Topics",
    "poses_to_array",
]
