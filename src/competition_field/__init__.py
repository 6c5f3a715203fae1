"""competition_field - Field object registry and telemetry for competition robots."""

from competition_field.config import FieldConfig, load_field_config
from competition_field.core import (
    CompetitionFieldError,
    ConfigError,
    GamePieceInFlight,
    GamePieceOnField,
    InvalidObjectError,
    ObjectOn2dField,
    ObjectOnField,
    OpponentRobotOnField,
    Pose2d,
    Pose3d,
    RobotOnField,
    Rotation3d,
    Topics,
)
from competition_field.field import CompetitionField
from competition_field.layout import FieldLayout, load_field_layout
from competition_field.nodes import FieldPublisherNode
from competition_field.sinks import (
    DashboardField,
    DashboardSink,
    PubSubDashboard,
    PubSubTelemetry,
    TelemetryLog,
    TelemetrySink,
)

__all__ = [
    "CompetitionField",
    "CompetitionFieldError",
    "ConfigError",
    "DashboardField",
    "DashboardSink",
    "FieldConfig",
    "FieldLayout",
    "FieldPublisherNode",
    "GamePieceInFlight",
    "GamePieceOnField",
    "InvalidObjectError",
    "ObjectOn2dField",
    "ObjectOnField",
    "OpponentRobotOnField",
    "Pose2d",
    "Pose3d",
    "PubSubDashboard",
    "PubSubTelemetry",
    "RobotOnField",
    "Rotation3d",
    "TelemetryLog",
    "TelemetrySink",
    "Topics",
    "load_field_config",
    "load_field_layout",
]

# FieldWindow requires PySide6 - import conditionally
try:
    from competition_field.gui import FieldWindow
    __all__.append("FieldWindow")
except ImportError:
    pass
