"""Dashboard and structured-log sinks."""

from competition_field.sinks.base import (
    DashboardSink,
    FanoutDashboard,
    FanoutTelemetry,
    TelemetrySink,
)
from competition_field.sinks.memory import (
    DashboardField,
    FieldObjectLayer,
    LogRecord,
    TelemetryLog,
    latest_pose3ds,
)
from competition_field.sinks.pubsub_sinks import PubSubDashboard, PubSubTelemetry

__all__ = [
    "DashboardField",
    "DashboardSink",
    "FanoutDashboard",
    "FanoutTelemetry",
    "FieldObjectLayer",
    "LogRecord",
    "PubSubDashboard",
    "PubSubTelemetry",
    "TelemetryLog",
    "TelemetrySink",
    "latest_pose3ds",
]
