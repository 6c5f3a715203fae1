"""Topic name constants for pub/sub messaging."""


class Topics:
    """Central registry of topic names."""

    DASHBOARD_POSES = "dashboard.poses"  # PubSubDashboard publishes (channel, poses)
    DASHBOARD_ROBOT = "dashboard.robot"  # PubSubDashboard publishes robot Pose2d
    TELEMETRY_RECORD = "telemetry.record"  # PubSubTelemetry publishes (path, value)
