"""Sinks that forward field telemetry over pypubsub."""

from __future__ import annotations

from typing import Sequence

from pubsub import pub

from competition_field.core.geometry import Pose2d
from competition_field.core.topics import Topics
from competition_field.sinks.base import DashboardSink, TelemetrySink, TelemetryValue


class PubSubDashboard(DashboardSink):
    """
    Publishes dashboard updates for async subscribers (GUI, recorders).

    Messages:
        Topics.DASHBOARD_POSES: channel=str, poses=tuple[Pose2d, ...]
        Topics.DASHBOARD_ROBOT: pose=Pose2d
    """

    def set_poses(self, channel: str, poses: Sequence[Pose2d]) -> None:
        pub.sendMessage(Topics.DASHBOARD_POSES, channel=channel, poses=tuple(poses))

    def set_robot_pose(self, pose: Pose2d) -> None:
        pub.sendMessage(Topics.DASHBOARD_ROBOT, pose=pose)


class PubSubTelemetry(TelemetrySink):
    """Publishes every record on Topics.TELEMETRY_RECORD (path=str, value=...)."""

    def record(self, path: str, value: TelemetryValue) -> None:
        if not isinstance(value, Pose2d):
            value = tuple(value)
        pub.sendMessage(Topics.TELEMETRY_RECORD, path=path, value=value)
