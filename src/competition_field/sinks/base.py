"""Sink interfaces for field telemetry."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable, List, Sequence, Union

from competition_field.core.geometry import Pose2d, Pose3d

TelemetryValue = Union[Sequence[Pose3d], Pose2d]


class DashboardSink(ABC):
    """Top-down 2D dashboard that accepts named pose overlays."""

    @abstractmethod
    def set_poses(self, channel: str, poses: Sequence[Pose2d]) -> None:
        """Replace the poses drawn on ``channel``. Empty clears the layer."""
        ...

    @abstractmethod
    def set_robot_pose(self, pose: Pose2d) -> None:
        """Update the reserved robot overlay."""
        ...


class TelemetrySink(ABC):
    """Structured log that accepts pose values under a path."""

    @abstractmethod
    def record(self, path: str, value: TelemetryValue) -> None:
        ...


class FanoutDashboard(DashboardSink):
    """Forwards every update to several dashboards."""

    def __init__(self, sinks: Iterable[DashboardSink]) -> None:
        self._sinks: List[DashboardSink] = list(sinks)

    def set_poses(self, channel: str, poses: Sequence[Pose2d]) -> None:
        for sink in self._sinks:
            sink.set_poses(channel, poses)

    def set_robot_pose(self, pose: Pose2d) -> None:
        for sink in self._sinks:
            sink.set_robot_pose(pose)


class FanoutTelemetry(TelemetrySink):
    """Forwards every record to several telemetry sinks."""

    def __init__(self, sinks: Iterable[TelemetrySink]) -> None:
        self._sinks: List[TelemetrySink] = list(sinks)

    def record(self, path: str, value: TelemetryValue) -> None:
        for sink in self._sinks:
            sink.record(path, value)
