"""In-memory dashboard and structured log."""

from __future__ import annotations

import time
from collections import deque
from dataclasses import dataclass
from threading import Lock
from typing import Callable, Deque, Dict, List, Optional, Sequence, Tuple

import numpy as np

from competition_field.core.geometry import Pose2d, Pose3d, poses_to_array
from competition_field.sinks.base import DashboardSink, TelemetrySink, TelemetryValue


class FieldObjectLayer:
    """One named overlay on the dashboard field."""

    def __init__(self, name: str) -> None:
        self.name = name
        self._poses: Tuple[Pose2d, ...] = ()

    @property
    def poses(self) -> Tuple[Pose2d, ...]:
        return self._poses

    def set_poses(self, poses: Sequence[Pose2d]) -> None:
        self._poses = tuple(poses)

    def __len__(self) -> int:
        return len(self._poses)


class DashboardField(DashboardSink):
    """
    Latest-state dashboard field.

    Keeps only the most recent poses per layer, plus the robot pose.

    Usage:
        dashboard = DashboardField()
        field = CompetitionField(robot, dashboard=dashboard)
        field.publish()
        dashboard.get_object("Note").poses
    """

    def __init__(self, name: str = "Field") -> None:
        self.name = name
        self._lock = Lock()
        self._layers: Dict[str, FieldObjectLayer] = {}
        self._robot_pose = Pose2d()
        self.robot_updates = 0

    def get_object(self, channel: str) -> FieldObjectLayer:
        """Get a layer by name, creating it empty if needed."""
        with self._lock:
            layer = self._layers.get(channel)
            if layer is None:
                layer = FieldObjectLayer(channel)
                self._layers[channel] = layer
            return layer

    def channels(self) -> List[str]:
        with self._lock:
            return list(self._layers.keys())

    def set_poses(self, channel: str, poses: Sequence[Pose2d]) -> None:
        self.get_object(channel).set_poses(poses)

    def set_robot_pose(self, pose: Pose2d) -> None:
        with self._lock:
            self._robot_pose = pose
            self.robot_updates += 1

    @property
    def robot_pose(self) -> Pose2d:
        with self._lock:
            return self._robot_pose

    def snapshot(self) -> Dict[str, Tuple[Pose2d, ...]]:
        """Copy of all layers for safe iteration."""
        with self._lock:
            return {name: layer.poses for name, layer in self._layers.items()}


@dataclass(frozen=True)
class LogRecord:
    """One structured-log entry."""

    timestamp: float
    path: str
    value: TelemetryValue

    def as_array(self) -> np.ndarray:
        """Numeric form of the value: (N, 7) for pose arrays, (3,) for Pose2d."""
        if isinstance(self.value, Pose2d):
            return np.array([self.value.x, self.value.y, self.value.heading])
        return poses_to_array(self.value)


class TelemetryLog(TelemetrySink):
    """
    Append-only structured log held in memory.

    Args:
        capacity: Keep at most this many records (oldest dropped). None = unbounded.
        clock: Timestamp source in seconds.
    """

    def __init__(
        self,
        capacity: Optional[int] = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._lock = Lock()
        self._records: Deque[LogRecord] = deque(maxlen=capacity)
        self._latest: Dict[str, LogRecord] = {}
        self._clock = clock

    def record(self, path: str, value: TelemetryValue) -> None:
        if not isinstance(value, Pose2d):
            value = tuple(value)
        entry = LogRecord(self._clock(), path, value)
        with self._lock:
            self._records.append(entry)
            self._latest[path] = entry

    def latest(self, path: str) -> Optional[TelemetryValue]:
        """Most recent value under ``path``, or None if never recorded."""
        with self._lock:
            entry = self._latest.get(path)
        return entry.value if entry is not None else None

    def records(self, path: Optional[str] = None) -> List[LogRecord]:
        with self._lock:
            if path is None:
                return list(self._records)
            return [r for r in self._records if r.path == path]

    def paths(self) -> List[str]:
        with self._lock:
            return sorted(self._latest.keys())

    def clear(self) -> None:
        with self._lock:
            self._records.clear()
            self._latest.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)


def latest_pose3ds(log: TelemetryLog, path: str) -> Tuple[Pose3d, ...]:
    """Latest pose array under ``path``; empty if absent or not an array."""
    value = log.latest(path)
    if value is None or isinstance(value, Pose2d):
        return ()
    return tuple(value)
