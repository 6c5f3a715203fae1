"""Registry of everything on the competition field, projected to dashboard and telemetry."""

from __future__ import annotations

import logging
from threading import Lock
from typing import Dict, List, Optional, Tuple, TypeVar

from competition_field.config import FieldConfig
from competition_field.core.errors import InvalidObjectError
from competition_field.core.geometry import Pose2d, Pose3d
from competition_field.core.objects import ObjectOnField
from competition_field.sinks.base import DashboardSink, TelemetrySink
from competition_field.sinks.memory import DashboardField, TelemetryLog

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=ObjectOnField)


class CompetitionField:
    """
    Stores and displays the competition field: the robot, opponent robots
    and game pieces.

    The field only stores and displays; it never moves anything. Poses are
    updated by their producers (vision during a real match, the simulation
    otherwise) and read back here once per control cycle.

    Objects are grouped by ``type_name``. Each group becomes one dashboard
    layer (2D objects only) and one telemetry channel ``<log_prefix><type>``
    (all objects, full 3D pose). The robot is tracked separately and always
    published, even when nothing else is on the field.

    Usage:
        field = CompetitionField(RobotOnField(drive.get_pose))
        field.add_object(GamePieceOnField("Note", Pose2d(2.9, 4.1)))

        # once per control cycle
        field.publish()
    """

    def __init__(
        self,
        robot: ObjectOnField,
        dashboard: Optional[DashboardSink] = None,
        telemetry: Optional[TelemetrySink] = None,
        config: Optional[FieldConfig] = None,
    ) -> None:
        self._config = config if config is not None else FieldConfig.defaults()
        self._robot = robot
        if dashboard is None:
            dashboard = DashboardField(self._config.dashboard_name)
        if telemetry is None:
            telemetry = TelemetryLog(capacity=self._config.log_capacity)
        self._dashboard = dashboard
        self._telemetry = telemetry
        # type name -> {id(obj): obj}; membership is by identity
        self._objects_by_type: Dict[str, Dict[int, ObjectOnField]] = {}
        self._lock = Lock()

    @property
    def robot(self) -> ObjectOnField:
        return self._robot

    @property
    def dashboard(self) -> DashboardSink:
        return self._dashboard

    @property
    def telemetry(self) -> TelemetrySink:
        return self._telemetry

    @property
    def config(self) -> FieldConfig:
        return self._config

    # --- Registration ---

    def add_object(self, obj: T) -> T:
        """
        Register an object under its type name.

        Adding the same object twice is a no-op. Distinct objects are
        distinct entries even if they compare equal.

        Returns:
            The same object, for chaining.

        Raises:
            InvalidObjectError: If the type name is empty, or obj is the robot.
        """
        if obj is self._robot:
            raise InvalidObjectError("the robot is tracked separately and cannot be added")
        type_name = obj.type_name
        if not type_name:
            raise InvalidObjectError(f"{obj!r} has an empty type name")

        with self._lock:
            self._objects_by_type.setdefault(type_name, {})[id(obj)] = obj
        logger.debug("Added %r under %r", obj, type_name)
        return obj

    def delete_object(self, obj: T) -> Optional[T]:
        """
        Remove an object from the field.

        Returns:
            The removed object, or None if it was not on the field.
        """
        type_name = obj.type_name
        with self._lock:
            objects = self._objects_by_type.get(type_name)
            if objects is None or objects.get(id(obj)) is not obj:
                logger.debug("Delete of %r under %r: not found", obj, type_name)
                return None
            del objects[id(obj)]
        logger.debug("Deleted %r from %r", obj, type_name)
        return obj

    def clear_objects_with_type(self, type_name: str) -> List[ObjectOnField]:
        """
        Remove every object of a type.

        The field starts over with a fresh empty collection, so the caller
        keeps a stable snapshot to drain or re-place from.

        Returns:
            The previous objects of that type (empty if the type was unknown).
        """
        with self._lock:
            previous = self._objects_by_type.get(type_name, {})
            self._objects_by_type[type_name] = {}
        logger.debug("Cleared %d object(s) of type %r", len(previous), type_name)
        return list(previous.values())

    # --- Queries ---

    def type_names(self) -> List[str]:
        with self._lock:
            return list(self._objects_by_type.keys())

    def objects_with_type(self, type_name: str) -> Tuple[ObjectOnField, ...]:
        """Snapshot of the objects registered under ``type_name``."""
        with self._lock:
            return tuple(self._objects_by_type.get(type_name, {}).values())

    def __contains__(self, obj: object) -> bool:
        with self._lock:
            return any(
                objects.get(id(obj)) is obj for objects in self._objects_by_type.values()
            )

    def __len__(self) -> int:
        with self._lock:
            return sum(len(objects) for objects in self._objects_by_type.values())

    # --- Publishing ---

    def update_objects_to_dashboard_and_telemetry(self) -> None:
        """
        Push every object's current pose to the dashboard and telemetry.

        Called once per control cycle. Exceptions raised by an object's pose
        methods propagate to the caller.
        """
        for type_name, objects in self._snapshot():
            self._dashboard.set_poses(type_name, _pose2ds(objects))
            self._telemetry.record(self._config.log_path(type_name), _pose3ds(objects))

        robot_pose = self._robot.pose3d().to_pose2d()
        self._dashboard.set_robot_pose(robot_pose)
        self._telemetry.record(self._config.robot_log_path, robot_pose)

    publish = update_objects_to_dashboard_and_telemetry

    def _snapshot(self) -> List[Tuple[str, Tuple[ObjectOnField, ...]]]:
        with self._lock:
            return [
                (name, tuple(objects.values()))
                for name, objects in self._objects_by_type.items()
            ]


def _pose2ds(objects: Tuple[ObjectOnField, ...]) -> List[Pose2d]:
    return [obj.pose3d().to_pose2d() for obj in objects if obj.on_2d_field()]


def _pose3ds(objects: Tuple[ObjectOnField, ...]) -> List[Pose3d]:
    return [obj.pose3d() for obj in objects]
