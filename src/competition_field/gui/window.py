"""Main window for the field dashboard."""

from __future__ import annotations

from typing import Dict, Optional, Sequence

from PySide6.QtCore import QObject, Signal
from PySide6.QtWidgets import QApplication, QLabel, QMainWindow, QVBoxLayout, QWidget
from pubsub import pub

from competition_field.config import FieldConfig
from competition_field.core.geometry import Pose2d
from competition_field.core.topics import Topics
from competition_field.gui.canvas import FieldCanvas
from competition_field.sinks.base import DashboardSink


class UpdateEmitter(QObject):
    """Thread-safe signal emitter for GUI updates."""
    poses_requested = Signal(str, object)  # channel, tuple of Pose2d
    robot_requested = Signal(object)  # Pose2d


class FieldWindow(QMainWindow):
    """
    Top-down dashboard showing the robot and every field layer.

    Can be injected directly as the field's dashboard sink, or fed from
    PubSubDashboard via subscribe().

    Usage:
        window = FieldWindow(config)
        window.subscribe()   # listen to PubSubDashboard topics

        # From any thread:
        window.set_poses("Note", poses)

        window.run()  # Blocks
    """

    def __init__(self, config: FieldConfig, parent: Optional[QWidget] = None):
        # Ensure QApplication exists
        self._app = QApplication.instance()
        if self._app is None:
            self._app = QApplication([])

        super().__init__(parent)
        self._config = config
        self._counts: Dict[str, int] = {}
        self._subscribed = False

        self._update_emitter = UpdateEmitter()
        self._update_emitter.poses_requested.connect(self._handle_poses)
        self._update_emitter.robot_requested.connect(self._handle_robot)

        self._setup_ui()

    def _setup_ui(self) -> None:
        self.setWindowTitle(self._config.dashboard_name)
        self.setMinimumSize(800, 450)
        self.resize(1100, 600)

        central = QWidget()
        self.setCentralWidget(central)
        layout = QVBoxLayout(central)
        layout.setContentsMargins(0, 0, 0, 0)

        self._canvas = FieldCanvas(self._config)
        layout.addWidget(self._canvas, stretch=1)

        self._status = QLabel("No objects")
        self._status.setContentsMargins(8, 4, 8, 4)
        layout.addWidget(self._status)

    # --- DashboardSink (callable from any thread) ---

    def set_poses(self, channel: str, poses: Sequence[Pose2d]) -> None:
        self._update_emitter.poses_requested.emit(channel, tuple(poses))

    def set_robot_pose(self, pose: Pose2d) -> None:
        self._update_emitter.robot_requested.emit(pose)

    # --- pub/sub ---

    def subscribe(self) -> None:
        """Listen to PubSubDashboard topics."""
        if self._subscribed:
            return
        pub.subscribe(self._on_poses, Topics.DASHBOARD_POSES)
        pub.subscribe(self._on_robot, Topics.DASHBOARD_ROBOT)
        self._subscribed = True

    def unsubscribe(self) -> None:
        """Stop listening. Call on shutdown."""
        if not self._subscribed:
            return
        pub.unsubscribe(self._on_poses, Topics.DASHBOARD_POSES)
        pub.unsubscribe(self._on_robot, Topics.DASHBOARD_ROBOT)
        self._subscribed = False

    def _on_poses(self, channel: str, poses: tuple) -> None:
        self.set_poses(channel, poses)

    def _on_robot(self, pose: Pose2d) -> None:
        self.set_robot_pose(pose)

    # --- Qt thread handlers ---

    def _handle_poses(self, channel: str, poses: tuple) -> None:
        self._canvas.set_layer(channel, poses)
        self._counts[channel] = len(poses)
        self._status.setText(
            "  ".join(f"{name}: {count}" for name, count in sorted(self._counts.items()))
        )

    def _handle_robot(self, pose: Pose2d) -> None:
        self._canvas.set_robot_pose(pose)

    def run(self) -> int:
        """Show the window and block until it is closed."""
        self.show()
        result = self._app.exec()
        self.unsubscribe()
        return result


DashboardSink.register(FieldWindow)
