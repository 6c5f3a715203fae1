"""Field dashboard demo with a simulated robot, opponents and notes.

The robot drives a loop around the field and picks up the nearest note
whenever it passes over one; picked-up notes are shot and fly as 3D
objects (logged, but not drawn on the 2D dashboard) before landing again.

Usage:
    # Dashboard window
    python scripts/run_field_demo.py

    # Headless, print telemetry summary after 5 seconds
    python scripts/run_field_demo.py --headless --duration 5

    # Custom layout / config
    python scripts/run_field_demo.py --layout config/layouts/crescendo2024.yaml --config config/field.yaml
"""

from __future__ import annotations

import argparse
import logging
import math
import threading
import time
from pathlib import Path
from typing import List

from competition_field import (
    CompetitionField,
    FieldPublisherNode,
    GamePieceInFlight,
    GamePieceOnField,
    Pose2d,
    Pose3d,
    PubSubDashboard,
    RobotOnField,
    Rotation3d,
    TelemetryLog,
    load_field_config,
    load_field_layout,
)
from competition_field.layout import DEFAULT_LAYOUT_YAML
from competition_field.sinks import FanoutDashboard
from competition_field.utils import setup_logging

logger = logging.getLogger("run_field_demo")

PICKUP_RADIUS_M = 0.5
FLIGHT_TIME_S = 1.0


class LoopDrive:
    """Fake drivetrain following an ellipse around the field center."""

    def __init__(self, center_x: float, center_y: float, rx: float, ry: float, period: float):
        self._cx, self._cy = center_x, center_y
        self._rx, self._ry = rx, ry
        self._omega = 2.0 * math.pi / period
        self._start = time.monotonic()

    def get_pose(self) -> Pose2d:
        t = (time.monotonic() - self._start) * self._omega
        x = self._cx + self._rx * math.cos(t)
        y = self._cy + self._ry * math.sin(t)
        heading = math.atan2(self._ry * math.cos(t), -self._rx * math.sin(t))
        return Pose2d(x, y, heading)


def simulate(field: CompetitionField, drive: LoopDrive, stop: threading.Event) -> None:
    """Collect notes the robot drives over and shoot them."""
    in_flight: List[tuple] = []  # (piece, start_time, start_pose2d)
    while not stop.is_set():
        now = time.monotonic()
        robot = drive.get_pose()

        for piece in list(field.objects_with_type("Note")):
            pose = piece.pose2d()
            if math.hypot(pose.x - robot.x, pose.y - robot.y) < PICKUP_RADIUS_M:
                field.delete_object(piece)
                flying = field.add_object(
                    GamePieceInFlight("NoteInFlight", Pose3d(robot.x, robot.y, 0.5))
                )
                in_flight.append((flying, now, robot))
                logger.info("Picked up note at (%.2f, %.2f)", pose.x, pose.y)

        for entry in list(in_flight):
            flying, start, origin = entry
            s = (now - start) / FLIGHT_TIME_S
            if s >= 1.0:
                field.delete_object(flying)
                in_flight.remove(entry)
                landed = Pose2d(origin.x + 3.0 * math.cos(origin.heading),
                                origin.y + 3.0 * math.sin(origin.heading))
                field.add_object(GamePieceOnField("Note", landed))
                continue
            flying.set_pose(Pose3d(
                origin.x + 3.0 * s * math.cos(origin.heading),
                origin.y + 3.0 * s * math.sin(origin.heading),
                0.5 + 2.0 * s * (1.0 - s),
                Rotation3d(pitch=-math.pi / 4.0 * (1.0 - 2.0 * s), yaw=origin.heading),
            ))

        stop.wait(0.02)


def main():
    parser = argparse.ArgumentParser(description="Competition field dashboard demo")
    parser.add_argument("--config", type=Path, default=None, help="Field config YAML")
    parser.add_argument("--layout", type=Path, default=DEFAULT_LAYOUT_YAML, help="Field layout YAML")
    parser.add_argument("--headless", action="store_true", help="Run without the GUI")
    parser.add_argument("--duration", type=float, default=10.0, help="Headless run time (s)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = parser.parse_args()

    setup_logging(verbose=args.verbose)

    config = load_field_config(args.config)
    layout = load_field_layout(args.layout)

    drive = LoopDrive(
        center_x=config.field_length / 2.0,
        center_y=config.field_width / 2.0,
        rx=config.field_length * 0.3,
        ry=config.field_width * 0.3,
        period=12.0,
    )

    window = None
    dashboards = [PubSubDashboard()]
    if not args.headless:
        from competition_field.gui import FieldWindow
        window = FieldWindow(config)
        dashboards.append(window)

    telemetry = TelemetryLog(capacity=config.log_capacity)
    field = CompetitionField(
        RobotOnField(drive.get_pose),
        dashboard=FanoutDashboard(dashboards),
        telemetry=telemetry,
        config=config,
    )
    layout.place_game_pieces(field)
    layout.add_opponents(field)

    publisher = FieldPublisherNode(field, rate=config.publish_rate)
    stop = threading.Event()
    sim_thread = threading.Thread(target=simulate, args=(field, drive, stop), daemon=True)

    publisher.start()
    sim_thread.start()
    try:
        if window is not None:
            window.run()
        else:
            time.sleep(args.duration)
    except KeyboardInterrupt:
        pass
    finally:
        stop.set()
        sim_thread.join(timeout=1.0)
        publisher.stop()

    print("\n" + "=" * 50)
    print(f"Published {publisher.cycles} cycle(s), {publisher.failed_cycles} failed")
    for path in telemetry.paths():
        records = telemetry.records(path)
        print(f"{path}: {len(records)} record(s), latest shape {records[-1].as_array().shape}")
    print("=" * 50)


if __name__ == "__main__":
    main()
