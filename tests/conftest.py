"""Shared fixtures for competition_field tests."""

import pytest

from competition_field import (
    CompetitionField,
    DashboardField,
    Pose2d,
    RobotOnField,
    TelemetryLog,
)


class ManualClock:
    """Deterministic clock for TelemetryLog timestamps."""

    def __init__(self):
        self.now = 0.0

    def __call__(self):
        self.now += 0.02
        return self.now


@pytest.fixture
def robot_pose():
    """Mutable holder for the robot's pose supplier."""
    return {"pose": Pose2d(3.0, 3.0, 0.0)}


@pytest.fixture
def robot(robot_pose):
    return RobotOnField(lambda: robot_pose["pose"])


@pytest.fixture
def dashboard():
    return DashboardField()


@pytest.fixture
def telemetry():
    return TelemetryLog(clock=ManualClock())


@pytest.fixture
def field(robot, dashboard, telemetry):
    return CompetitionField(robot, dashboard=dashboard, telemetry=telemetry)
