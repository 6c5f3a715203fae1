"""Tests for in-memory, fan-out and pub/sub sinks."""

import numpy as np
import pytest
from pubsub import pub

from competition_field.core.geometry import Pose2d, Pose3d
from competition_field.core.topics import Topics
from competition_field.sinks import (
    DashboardField,
    FanoutDashboard,
    FanoutTelemetry,
    PubSubDashboard,
    PubSubTelemetry,
    TelemetryLog,
    latest_pose3ds,
)


class TestDashboardField:
    def test_set_poses_replaces(self):
        dashboard = DashboardField()
        dashboard.set_poses("Note", [Pose2d(1, 1), Pose2d(2, 2)])
        dashboard.set_poses("Note", [Pose2d(3, 3)])
        assert dashboard.get_object("Note").poses == (Pose2d(3, 3),)

    def test_unknown_layer_is_empty(self):
        dashboard = DashboardField()
        assert dashboard.get_object("Cube").poses == ()
        assert dashboard.channels() == ["Cube"]

    def test_robot_pose(self):
        dashboard = DashboardField()
        dashboard.set_robot_pose(Pose2d(1, 2, 3))
        assert dashboard.robot_pose == Pose2d(1, 2, 3)
        assert dashboard.robot_updates == 1

    def test_snapshot_is_a_copy(self):
        dashboard = DashboardField()
        dashboard.set_poses("Note", [Pose2d(1, 1)])
        snap = dashboard.snapshot()
        dashboard.set_poses("Note", [])
        assert snap == {"Note": (Pose2d(1, 1),)}


class TestTelemetryLog:
    def test_latest_and_records(self):
        log = TelemetryLog()
        log.record("/Field/Note", [Pose3d(1, 1, 0)])
        log.record("/Field/Note", [Pose3d(2, 2, 0)])
        log.record("/Field/Robot", Pose2d(0, 0, 0))
        assert log.latest("/Field/Note") == (Pose3d(2, 2, 0),)
        assert len(log.records("/Field/Note")) == 2
        assert len(log) == 3
        assert log.paths() == ["/Field/Note", "/Field/Robot"]

    def test_missing_path(self):
        assert TelemetryLog().latest("/Field/Nothing") is None

    def test_capacity_drops_oldest(self):
        log = TelemetryLog(capacity=2)
        for i in range(3):
            log.record("/Field/Robot", Pose2d(i, 0, 0))
        assert [r.value.x for r in log.records()] == [1, 2]

    def test_timestamps_from_clock(self):
        ticks = iter([1.0, 2.0])
        log = TelemetryLog(clock=lambda: next(ticks))
        log.record("/a", [])
        log.record("/b", [])
        assert [r.timestamp for r in log.records()] == [1.0, 2.0]

    def test_record_copies_input(self):
        log = TelemetryLog()
        poses = [Pose3d(1, 1, 1)]
        log.record("/Field/Note", poses)
        poses.append(Pose3d(2, 2, 2))
        assert log.latest("/Field/Note") == (Pose3d(1, 1, 1),)

    def test_as_array(self):
        log = TelemetryLog()
        log.record("/Field/Note", [Pose3d(1, 2, 3), Pose3d(4, 5, 6)])
        log.record("/Field/Robot", Pose2d(1, 2, 0.5))
        note, robot = log.records()
        assert note.as_array().shape == (2, 7)
        assert robot.as_array() == pytest.approx(np.array([1.0, 2.0, 0.5]))

    def test_clear(self):
        log = TelemetryLog()
        log.record("/a", [])
        log.clear()
        assert len(log) == 0
        assert log.paths() == []

    def test_latest_pose3ds(self):
        log = TelemetryLog()
        log.record("/Field/Note", [Pose3d(1, 1, 1)])
        log.record("/Field/Robot", Pose2d())
        assert latest_pose3ds(log, "/Field/Note") == (Pose3d(1, 1, 1),)
        assert latest_pose3ds(log, "/Field/Robot") == ()
        assert latest_pose3ds(log, "/Field/Missing") == ()


class TestFanout:
    def test_dashboard_fanout(self):
        a, b = DashboardField(), DashboardField()
        fanout = FanoutDashboard([a, b])
        fanout.set_poses("Note", [Pose2d(1, 1)])
        fanout.set_robot_pose(Pose2d(2, 2))
        for sink in (a, b):
            assert sink.get_object("Note").poses == (Pose2d(1, 1),)
            assert sink.robot_pose == Pose2d(2, 2)

    def test_telemetry_fanout(self):
        a, b = TelemetryLog(), TelemetryLog()
        FanoutTelemetry([a, b]).record("/Field/Robot", Pose2d(1, 1))
        assert a.latest("/Field/Robot") == b.latest("/Field/Robot") == Pose2d(1, 1)


class TestPubSubSinks:
    def test_dashboard_topics(self):
        received = []

        # Must use named functions, not lambdas - pypubsub uses weak refs
        def on_poses(channel, poses):
            received.append((channel, poses))

        def on_robot(pose):
            received.append(("robot", pose))

        pub.subscribe(on_poses, Topics.DASHBOARD_POSES)
        pub.subscribe(on_robot, Topics.DASHBOARD_ROBOT)
        try:
            dashboard = PubSubDashboard()
            dashboard.set_poses("Note", [Pose2d(1, 1)])
            dashboard.set_robot_pose(Pose2d(2, 2))
        finally:
            pub.unsubscribe(on_poses, Topics.DASHBOARD_POSES)
            pub.unsubscribe(on_robot, Topics.DASHBOARD_ROBOT)

        assert received == [("Note", (Pose2d(1, 1),)), ("robot", Pose2d(2, 2))]

    def test_telemetry_topic(self):
        received = []

        def on_record(path, value):
            received.append((path, value))

        pub.subscribe(on_record, Topics.TELEMETRY_RECORD)
        try:
            telemetry = PubSubTelemetry()
            telemetry.record("/Field/Note", [Pose3d(1, 1, 1)])
            telemetry.record("/Field/Robot", Pose2d(0, 0, 0))
        finally:
            pub.unsubscribe(on_record, Topics.TELEMETRY_RECORD)

        assert received == [
            ("/Field/Note", (Pose3d(1, 1, 1),)),
            ("/Field/Robot", Pose2d(0, 0, 0)),
        ]
