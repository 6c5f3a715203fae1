"""Planar and spatial pose types for objects on the field."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterable, List, Tuple

import numpy as np


def _normalize_angle(angle: float) -> float:
    """Wrap angle to (-pi, pi]."""
    wrapped = math.atan2(math.sin(angle), math.cos(angle))
    if wrapped == -math.pi:
        return math.pi
    return wrapped


@dataclass(frozen=True)
class Rotation3d:
    """Orientation as extrinsic roll/pitch/yaw (radians)."""

    roll: float = 0.0
    pitch: float = 0.0
    yaw: float = 0.0

    @classmethod
    def from_degrees(cls, roll: float = 0.0, pitch: float = 0.0, yaw: float = 0.0) -> Rotation3d:
        return cls(math.radians(roll), math.radians(pitch), math.radians(yaw))

    @classmethod
    def from_quaternion(cls, w: float, x: float, y: float, z: float) -> Rotation3d:
        """
        Create a rotation from a unit quaternion.

        The quaternion is normalized first; a zero quaternion yields identity.
        """
        norm = math.sqrt(w * w + x * x + y * y + z * z)
        if norm < 1e-12:
            return cls()
        w, x, y, z = w / norm, x / norm, y / norm, z / norm

        roll = math.atan2(2.0 * (w * x + y * z), 1.0 - 2.0 * (x * x + y * y))
        sinp = 2.0 * (w * y - z * x)
        pitch = math.copysign(math.pi / 2.0, sinp) if abs(sinp) >= 1.0 else math.asin(sinp)
        yaw = math.atan2(2.0 * (w * z + x * y), 1.0 - 2.0 * (y * y + z * z))
        return cls(roll, pitch, yaw)

    def to_quaternion(self) -> Tuple[float, float, float, float]:
        """Return (w, x, y, z)."""
        cr, sr = math.cos(self.roll / 2.0), math.sin(self.roll / 2.0)
        cp, sp = math.cos(self.pitch / 2.0), math.sin(self.pitch / 2.0)
        cy, sy = math.cos(self.yaw / 2.0), math.sin(self.yaw / 2.0)
        return (
            cr * cp * cy + sr * sp * sy,
            sr * cp * cy - cr * sp * sy,
            cr * sp * cy + sr * cp * sy,
            cr * cp * sy - sr * sp * cy,
        )

    def to_matrix(self) -> np.ndarray:
        """3x3 rotation matrix, R = Rz(yaw) @ Ry(pitch) @ Rx(roll)."""
        cr, sr = math.cos(self.roll), math.sin(self.roll)
        cp, sp = math.cos(self.pitch), math.sin(self.pitch)
        cy, sy = math.cos(self.yaw), math.sin(self.yaw)
        rx = np.array([[1.0, 0.0, 0.0], [0.0, cr, -sr], [0.0, sr, cr]])
        ry = np.array([[cp, 0.0, sp], [0.0, 1.0, 0.0], [-sp, 0.0, cp]])
        rz = np.array([[cy, -sy, 0.0], [sy, cy, 0.0], [0.0, 0.0, 1.0]])
        return rz @ ry @ rx

    @property
    def is_planar(self) -> bool:
        """True when the rotation is a pure heading (no roll or pitch)."""
        return self.roll == 0.0 and self.pitch == 0.0


@dataclass(frozen=True)
class Pose2d:
    """Pose on the field plane."""

    x: float = 0.0        # meters
    y: float = 0.0        # meters
    heading: float = 0.0  # radians, CCW from +X

    @classmethod
    def from_degrees(cls, x: float, y: float, heading_deg: float) -> Pose2d:
        return cls(x, y, math.radians(heading_deg))

    @property
    def heading_degrees(self) -> float:
        return math.degrees(self.heading)

    def to_pose3d(self) -> Pose3d:
        """Embed at zero elevation with no roll or pitch."""
        return Pose3d(self.x, self.y, 0.0, Rotation3d(yaw=self.heading))

    def is_close(self, other: Pose2d, tol: float = 1e-9) -> bool:
        return (
            abs(self.x - other.x) <= tol
            and abs(self.y - other.y) <= tol
            and abs(_normalize_angle(self.heading - other.heading)) <= tol
        )


@dataclass(frozen=True)
class Pose3d:
    """Full spatial pose: position plus 3D orientation."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    rotation: Rotation3d = field(default_factory=Rotation3d)

    @classmethod
    def from_pose2d(cls, pose: Pose2d) -> Pose3d:
        return pose.to_pose3d()

    def to_pose2d(self) -> Pose2d:
        """Project onto the field plane: drop z, roll and pitch; keep yaw."""
        return Pose2d(self.x, self.y, self.rotation.yaw)

    @property
    def translation(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z])

    def to_list(self) -> List[float]:
        """Log layout: [x, y, z, qw, qx, qy, qz]."""
        return [self.x, self.y, self.z, *self.rotation.to_quaternion()]


def poses_to_array(poses: Iterable[Pose3d]) -> np.ndarray:
    """Stack poses into an (N, 7) array using Pose3d.to_list() layout."""
    rows = [pose.to_list() for pose in poses]
    if not rows:
        return np.zeros((0, 7))
    return np.array(rows, dtype=float)
