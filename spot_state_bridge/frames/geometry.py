"""Plain geometry records for translated poses and velocities.

Pose arithmetic (inversion, composition, tree walks) is done with
``bosdyn.client.math_helpers.SE3Pose``; the records here only carry results.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from bosdyn.api import geometry_pb2
from bosdyn.client.math_helpers import Quat, SE3Pose


@dataclass(frozen=True, slots=True)
class Vector3:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def from_proto(cls, vec: geometry_pb2.Vec3) -> "Vector3":
        return cls(x=vec.x, y=vec.y, z=vec.z)

    @classmethod
    def from_array(cls, values) -> "Vector3":
        return cls(x=float(values[0]), y=float(values[1]), z=float(values[2]))

    def as_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=float)


@dataclass(frozen=True, slots=True)
class Quaternion:
    """Unit quaternion in ROS (x, y, z, w) field order."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0

    def as_wxyz(self) -> np.ndarray:
        # transforms3d orders quaternions (w, x, y, z).
        return np.array([self.w, self.x, self.y, self.z], dtype=float)


@dataclass(frozen=True, slots=True)
class Twist:
    linear: Vector3 = Vector3()
    angular: Vector3 = Vector3()

    @classmethod
    def from_proto(cls, velocity: geometry_pb2.SE3Velocity) -> "Twist":
        return cls(linear=Vector3.from_proto(velocity.linear), angular=Vector3.from_proto(velocity.angular))


def se3_pose_from_proto(pose: geometry_pb2.SE3Pose) -> SE3Pose:
    """Convert a pose proto, treating an unset rotation as the identity."""

    if pose.HasField("rotation"):
        return SE3Pose.from_obj(pose)
    return SE3Pose(pose.position.x, pose.position.y, pose.position.z, Quat())


@dataclass(frozen=True, slots=True)
class RigidTransform:
    """``a_tform_b``: maps points expressed in frame b into frame a."""

    translation: Vector3 = Vector3()
    rotation: Quaternion = Quaternion()

    @classmethod
    def identity(cls) -> "RigidTransform":
        return cls()

    @classmethod
    def from_se3_pose(cls, pose: SE3Pose) -> "RigidTransform":
        return cls(
            translation=Vector3(x=pose.x, y=pose.y, z=pose.z),
            rotation=Quaternion(x=pose.rot.x, y=pose.rot.y, z=pose.rot.z, w=pose.rot.w),
        )

    @classmethod
    def from_proto(cls, pose: geometry_pb2.SE3Pose) -> "RigidTransform":
        return cls.from_se3_pose(se3_pose_from_proto(pose))

