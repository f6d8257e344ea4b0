"""Rigid transform helpers for the robot's frame tree."""

from .geometry import Quaternion, RigidTransform, Twist, Vector3

__all__ = ["Quaternion", "RigidTransform", "Twist", "Vector3"]
