"""Failures raised while fetching or translating a robot state snapshot."""

from __future__ import annotations


class RobotStateError(Exception):
    """Base class for every failure surfaced by this package."""


class UpstreamFailure(RobotStateError):
    """The snapshot fetch or the clock-skew query did not produce a value."""


class UnknownJointError(RobotStateError, KeyError):
    """A joint id reported by the robot is missing from the name table."""

    def __init__(self, joint_id: str):
        super().__init__(joint_id)
        self.joint_id = joint_id

    def __str__(self) -> str:
        return f"Unknown joint id '{self.joint_id}'; the friendly name table does not cover it"


class MissingRequiredAnchorError(RobotStateError):
    """The odometry anchor frame cannot be reached from the body in the snapshot."""

    def __init__(self, frame_name: str, body_frame: str = "body"):
        super().__init__(frame_name)
        self.frame_name = frame_name
        self.body_frame = body_frame

    def __str__(self) -> str:
        return (
            f"Transform snapshot has no path between anchor frame '{self.frame_name}' "
            f"and '{self.body_frame}'"
        )
