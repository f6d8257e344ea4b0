"""Body odometry (pose + twist) relative to one of the two world anchors."""

from __future__ import annotations

from dataclasses import replace
from enum import Enum

import transforms3d
from bosdyn.api import robot_state_pb2
from bosdyn.client.frame_helpers import (
    BODY_FRAME_NAME,
    ODOM_FRAME_NAME,
    VISION_FRAME_NAME,
    ValidateFrameTreeError,
    get_a_tform_b,
)
from google.protobuf.duration_pb2 import Duration

from ..errors import MissingRequiredAnchorError
from ..telemetry.records import Odometry, TwistStamped
from ..utils.time import apply_clock_skew
from .geometry import RigidTransform, Twist, Vector3

BODY_FRAME = BODY_FRAME_NAME


class OdometryFrame(str, Enum):
    """World anchors the robot publishes in every transform snapshot."""

    ODOM = ODOM_FRAME_NAME
    VISION = VISION_FRAME_NAME


DEFAULT_ODOM_FRAME = OdometryFrame.VISION


def _body_velocity(kinematic_state: robot_state_pb2.KinematicState, frame: OdometryFrame):
    if frame is OdometryFrame.VISION:
        return kinematic_state.velocity_of_body_in_vision
    return kinematic_state.velocity_of_body_in_odom


def get_odom_twist(
    robot_state: robot_state_pb2.RobotState,
    clock_skew: Duration,
    prefix: str = "",
    odom_frame: OdometryFrame = DEFAULT_ODOM_FRAME,
) -> TwistStamped | None:
    """Body velocity expressed in ``odom_frame``, stamped at kinematic acquisition."""

    if not robot_state.HasField("kinematic_state"):
        return None
    kinematic_state = robot_state.kinematic_state
    return TwistStamped(
        stamp=apply_clock_skew(kinematic_state.acquisition_timestamp, clock_skew),
        frame_id=prefix + odom_frame.value,
        twist=Twist.from_proto(_body_velocity(kinematic_state, odom_frame)),
    )


def get_odometry(
    robot_state: robot_state_pb2.RobotState,
    clock_skew: Duration,
    prefix: str = "",
    odom_frame: OdometryFrame = DEFAULT_ODOM_FRAME,
    odom_twist: TwistStamped | None = None,
) -> Odometry | None:
    """Return ``anchor_tform_body`` merged with the body twist in the same anchor.

    ``odom_twist`` may carry the result of :func:`get_odom_twist` for the same
    call so it is not computed twice. Raises :class:`MissingRequiredAnchorError`
    if the snapshot has no path between the anchor and the body frame.
    """

    if odom_twist is None:
        odom_twist = get_odom_twist(robot_state, clock_skew, prefix, odom_frame)
    if odom_twist is None:
        return None
    snapshot = robot_state.kinematic_state.transforms_snapshot
    try:
        anchor_tform_body = get_a_tform_b(snapshot, odom_frame.value, BODY_FRAME)
    except ValidateFrameTreeError as exc:
        raise MissingRequiredAnchorError(odom_frame.value, BODY_FRAME) from exc
    if anchor_tform_body is None:
        raise MissingRequiredAnchorError(odom_frame.value, BODY_FRAME)
    return Odometry(
        stamp=odom_twist.stamp,
        frame_id=odom_twist.frame_id,
        child_frame_id=prefix + BODY_FRAME,
        pose=RigidTransform.from_se3_pose(anchor_tform_body),
        twist=odom_twist.twist,
    )


def get_corrected_odometry(odometry: Odometry) -> Odometry:
    """Copy of ``odometry`` with its twist re-expressed in the body frame.

    The robot reports body velocity in the anchor frame, while odometry
    consumers expect it in the child frame of the message.
    """

    inverse_rotation = transforms3d.quaternions.quat2mat(
        transforms3d.quaternions.qinverse(odometry.pose.rotation.as_wxyz())
    )
    return replace(
        odometry,
        twist=Twist(
            linear=Vector3.from_array(inverse_rotation.dot(odometry.twist.linear.as_array())),
            angular=Vector3.from_array(inverse_rotation.dot(odometry.twist.angular.as_array())),
        ),
    )
