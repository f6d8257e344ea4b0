"""Single-pass translation of one robot state snapshot into a :class:`RobotState`."""

from __future__ import annotations

import logging
from logging import Formatter, BASIC_FORMAT

from bosdyn.api import robot_state_pb2
from google.protobuf.duration_pb2 import Duration

from .frames.odometry import DEFAULT_ODOM_FRAME, OdometryFrame, get_corrected_odometry, get_odom_twist, get_odometry
from .frames.tree import build_transform_set
from .telemetry import translators
from .telemetry.records import RobotState

logger = logging.getLogger(__name__)
handler = logging.StreamHandler()
handler.setLevel(logging.INFO)
handler.setFormatter(Formatter(BASIC_FORMAT))
logger.addHandler(handler)


def translate_robot_state(
    robot_state: robot_state_pb2.RobotState,
    clock_skew: Duration,
    *,
    prefix: str = "",
    inverse_target_frame_id: str = "",
    odom_frame: OdometryFrame = DEFAULT_ODOM_FRAME,
) -> RobotState:
    """Translate every facet of ``robot_state`` against one clock skew.

    Facets missing from the snapshot stay ``None``. Data-integrity failures
    (:class:`~spot_state_bridge.errors.UnknownJointError`,
    :class:`~spot_state_bridge.errors.MissingRequiredAnchorError`) propagate
    and no partially filled result is returned.
    """

    odom_frame = OdometryFrame(odom_frame)
    odom_twist = get_odom_twist(robot_state, clock_skew, prefix, odom_frame)
    odom = get_odometry(robot_state, clock_skew, prefix, odom_frame, odom_twist)
    out = RobotState(
        battery_states=translators.get_battery_states(robot_state, clock_skew),
        wifi_state=translators.get_wifi_state(robot_state, clock_skew),
        foot_states=translators.get_foot_states(robot_state),
        estop_states=translators.get_estop_states(robot_state, clock_skew),
        joint_states=translators.get_joint_states(robot_state, clock_skew, prefix),
        tf=build_transform_set(robot_state, clock_skew, prefix, inverse_target_frame_id),
        odom_twist=odom_twist,
        odom=odom,
        odom_corrected=get_corrected_odometry(odom) if odom is not None else None,
        power_state=translators.get_power_state(robot_state, clock_skew),
        system_fault_state=translators.get_system_fault_state(robot_state, clock_skew),
        manipulator_state=translators.get_manipulator_state(robot_state),
        end_effector_force=translators.get_end_effector_force(robot_state, clock_skew, prefix),
        behavior_fault_state=translators.get_behavior_fault_state(robot_state, clock_skew),
    )
    logger.debug(
        "Translated robot state | prefix=%r | odom_frame=%s | facets=%s | transforms=%d",
        prefix,
        odom_frame.value,
        ",".join(out.present_facets()),
        len(out.tf.transforms) if out.tf else 0,
    )
    return out


class RobotStateTranslator:
    """Bind the per-robot translation options once and reuse them per snapshot."""

    def __init__(
        self,
        *,
        prefix: str = "",
        inverse_target_frame_id: str = "",
        odom_frame: OdometryFrame = DEFAULT_ODOM_FRAME,
    ):
        self.prefix = prefix
        self.inverse_target_frame_id = inverse_target_frame_id
        self.odom_frame = OdometryFrame(odom_frame)

    def translate(self, robot_state: robot_state_pb2.RobotState, clock_skew: Duration) -> RobotState:
        return translate_robot_state(
            robot_state,
            clock_skew,
            prefix=self.prefix,
            inverse_target_frame_id=self.inverse_target_frame_id,
            odom_frame=self.odom_frame,
        )
