from __future__ import annotations

import pytest
from bosdyn.api import robot_state_pb2
from google.protobuf.duration_pb2 import Duration
from google.protobuf.timestamp_pb2 import Timestamp
from google.protobuf.wrappers_pb2 import DoubleValue

from conftest import add_joint, assert_transform_close

from spot_state_bridge import (
    MissingRequiredAnchorError,
    OdometryFrame,
    RobotStateTranslator,
    StateClientConfig,
    UnknownJointError,
    translate_robot_state,
)
from spot_state_bridge.utils import Stamp


def test_battery_and_estop_snapshot_translates_end_to_end() -> None:
    robot_state = robot_state_pb2.RobotState()
    robot_state.battery_states.add(
        timestamp=Timestamp(seconds=100), identifier="b1", charge_percentage=DoubleValue(value=80.0)
    )
    robot_state.estop_states.add(
        timestamp=Timestamp(seconds=100), name="estop1", state=robot_state_pb2.EStopState.STATE_ESTOPPED
    )

    out = translate_robot_state(robot_state, Duration(seconds=2))

    assert out.wifi_state is None
    assert len(out.battery_states) == 1
    assert out.battery_states[0].identifier == "b1"
    assert out.battery_states[0].charge_percentage == 80.0
    assert out.battery_states[0].stamp == Stamp(102, 0)
    assert len(out.estop_states) == 1
    assert out.estop_states[0].name == "estop1"
    assert out.estop_states[0].state == robot_state_pb2.EStopState.STATE_ESTOPPED
    assert out.estop_states[0].stamp == Stamp(102, 0)
    assert out.present_facets() == ("battery_states", "estop_states")


def test_empty_snapshot_yields_all_absent() -> None:
    out = translate_robot_state(robot_state_pb2.RobotState(), Duration())
    assert out.present_facets() == ()


def test_full_snapshot_populates_every_facet(robot_state, clock_skew: Duration) -> None:
    robot_state.manipulator_state.gripper_open_percentage = 5.0
    out = translate_robot_state(
        robot_state,
        clock_skew,
        prefix="spot/",
        inverse_target_frame_id="spot/odom",
        odom_frame=OdometryFrame.ODOM,
    )
    assert set(out.present_facets()) == {
        "battery_states",
        "wifi_state",
        "foot_states",
        "estop_states",
        "joint_states",
        "tf",
        "odom_twist",
        "odom",
        "odom_corrected",
        "power_state",
        "system_fault_state",
        "manipulator_state",
        "end_effector_force",
        "behavior_fault_state",
    }
    inverted = out.tf.find("spot/body")
    assert inverted is not None
    assert inverted.parent_frame_id == "spot/odom"
    assert_transform_close(inverted.transform, out.odom.pose)
    assert out.odom.stamp == out.odom_twist.stamp == out.joint_states.stamp
    assert out.odom.twist is out.odom_twist.twist
    assert out.odom_corrected.pose == out.odom.pose


def test_unknown_joint_aborts_the_whole_translation(robot_state, clock_skew: Duration) -> None:
    add_joint(robot_state, "fl.toe")
    with pytest.raises(UnknownJointError):
        translate_robot_state(robot_state, clock_skew)


def test_missing_anchor_aborts_the_whole_translation(robot_state, clock_skew: Duration) -> None:
    del robot_state.kinematic_state.transforms_snapshot.child_to_parent_edge_map["odom"]
    with pytest.raises(MissingRequiredAnchorError):
        translate_robot_state(robot_state, clock_skew, odom_frame="odom")


def test_translator_binds_options(robot_state, clock_skew: Duration) -> None:
    translator = RobotStateTranslator(prefix="r1/", inverse_target_frame_id="r1/vision", odom_frame="vision")
    out = translator.translate(robot_state, clock_skew)
    assert out.odom.frame_id == "r1/vision"
    assert out.tf.find("r1/body").parent_frame_id == "r1/vision"
    assert out.joint_states.name[0] == "r1/front_left_hip_x"


def test_translation_does_not_mutate_the_snapshot(robot_state, clock_skew: Duration) -> None:
    before = robot_state.SerializeToString(deterministic=True)
    translate_robot_state(robot_state, clock_skew, inverse_target_frame_id="vision", odom_frame="vision")
    assert robot_state.SerializeToString(deterministic=True) == before


def test_translator_and_config_share_the_default_anchor(robot_state, clock_skew: Duration) -> None:
    out = translate_robot_state(robot_state, clock_skew)
    assert out.odom.frame_id == StateClientConfig().preferred_odom_frame.value
    assert RobotStateTranslator().odom_frame is StateClientConfig().preferred_odom_frame
