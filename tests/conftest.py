from __future__ import annotations

import math
from typing import Sequence

import pytest
from bosdyn.api import robot_state_pb2
from google.protobuf.duration_pb2 import Duration
from google.protobuf.timestamp_pb2 import Timestamp
from google.protobuf.wrappers_pb2 import DoubleValue

from spot_state_bridge.frames import RigidTransform

ACQUISITION = Timestamp(seconds=1_000, nanos=250_000_000)
LEG_JOINTS = ("fl.hx", "fl.hy", "fl.kn", "fr.hx", "fr.hy", "fr.kn", "hl.hx", "hl.hy", "hl.kn", "hr.hx", "hr.hy", "hr.kn")

# Rotation of 90 degrees about +z, in (x, y, z, w) order.
YAW_90 = (0.0, 0.0, math.sin(math.pi / 4), math.cos(math.pi / 4))


def add_edge(
    robot_state: robot_state_pb2.RobotState,
    child: str,
    parent: str,
    *,
    position: Sequence[float] = (0.0, 0.0, 0.0),
    rotation: Sequence[float] = (0.0, 0.0, 0.0, 1.0),
) -> None:
    edge = robot_state.kinematic_state.transforms_snapshot.child_to_parent_edge_map[child]
    edge.parent_frame_name = parent
    if parent:
        pose = edge.parent_tform_child
        pose.position.x, pose.position.y, pose.position.z = position
        pose.rotation.x, pose.rotation.y, pose.rotation.z, pose.rotation.w = rotation


def assert_transform_close(actual: RigidTransform, expected: RigidTransform, *, tol: float = 1e-9) -> None:
    actual_xyz = (actual.translation.x, actual.translation.y, actual.translation.z)
    expected_xyz = (expected.translation.x, expected.translation.y, expected.translation.z)
    assert actual_xyz == pytest.approx(expected_xyz, abs=tol)
    # q and -q encode the same rotation.
    ours = tuple(actual.rotation.as_wxyz())
    theirs = tuple(expected.rotation.as_wxyz())
    assert ours == pytest.approx(theirs, abs=tol) or ours == pytest.approx(tuple(-v for v in theirs), abs=tol)


def add_joint(robot_state: robot_state_pb2.RobotState, name: str, position: float = 0.0) -> None:
    robot_state.kinematic_state.joint_states.add(
        name=name,
        position=DoubleValue(value=position),
        velocity=DoubleValue(value=position / 10.0),
        load=DoubleValue(value=-position),
    )


def make_kinematic_state(robot_state: robot_state_pb2.RobotState) -> None:
    """Spot-like frame tree: ``body`` is the root, anchors hang off it."""

    robot_state.kinematic_state.acquisition_timestamp.CopyFrom(ACQUISITION)
    add_edge(robot_state, "body", "")
    add_edge(robot_state, "odom", "body", position=(-1.0, -2.0, 0.0))
    add_edge(robot_state, "vision", "body", position=(0.0, -3.0, 0.0), rotation=YAW_90)
    add_edge(robot_state, "hand", "body", position=(0.5, 0.0, 0.25))
    velocity = robot_state.kinematic_state.velocity_of_body_in_odom
    velocity.linear.x, velocity.linear.y, velocity.linear.z = 0.5, 0.1, 0.0
    velocity.angular.x, velocity.angular.y, velocity.angular.z = 0.01, 0.02, 0.3
    vision_velocity = robot_state.kinematic_state.velocity_of_body_in_vision
    vision_velocity.linear.x, vision_velocity.linear.y = -0.1, 0.5
    vision_velocity.angular.z = 0.3
    for index, name in enumerate(LEG_JOINTS):
        add_joint(robot_state, name, position=float(index))


def make_full_robot_state() -> robot_state_pb2.RobotState:
    robot_state = robot_state_pb2.RobotState()
    robot_state.battery_states.add(
        timestamp=Timestamp(seconds=900),
        identifier="b1",
        charge_percentage=DoubleValue(value=80.0),
        estimated_runtime=Duration(seconds=3_600, nanos=5),
        current=DoubleValue(value=-4.5),
        voltage=DoubleValue(value=57.2),
        temperatures=[31.0, 32.5],
        status=robot_state_pb2.BatteryState.STATUS_DISCHARGING,
    )
    comms = robot_state.comms_states.add(timestamp=Timestamp(seconds=950))
    comms.wifi_state.current_mode = 2
    comms.wifi_state.essid = "spot-net"
    foot = robot_state.foot_state.add(contact=robot_state_pb2.FootState.CONTACT_MADE)
    foot.foot_position_rt_body.x, foot.foot_position_rt_body.y, foot.foot_position_rt_body.z = 0.3, 0.2, -0.5
    robot_state.estop_states.add(
        timestamp=Timestamp(seconds=905),
        name="estop1",
        type=robot_state_pb2.EStopState.TYPE_SOFTWARE,
        state=robot_state_pb2.EStopState.STATE_ESTOPPED,
        state_description="pressed",
    )
    make_kinematic_state(robot_state)
    robot_state.power_state.timestamp.seconds = 910
    robot_state.power_state.motor_power_state = 2
    robot_state.power_state.locomotion_charge_percentage.value = 79.5
    robot_state.power_state.locomotion_estimated_runtime.seconds = 3_500
    robot_state.system_fault_state.faults.add(
        name="motor_fault",
        onset_timestamp=Timestamp(seconds=920),
        duration=Duration(seconds=3),
        code=7,
        uid=42,
        error_message="hot",
        attributes=["leg", "motor"],
        severity=robot_state_pb2.SystemFault.SEVERITY_CRITICAL,
    )
    robot_state.system_fault_state.historical_faults.add(name="old", onset_timestamp=Timestamp(seconds=10))
    robot_state.behavior_fault_state.faults.add(
        behavior_fault_id=3, onset_timestamp=Timestamp(seconds=930), cause=1, status=1
    )
    return robot_state


@pytest.fixture()
def clock_skew() -> Duration:
    return Duration(seconds=2)


@pytest.fixture()
def robot_state() -> robot_state_pb2.RobotState:
    return make_full_robot_state()
