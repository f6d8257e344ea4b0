"""Per-facet translation of a ``bosdyn.api.RobotState`` into normalized records.

Every function takes the raw snapshot and the clock skew of the current call
and returns ``None`` when the facet is missing from the snapshot. Repeated
containers (batteries, e-stops, feet, comms) count as missing when empty.
"""

from __future__ import annotations

from typing import Iterable

from bosdyn.api import robot_state_pb2
from google.protobuf.duration_pb2 import Duration

from ..frames.geometry import Twist, Vector3
from ..utils.time import Elapsed, apply_clock_skew
from .joints import resolve_joint_name
from .records import (
    BatteryState,
    BehaviorFault,
    BehaviorFaultState,
    EndEffectorForce,
    EStopState,
    FootState,
    JointStates,
    ManipulatorState,
    PowerState,
    SystemFault,
    SystemFaultState,
    TerrainState,
    WiFiState,
)

HAND_FRAME = "hand"


def get_battery_states(
    robot_state: robot_state_pb2.RobotState, clock_skew: Duration
) -> list[BatteryState] | None:
    """One record per battery pack, each stamped with its own corrected reading time."""

    if not robot_state.battery_states:
        return None
    return [
        BatteryState(
            stamp=apply_clock_skew(battery.timestamp, clock_skew),
            identifier=battery.identifier,
            charge_percentage=battery.charge_percentage.value,
            estimated_runtime=Elapsed.from_duration(battery.estimated_runtime),
            current=battery.current.value,
            voltage=battery.voltage.value,
            temperatures=list(battery.temperatures),
            status=battery.status,
        )
        for battery in robot_state.battery_states
    ]


def get_wifi_state(robot_state: robot_state_pb2.RobotState, clock_skew: Duration) -> WiFiState | None:
    """Return the Wi-Fi state of the last comms entry that reports one."""

    wifi_state: WiFiState | None = None
    for comm_state in robot_state.comms_states:
        if comm_state.HasField("wifi_state"):
            wifi_state = WiFiState(
                stamp=apply_clock_skew(comm_state.timestamp, clock_skew),
                current_mode=comm_state.wifi_state.current_mode,
                essid=comm_state.wifi_state.essid,
            )
    return wifi_state


def get_foot_states(robot_state: robot_state_pb2.RobotState) -> list[FootState] | None:
    """Foot positions in the body frame, with terrain estimates where the robot reports them.

    Foot states carry no timestamp of their own, so no clock skew is needed.
    """

    if not robot_state.foot_state:
        return None
    feet: list[FootState] = []
    for foot in robot_state.foot_state:
        terrain = None
        if foot.HasField("terrain"):
            terrain = TerrainState(
                ground_mu_est=foot.terrain.ground_mu_est,
                frame_name=foot.terrain.frame_name,
                foot_slip_distance_rt_frame=Vector3.from_proto(foot.terrain.foot_slip_distance_rt_frame),
                foot_slip_velocity_rt_frame=Vector3.from_proto(foot.terrain.foot_slip_velocity_rt_frame),
                ground_contact_normal_rt_frame=Vector3.from_proto(foot.terrain.ground_contact_normal_rt_frame),
                visual_surface_ground_penetration_mean=foot.terrain.visual_surface_ground_penetration_mean,
                visual_surface_ground_penetration_std=foot.terrain.visual_surface_ground_penetration_std,
            )
        feet.append(
            FootState(
                position_rt_body=Vector3.from_proto(foot.foot_position_rt_body),
                contact=foot.contact,
                terrain=terrain,
            )
        )
    return feet


def get_estop_states(robot_state: robot_state_pb2.RobotState, clock_skew: Duration) -> list[EStopState] | None:
    """One record per emergency stop endpoint known to the robot."""

    if not robot_state.estop_states:
        return None
    return [
        EStopState(
            stamp=apply_clock_skew(estop.timestamp, clock_skew),
            name=estop.name,
            type=estop.type,
            state=estop.state,
            state_description=estop.state_description,
        )
        for estop in robot_state.estop_states
    ]


def get_joint_states(
    robot_state: robot_state_pb2.RobotState, clock_skew: Duration, prefix: str = ""
) -> JointStates | None:
    """Build index-aligned joint vectors.

    An unknown joint id raises :class:`~spot_state_bridge.errors.UnknownJointError`
    before anything is returned; a partial joint vector is never produced.
    """

    if not robot_state.HasField("kinematic_state"):
        return None
    kinematic_state = robot_state.kinematic_state
    joint_states = JointStates(stamp=apply_clock_skew(kinematic_state.acquisition_timestamp, clock_skew))
    for joint in kinematic_state.joint_states:
        joint_states.name.append(resolve_joint_name(joint.name, prefix))
        joint_states.position.append(joint.position.value)
        joint_states.velocity.append(joint.velocity.value)
        joint_states.effort.append(joint.load.value)
    return joint_states


def get_power_state(robot_state: robot_state_pb2.RobotState, clock_skew: Duration) -> PowerState | None:
    """Motor and shore power status plus the locomotion battery estimate."""

    if not robot_state.HasField("power_state"):
        return None
    power_state = robot_state.power_state
    return PowerState(
        stamp=apply_clock_skew(power_state.timestamp, clock_skew),
        motor_power_state=power_state.motor_power_state,
        shore_power_state=power_state.shore_power_state,
        locomotion_charge_percentage=power_state.locomotion_charge_percentage.value,
        locomotion_estimated_runtime=Elapsed.from_duration(power_state.locomotion_estimated_runtime),
    )


def _system_faults(faults: Iterable[robot_state_pb2.SystemFault], clock_skew: Duration) -> list[SystemFault]:
    return [
        SystemFault(
            stamp=apply_clock_skew(fault.onset_timestamp, clock_skew),
            name=fault.name,
            duration=Elapsed.from_duration(fault.duration),
            code=fault.code,
            uid=fault.uid,
            error_message=fault.error_message,
            attributes=list(fault.attributes),
            severity=fault.severity,
        )
        for fault in faults
    ]


def get_system_fault_state(
    robot_state: robot_state_pb2.RobotState, clock_skew: Duration
) -> SystemFaultState | None:
    """Active and historical system faults, stamped at their corrected onset."""

    if not robot_state.HasField("system_fault_state"):
        return None
    return SystemFaultState(
        faults=_system_faults(robot_state.system_fault_state.faults, clock_skew),
        historical_faults=_system_faults(robot_state.system_fault_state.historical_faults, clock_skew),
    )


def _optional_vector(message, field_name: str) -> Vector3 | None:
    if not message.HasField(field_name):
        return None
    return Vector3.from_proto(getattr(message, field_name))


def _optional_twist(message, field_name: str) -> Twist | None:
    if not message.HasField(field_name):
        return None
    return Twist.from_proto(getattr(message, field_name))


def get_manipulator_state(robot_state: robot_state_pb2.RobotState) -> ManipulatorState | None:
    """Arm and gripper state. Unmeasured quantities come back as ``None``."""

    if not robot_state.HasField("manipulator_state"):
        return None
    manipulator = robot_state.manipulator_state
    return ManipulatorState(
        gripper_open_percentage=manipulator.gripper_open_percentage,
        is_gripper_holding_item=manipulator.is_gripper_holding_item,
        estimated_end_effector_force_in_hand=_optional_vector(manipulator, "estimated_end_effector_force_in_hand"),
        stow_state=manipulator.stow_state,
        velocity_of_hand_in_vision=_optional_twist(manipulator, "velocity_of_hand_in_vision"),
        velocity_of_hand_in_odom=_optional_twist(manipulator, "velocity_of_hand_in_odom"),
        carry_state=manipulator.carry_state,
    )


def get_end_effector_force(
    robot_state: robot_state_pb2.RobotState, clock_skew: Duration, prefix: str = ""
) -> EndEffectorForce | None:
    """Force estimate at the hand, stamped with the kinematic acquisition time."""

    if not robot_state.HasField("manipulator_state"):
        return None
    stamp = None
    if robot_state.HasField("kinematic_state"):
        stamp = apply_clock_skew(robot_state.kinematic_state.acquisition_timestamp, clock_skew)
    return EndEffectorForce(
        stamp=stamp,
        frame_id=prefix + HAND_FRAME,
        force=_optional_vector(robot_state.manipulator_state, "estimated_end_effector_force_in_hand"),
    )


def get_behavior_fault_state(
    robot_state: robot_state_pb2.RobotState, clock_skew: Duration
) -> BehaviorFaultState | None:
    """Behavior faults that currently block locomotion, stamped at their corrected onset."""

    if not robot_state.HasField("behavior_fault_state"):
        return None
    return BehaviorFaultState(
        faults=[
            BehaviorFault(
                stamp=apply_clock_skew(fault.onset_timestamp, clock_skew),
                behavior_fault_id=fault.behavior_fault_id,
                cause=fault.cause,
                status=fault.status,
            )
            for fault in robot_state.behavior_fault_state.faults
        ]
    )
