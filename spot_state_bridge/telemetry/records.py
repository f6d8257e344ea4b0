"""Normalized, clock-corrected records produced from one robot state snapshot."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field, fields
from typing import Any

from ..frames.geometry import RigidTransform, Twist, Vector3
from ..utils.time import Elapsed, Stamp


@dataclass(slots=True)
class BatteryState:
    stamp: Stamp
    identifier: str
    charge_percentage: float
    estimated_runtime: Elapsed
    current: float
    voltage: float
    temperatures: list[float] = field(default_factory=list)
    status: int = 0


@dataclass(slots=True)
class WiFiState:
    stamp: Stamp
    current_mode: int
    essid: str


@dataclass(slots=True)
class TerrainState:
    ground_mu_est: float
    frame_name: str
    foot_slip_distance_rt_frame: Vector3
    foot_slip_velocity_rt_frame: Vector3
    ground_contact_normal_rt_frame: Vector3
    visual_surface_ground_penetration_mean: float
    visual_surface_ground_penetration_std: float


@dataclass(slots=True)
class FootState:
    position_rt_body: Vector3
    contact: int
    terrain: TerrainState | None = None


@dataclass(slots=True)
class EStopState:
    stamp: Stamp
    name: str
    type: int
    state: int
    state_description: str


@dataclass(slots=True)
class JointStates:
    """Index-aligned joint vectors sharing the kinematic acquisition time."""

    stamp: Stamp
    name: list[str] = field(default_factory=list)
    position: list[float] = field(default_factory=list)
    velocity: list[float] = field(default_factory=list)
    effort: list[float] = field(default_factory=list)


@dataclass(slots=True)
class PowerState:
    stamp: Stamp
    motor_power_state: int
    shore_power_state: int
    locomotion_charge_percentage: float
    locomotion_estimated_runtime: Elapsed


@dataclass(slots=True)
class SystemFault:
    stamp: Stamp
    name: str
    duration: Elapsed
    code: int
    uid: int
    error_message: str
    attributes: list[str] = field(default_factory=list)
    severity: int = 0


@dataclass(slots=True)
class SystemFaultState:
    faults: list[SystemFault] = field(default_factory=list)
    historical_faults: list[SystemFault] = field(default_factory=list)


@dataclass(slots=True)
class ManipulatorState:
    """Arm state. ``None`` marks a quantity the robot did not measure."""

    gripper_open_percentage: float
    is_gripper_holding_item: bool
    estimated_end_effector_force_in_hand: Vector3 | None
    stow_state: int
    velocity_of_hand_in_vision: Twist | None
    velocity_of_hand_in_odom: Twist | None
    carry_state: int


@dataclass(slots=True)
class EndEffectorForce:
    stamp: Stamp | None
    frame_id: str
    force: Vector3 | None


@dataclass(slots=True)
class BehaviorFault:
    stamp: Stamp
    behavior_fault_id: int
    cause: int
    status: int


@dataclass(slots=True)
class BehaviorFaultState:
    faults: list[BehaviorFault] = field(default_factory=list)


@dataclass(slots=True)
class TransformStamped:
    stamp: Stamp
    parent_frame_id: str
    child_frame_id: str
    transform: RigidTransform


@dataclass(slots=True)
class TransformSet:
    transforms: list[TransformStamped] = field(default_factory=list)

    def find(self, child_frame_id: str) -> TransformStamped | None:
        for transform in self.transforms:
            if transform.child_frame_id == child_frame_id:
                return transform
        return None


@dataclass(slots=True)
class TwistStamped:
    stamp: Stamp
    frame_id: str
    twist: Twist


@dataclass(slots=True)
class Odometry:
    stamp: Stamp
    frame_id: str
    child_frame_id: str
    pose: RigidTransform
    twist: Twist


@dataclass(slots=True)
class RobotState:
    """Aggregate output; each facet is ``None`` when the snapshot lacks it."""

    battery_states: list[BatteryState] | None = None
    wifi_state: WiFiState | None = None
    foot_states: list[FootState] | None = None
    estop_states: list[EStopState] | None = None
    joint_states: JointStates | None = None
    tf: TransformSet | None = None
    odom_twist: TwistStamped | None = None
    odom: Odometry | None = None
    odom_corrected: Odometry | None = None
    power_state: PowerState | None = None
    system_fault_state: SystemFaultState | None = None
    manipulator_state: ManipulatorState | None = None
    end_effector_force: EndEffectorForce | None = None
    behavior_fault_state: BehaviorFaultState | None = None

    def present_facets(self) -> tuple[str, ...]:
        return tuple(f.name for f in fields(self) if getattr(self, f.name) is not None)

    def as_dict(self) -> dict[str, Any]:
        """Expose a nested plain-data view, mainly for debugging and JSON dumps."""

        return asdict(self)
