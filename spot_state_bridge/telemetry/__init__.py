"""Translation of robot state snapshots into normalized records."""

from .joints import SpotJoint, resolve_joint_name
from .records import (
    BatteryState,
    BehaviorFault,
    BehaviorFaultState,
    EndEffectorForce,
    EStopState,
    FootState,
    JointStates,
    ManipulatorState,
    Odometry,
    PowerState,
    RobotState,
    SystemFault,
    SystemFaultState,
    TerrainState,
    TransformSet,
    TransformStamped,
    TwistStamped,
    WiFiState,
)

__all__ = [
    "BatteryState",
    "BehaviorFault",
    "BehaviorFaultState",
    "EndEffectorForce",
    "EStopState",
    "FootState",
    "JointStates",
    "ManipulatorState",
    "Odometry",
    "PowerState",
    "RobotState",
    "SpotJoint",
    "SystemFault",
    "SystemFaultState",
    "TerrainState",
    "TransformSet",
    "TransformStamped",
    "TwistStamped",
    "WiFiState",
    "resolve_joint_name",
]
