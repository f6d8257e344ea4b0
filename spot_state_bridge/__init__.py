"""Public package surface for the Spot robot state bridge."""

from .client import ClockSkewSource, RobotStateSource, SpotStateClient
from .configs import StateClientConfig
from .errors import MissingRequiredAnchorError, RobotStateError, UnknownJointError, UpstreamFailure
from .frames.odometry import OdometryFrame
from .telemetry import RobotState
from .translator import RobotStateTranslator, translate_robot_state

__all__ = [
    "ClockSkewSource",
    "MissingRequiredAnchorError",
    "OdometryFrame",
    "RobotState",
    "RobotStateError",
    "RobotStateSource",
    "RobotStateTranslator",
    "SpotStateClient",
    "StateClientConfig",
    "UnknownJointError",
    "UpstreamFailure",
    "translate_robot_state",
]
