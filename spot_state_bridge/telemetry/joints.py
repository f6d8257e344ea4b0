"""Mapping from Spot's internal joint ids to friendly joint names."""

from __future__ import annotations

from enum import Enum

from ..errors import UnknownJointError


class SpotJoint(str, Enum):
    """Every joint the robot reports in its kinematic state."""

    FRONT_LEFT_HIP_X = "fl.hx"
    FRONT_LEFT_HIP_Y = "fl.hy"
    FRONT_LEFT_KNEE = "fl.kn"
    FRONT_RIGHT_HIP_X = "fr.hx"
    FRONT_RIGHT_HIP_Y = "fr.hy"
    FRONT_RIGHT_KNEE = "fr.kn"
    REAR_LEFT_HIP_X = "hl.hx"
    REAR_LEFT_HIP_Y = "hl.hy"
    REAR_LEFT_KNEE = "hl.kn"
    REAR_RIGHT_HIP_X = "hr.hx"
    REAR_RIGHT_HIP_Y = "hr.hy"
    REAR_RIGHT_KNEE = "hr.kn"
    ARM_SH0 = "arm0.sh0"
    ARM_SH1 = "arm0.sh1"
    ARM_HR0 = "arm0.hr0"
    ARM_EL0 = "arm0.el0"
    ARM_EL1 = "arm0.el1"
    ARM_WR0 = "arm0.wr0"
    ARM_WR1 = "arm0.wr1"
    ARM_F1X = "arm0.f1x"

    @property
    def friendly_name(self) -> str:
        return FRIENDLY_JOINT_NAMES[self]

    @property
    def is_arm_joint(self) -> bool:
        return self.value.startswith("arm0.")


FRIENDLY_JOINT_NAMES: dict[SpotJoint, str] = {
    SpotJoint.FRONT_LEFT_HIP_X: "front_left_hip_x",
    SpotJoint.FRONT_LEFT_HIP_Y: "front_left_hip_y",
    SpotJoint.FRONT_LEFT_KNEE: "front_left_knee",
    SpotJoint.FRONT_RIGHT_HIP_X: "front_right_hip_x",
    SpotJoint.FRONT_RIGHT_HIP_Y: "front_right_hip_y",
    SpotJoint.FRONT_RIGHT_KNEE: "front_right_knee",
    SpotJoint.REAR_LEFT_HIP_X: "rear_left_hip_x",
    SpotJoint.REAR_LEFT_HIP_Y: "rear_left_hip_y",
    SpotJoint.REAR_LEFT_KNEE: "rear_left_knee",
    SpotJoint.REAR_RIGHT_HIP_X: "rear_right_hip_x",
    SpotJoint.REAR_RIGHT_HIP_Y: "rear_right_hip_y",
    SpotJoint.REAR_RIGHT_KNEE: "rear_right_knee",
    SpotJoint.ARM_SH0: "arm_sh0",
    SpotJoint.ARM_SH1: "arm_sh1",
    SpotJoint.ARM_HR0: "arm_hr0",
    SpotJoint.ARM_EL0: "arm_el0",
    SpotJoint.ARM_EL1: "arm_el1",
    SpotJoint.ARM_WR0: "arm_wr0",
    SpotJoint.ARM_WR1: "arm_wr1",
    SpotJoint.ARM_F1X: "arm_f1x",
}

if set(FRIENDLY_JOINT_NAMES) != set(SpotJoint):  # pragma: no cover - import-time guard
    raise RuntimeError("FRIENDLY_JOINT_NAMES must cover every SpotJoint")


def resolve_joint(internal_id: str) -> SpotJoint:
    try:
        return SpotJoint(internal_id)
    except ValueError as exc:
        raise UnknownJointError(internal_id) from exc


def resolve_joint_name(internal_id: str, prefix: str = "") -> str:
    """Return ``prefix`` + the friendly name for ``internal_id``.

    Raises :class:`UnknownJointError` when the id is not a known joint.
    """

    return prefix + resolve_joint(internal_id).friendly_name
