"""Pydantic configuration for translating one robot's state snapshots."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator

from ..frames.odometry import BODY_FRAME, DEFAULT_ODOM_FRAME, OdometryFrame


class StateClientConfig(BaseModel):
    """Per-robot knobs consumed by :class:`~spot_state_bridge.client.SpotStateClient`."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    robot_name: str = ""
    preferred_odom_frame: OdometryFrame = DEFAULT_ODOM_FRAME
    inverse_target_frame: str | None = None

    @field_validator("robot_name")
    @classmethod
    def _ensure_plain_name(cls, value: str) -> str:
        if "/" in value or any(ch.isspace() for ch in value):
            raise ValueError(f"robot_name must not contain '/' or whitespace: {value!r}")
        return value

    @field_validator("inverse_target_frame")
    @classmethod
    def _ensure_unqualified_frame(cls, value: str | None) -> str | None:
        if value is not None and (not value or value.startswith("/")):
            raise ValueError("inverse_target_frame must be a non-empty frame name without a leading '/'")
        if value == BODY_FRAME:
            raise ValueError(f"inverse_target_frame must not be the frame tree root {BODY_FRAME!r}")
        return value

    @property
    def frame_prefix(self) -> str:
        return f"{self.robot_name}/" if self.robot_name else ""

    @property
    def inverse_target_frame_id(self) -> str:
        """The frame-qualified child whose edge is published inverted."""

        target = self.inverse_target_frame or self.preferred_odom_frame.value
        return self.frame_prefix + target
