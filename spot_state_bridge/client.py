"""Robot state client: fetch a snapshot, read the clock skew, translate."""

from __future__ import annotations

import logging
from logging import Formatter, BASIC_FORMAT
from typing import Protocol

from bosdyn.api import robot_state_pb2
from google.protobuf.duration_pb2 import Duration

from .configs import StateClientConfig
from .errors import UpstreamFailure
from .telemetry.records import RobotState
from .translator import RobotStateTranslator

logger = logging.getLogger(__name__)
handler = logging.StreamHandler()
handler.setLevel(logging.INFO)
handler.setFormatter(Formatter(BASIC_FORMAT))
logger.addHandler(handler)


class RobotStateSource(Protocol):
    """Anything that can fetch the latest raw robot state (e.g. a bosdyn RobotStateClient)."""

    def get_robot_state(self) -> robot_state_pb2.RobotState | None: ...


class ClockSkewSource(Protocol):
    """Anything that knows the current robot-to-local clock skew (e.g. a time-sync endpoint)."""

    def get_clock_skew(self) -> Duration | None: ...


class SpotStateClient:
    """Produce one translated :class:`RobotState` per call.

    Fetch and clock-sync failures are raised as :class:`UpstreamFailure`
    with the upstream diagnostic; this client never retries.
    """

    def __init__(
        self,
        config: StateClientConfig,
        *,
        state_source: RobotStateSource,
        clock_skew_source: ClockSkewSource,
        translator: RobotStateTranslator | None = None,
    ):
        self.config = config
        self._state_source = state_source
        self._clock_skew_source = clock_skew_source
        self._translator = translator or RobotStateTranslator(
            prefix=config.frame_prefix,
            inverse_target_frame_id=config.inverse_target_frame_id,
            odom_frame=config.preferred_odom_frame,
        )
        logger.debug(
            "Initializing SpotStateClient | prefix=%r | inverse_target=%s | odom_frame=%s",
            config.frame_prefix,
            config.inverse_target_frame_id,
            config.preferred_odom_frame.value,
        )

    @property
    def translator(self) -> RobotStateTranslator:
        return self._translator

    def fetch_raw_state(self) -> robot_state_pb2.RobotState:
        try:
            robot_state = self._state_source.get_robot_state()
        except Exception as exc:
            logger.warning("Robot state request failed: %s", exc)
            raise UpstreamFailure(f"Failed to get robot state: {exc}") from exc
        if robot_state is None:
            logger.warning("Robot state response carried no robot state.")
            raise UpstreamFailure("Failed to get robot state: response carried no robot state")
        return robot_state

    def get_clock_skew(self) -> Duration:
        try:
            clock_skew = self._clock_skew_source.get_clock_skew()
        except Exception as exc:
            logger.warning("Clock skew query failed: %s", exc)
            raise UpstreamFailure(f"Failed to get latest clock skew: {exc}") from exc
        if clock_skew is None:
            raise UpstreamFailure("Failed to get latest clock skew: time sync has not converged")
        return clock_skew

    def get_robot_state(self) -> RobotState:
        robot_state = self.fetch_raw_state()
        clock_skew = self.get_clock_skew()
        return self._translator.translate(robot_state, clock_skew)
