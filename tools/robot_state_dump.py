#!/usr/bin/env python3
"""
robot_state_dump.py

Translate a saved bosdyn ``RobotState`` snapshot and print the normalized
result as JSON.

Usage:
    python tools/robot_state_dump.py state.pb --skew 0.25
    python tools/robot_state_dump.py state.txt --text --robot-name spot --odom-frame odom
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from bosdyn.api import robot_state_pb2
from google.protobuf import text_format
from google.protobuf.message import DecodeError

from spot_state_bridge import OdometryFrame, RobotStateError, StateClientConfig, RobotStateTranslator
from spot_state_bridge.frames.odometry import DEFAULT_ODOM_FRAME
from spot_state_bridge.utils import seconds_to_duration


def load_robot_state(path: Path, *, as_text: bool) -> robot_state_pb2.RobotState:
    robot_state = robot_state_pb2.RobotState()
    if as_text:
        text_format.Parse(path.read_text(encoding="utf-8"), robot_state)
    else:
        robot_state.ParseFromString(path.read_bytes())
    return robot_state


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Translate a saved Spot RobotState snapshot to JSON.")
    ap.add_argument("snapshot", type=Path, help="serialized RobotState (binary unless --text)")
    ap.add_argument("--text", action="store_true", help="snapshot is in protobuf text format")
    ap.add_argument("--skew", type=float, default=0.0, help="clock skew in seconds added to every stamp")
    ap.add_argument("--robot-name", default="", help="frame prefix namespace (empty for none)")
    ap.add_argument(
        "--odom-frame",
        choices=[frame.value for frame in OdometryFrame],
        default=DEFAULT_ODOM_FRAME.value,
        help="world anchor used for odometry",
    )
    ap.add_argument("--inverse-target", default=None, help="frame whose parent edge is published inverted")
    ap.add_argument("--indent", type=int, default=2)
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = StateClientConfig(
            robot_name=args.robot_name,
            preferred_odom_frame=args.odom_frame,
            inverse_target_frame=args.inverse_target,
        )
    except ValueError as exc:
        print(f"[ERROR] invalid configuration: {exc}", file=sys.stderr)
        return 2

    try:
        robot_state = load_robot_state(args.snapshot, as_text=args.text)
    except (OSError, DecodeError, text_format.ParseError) as exc:
        print(f"[ERROR] could not read {args.snapshot}: {exc}", file=sys.stderr)
        return 1

    translator = RobotStateTranslator(
        prefix=config.frame_prefix,
        inverse_target_frame_id=config.inverse_target_frame_id,
        odom_frame=config.preferred_odom_frame,
    )
    try:
        translated = translator.translate(robot_state, seconds_to_duration(args.skew))
    except RobotStateError as exc:
        print(f"[ERROR] translation failed: {exc}", file=sys.stderr)
        return 1

    print(json.dumps(translated.as_dict(), indent=args.indent))
    return 0


if __name__ == "__main__":
    sys.exit(main())
