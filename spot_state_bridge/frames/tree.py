"""Frame-qualified transform tree built from a snapshot's child-to-parent edge map."""

from __future__ import annotations

import logging

from bosdyn.api import robot_state_pb2
from google.protobuf.duration_pb2 import Duration

from ..telemetry.records import TransformSet, TransformStamped
from ..utils.time import apply_clock_skew
from .geometry import RigidTransform, se3_pose_from_proto

logger = logging.getLogger(__name__)


def build_transform_set(
    robot_state: robot_state_pb2.RobotState,
    clock_skew: Duration,
    prefix: str = "",
    inverse_target_frame_id: str = "",
) -> TransformSet | None:
    """Emit one frame-qualified transform per parent edge.

    The edge whose qualified child id equals ``inverse_target_frame_id`` is
    emitted inverted, so that child becomes the parent of its old parent.
    Root edges (empty parent name) carry no transform and are skipped; a root
    frame named as the inverse target is logged and left as is.
    """

    if not robot_state.HasField("kinematic_state"):
        return None
    kinematic_state = robot_state.kinematic_state
    stamp = apply_clock_skew(kinematic_state.acquisition_timestamp, clock_skew)
    tf_set = TransformSet()
    for child_frame_id, edge in kinematic_state.transforms_snapshot.child_to_parent_edge_map.items():
        child = prefix + child_frame_id
        if not edge.parent_frame_name:
            if child == inverse_target_frame_id:
                logger.warning("Inverse target %s is the root of the frame tree; it has no edge to invert.", child)
            continue
        parent = prefix + edge.parent_frame_name
        if child == inverse_target_frame_id:
            logger.debug("Inverting edge %s -> %s so %s becomes the parent.", parent, child, child)
            child_tform_parent = se3_pose_from_proto(edge.parent_tform_child).inverse()
            tf_set.transforms.append(
                TransformStamped(
                    stamp=stamp,
                    parent_frame_id=child,
                    child_frame_id=parent,
                    transform=RigidTransform.from_se3_pose(child_tform_parent),
                )
            )
        else:
            tf_set.transforms.append(
                TransformStamped(
                    stamp=stamp,
                    parent_frame_id=parent,
                    child_frame_id=child,
                    transform=RigidTransform.from_proto(edge.parent_tform_child),
                )
            )
    return tf_set
