"""Configuration models for the robot state bridge."""

from .state_client import StateClientConfig

__all__ = ["StateClientConfig"]
