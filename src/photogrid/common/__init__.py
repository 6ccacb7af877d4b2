"""Shared helpers used across photogrid subpackages."""

from .timing import TimingLog, timed_phase

__all__ = ["TimingLog", "timed_phase"]
