"""
Module: common.timing

Purpose:
    Phase timing for a single composition call, so slow decodes or
    oversized canvases show up in the kiosk logs.

Key Classes:
    - TimingLog: Collects per-phase durations

Key Functions:
    - timed_phase: Context manager for timing code blocks

Dependencies:
    - time (std)
    - contextlib (std)
    - dataclasses (std)

Used By:
    - compositor.controller: compose_grid / render_grid
"""

from __future__ import annotations

import logging
import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Dict, Generator

logger = logging.getLogger(__name__)


@dataclass
class TimingLog:
    """
    Durations of the phases of one composition.

    Example:
        >>> log = TimingLog()
        >>> log.log_phase("decode", 0.234)
        >>> log.total
        0.234
    """
    phases: Dict[str, float] = field(default_factory=dict)

    def log_phase(self, phase: str, duration: float) -> None:
        """Record a phase duration, accumulating repeated phases."""
        self.phases[phase] = self.phases.get(phase, 0.0) + duration

    @property
    def total(self) -> float:
        return sum(self.phases.values())

    def summary(self) -> str:
        """One-line summary such as 'decode=0.120s plan=0.000s (total 0.120s)'."""
        parts = [f"{phase}={duration:.3f}s" for phase, duration in self.phases.items()]
        return f"{' '.join(parts)} (total {self.total:.3f}s)"


@contextmanager
def timed_phase(log: TimingLog, phase: str) -> Generator[None, None, None]:
    """
    Context manager for timing a code phase.

    The duration is recorded even when the block raises.

    Example:
        >>> log = TimingLog()
        >>> with timed_phase(log, "decode"):
        ...     images = decode_all(photos)
    """
    start = time.perf_counter()
    try:
        yield
    finally:
        elapsed = time.perf_counter() - start
        log.log_phase(phase, elapsed)
        logger.debug(f"Phase {phase} took {elapsed:.3f}s")
