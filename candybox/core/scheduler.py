"""Delayed round transitions.

Holds at most one pending continuation (next level, win, or auto-restart).
Time only advances through ``advance`` so delays follow the game clock.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional

logger = logging.getLogger(__name__)


@dataclass
class PendingTransition:
    label: str
    epoch: int
    remaining: float
    action: Callable[[], None]


class TransitionScheduler:
    """Single-slot scheduler keyed by the controller's round epoch."""

    def __init__(self) -> None:
        self._pending: Optional[PendingTransition] = None

    @property
    def pending(self) -> Optional[PendingTransition]:
        return self._pending

    def schedule(self, label: str, delay: float, epoch: int, action: Callable[[], None]) -> None:
        """Replace whatever is pending with a new continuation."""
        if delay < 0:
            raise ValueError(f"delay must be >= 0, got {delay}")
        if self._pending is not None:
            logger.debug("Replacing pending %s with %s", self._pending.label, label)
        self._pending = PendingTransition(label=label, epoch=epoch, remaining=delay, action=action)

    def cancel(self) -> None:
        self._pending = None

    def advance(self, elapsed: float, current_epoch: int) -> bool:
        """Count down the pending continuation and run it when due.

        A continuation scheduled under an older epoch is dropped instead of run.

        Returns:
            True if a continuation ran
        """
        pending = self._pending
        if pending is None:
            return False

        pending.remaining -= elapsed
        if pending.remaining > 0:
            return False

        self._pending = None
        if pending.epoch != current_epoch:
            logger.debug(
                "Dropping stale %s (epoch %d, current %d)", pending.label, pending.epoch, current_epoch
            )
            return False

        pending.action()
        return True
