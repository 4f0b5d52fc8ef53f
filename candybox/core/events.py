"""Base class for round listeners (HUD, audio, anything else watching a round)."""

from typing import Optional

from .cell import BoxCell
from .models import EndCause, Phase


class RoundListener:
    """Override only the callbacks you care about."""

    def on_level_changed(self, level_index: int) -> None:
        return None

    def on_score_changed(self, score: int) -> None:
        return None

    def on_time_changed(self, remaining: float) -> None:
        return None

    def on_phase_changed(self, phase: Phase, cause: Optional[EndCause] = None) -> None:
        return None

    def on_cell_revealed(self, cell: BoxCell) -> None:
        return None
