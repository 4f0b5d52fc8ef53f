"""HUD text

Keeps the score, timer, level and banner strings up to date from round
events, for whatever draws them.
"""

import logging
from typing import Optional

from ..core.events import RoundListener
from ..core.models import EndCause, Phase
from ..core.rules import level_label, phase_banner, score_label, timer_label

logger = logging.getLogger(__name__)


class HudText(RoundListener):
    """Latest HUD strings."""

    def __init__(self):
        self.level_text = ""
        self.score_text = score_label(0)
        self.timer_text = timer_label(0.0)
        self.banner_text = ""

    def on_level_changed(self, level_index: int) -> None:
        self.level_text = level_label(level_index)

    def on_score_changed(self, score: int) -> None:
        self.score_text = score_label(score)

    def on_time_changed(self, remaining: float) -> None:
        self.timer_text = timer_label(remaining)

    def on_phase_changed(self, phase: Phase, cause: Optional[EndCause] = None) -> None:
        self.banner_text = phase_banner(phase, cause)
        if self.banner_text:
            logger.info("%s | %s | %s", self.banner_text, self.score_text, self.level_text)

    def lines(self) -> list[str]:
        """HUD lines top to bottom, banner last when present."""
        lines = [self.level_text, self.score_text, self.timer_text]
        if self.banner_text:
            lines.append(self.banner_text)
        return lines
