"""Audio cues

Plays one-shot sounds for candy, bomb and game over on ``pygame.mixer``.
A missing clip or an unavailable audio device never interrupts the game;
the cue is just skipped.
"""

import logging
import os
from enum import Enum
from typing import Optional

import pygame

from ..core.cell import BoxCell
from ..core.events import RoundListener
from ..core.models import ContentType, EndCause, Phase
from ..core.state import Settings

logger = logging.getLogger(__name__)


class Cue(str, Enum):
    CANDY = "candy"
    BOMB = "bomb"
    GAME_OVER = "game_over"


class SoundBoard(RoundListener):
    """Round listener that turns game events into sounds."""

    def __init__(self, clips: dict[Cue, Optional[str]], *, enabled: bool = True, mixer=None):
        """
        Args:
            clips: clip path per cue (None or missing file = silent cue)
            enabled: sound preference
            mixer: mixer module, pygame.mixer by default
        """
        self._mixer = mixer if mixer is not None else pygame.mixer
        self.enabled = enabled
        self._sounds: dict[Cue, object] = {}
        self._ready = self._init_mixer()

        if self._ready:
            for cue, path in clips.items():
                self._load(cue, path)

    @classmethod
    def from_settings(cls, settings: Settings, *, enabled: bool = True, mixer=None) -> "SoundBoard":
        clips = {
            Cue.CANDY: settings.sound_candy,
            Cue.BOMB: settings.sound_bomb,
            Cue.GAME_OVER: settings.sound_game_over,
        }
        return cls(clips, enabled=enabled, mixer=mixer)

    @property
    def ready(self) -> bool:
        return self._ready

    def has_cue(self, cue: Cue) -> bool:
        return cue in self._sounds

    def _init_mixer(self) -> bool:
        try:
            if not self._mixer.get_init():
                self._mixer.init()
            return True
        except pygame.error as exc:
            logger.warning("Audio unavailable, cues disabled: %s", exc)
            return False

    def _load(self, cue: Cue, path: Optional[str]) -> None:
        if not path:
            return
        if not os.path.exists(path):
            logger.warning("Sound clip for %s not found: %s", cue.value, path)
            return
        try:
            self._sounds[cue] = self._mixer.Sound(path)
        except pygame.error as exc:
            logger.warning("Failed to load %s: %s", path, exc)

    def set_enabled(self, enabled: bool) -> None:
        self.enabled = enabled
        if not enabled and self._ready:
            self._mixer.stop()

    def play(self, cue: Cue) -> bool:
        """Fire and forget. Returns True if a sound was started."""
        if not self.enabled or not self._ready:
            return False
        sound = self._sounds.get(cue)
        if sound is None:
            return False
        sound.play()
        return True

    # RoundListener callbacks
    def on_cell_revealed(self, cell: BoxCell) -> None:
        self.play(Cue.CANDY if cell.content is ContentType.CANDY else Cue.BOMB)

    def on_phase_changed(self, phase: Phase, cause: Optional[EndCause] = None) -> None:
        if not self._ready:
            return
        if phase is Phase.OVER:
            self.play(Cue.GAME_OVER)
        elif phase is Phase.PAUSED:
            self._mixer.pause()
        elif phase is Phase.ACTIVE:
            self._mixer.unpause()
