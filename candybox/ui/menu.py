"""Main menu: sound preference and session start."""

import logging

from ..audio.sound import SoundBoard
from ..core import prefs as prefs_store
from ..core.controller import RoundController
from ..core.models import Preferences
from ..core.state import Settings

logger = logging.getLogger(__name__)


class MainMenu:
    def __init__(self, settings: Settings, sound: SoundBoard):
        self.settings = settings
        self.sound = sound
        self.prefs = Preferences()

    @property
    def sound_on(self) -> bool:
        return self.prefs.sound_on

    def start(self) -> Preferences:
        """Read the stored preference and apply it to the sound board."""
        self.prefs = prefs_store.load_prefs(self.settings.prefs_path)
        self.sound.set_enabled(self.prefs.sound_on)
        return self.prefs

    def toggle_sound(self) -> bool:
        """Flip sound on/off, apply it and persist it. Returns the new value."""
        self.prefs = Preferences(sound_on=not self.prefs.sound_on)
        self.sound.set_enabled(self.prefs.sound_on)
        if not prefs_store.save_prefs(self.prefs, self.settings.prefs_path):
            logger.warning("Sound preference not persisted")
        return self.prefs.sound_on

    def play(self, controller: RoundController) -> None:
        logger.info("Starting game")
        controller.start(1)
