import os
import random

import pytest

# No audio device in CI
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from candybox.core.cell import BoxCell
from candybox.core.controller import RoundController
from candybox.core.events import RoundListener
from candybox.core.state import Settings


class RecordingListener(RoundListener):
    def __init__(self):
        self.events = []

    def on_level_changed(self, level_index):
        self.events.append(("level", level_index))

    def on_score_changed(self, score):
        self.events.append(("score", score))

    def on_time_changed(self, remaining):
        self.events.append(("time", remaining))

    def on_phase_changed(self, phase, cause=None):
        self.events.append(("phase", phase, cause))

    def on_cell_revealed(self, cell):
        self.events.append(("revealed", cell))

    def of(self, kind):
        return [e for e in self.events if e[0] == kind]


@pytest.fixture()
def settings():
    s = Settings()
    s.time_limit_per_level = 10.0
    s.total_levels = 3
    s.level_transition_delay = 1.5
    s.game_over_delay = 2.0
    return s


@pytest.fixture()
def recorder():
    return RecordingListener()


@pytest.fixture()
def make_controller(settings, recorder):
    def _make(seed=7, **overrides):
        for key, value in overrides.items():
            setattr(settings, key, value)
        return RoundController(
            settings=settings,
            template=BoxCell(x=0.0, y=0.0),
            rng=random.Random(seed),
            listeners=[recorder],
        )

    return _make
