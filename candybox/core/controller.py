"""Round controller.

Owns the grid, the countdown, the score and the phase state machine. Boxes
report clicks here; this module alone decides whether a click scores, ends
the round, or completes the level.
"""

from __future__ import annotations

import logging
import random
from typing import Iterable, Optional

from .cell import BoxCell
from .events import RoundListener
from .models import ContentType, EndCause, Phase, RoundSnapshot
from .rules import cell_position
from .scheduler import PendingTransition, TransitionScheduler
from .shuffle import shuffle_placement
from .state import GridConfigError, RoundState, Settings

logger = logging.getLogger(__name__)

RESTARTABLE_PHASES = (Phase.PAUSED, Phase.OVER, Phase.WON)


class RoundController:
    """Drive a session of levels from level 1 until won or over."""

    def __init__(
        self,
        *,
        settings: Settings,
        template: Optional[BoxCell],
        rng: random.Random,
        listeners: Iterable[RoundListener] = (),
    ) -> None:
        if template is None:
            raise GridConfigError("no template box to build the grid from")
        settings.validate()

        self.settings = settings
        self._template = template
        self._origin = template.position
        self._rng = rng
        self._listeners: list[RoundListener] = list(listeners)
        self._scheduler = TransitionScheduler()

        self._cells: list[BoxCell] = []
        self._round: Optional[RoundState] = None
        self._score = 0
        self._phase = Phase.IDLE
        self._end_cause: Optional[EndCause] = None
        # bumped on every start and game over; pending transitions check it
        self._epoch = 0

    # ------------------------------------------------------------------
    # Listeners
    # ------------------------------------------------------------------
    def add_listener(self, listener: RoundListener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: RoundListener) -> None:
        self._listeners.remove(listener)

    # ------------------------------------------------------------------
    # Public accessors
    # ------------------------------------------------------------------
    def is_active(self) -> bool:
        return self._phase is Phase.ACTIVE

    def current_score(self) -> int:
        return self._score

    def current_phase(self) -> Phase:
        return self._phase

    @property
    def paused(self) -> bool:
        return self._phase is Phase.PAUSED

    @property
    def end_cause(self) -> Optional[EndCause]:
        return self._end_cause

    @property
    def level_index(self) -> int:
        return self._round.level_index if self._round else 0

    @property
    def time_remaining(self) -> float:
        return self._round.time_remaining if self._round else 0.0

    @property
    def cells(self) -> tuple[BoxCell, ...]:
        return tuple(self._cells)

    @property
    def template(self) -> BoxCell:
        return self._template

    @property
    def pending_transition(self) -> Optional[PendingTransition]:
        return self._scheduler.pending

    def snapshot(self) -> RoundSnapshot:
        """State payload for HUD/UI."""
        r = self._round
        return RoundSnapshot(
            level_index=self.level_index,
            grid_size=r.grid_size if r else 0,
            candy_count=r.candy_count if r else 0,
            bomb_count=r.bomb_count if r else 0,
            candies_revealed=r.candies_revealed if r else 0,
            score=self._score,
            time_remaining=self.time_remaining,
            phase=self._phase,
            end_cause=self._end_cause,
        )

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------
    def start(self, level_index: int) -> None:
        """Build the grid for a level and start its countdown.

        Raises:
            ValueError: level_index outside 1..total_levels (nothing changes)
        """
        if not 1 <= level_index <= self.settings.total_levels:
            raise ValueError(
                f"level_index must be in 1..{self.settings.total_levels}, got {level_index}"
            )

        state = RoundState(
            level_index,
            self.settings.grid_size_at_level1,
            self.settings.time_limit_per_level,
        )
        placement = shuffle_placement(state.candy_count, state.bomb_count, self._rng)

        self._epoch += 1
        self._scheduler.cancel()
        self._discard_cells()
        self._cells = self._build_grid(state.grid_size, placement)
        self._round = state
        self._end_cause = None

        logger.info(
            "Level %d: %dx%d grid, %d bombs, %.1fs",
            level_index,
            state.grid_size,
            state.grid_size,
            state.bomb_count,
            state.time_remaining,
        )
        self._emit("on_level_changed", level_index)
        self._emit("on_score_changed", self._score)
        self._emit("on_time_changed", state.time_remaining)
        self._set_phase(Phase.ACTIVE)

    def tick(self, elapsed: float) -> None:
        """Advance the game clock by ``elapsed`` seconds."""
        if not elapsed >= 0:
            raise ValueError(f"elapsed must be >= 0, got {elapsed}")

        if self._phase is Phase.ACTIVE:
            expired = self._round.consume_time(elapsed)
            self._emit("on_time_changed", self._round.time_remaining)
            if expired:
                self._game_over(EndCause.TIME_EXPIRED)
        elif self._phase in (Phase.TRANSITIONING, Phase.OVER):
            self._scheduler.advance(elapsed, self._epoch)

    def reveal(self, cell_id: int) -> bool:
        """Open the box at row-major index ``cell_id``.

        Returns:
            True if the reveal was accepted
        """
        if self._phase is not Phase.ACTIVE:
            return False
        if not 0 <= cell_id < len(self._cells):
            raise IndexError(f"cell_id {cell_id} out of range for {len(self._cells)} boxes")
        return self.cell_revealed(self._cells[cell_id])

    def cell_revealed(self, cell: BoxCell) -> bool:
        """Apply the reveal rules to a clicked box."""
        if self._phase is not Phase.ACTIVE:
            return False
        if cell.generation != self._epoch or cell not in self._cells:
            logger.debug("Ignoring reveal of a box from another round")
            return False
        if not cell.uncover():
            return False

        self._emit("on_cell_revealed", cell)

        if cell.content is ContentType.BOMB:
            self._game_over(EndCause.BOMB_HIT)
            return True

        self._round.record_candy()
        self._score += 1
        self._emit("on_score_changed", self._score)

        if self._round.all_candies_found():
            self._complete_level()
        return True

    def toggle_pause(self) -> bool:
        """Pause or resume. Returns False outside ACTIVE/PAUSED."""
        if self._phase is Phase.ACTIVE:
            self._set_phase(Phase.PAUSED)
        elif self._phase is Phase.PAUSED:
            self._set_phase(Phase.ACTIVE)
        else:
            logger.debug("toggle_pause ignored in phase %s", self._phase.value)
            return False
        return True

    def restart(self) -> bool:
        """Start a fresh session at level 1 with the score cleared."""
        if self._phase not in RESTARTABLE_PHASES:
            logger.debug("restart ignored in phase %s", self._phase.value)
            return False
        self._score = 0
        self.start(1)
        return True

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _build_grid(self, size: int, placement: list[ContentType]) -> list[BoxCell]:
        cells: list[BoxCell] = []
        for row in range(size):
            for col in range(size):
                index = row * size + col
                if index == 0:
                    cell = self._template
                    cell.reset()
                else:
                    cell = self._template.spawn()

                cell.row, cell.col = row, col
                cell.x, cell.y = cell_position(
                    self._origin,
                    row,
                    col,
                    size,
                    self.settings.spacing_x,
                    self.settings.spacing_y,
                )
                cell.generation = self._epoch
                cell.assign_content(placement[index], self)
                cells.append(cell)
        return cells

    def _discard_cells(self) -> None:
        for cell in self._cells:
            if cell is not self._template:
                cell.reset()
        self._cells = []

    def _complete_level(self) -> None:
        self._set_phase(Phase.TRANSITIONING)
        next_level = self._round.level_index + 1
        if next_level > self.settings.total_levels:
            label, action = "win", self._win
        else:
            label, action = f"level {next_level}", lambda: self.start(next_level)
        self._scheduler.schedule(label, self.settings.level_transition_delay, self._epoch, action)

    def _win(self) -> None:
        logger.info("All %d levels cleared, score %d", self.settings.total_levels, self._score)
        self._set_phase(Phase.WON)

    def _game_over(self, cause: EndCause) -> None:
        self._epoch += 1
        self._scheduler.cancel()
        self._end_cause = cause
        logger.info("Game over on level %d: %s", self.level_index, cause.value)
        self._set_phase(Phase.OVER, cause)

        if self.settings.auto_advance_on_game_over:
            self._scheduler.schedule("auto restart", self.settings.game_over_delay, self._epoch, self.restart)

    def _set_phase(self, phase: Phase, cause: Optional[EndCause] = None) -> None:
        self._phase = phase
        self._emit("on_phase_changed", phase, cause)

    def _emit(self, name: str, *args) -> None:
        for listener in list(self._listeners):
            try:
                getattr(listener, name)(*args)
            except Exception:
                logger.exception("Listener %r failed in %s", listener, name)


def build_controller(
    *,
    settings: Settings,
    rng: Optional[random.Random] = None,
    listeners: Iterable[RoundListener] = (),
) -> RoundController:
    """Create a controller with a template box at the configured origin."""
    settings.validate()
    origin = settings.origin
    template = BoxCell(x=origin[0], y=origin[1])
    if rng is None:
        rng = random.Random(settings.demo_seed)
    return RoundController(settings=settings, template=template, rng=rng, listeners=listeners)
