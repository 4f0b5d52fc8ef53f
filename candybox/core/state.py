"""Round state and game settings."""

from typing import Optional

from .rules import bomb_count_for_size, candy_count_for_size, grid_size_for_level


class GridConfigError(ValueError):
    """The round cannot be built with the given configuration."""


class RoundState:
    """Per-level counters. A new one is built for every level."""

    def __init__(self, level_index: int, size_at_level1: int, time_limit: float):
        self.level_index = level_index
        self.grid_size = grid_size_for_level(level_index, size_at_level1)
        self.bomb_count = bomb_count_for_size(self.grid_size)
        self.candy_count = candy_count_for_size(self.grid_size)
        self.candies_revealed = 0
        self.time_remaining = float(time_limit)

    def all_candies_found(self) -> bool:
        return self.candies_revealed >= self.candy_count

    def record_candy(self) -> None:
        if self.candies_revealed >= self.candy_count:
            raise RuntimeError("all candies already revealed")
        self.candies_revealed += 1

    def consume_time(self, elapsed: float) -> bool:
        """Run the countdown. Returns True once time is up (clamped to 0)."""
        self.time_remaining -= elapsed
        if self.time_remaining <= 0:
            self.time_remaining = 0.0
            return True
        return False


class Settings:
    """Game settings."""

    def __init__(self):
        # Grid
        self.grid_size_at_level1 = 2
        self.spacing_x = 1.5
        self.spacing_y = 1.5
        self.origin: tuple[float, float] = (0.0, 0.0)

        # Timer
        self.time_limit_per_level = 10.0

        # Levels
        self.total_levels = 5
        self.level_transition_delay = 1.5

        # Game over
        self.game_over_delay = 2.0
        self.auto_advance_on_game_over = False

        # Audio clips
        self.sound_candy: Optional[str] = "assets/sounds/candy.wav"
        self.sound_bomb: Optional[str] = "assets/sounds/bomb.wav"
        self.sound_game_over: Optional[str] = "assets/sounds/game_over.wav"

        # Preferences
        self.prefs_path = "./save/prefs.json"

        # Loop
        self.fps = 60

        # Demo session
        self.demo_seed: Optional[int] = None
        self.demo_reveal_interval = 0.4

    def load_from_dict(self, config: dict) -> None:
        if "grid" in config:
            g = config["grid"]
            self.grid_size_at_level1 = g.get("size_at_level1", self.grid_size_at_level1)
            self.spacing_x = g.get("spacing_x", self.spacing_x)
            self.spacing_y = g.get("spacing_y", self.spacing_y)
            if "origin" in g:
                self.origin = tuple(g["origin"])

        if "timer" in config:
            self.time_limit_per_level = config["timer"].get("limit_per_level", self.time_limit_per_level)

        if "levels" in config:
            lv = config["levels"]
            self.total_levels = lv.get("total", self.total_levels)
            self.level_transition_delay = lv.get("transition_delay", self.level_transition_delay)

        if "game_over" in config:
            go = config["game_over"]
            self.game_over_delay = go.get("delay", self.game_over_delay)
            self.auto_advance_on_game_over = go.get("auto_advance", self.auto_advance_on_game_over)

        if "audio" in config:
            a = config["audio"]
            self.sound_candy = a.get("candy", self.sound_candy)
            self.sound_bomb = a.get("bomb", self.sound_bomb)
            self.sound_game_over = a.get("game_over", self.sound_game_over)

        if "prefs" in config:
            self.prefs_path = config["prefs"].get("path", self.prefs_path)

        if "window" in config:
            self.fps = config["window"].get("fps", self.fps)

        if "demo" in config:
            d = config["demo"]
            self.demo_seed = d.get("seed", self.demo_seed)
            self.demo_reveal_interval = d.get("reveal_interval", self.demo_reveal_interval)

    def validate(self) -> None:
        """Reject values the round controller cannot work with.

        Raises:
            GridConfigError: on the first invalid value
        """
        if self.grid_size_at_level1 < 2:
            raise GridConfigError(f"grid.size_at_level1 must be >= 2, got {self.grid_size_at_level1}")
        if self.total_levels < 1:
            raise GridConfigError(f"levels.total must be >= 1, got {self.total_levels}")
        if self.time_limit_per_level <= 0:
            raise GridConfigError(f"timer.limit_per_level must be > 0, got {self.time_limit_per_level}")
        if self.level_transition_delay < 0:
            raise GridConfigError(f"levels.transition_delay must be >= 0, got {self.level_transition_delay}")
        if self.game_over_delay < 0:
            raise GridConfigError(f"game_over.delay must be >= 0, got {self.game_over_delay}")
        if len(self.origin) != 2:
            raise GridConfigError(f"grid.origin must be [x, y], got {self.origin!r}")
