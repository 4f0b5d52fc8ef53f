import pytest
import yaml

from candybox.core.state import GridConfigError, RoundState, Settings


def test_round_state_counts():
    state = RoundState(level_index=3, size_at_level1=2, time_limit=12)
    assert state.grid_size == 4
    assert state.bomb_count == 3
    assert state.candy_count == 13
    assert state.time_remaining == 12.0
    assert state.candies_revealed == 0


def test_round_state_candy_limit():
    state = RoundState(level_index=1, size_at_level1=2, time_limit=10)
    for _ in range(3):
        state.record_candy()
    assert state.all_candies_found()
    with pytest.raises(RuntimeError):
        state.record_candy()


def test_consume_time_clamps():
    state = RoundState(level_index=1, size_at_level1=2, time_limit=1)
    assert state.consume_time(0.5) is False
    assert state.consume_time(0.75) is True
    assert state.time_remaining == 0.0


def test_settings_load_from_yaml():
    config = yaml.safe_load(
        """
grid:
  size_at_level1: 3
  spacing_x: 2.0
  origin: [1.0, 2.0]
timer:
  limit_per_level: 20
levels:
  total: 7
  transition_delay: 0.5
game_over:
  auto_advance: true
audio:
  bomb: null
prefs:
  path: /tmp/p.json
"""
    )
    s = Settings()
    s.load_from_dict(config)

    assert s.grid_size_at_level1 == 3
    assert s.spacing_x == 2.0
    assert s.spacing_y == 1.5
    assert s.origin == (1.0, 2.0)
    assert s.time_limit_per_level == 20
    assert s.total_levels == 7
    assert s.level_transition_delay == 0.5
    assert s.auto_advance_on_game_over is True
    assert s.game_over_delay == 2.0
    assert s.sound_bomb is None
    assert s.sound_candy == "assets/sounds/candy.wav"
    assert s.prefs_path == "/tmp/p.json"
    s.validate()


def test_defaults_are_valid():
    Settings().validate()


def test_validate_reports_first_problem():
    s = Settings()
    s.total_levels = 0
    with pytest.raises(GridConfigError, match="levels.total"):
        s.validate()
    assert issubclass(GridConfigError, ValueError)
