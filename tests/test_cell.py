import pytest

from candybox.core.cell import BoxCell
from candybox.core.models import ContentType


class StubHandler:
    def __init__(self, active=True):
        self.active = active
        self.revealed = []

    def is_active(self):
        return self.active

    def cell_revealed(self, cell):
        self.revealed.append(cell)
        return cell.uncover()


def test_assign_then_interact_reaches_handler():
    handler = StubHandler()
    cell = BoxCell(row=1, col=0)
    cell.assign_content(ContentType.CANDY, handler)

    assert cell.interact() is True
    assert handler.revealed == [cell]
    assert cell.covered is False


def test_interact_ignored_when_revealed_or_inactive():
    handler = StubHandler(active=False)
    cell = BoxCell()
    cell.assign_content(ContentType.BOMB, handler)
    assert cell.interact() is False

    handler.active = True
    cell.uncover()
    assert cell.interact() is False
    assert handler.revealed == []


def test_unbound_cell_ignores_clicks():
    assert BoxCell().interact() is False


def test_content_fixed_until_reset():
    cell = BoxCell()
    cell.assign_content(ContentType.CANDY, StubHandler())
    with pytest.raises(ValueError):
        cell.assign_content(ContentType.BOMB, StubHandler())

    cell.uncover()
    cell.reset()
    assert cell.covered is True
    assert cell.content is None
    assert cell.handler is None
    cell.assign_content(ContentType.BOMB, StubHandler())
    assert cell.content is ContentType.BOMB


def test_uncover_only_once():
    cell = BoxCell()
    assert cell.uncover() is True
    assert cell.uncover() is False


def test_spawn_is_a_fresh_box():
    template = BoxCell(x=2.0, y=3.0)
    template.assign_content(ContentType.CANDY, StubHandler())
    clone = template.spawn()
    assert clone is not template
    assert clone.position == (2.0, 3.0)
    assert clone.content is None and clone.covered
