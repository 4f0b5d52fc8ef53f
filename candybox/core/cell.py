"""Grid box

A single box on the grid. It knows its content and whether it is still
covered; the round controller decides what opening it means.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional, Protocol

from .models import ContentType

logger = logging.getLogger(__name__)


class RevealHandler(Protocol):
    """What a box needs from the controller that owns it."""

    def is_active(self) -> bool:
        ...

    def cell_revealed(self, cell: "BoxCell") -> bool:
        ...


@dataclass(eq=False)
class BoxCell:
    """Grid box"""
    row: int = 0
    col: int = 0
    x: float = 0.0
    y: float = 0.0
    content: Optional[ContentType] = None
    covered: bool = True
    generation: int = 0
    handler: Optional[RevealHandler] = field(default=None, repr=False)

    @property
    def position(self) -> tuple[float, float]:
        return self.x, self.y

    def assign_content(self, content: ContentType, handler: RevealHandler) -> None:
        """Set the box content for this round and bind it to its controller.

        Raises:
            ValueError: the box already holds content for this round
        """
        if self.content is not None:
            raise ValueError(f"box ({self.row}, {self.col}) already holds {self.content.value}")
        self.content = content
        self.handler = handler

    def reset(self) -> None:
        """Cover the box again and clear its content."""
        self.covered = True
        self.content = None
        self.handler = None

    def spawn(self) -> "BoxCell":
        """Fresh, empty copy of this box (used to fill the grid from the template)."""
        return BoxCell(x=self.x, y=self.y)

    def uncover(self) -> bool:
        """Flip the cover off. Returns False if it was already open."""
        if not self.covered:
            return False
        self.covered = False
        return True

    def interact(self) -> bool:
        """Player clicked the box.

        Returns:
            True if the click was forwarded to the controller and accepted
        """
        if self.handler is None or not self.covered:
            return False
        if not self.handler.is_active():
            logger.debug("Ignoring click on (%d, %d): round not active", self.row, self.col)
            return False
        return self.handler.cell_revealed(self)
