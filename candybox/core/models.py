"""Data models (Pydantic) and enums shared by the round controller."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class ContentType(str, Enum):
    """What a box hides."""

    CANDY = "candy"
    BOMB = "bomb"


class Phase(str, Enum):
    """Round controller phases."""

    IDLE = "idle"
    ACTIVE = "active"
    PAUSED = "paused"
    TRANSITIONING = "transitioning"
    OVER = "over"
    WON = "won"


class EndCause(str, Enum):
    """Why a round ended in defeat."""

    TIME_EXPIRED = "time_expired"
    BOMB_HIT = "bomb_hit"


class RoundSnapshot(BaseModel):
    """Read-only view of the controller for HUD/UI consumers."""

    level_index: int = Field(..., ge=0, description="Current level (0 before the first start)")
    grid_size: int = Field(..., ge=0, description="Boxes per row and column")
    candy_count: int = Field(default=0, ge=0, description="Candies hidden this round")
    bomb_count: int = Field(default=0, ge=0, description="Bombs hidden this round")
    candies_revealed: int = Field(default=0, ge=0, description="Candies opened this round")
    score: int = Field(default=0, ge=0, description="Session score")
    time_remaining: float = Field(default=0.0, ge=0.0, description="Countdown seconds left")
    phase: Phase = Field(default=Phase.IDLE, description="State machine phase")
    end_cause: Optional[EndCause] = Field(default=None, description="Set while phase is OVER")


class Preferences(BaseModel):
    """Persisted player preferences."""

    sound_on: bool = Field(default=True, description="Whether audio cues are audible")

    class Config:
        json_schema_extra = {"example": {"sound_on": False}}
