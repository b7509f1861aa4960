"""Typing session models - per-chunk keystroke state and derived statistics"""

from enum import Enum
from typing import FrozenSet, Optional
from pydantic import BaseModel, ConfigDict, Field


class SpecialKey(str, Enum):
    """Logical key signals, distinct from any literal character"""
    TAB = "Tab"
    ENTER = "Enter"


class SessionStatus(str, Enum):
    """Lifecycle of a typing session"""
    NOT_STARTED = "not_started"
    ACTIVE = "active"
    COMPLETED = "completed"


class SessionState(BaseModel):
    """Snapshot of a typing session over one chunk.

    Instances are immutable; every transition returns a new state.
    """

    model_config = ConfigDict(frozen=True)

    cursor: int = Field(0, ge=0, description="Index of the next character to type")
    error_positions: FrozenSet[int] = frozenset()
    correct_count: int = 0
    error_count: int = 0
    start_time: Optional[float] = None
    end_time: Optional[float] = None

    @property
    def active(self) -> bool:
        return self.start_time is not None and self.end_time is None

    @property
    def status(self) -> SessionStatus:
        if self.start_time is None:
            return SessionStatus.NOT_STARTED
        if self.end_time is None:
            return SessionStatus.ACTIVE
        return SessionStatus.COMPLETED

    @property
    def is_complete(self) -> bool:
        return self.end_time is not None


class Statistics(BaseModel):
    """Typing statistics derived from a session and its chunk"""

    model_config = ConfigDict(frozen=True)

    wpm: int = 0
    accuracy: int = 100
    progress: int = 0
    total_chars: int = 0
    typed_chars: int = 0
    correct_chars: int = 0
    errors: int = 0
    elapsed_seconds: float = 0.0

    @property
    def elapsed_display(self) -> str:
        """Elapsed time as m:ss"""
        total = int(round(self.elapsed_seconds))
        minutes, seconds = divmod(total, 60)
        return f"{minutes}:{seconds:02d}"
