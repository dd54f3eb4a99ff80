"""
Pydantic models for the game layer.

Configuration, the events a session consumes, and the results and
snapshots it hands back to whatever is rendering the game.
"""

from pathlib import Path
from typing import List, Literal, Optional, Union
from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..puzzle.models import DEFAULT_ALPHABET, Cell, Grid


SessionState = Literal["ACTIVE", "ENDED"]

RejectionCode = Literal[
    "TOO_SHORT",
    "ALREADY_FOUND",
    "NOT_A_WORD",
    "LOOKUP_FAILED",
    "SESSION_ENDED",
    "DISCARDED",
]

DEFAULT_TARGET_WORDS = ["CAT", "DOG", "SUN", "FUN"]
DEFAULT_DICTIONARY_URL = "https://api.dictionaryapi.dev/api/v2/entries/en/"
DEFAULT_PLAYER_NAME = "Player"


class GameConfig(BaseModel):
    """Configuration for a game session."""
    grid_size: int = Field(default=4, ge=1)
    duration_seconds: int = Field(default=120, ge=1)
    word_score: int = Field(default=10, ge=0)
    min_word_length: int = Field(default=3, ge=1)
    target_words: List[str] = Field(default_factory=lambda: list(DEFAULT_TARGET_WORDS))
    alphabet: str = Field(default=DEFAULT_ALPHABET, min_length=1)
    max_placement_attempts: int = Field(default=100, ge=1)
    hints_per_session: int = Field(default=1, ge=0)
    leaderboard_path: Optional[Path] = None
    leaderboard_capacity: int = Field(default=5, ge=1)
    dictionary_url: str = DEFAULT_DICTIONARY_URL
    dictionary_timeout: float = Field(default=10.0, gt=0)
    seed: Optional[int] = None

    @field_validator('target_words')
    @classmethod
    def _upper_words(cls, words: List[str]) -> List[str]:
        return [w.strip().upper() for w in words if w.strip()]

    @field_validator('alphabet')
    @classmethod
    def _upper_alphabet(cls, alphabet: str) -> str:
        return alphabet.upper()


# Events consumed by GameSession.handle()

class SubmitWord(BaseModel):
    kind: Literal["submit_word"] = "submit_word"
    word: str


class RequestHint(BaseModel):
    kind: Literal["request_hint"] = "request_hint"


class Restart(BaseModel):
    kind: Literal["restart"] = "restart"
    player_name: Optional[str] = None


class TimerTick(BaseModel):
    kind: Literal["timer_tick"] = "timer_tick"
    seconds: int = Field(default=1, ge=1)


SessionEvent = Union[SubmitWord, RequestHint, Restart, TimerTick]


class WordLookup(BaseModel):
    """Answer from the dictionary oracle."""
    valid: bool
    short_definition: Optional[str] = None


class FoundWord(BaseModel):
    """A word the player has had accepted this session."""
    word: str
    definition: str


class SubmissionResult(BaseModel):
    """Outcome of submitting a candidate word."""
    word: str
    accepted: bool
    code: Optional[RejectionCode] = None
    message: str = ""
    retryable: bool = False
    score_delta: int = 0
    definition: Optional[str] = None


class SessionSnapshot(BaseModel):
    """Everything a display needs after a state change."""
    player_name: str
    state: SessionState
    grid: Grid
    score: int
    found_words: List[FoundWord] = Field(default_factory=list)
    remaining_seconds: int
    hint_available: bool
    hints_remaining: int
    hint_trail: Optional[List[Cell]] = None


class LeaderboardEntry(BaseModel):
    """A player's best score."""
    model_config = ConfigDict(extra='ignore')

    name: str
    score: int = Field(..., ge=0)
