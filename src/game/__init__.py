"""Session layer: configuration, dictionary oracle, leaderboard and game session."""

from .models import (
    GameConfig,
    SessionState,
    SessionEvent,
    SubmitWord,
    RequestHint,
    Restart,
    TimerTick,
    WordLookup,
    FoundWord,
    SubmissionResult,
    SessionSnapshot,
    LeaderboardEntry,
)
from .dictionary import DictionaryClient, DictionaryError, WordOracle
from .ranking import RankingStore
from .session import GameSession
from .clock import SessionClock

__all__ = [
    "GameConfig",
    "SessionState",
    "SessionEvent",
    "SubmitWord",
    "RequestHint",
    "Restart",
    "TimerTick",
    "WordLookup",
    "FoundWord",
    "SubmissionResult",
    "SessionSnapshot",
    "LeaderboardEntry",
    "DictionaryClient",
    "DictionaryError",
    "WordOracle",
    "RankingStore",
    "GameSession",
    "SessionClock",
]
