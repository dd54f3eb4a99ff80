"""
Best-score leaderboard with optional JSON persistence.

Each player name appears at most once, holding that player's best
score. After every change the list is sorted by score (descending)
and cut to capacity. Python's sort is stable, so among equal scores
the entry that reached the list first stays ahead.
"""

import json
import logging
from pathlib import Path
from typing import Dict, List, Optional

from pydantic import BaseModel, Field, TypeAdapter, ValidationError

from .models import LeaderboardEntry


logger = logging.getLogger(__name__)

DEFAULT_CAPACITY = 5

_ENTRY_LIST = TypeAdapter(List[LeaderboardEntry])


class RankingStore(BaseModel):
    """
    Bounded, score-sorted list of best scores per player.

    Attributes:
        capacity: Maximum number of entries kept
        path: JSON file to load from and save to; None keeps it in memory
        entries: Current entries, best first
    """

    capacity: int = Field(default=DEFAULT_CAPACITY, ge=1)
    path: Optional[Path] = None
    entries: List[LeaderboardEntry] = Field(default_factory=list)

    @classmethod
    def load(cls, path: Optional[str | Path] = None, capacity: int = DEFAULT_CAPACITY) -> "RankingStore":
        """
        Create a store, reading existing entries from ``path`` if it exists.

        A missing, unreadable or malformed file gives an empty leaderboard.
        """
        store = cls(capacity=capacity, path=Path(path) if path else None)
        if store.path is None:
            return store

        if not store.path.exists():
            logger.debug("No leaderboard at %s, starting empty", store.path)
            return store

        try:
            with open(store.path) as f:
                data = json.load(f)
            store.entries = _ENTRY_LIST.validate_python(data)
        except (OSError, ValueError, ValidationError) as e:
            logger.warning("Ignoring unreadable leaderboard %s: %s", store.path, e)
            store.entries = []

        store._normalize()
        return store

    def submit_score(self, player: str, score: int) -> bool:
        """
        Record a score for a player.

        Returning players keep their best score. A score of zero is
        never recorded.

        Returns:
            True if the leaderboard changed

        Raises:
            ValueError: If score is negative
        """
        if score < 0:
            raise ValueError(f"Score must be non-negative, got {score}")
        if score == 0:
            return False

        before = [entry.model_dump() for entry in self.entries]

        existing = next((e for e in self.entries if e.name == player), None)
        if existing is not None:
            existing.score = max(existing.score, score)
        else:
            self.entries.append(LeaderboardEntry(name=player, score=score))

        self._normalize()

        changed = before != [entry.model_dump() for entry in self.entries]
        if changed:
            self.save()
        return changed

    def top(self, k: Optional[int] = None) -> List[LeaderboardEntry]:
        """Return up to ``k`` best entries (all of them when k is None)."""
        if k is not None and k < 0:
            raise ValueError(f"k must be non-negative, got {k}")
        entries = self.entries if k is None else self.entries[:k]
        return [entry.model_copy() for entry in entries]

    def save(self) -> bool:
        """
        Write entries to ``path``.

        Failures are logged; the in-memory list stays authoritative.

        Returns:
            True if the file was written
        """
        if self.path is None:
            return False

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, 'w') as f:
                json.dump([entry.model_dump() for entry in self.entries], f, indent=2)
        except OSError as e:
            logger.warning("Could not save leaderboard to %s: %s", self.path, e)
            return False

        return True

    def _normalize(self) -> None:
        """Merge duplicate names, sort best-first and drop entries beyond capacity."""
        best: Dict[str, LeaderboardEntry] = {}
        for entry in self.entries:
            kept = best.get(entry.name)
            if kept is None:
                best[entry.name] = entry
            elif entry.score > kept.score:
                kept.score = entry.score

        self.entries = sorted(best.values(), key=lambda e: e.score, reverse=True)[:self.capacity]
