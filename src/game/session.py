"""
Game session controller.

Owns one player's play-through: the grid, the words found so far,
the score, the hint budget and the countdown. All state changes go
through GameSession methods (or ``handle`` with an event), guarded by
a lock so a clock thread can tick while a word is being checked.
"""

import logging
import random
import threading
from typing import Any, Callable, List, Optional, Set

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

from ..puzzle.models import Cell, Grid
from ..puzzle.search import find_path
from ..puzzle.synthesis import synthesize
from .dictionary import DictionaryError, NO_DEFINITION, WordOracle
from .models import (
    DEFAULT_PLAYER_NAME,
    FoundWord,
    GameConfig,
    RequestHint,
    Restart,
    SessionEvent,
    SessionSnapshot,
    SessionState,
    SubmissionResult,
    SubmitWord,
    TimerTick,
)
from .ranking import RankingStore


logger = logging.getLogger(__name__)


def normalize_player_name(name: Optional[str]) -> str:
    """Trim a player name, falling back to the default for blanks."""
    name = (name or "").strip()
    return name or DEFAULT_PLAYER_NAME


class GameSession(BaseModel):
    """
    One word-search session, from grid generation to time-up.

    Attributes:
        config: Game configuration
        oracle: Dictionary used to check submitted words
        ranking: Leaderboard the final score goes to
        player_name: Current player
        grid: The live grid
        state: ACTIVE until the clock runs out, then ENDED
        score: Points earned this session
        found_words: Accepted words in the order they were found
        remaining_seconds: Time left on the countdown
        hints_used: Hints granted this session
        hints_exhausted: True once a hint search found nothing left to show
        hinted_words: Target words already revealed by a hint
        last_hint: Trail from the most recent hint
        on_change: Called with a snapshot after every state change
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    config: GameConfig = Field(default_factory=GameConfig)
    oracle: Any  # WordOracle: anything with lookup(word) -> WordLookup
    ranking: RankingStore = Field(default_factory=RankingStore)
    player_name: str = DEFAULT_PLAYER_NAME
    grid: Optional[Grid] = None
    state: SessionState = "ACTIVE"
    score: int = 0
    found_words: List[FoundWord] = Field(default_factory=list)
    remaining_seconds: int = 0
    hints_used: int = 0
    hints_exhausted: bool = False
    hinted_words: List[str] = Field(default_factory=list)
    last_hint: Optional[List[Cell]] = None
    on_change: Optional[Callable[[SessionSnapshot], None]] = None

    _lock: Any = PrivateAttr(default_factory=threading.RLock)
    _rng: random.Random = PrivateAttr(default=None)
    _generation: int = PrivateAttr(default=0)
    _score_recorded: bool = PrivateAttr(default=False)

    def model_post_init(self, __context) -> None:
        """Seed the generator and build the first grid if none was given."""
        self._rng = random.Random(self.config.seed)
        self.player_name = normalize_player_name(self.player_name)
        if self.grid is None:
            self.grid = self._build_grid()
        if not self.remaining_seconds:
            self.remaining_seconds = self.config.duration_seconds

    @classmethod
    def create(
        cls,
        oracle: WordOracle,
        config: Optional[GameConfig] = None,
        player_name: Optional[str] = None,
        ranking: Optional[RankingStore] = None,
        on_change: Optional[Callable[[SessionSnapshot], None]] = None,
    ) -> "GameSession":
        """
        Factory method to create a session with its leaderboard loaded.

        Args:
            oracle: Dictionary used to validate words
            config: Game configuration (defaults if omitted)
            player_name: Player name; blank means the default name
            ranking: Leaderboard to use; loaded from config.leaderboard_path if omitted
            on_change: Optional listener for snapshots

        Returns:
            A new, active GameSession
        """
        config = config or GameConfig()
        if ranking is None:
            ranking = RankingStore.load(config.leaderboard_path, capacity=config.leaderboard_capacity)

        return cls(
            config=config,
            oracle=oracle,
            ranking=ranking,
            player_name=normalize_player_name(player_name),
            on_change=on_change,
        )

    @property
    def found_set(self) -> Set[str]:
        return {fw.word for fw in self.found_words}

    @property
    def hints_remaining(self) -> int:
        return max(self.config.hints_per_session - self.hints_used, 0)

    @property
    def hint_available(self) -> bool:
        """Whether a hint request could still produce a trail."""
        if self.state != "ACTIVE" or self.hints_exhausted or self.hints_remaining == 0:
            return False
        skip = self.found_set | set(self.hinted_words)
        return any(word not in skip for word in self.config.target_words)

    def _build_grid(self) -> Grid:
        return synthesize(
            self.config.grid_size,
            self.config.target_words,
            alphabet=self.config.alphabet,
            rng=self._rng,
            max_attempts=self.config.max_placement_attempts,
        )

    def _reject(self, word: str, code: str, message: str, retryable: bool = False) -> SubmissionResult:
        return SubmissionResult(word=word, accepted=False, code=code, message=message, retryable=retryable)

    def _precheck(self, word: str) -> Optional[SubmissionResult]:
        """Checks that need no dictionary lookup."""
        if self.state != "ACTIVE":
            return self._reject(word, "SESSION_ENDED", "The game is over.")
        if len(word) < self.config.min_word_length:
            return self._reject(
                word, "TOO_SHORT",
                f'"{word}" is too short (minimum {self.config.min_word_length} letters).'
            )
        if word in self.found_set:
            return self._reject(word, "ALREADY_FOUND", f'"{word}" has already been found!')
        return None

    def submit_word(self, word: str) -> SubmissionResult:
        """
        Submit a candidate word.

        The dictionary is consulted outside the lock; its answer is only
        applied if the same session is still active when it returns.

        Args:
            word: The letters the player selected

        Returns:
            SubmissionResult describing acceptance or the rejection reason
        """
        word = word.strip().upper()

        with self._lock:
            rejection = self._precheck(word)
            if rejection is not None:
                return rejection
            generation = self._generation

        try:
            lookup = self.oracle.lookup(word)
        except DictionaryError as e:
            logger.warning("Dictionary lookup failed for %r: %s", word, e)
            return self._reject(
                word, "LOOKUP_FAILED", "Error checking word validity. Please try again.", retryable=True
            )
        except Exception as e:
            # Any oracle failure is a retryable rejection
            logger.warning("Dictionary lookup raised unexpectedly for %r: %r", word, e)
            return self._reject(
                word, "LOOKUP_FAILED", "Error checking word validity. Please try again.", retryable=True
            )

        with self._lock:
            if self._generation != generation or self.state != "ACTIVE":
                logger.info("Discarding lookup for %r: session ended while it was pending", word)
                return self._reject(word, "DISCARDED", "The game ended before the word was checked.")

            if word in self.found_set:
                return self._reject(word, "ALREADY_FOUND", f'"{word}" has already been found!')

            if not lookup.valid:
                return self._reject(word, "NOT_A_WORD", f'"{word}" is not a valid English word.')

            definition = lookup.short_definition or NO_DEFINITION
            self.found_words.append(FoundWord(word=word, definition=definition))
            self.score += self.config.word_score
            result = SubmissionResult(
                word=word,
                accepted=True,
                message=f'Found "{word}"!',
                score_delta=self.config.word_score,
                definition=definition,
            )

        self._notify()
        return result

    def request_hint(self) -> Optional[List[Cell]]:
        """
        Reveal the trail of one target word the player has not found.

        Target words are tried in order, skipping found words and words
        already hinted; the first one the grid actually contains is shown. If none can be traced the hint feature is
        exhausted for the rest of the session.

        Returns:
            The trail to highlight, or None if no hint is given
        """
        with self._lock:
            if self.state != "ACTIVE" or self.hints_exhausted or self.hints_remaining == 0:
                return None

            skip = self.found_set | set(self.hinted_words)
            trail = None
            for word in self.config.target_words:
                if word in skip:
                    continue
                trail = find_path(self.grid, word)
                if trail is not None:
                    self.hinted_words.append(word)
                    logger.debug("Hint granted for a target word of length %d", len(word))
                    break

            if trail is None:
                self.hints_exhausted = True
                logger.debug("No hint available: no unfound target word is on the grid")
            else:
                self.hints_used += 1
                self.last_hint = trail

        self._notify()
        return trail

    def tick(self, seconds: int = 1) -> None:
        """Advance the countdown, ending the session when it hits zero."""
        with self._lock:
            if self.state != "ACTIVE":
                return
            self.remaining_seconds = max(self.remaining_seconds - seconds, 0)
            if self.remaining_seconds == 0:
                self._end()

        self._notify()

    def end(self) -> None:
        """End the session now and record the score."""
        with self._lock:
            if self.state != "ACTIVE":
                return
            self._end()

        self._notify()

    def _end(self) -> None:
        self.state = "ENDED"
        logger.info(
            "Session ended for %s: score %d, %d words found",
            self.player_name, self.score, len(self.found_words)
        )
        self._record_score()

    def _record_score(self) -> None:
        """Send the final score to the leaderboard, once, and only if positive."""
        if self._score_recorded or self.score <= 0:
            return
        self._score_recorded = True
        self.ranking.submit_score(self.player_name, self.score)

    def restart(self, player_name: Optional[str] = None) -> None:
        """
        Throw away the current session and start a fresh one.

        Args:
            player_name: New player; keeps the current player if None
        """
        with self._lock:
            if player_name is not None:
                self.player_name = normalize_player_name(player_name)

            self._generation += 1
            self._score_recorded = False
            self.grid = self._build_grid()
            self.state = "ACTIVE"
            self.score = 0
            self.found_words = []
            self.remaining_seconds = self.config.duration_seconds
            self.hints_used = 0
            self.hints_exhausted = False
            self.hinted_words = []
            self.last_hint = None
            logger.info("Session restarted for %s", self.player_name)

        self._notify()

    def handle(self, event: SessionEvent):
        """
        Apply an event to the session.

        Returns:
            SubmissionResult for SubmitWord, the trail (or None) for
            RequestHint, and None for Restart and TimerTick
        """
        if isinstance(event, SubmitWord):
            return self.submit_word(event.word)
        if isinstance(event, RequestHint):
            return self.request_hint()
        if isinstance(event, Restart):
            return self.restart(event.player_name)
        if isinstance(event, TimerTick):
            return self.tick(event.seconds)
        raise ValueError(f"Unknown session event: {event!r}")

    def snapshot(self) -> SessionSnapshot:
        """Get the current session state for display."""
        with self._lock:
            return SessionSnapshot(
                player_name=self.player_name,
                state=self.state,
                grid=self.grid,
                score=self.score,
                found_words=[fw.model_copy() for fw in self.found_words],
                remaining_seconds=self.remaining_seconds,
                hint_available=self.hint_available,
                hints_remaining=self.hints_remaining,
                hint_trail=list(self.last_hint) if self.last_hint else None,
            )

    def _notify(self) -> None:
        if self.on_change is not None:
            self.on_change(self.snapshot())
