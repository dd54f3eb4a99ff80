"""
Main entry point for playing a word-search session in the terminal.

Usage:
    python -m src.main
    python -m src.main config.yaml --player Ann --verbose
    python -m src.main config.yaml --preview
    python -m src.main --leaderboard-only --leaderboard scores.json
"""

import argparse
import logging
import random
import sys
from pathlib import Path
from typing import List, Optional

import yaml

from .game import DictionaryClient, GameConfig, GameSession, RankingStore, SessionClock, SessionSnapshot
from .game.models import LeaderboardEntry
from .puzzle import find_path, render_grid, synthesize


MEDALS = ["🥇", "🥈", "🥉"]

HELP_TEXT = "Type a word to submit it. Commands: :hint  :restart  :scores  :quit"


def load_config(config_path: str) -> GameConfig:
    """Load game configuration from a YAML file."""
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    return GameConfig(**data)


def format_leaderboard(entries: List[LeaderboardEntry]) -> str:
    """Render leaderboard entries, medals for the top three."""
    if not entries:
        return "No scores yet!"

    lines = []
    for i, entry in enumerate(entries):
        medal = MEDALS[i] if i < len(MEDALS) else "  "
        lines.append(f"{medal} {entry.name}: {entry.score}")
    return "\n".join(lines)


def format_status(snapshot: SessionSnapshot) -> str:
    hints = f"Hint ({snapshot.hints_remaining} left)" if snapshot.hint_available else "No hints"
    return f"Score: {snapshot.score} | Time: {snapshot.remaining_seconds}s | {hints}"


def format_preview(config: GameConfig) -> str:
    """Generate one grid and show where each target word ended up."""
    grid = synthesize(
        config.grid_size,
        config.target_words,
        alphabet=config.alphabet,
        rng=random.Random(config.seed),
        max_attempts=config.max_placement_attempts,
    )

    lines = [render_grid(grid), ""]
    for word in config.target_words:
        trail = find_path(grid, word)
        if trail is None:
            lines.append(f"{word}: not placed")
        else:
            cells = " ".join(f"({r},{c})" for r, c in trail)
            lines.append(f"{word}: {cells}")
    return "\n".join(lines)


def prompt_player_name(current: Optional[str] = None) -> Optional[str]:
    """Ask who is playing; a blank answer keeps the current player."""
    default = current or "Player"
    try:
        name = input(f"Enter your name to start the game [{default}]: ").strip()
    except EOFError:
        return current
    return name or current


def print_board(snapshot: SessionSnapshot, highlight=None) -> None:
    print()
    print(render_grid(snapshot.grid, highlight=highlight))
    print()
    print(format_status(snapshot))


def print_summary(snapshot: SessionSnapshot, ranking: RankingStore) -> None:
    print()
    print(f"Game over! Final Score: {snapshot.score}")
    print(f"Words found: {len(snapshot.found_words)}")
    for fw in snapshot.found_words:
        print(f"  {fw.word}: {fw.definition}")
    print()
    print("=== Leaderboard ===")
    print(format_leaderboard(ranking.top()))


def play(session: GameSession, clock: SessionClock) -> None:
    """Read words and commands from stdin until the player quits."""
    print(f"Welcome, {session.player_name}!")
    print(HELP_TEXT)
    print_board(session.snapshot())
    clock.start()

    while True:
        try:
            line = input("> ").strip()
        except EOFError:
            line = ":quit"

        snapshot = session.snapshot()

        if line == ":quit":
            session.end()
            clock.stop()
            print_summary(session.snapshot(), session.ranking)
            return

        if line == ":restart":
            clock.stop()
            session.restart(player_name=prompt_player_name(session.player_name))
            print_board(session.snapshot())
            clock.start()
            continue

        if line == ":scores":
            print(format_leaderboard(session.ranking.top()))
            continue

        if snapshot.state == "ENDED":
            print("The game is over. Type :restart to play again or :quit to leave.")
            continue

        if line == ":hint":
            trail = session.request_hint()
            if trail is None:
                print("No hints available.")
            else:
                print_board(session.snapshot(), highlight=trail)
            continue

        if not line:
            print(HELP_TEXT)
            continue

        # Typed letters stand in for a tile selection, so they must trace a path on the grid
        if find_path(snapshot.grid, line) is None:
            print(f'"{line.upper()}" is not on the grid.')
            continue

        result = session.submit_word(line)
        if result.accepted:
            print(f"{result.word} (+{result.score_delta}): {result.definition}")
        else:
            print(result.message)
        print(format_status(session.snapshot()))


def main():
    parser = argparse.ArgumentParser(
        description="Play a timed word-search game",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example config.yaml:
  grid_size: 5
  duration_seconds: 90
  target_words: [CAT, DOG, SUN, FUN]
  hints_per_session: 1
  leaderboard_path: results/leaderboard.json
  seed: 42
        """
    )
    parser.add_argument(
        "config",
        nargs="?",
        help="Path to YAML configuration file (defaults are used if omitted)"
    )
    parser.add_argument(
        "--player", "-p",
        help="Player name for the leaderboard"
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Random seed for grid generation"
    )
    parser.add_argument(
        "--leaderboard",
        help="Path to the leaderboard JSON file"
    )
    parser.add_argument(
        "--preview",
        action="store_true",
        help="Print a generated grid with the target word locations and exit"
    )
    parser.add_argument(
        "--leaderboard-only",
        action="store_true",
        help="Print the leaderboard and exit"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log debug output to stderr"
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(args.config) if args.config else GameConfig()
    except Exception as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        sys.exit(1)

    overrides = {}
    if args.seed is not None:
        overrides["seed"] = args.seed
    if args.leaderboard:
        overrides["leaderboard_path"] = Path(args.leaderboard)
    if overrides:
        config = config.model_copy(update=overrides)

    if args.preview:
        print(format_preview(config))
        return 0

    ranking = RankingStore.load(config.leaderboard_path, capacity=config.leaderboard_capacity)

    if args.leaderboard_only:
        print(format_leaderboard(ranking.top()))
        return 0

    player_name = args.player
    if player_name is None:
        player_name = prompt_player_name()

    oracle = DictionaryClient(base_url=config.dictionary_url, timeout=config.dictionary_timeout)

    def on_change(snapshot: SessionSnapshot) -> None:
        # Only the clock ends a session with no time left, and it does so once
        if snapshot.state == "ENDED" and snapshot.remaining_seconds == 0:
            print("\nTime's up! Type :restart to play again or :quit to see your results.")

    session = GameSession.create(
        oracle=oracle,
        config=config,
        player_name=player_name,
        ranking=ranking,
        on_change=on_change,
    )
    clock = SessionClock(on_tick=session.tick)

    try:
        play(session, clock)
    except KeyboardInterrupt:
        print("\nGame interrupted by user")
        session.end()
    finally:
        clock.stop()

    return 0


if __name__ == "__main__":
    sys.exit(main())
