import argparse
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Final

DEFAULT_SCORE_FILE: Final = Path.home() / ".py_tic_tac_toe_minimax" / "score.json"
DEFAULT_AI_DELAY: Final = 0.8
LOG_LEVELS: Final = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass(frozen=True, slots=True)
class Settings:
    uis: tuple[str, ...]
    score_file: Path | None
    ai_delay: float
    log_level: str


def parse_args(ui_choices: Iterable[str], argv: Sequence[str] | None = None) -> Settings:
    parser = argparse.ArgumentParser(description="Play tic-tac-toe against a computer that never loses.")

    parser.add_argument("--ui", nargs="+", choices=tuple(ui_choices), default=["terminal"])
    parser.add_argument("--score-file", type=Path, default=DEFAULT_SCORE_FILE)
    parser.add_argument("--no-score-file", action="store_true", help="keep the score in memory only")
    parser.add_argument("--ai-delay", type=float, default=DEFAULT_AI_DELAY, help="seconds the computer 'thinks'")
    parser.add_argument("--log-level", choices=LOG_LEVELS, default="WARNING")

    args = parser.parse_args(argv)
    if args.ai_delay < 0:
        parser.error("--ai-delay must not be negative")

    return Settings(
        uis=tuple(args.ui),
        score_file=None if args.no_score_file else args.score_file,
        ai_delay=args.ai_delay,
        log_level=args.log_level,
    )
