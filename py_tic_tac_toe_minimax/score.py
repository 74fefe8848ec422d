"""Cumulative win/draw/loss counters that survive between sessions."""

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path

from py_tic_tac_toe_minimax.board import Outcome
from py_tic_tac_toe_minimax.exception import ScoreFileError

logger = logging.getLogger(__name__)


@dataclass
class Scoreboard:
    human_wins: int = 0
    draws: int = 0
    computer_wins: int = 0

    def record(self, outcome: Outcome) -> None:
        match outcome:
            case Outcome.HUMAN_WIN:
                self.human_wins += 1
            case Outcome.COMPUTER_WIN:
                self.computer_wins += 1
            case Outcome.DRAW:
                self.draws += 1
            case Outcome.ONGOING:
                pass

    def reset(self) -> None:
        self.human_wins = 0
        self.draws = 0
        self.computer_wins = 0

    def __str__(self) -> str:
        return f"You: {self.human_wins}  Draws: {self.draws}  Computer: {self.computer_wins}"


class ScoreStore:
    """Loads and saves a ``Scoreboard`` as a small JSON document."""

    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> Scoreboard:
        if not self._path.exists():
            return Scoreboard()

        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
            scoreboard = Scoreboard(
                human_wins=int(data["human_wins"]),
                draws=int(data["draws"]),
                computer_wins=int(data["computer_wins"]),
            )
        except (OSError, ValueError, KeyError, TypeError) as e:
            msg = f"Cannot read score file {self._path}"
            raise ScoreFileError(msg) from e

        logger.info("Loaded score from %s: %s", self._path, scoreboard)
        return scoreboard

    def save(self, scoreboard: Scoreboard) -> None:
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(json.dumps(asdict(scoreboard)), encoding="utf-8")
        except OSError as e:
            msg = f"Cannot write score file {self._path}"
            raise ScoreFileError(msg) from e
        logger.debug("Saved score to %s", self._path)
