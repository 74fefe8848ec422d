from pathlib import Path

import pytest

from py_tic_tac_toe_minimax.board import Outcome
from py_tic_tac_toe_minimax.exception import ScoreFileError
from py_tic_tac_toe_minimax.score import Scoreboard, ScoreStore


class TestScoreboard:
    def test_record(self) -> None:
        scoreboard = Scoreboard()
        scoreboard.record(Outcome.HUMAN_WIN)
        scoreboard.record(Outcome.DRAW)
        scoreboard.record(Outcome.DRAW)
        scoreboard.record(Outcome.COMPUTER_WIN)
        scoreboard.record(Outcome.ONGOING)

        assert scoreboard == Scoreboard(human_wins=1, draws=2, computer_wins=1)

    def test_reset(self) -> None:
        scoreboard = Scoreboard(human_wins=3, draws=4, computer_wins=5)
        scoreboard.reset()
        assert scoreboard == Scoreboard()

    def test_str(self) -> None:
        assert str(Scoreboard(1, 2, 3)) == "You: 1  Draws: 2  Computer: 3"


class TestScoreStore:
    def test_missing_file_gives_empty_score(self, tmp_path: Path) -> None:
        assert ScoreStore(tmp_path / "missing.json").load() == Scoreboard()

    def test_save_creates_parent_directory(self, tmp_path: Path) -> None:
        store = ScoreStore(tmp_path / "nested" / "dir" / "score.json")
        store.save(Scoreboard(draws=7))

        assert store.path.exists()
        assert store.load() == Scoreboard(draws=7)

    @pytest.mark.parametrize(
        "content",
        ["not json", "[]", '{"draws": 1}', '{"human_wins": "a", "draws": 0, "computer_wins": 0}'],
    )
    def test_corrupt_file(self, tmp_path: Path, content: str) -> None:
        path = tmp_path / "score.json"
        path.write_text(content, encoding="utf-8")

        with pytest.raises(ScoreFileError, match="Cannot read score file"):
            ScoreStore(path).load()

    def test_unwritable_path(self, tmp_path: Path) -> None:
        blocker = tmp_path / "blocker"
        blocker.write_text("", encoding="utf-8")
        store = ScoreStore(blocker / "score.json")

        assert store.load() == Scoreboard()
        with pytest.raises(ScoreFileError, match="Cannot write score file"):
            store.save(Scoreboard(draws=1))
