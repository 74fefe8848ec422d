from pathlib import Path

import pytest

from py_tic_tac_toe_minimax.config import DEFAULT_AI_DELAY, DEFAULT_SCORE_FILE, parse_args

UI_CHOICES = ("terminal", "pygame", "tk")


class TestSettings:
    def test_defaults(self) -> None:
        settings = parse_args(UI_CHOICES, [])
        assert settings.uis == ("terminal",)
        assert settings.score_file == DEFAULT_SCORE_FILE
        assert settings.ai_delay == DEFAULT_AI_DELAY
        assert settings.log_level == "WARNING"

    def test_overrides(self, tmp_path: Path) -> None:
        score_file = tmp_path / "s.json"
        settings = parse_args(
            UI_CHOICES,
            ["--ui", "tk", "pygame", "--score-file", str(score_file), "--ai-delay", "0", "--log-level", "DEBUG"],
        )
        assert settings.uis == ("tk", "pygame")
        assert settings.score_file == score_file
        assert settings.ai_delay == 0
        assert settings.log_level == "DEBUG"

    def test_no_score_file(self) -> None:
        assert parse_args(UI_CHOICES, ["--no-score-file"]).score_file is None

    @pytest.mark.parametrize("argv", [["--ai-delay", "-1"], ["--ui", "web"]])
    def test_invalid_arguments(self, argv: list[str]) -> None:
        with pytest.raises(SystemExit):
            parse_args(UI_CHOICES, argv)
