from abc import ABC, abstractmethod
from typing import Final

from py_tic_tac_toe_minimax.board import Outcome
from py_tic_tac_toe_minimax.exception import InvalidMoveError
from py_tic_tac_toe_minimax.game_engine import GameEngine

END_MESSAGES: Final[dict[Outcome, str]] = {
    Outcome.HUMAN_WIN: "You win! Congratulations!",
    Outcome.COMPUTER_WIN: "Computer wins! Try again.",
    Outcome.DRAW: "It's a draw!",
}


class Ui(ABC):
    def __init__(self, game_engine: GameEngine) -> None:
        self._game_engine = game_engine
        self._running = False
        self._input_enabled = False
        self._input_error: str | None = None

    @property
    def running(self) -> bool:
        return self._running

    def run(self) -> None:
        self._running = True

    def _stop(self) -> None:
        self._running = False

    def _queue_move(self, index: int) -> None:
        # Disable own input immediately.
        # Prevents sending multiple moves before the engine processes the first one.
        self._disable_input()
        self._game_engine.queue_move(index)

    def _new_game(self) -> None:
        self._disable_input()
        self._game_engine.new_game()

    def _reset_score(self) -> None:
        self._game_engine.reset_score()

    def enable_input(self) -> None:
        if not self._running:
            return
        self._input_enabled = True

    def _disable_input(self) -> None:
        self._input_enabled = False

    def on_board_updated(self) -> None:
        if not self._running:
            return
        # Input gets enabled again by the human player's turn, after the computer has moved.
        self._disable_input()
        self._render_board()

    def on_new_game(self) -> None:
        self._input_error = None
        self._clear_game_over()

    def on_game_over(self, outcome: Outcome) -> None:
        if not self._running:
            return
        self._disable_input()
        line = self._game_engine.game.board.winning_line()
        if line is not None:
            self._highlight_line(line)
        self._show_end_message(END_MESSAGES[outcome])

    def on_score_updated(self) -> None:
        if not self._running:
            return
        self._render_score()

    def on_error(self, exception: Exception) -> None:
        if isinstance(exception, (InvalidMoveError, IndexError)):
            self._input_error = str(exception)
            self._on_input_error(exception)
        else:
            self._on_other_error(exception)

    def _turn_message(self, prompt: str) -> str:
        """Prompt for the human's turn, prefixed by the error that caused the retry, if any."""
        error, self._input_error = self._input_error, None
        return f"{error} {prompt}" if error else prompt

    @abstractmethod
    def _render_board(self) -> None:
        pass

    @abstractmethod
    def _render_score(self) -> None:
        pass

    @abstractmethod
    def _highlight_line(self, line: tuple[int, int, int]) -> None:
        pass

    @abstractmethod
    def _show_end_message(self, message: str) -> None:
        pass

    @abstractmethod
    def _on_input_error(self, exception: Exception) -> None:
        pass

    def _clear_game_over(self) -> None:
        """Drop end-of-game decorations (highlight, end message) before the next game is drawn."""

    def _on_other_error(self, exception: Exception) -> None:
        self._on_input_error(exception)
