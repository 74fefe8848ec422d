# ruff: noqa: T201

from py_tic_tac_toe_minimax.board import BOARD_SIZE, CELL_COUNT
from py_tic_tac_toe_minimax.game_engine import GameEngine
from py_tic_tac_toe_minimax.ui import Ui


class TerminalUi(Ui):
    HELP: str = (
        f"Type a cell number (1-{CELL_COUNT}), 'new' for a new game, 'reset' to clear the score, 'exit' to quit."
    )

    def __init__(self, game_engine: GameEngine) -> None:
        super().__init__(game_engine)
        self._highlight: tuple[int, int, int] | None = None

    def run(self) -> None:
        super().run()
        print(self.HELP, flush=True)
        while self._running:
            self._get_input()
        print("Terminal UI stopped", flush=True)

    def enable_input(self) -> None:
        super().enable_input()
        if not self._running:
            return
        self._ask_for_move()

    def _ask_for_move(self) -> None:
        print(f"Your move (1-{CELL_COUNT}): ", end="", flush=True)

    def _get_input(self) -> None:
        try:
            input_str = input().strip().lower()
        except (KeyboardInterrupt, EOFError):
            self._stop()
            return

        match input_str:
            case "exit":
                self._stop()
                return
            case "new":
                self._new_game()
                return
            case "reset":
                self._reset_score()
                return

        if not self._input_enabled or not self._running:
            return

        try:
            board_position = int(input_str)
        except ValueError:
            self._on_input_error(ValueError("Not an integer"))
            self._ask_for_move()
            return

        if not (1 <= board_position <= CELL_COUNT):
            self._on_input_error(ValueError(f"Not between 1 and {CELL_COUNT}"))
            self._ask_for_move()
            return

        self._queue_move(board_position - 1)

    def _render_board(self) -> None:
        cells = self._game_engine.game.board.cells

        def _cell_value(index: int) -> str:
            value = cells[index]
            if value is None:
                return str(index + 1)
            if self._highlight is not None and index in self._highlight:
                return f"\033[7m{value}\033[0m"  # Reverse video
            return value

        rows = []
        for r in range(BOARD_SIZE):
            start = r * BOARD_SIZE
            row = " | ".join(_cell_value(start + i) for i in range(BOARD_SIZE))
            rows.append(f" {row} ")

        separator = "\n-----------\n"
        output = separator.join(rows)
        print(f"\n{output}\n", flush=True)

    def _render_score(self) -> None:
        print(str(self._game_engine.scoreboard), flush=True)

    def _highlight_line(self, line: tuple[int, int, int]) -> None:
        self._highlight = line
        self._render_board()

    def _clear_game_over(self) -> None:
        self._highlight = None

    def _show_end_message(self, message: str) -> None:
        print(f"{message}\nType 'new' to play again or 'exit' to quit.", flush=True)

    def _on_input_error(self, exception: Exception) -> None:
        if not self._running:
            return
        print(str(exception), flush=True)
