import tkinter as tk
from functools import partial
from typing import Final

from py_tic_tac_toe_minimax.board import BOARD_SIZE, CELL_COUNT
from py_tic_tac_toe_minimax.game_engine import GameEngine
from py_tic_tac_toe_minimax.ui import Ui


class TkUi(Ui):
    TITLE: Final = "Tic-Tac-Toe (Tk)"

    X_COLOR: Final = "#bf3f3f"
    O_COLOR: Final = "#3f3fbf"
    WIN_COLOR: Final = "#9fdf9f"

    def __init__(self, game_engine: GameEngine) -> None:
        super().__init__(game_engine)
        self._buttons: list[tk.Button] = []

    def run(self) -> None:
        self._root = tk.Tk()
        self._root.title(self.TITLE)
        self._root.protocol("WM_DELETE_WINDOW", self._stop)
        self._build_grid()
        self._build_controls()
        super().run()
        self._root.mainloop()

    def _stop(self) -> None:
        self._root.after(0, self._root.quit)
        super()._stop()

    def enable_input(self) -> None:
        super().enable_input()
        if not self._running:
            return
        self._root.after(0, self._set_status, self._turn_message("Your turn! Click a cell to play."))

    def _disable_input(self) -> None:
        super()._disable_input()
        if not self._running:
            return
        self._root.after(0, self._set_status, "Computer is thinking...")

    def _build_grid(self) -> None:
        default_bg = self._root.cget("bg")
        for i in range(CELL_COUNT):
            btn = tk.Button(
                self._root,
                text="",
                width=5,
                height=2,
                font=("Helvetica", 32),
                bg=default_bg,
                command=partial(self._on_click, i),
            )
            row, col = divmod(i, BOARD_SIZE)
            btn.grid(row=row, column=col, padx=2, pady=2)
            self._buttons.append(btn)
        self._default_bg = default_bg

    def _build_controls(self) -> None:
        self._status = tk.Label(self._root, text="", font=("Helvetica", 14))
        self._status.grid(row=BOARD_SIZE, column=0, columnspan=BOARD_SIZE, pady=4)
        self._score = tk.Label(self._root, text="", font=("Helvetica", 12))
        self._score.grid(row=BOARD_SIZE + 1, column=0, columnspan=BOARD_SIZE)
        tk.Button(self._root, text="New game", command=self._new_game).grid(row=BOARD_SIZE + 2, column=0, pady=4)
        tk.Button(self._root, text="Reset score", command=self._reset_score).grid(
            row=BOARD_SIZE + 2,
            column=BOARD_SIZE - 1,
            pady=4,
        )

    def _on_click(self, index: int) -> None:
        if not self._input_enabled or not self._running:
            return
        self._queue_move(index)

    def _set_status(self, text: str) -> None:
        self._status.config(text=text)

    # Engine callbacks may arrive from the game loop thread: hand the widget work to Tk's thread.

    def _render_board(self) -> None:
        self._root.after(0, self._render_board_internal)

    def _render_board_internal(self) -> None:
        for i, btn in enumerate(self._buttons):
            value = self._game_engine.game.board[i]
            btn.config(
                text=value if value is not None else "",
                fg=self.X_COLOR if value == "X" else self.O_COLOR,
                bg=self._default_bg,
            )

    def _render_score(self) -> None:
        self._root.after(0, lambda: self._score.config(text=str(self._game_engine.scoreboard)))

    def _highlight_line(self, line: tuple[int, int, int]) -> None:
        self._root.after(0, self._highlight_line_internal, line)

    def _highlight_line_internal(self, line: tuple[int, int, int]) -> None:
        for index in line:
            self._buttons[index].config(bg=self.WIN_COLOR)

    def _show_end_message(self, message: str) -> None:
        self._root.after(0, self._set_status, message)

    def _on_input_error(self, exception: Exception) -> None:
        self._root.after(0, self._set_status, str(exception))
