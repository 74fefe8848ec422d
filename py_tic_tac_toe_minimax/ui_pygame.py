from typing import Final

import pygame

from py_tic_tac_toe_minimax.board import BOARD_SIZE, Cell
from py_tic_tac_toe_minimax.game_engine import GameEngine
from py_tic_tac_toe_minimax.ui import Ui


class PygameUi(Ui):
    TITLE: Final = "Tic-Tac-Toe (Pygame)"
    WINDOW_SIZE: Final = 480
    STATUS_HEIGHT: Final = 64
    CELL_SIZE: Final = WINDOW_SIZE // BOARD_SIZE
    LINE_WIDTH: Final = 4

    BG_COLOR: Final = (0, 0, 0)
    LINE_COLOR: Final = (127, 127, 127)
    X_COLOR: Final = (191, 63, 63)
    O_COLOR: Final = (63, 63, 191)
    WIN_COLOR: Final = (31, 95, 31)
    TEXT_COLOR: Final = (255, 255, 255)

    def __init__(self, game_engine: GameEngine) -> None:
        super().__init__(game_engine)
        self._cells: list[Cell] = self._game_engine.game.board.cells
        self._highlight: tuple[int, int, int] | None = None
        self._status = ""
        self._score = ""
        self._end_message = ""

    def run(self) -> None:
        pygame.init()
        self._screen = pygame.display.set_mode((self.WINDOW_SIZE, self.WINDOW_SIZE + self.STATUS_HEIGHT))
        pygame.display.set_caption(self.TITLE)

        self._font = pygame.font.SysFont(None, 96)
        self._small_font = pygame.font.SysFont(None, 48)
        self._status_font = pygame.font.SysFont(None, 24)

        super().run()
        self._main_loop()

    def enable_input(self) -> None:
        super().enable_input()
        if not self._running:
            return
        self._status = self._turn_message("Your turn! Click a cell. [N]ew game, [R]eset score")

    def _disable_input(self) -> None:
        super()._disable_input()
        if not self._end_message:
            self._status = "Computer is thinking..."

    def _main_loop(self) -> None:
        clock = pygame.time.Clock()
        while self._running:
            clock.tick(30)
            self._handle_events()
            self._render()
        pygame.quit()

    def _handle_events(self) -> None:
        for event in pygame.event.get():
            match event.type:
                case pygame.QUIT:
                    self._stop()
                case pygame.KEYDOWN if event.key == pygame.K_n:
                    self._new_game()
                case pygame.KEYDOWN if event.key == pygame.K_r:
                    self._reset_score()
                case pygame.MOUSEBUTTONDOWN:
                    if self._end_message:
                        self._new_game()
                    elif self._input_enabled:
                        self._on_click(event.pos)

    def _render(self) -> None:
        self._screen.fill(self.BG_COLOR)
        self._draw_highlight()
        self._draw_grid()
        self._draw_marks()
        self._draw_status()
        self._draw_end_message()
        pygame.display.flip()

    def _on_click(self, pos: tuple[int, int]) -> None:
        x, y = pos
        col = x // self.CELL_SIZE
        row = y // self.CELL_SIZE
        if not (0 <= row < BOARD_SIZE) or not (0 <= col < BOARD_SIZE):
            return
        self._queue_move(row * BOARD_SIZE + col)

    def _render_board(self) -> None:
        self._cells = self._game_engine.game.board.cells

    def _render_score(self) -> None:
        self._score = str(self._game_engine.scoreboard)

    def _highlight_line(self, line: tuple[int, int, int]) -> None:
        self._highlight = line

    def _clear_game_over(self) -> None:
        self._end_message = ""
        self._highlight = None

    def _show_end_message(self, message: str) -> None:
        self._end_message = message
        self._status = "Click to play again. [R]eset score"

    def _on_input_error(self, exception: Exception) -> None:
        self._status = str(exception)

    def _cell_rect(self, index: int) -> pygame.Rect:
        row, col = divmod(index, BOARD_SIZE)
        return pygame.Rect(col * self.CELL_SIZE, row * self.CELL_SIZE, self.CELL_SIZE, self.CELL_SIZE)

    def _draw_highlight(self) -> None:
        if self._highlight is None:
            return
        for index in self._highlight:
            pygame.draw.rect(self._screen, self.WIN_COLOR, self._cell_rect(index))

    def _draw_grid(self) -> None:
        for i in range(1, BOARD_SIZE):
            pygame.draw.line(
                self._screen,
                self.LINE_COLOR,
                (0, i * self.CELL_SIZE),
                (self.WINDOW_SIZE, i * self.CELL_SIZE),
                self.LINE_WIDTH,
            )
            pygame.draw.line(
                self._screen,
                self.LINE_COLOR,
                (i * self.CELL_SIZE, 0),
                (i * self.CELL_SIZE, self.WINDOW_SIZE),
                self.LINE_WIDTH,
            )
        pygame.draw.line(
            self._screen,
            self.LINE_COLOR,
            (0, self.WINDOW_SIZE),
            (self.WINDOW_SIZE, self.WINDOW_SIZE),
            self.LINE_WIDTH,
        )

    def _draw_marks(self) -> None:
        for index, value in enumerate(self._cells):
            if value is None:
                continue
            text = self._font.render(value, True, self.X_COLOR if value == "X" else self.O_COLOR)  # noqa: FBT003
            rect = text.get_rect(center=self._cell_rect(index).center)
            self._screen.blit(text, rect)

    def _draw_status(self) -> None:
        status_text = self._status_font.render(self._status, True, self.TEXT_COLOR)  # noqa: FBT003
        score_text = self._status_font.render(self._score, True, self.TEXT_COLOR)  # noqa: FBT003
        self._screen.blit(status_text, (8, self.WINDOW_SIZE + 10))
        self._screen.blit(score_text, (8, self.WINDOW_SIZE + 36))

    def _draw_end_message(self) -> None:
        if not self._end_message:
            return
        main_text = self._small_font.render(self._end_message, True, self.TEXT_COLOR)  # noqa: FBT003
        main_rect = main_text.get_rect(center=(self.WINDOW_SIZE // 2, self.WINDOW_SIZE // 2))
        self._screen.blit(main_text, main_rect)
