from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum
from typing import Final, Literal, TypeAlias

BOARD_SIZE: Final = 3
CELL_COUNT: Final = BOARD_SIZE * BOARD_SIZE

PlayerSymbol: TypeAlias = Literal["X", "O"]
Cell: TypeAlias = PlayerSymbol | None

HUMAN: Final[PlayerSymbol] = "X"
COMPUTER: Final[PlayerSymbol] = "O"

# Order matters: the first full line decides the outcome.
WIN_LINES: Final[tuple[tuple[int, int, int], ...]] = (
    # Rows
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    # Columns
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    # Diagonals
    (0, 4, 8),
    (2, 4, 6),
)


class Outcome(StrEnum):
    ONGOING = "ongoing"
    HUMAN_WIN = "human_win"
    COMPUTER_WIN = "computer_win"
    DRAW = "draw"


@dataclass(frozen=True, slots=True)
class Move:
    player: PlayerSymbol
    index: int


def opponent(player: PlayerSymbol) -> PlayerSymbol:
    return COMPUTER if player == HUMAN else HUMAN


class Board:
    """The 3x3 board stored as 9 cells in row-major order.

    Cells hold ``"X"`` (human), ``"O"`` (computer) or ``None`` (empty).
    ``apply_move`` and ``reset`` are the only mutating operations; ``undo_move`` is
    the search's backtracking step and only clears a cell it has just filled.
    """

    def __init__(self) -> None:
        self._cells: list[Cell] = [None] * CELL_COUNT

    @classmethod
    def from_cells(cls, cells: Iterable[Cell]) -> "Board":
        board = cls()
        board._cells = list(cells)
        assert len(board._cells) == CELL_COUNT, f"A board has {CELL_COUNT} cells, got {len(board._cells)}."
        assert all(cell in (HUMAN, COMPUTER, None) for cell in board._cells), "Invalid cell value."
        return board

    @property
    def cells(self) -> list[Cell]:
        """A copy of the cells; changing it does not change the board."""
        return self._cells.copy()

    def __getitem__(self, index: int) -> Cell:
        return self._cells[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    def __repr__(self) -> str:
        return f"Board({self._cells!r})"

    def clone(self) -> "Board":
        return Board.from_cells(self._cells)

    def apply_move(self, index: int, player: PlayerSymbol) -> bool:
        if not (0 <= index < CELL_COUNT):
            raise IndexError("Move out of bounds.")

        if self._cells[index] is not None:
            return False

        self._cells[index] = player
        return True

    def undo_move(self, index: int) -> None:
        if not (0 <= index < CELL_COUNT):
            raise IndexError("Move out of bounds.")
        self._cells[index] = None

    def reset(self) -> None:
        for index in range(CELL_COUNT):
            self._cells[index] = None

    def legal_moves(self) -> list[int]:
        return [index for index, cell in enumerate(self._cells) if cell is None]

    def is_full(self) -> bool:
        return all(cell is not None for cell in self._cells)

    def winning_line(self) -> tuple[int, int, int] | None:
        for line in WIN_LINES:
            a, b, c = line
            if self._cells[a] is not None and self._cells[a] == self._cells[b] == self._cells[c]:
                return line
        return None

    def get_winner(self) -> PlayerSymbol | None:
        line = self.winning_line()
        return self._cells[line[0]] if line is not None else None

    def detect_outcome(self) -> Outcome:
        winner = self.get_winner()
        if winner == HUMAN:
            return Outcome.HUMAN_WIN
        if winner == COMPUTER:
            return Outcome.COMPUTER_WIN
        if self.is_full():
            return Outcome.DRAW
        return Outcome.ONGOING

    def is_terminal(self) -> bool:
        return self.detect_outcome() is not Outcome.ONGOING


def new_board() -> Board:
    return Board()
