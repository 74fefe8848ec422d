from py_tic_tac_toe_minimax.board import HUMAN, Board, Move, Outcome, PlayerSymbol, opponent
from py_tic_tac_toe_minimax.exception import InvalidMoveError


class Game:
    def __init__(self) -> None:
        self._board = Board()
        self._current_player: PlayerSymbol = HUMAN

    @property
    def board(self) -> Board:
        return self._board

    @property
    def current_player(self) -> PlayerSymbol:
        return self._current_player

    @property
    def outcome(self) -> Outcome:
        return self._board.detect_outcome()

    def is_over(self) -> bool:
        return self._board.is_terminal()

    def apply_move(self, move: Move) -> None:
        if self._board.is_terminal():
            raise InvalidMoveError("Game over.")

        if move.player != self._current_player:
            raise InvalidMoveError("Not your turn.")

        if not self._board.apply_move(move.index, move.player):
            raise InvalidMoveError("Cell occupied.")

        self._current_player = opponent(self._current_player)

    def reset(self) -> None:
        """Start a new game on the same board. The human always moves first."""
        self._board.reset()
        self._current_player = HUMAN
