import logging
import time

from py_tic_tac_toe_minimax.board import COMPUTER, Board
from py_tic_tac_toe_minimax.exception import LogicError
from py_tic_tac_toe_minimax.minimax import best_move
from py_tic_tac_toe_minimax.player import Player

logger = logging.getLogger(__name__)


class AiPlayer(Player):
    """Computer player backed by the minimax search.

    The move is computed as soon as the turn starts; ``delay`` only postpones the moment
    it becomes visible to the game engine, so the UI can show the computer "thinking".
    """

    def __init__(self, board: Board, delay: float = 0.0) -> None:
        super().__init__(COMPUTER)
        self._board = board
        self._delay = delay
        self._ready_at = 0.0

    @property
    def delay(self) -> float:
        return self._delay

    def start_turn(self) -> None:
        # Search a copy so renderers never see the search scratch marks.
        move = best_move(self._board.clone())
        if move is None:
            msg = f"No moves available for player {self._symbol}, but game not over."
            raise LogicError(msg)
        logger.debug("Computer will play cell %d after %.2fs", move, self._delay)
        self._ready_at = time.monotonic() + self._delay
        self.queue_move(move)

    def get_pending_move(self, *, block: bool = False, timeout: float | None = None) -> int | None:
        remaining = self._ready_at - time.monotonic()
        if remaining > 0:
            if not block:
                return None
            if timeout is not None and timeout < remaining:
                time.sleep(timeout)
                return None
            time.sleep(remaining)
        return super().get_pending_move(block=block, timeout=timeout)
