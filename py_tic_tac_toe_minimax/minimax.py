"""Exhaustive minimax move selection for the computer player.

The search explores the full game tree, without pruning or caching, using the
caller's board as a scratchpad: every hypothetical mark is removed again before
the next branch is tried, so the board is unchanged when a call returns.
"""

import logging

from py_tic_tac_toe_minimax.board import COMPUTER, HUMAN, Board, Outcome

logger = logging.getLogger(__name__)

_SCORES: dict[Outcome, int] = {
    Outcome.COMPUTER_WIN: 1,
    Outcome.HUMAN_WIN: -1,
    Outcome.DRAW: 0,
}


def search(board: Board, *, maximizing: bool) -> int:
    """Score ``board`` assuming perfect play from both sides.

    ``maximizing`` is True when the computer is the side to move.
    Returns +1 for a forced computer win, -1 for a forced human win and 0 for a draw.
    """
    outcome = board.detect_outcome()
    if outcome is not Outcome.ONGOING:
        return _SCORES[outcome]

    player = COMPUTER if maximizing else HUMAN
    best_score = -2 if maximizing else 2

    for index in board.legal_moves():
        board.apply_move(index, player)
        score = search(board, maximizing=not maximizing)
        board.undo_move(index)

        best_score = max(best_score, score) if maximizing else min(best_score, score)

    return best_score


def score_moves(board: Board) -> dict[int, int]:
    """Minimax score of every legal computer move, keyed by cell index."""
    scores: dict[int, int] = {}
    for index in board.legal_moves():
        board.apply_move(index, COMPUTER)
        scores[index] = search(board, maximizing=False)
        board.undo_move(index)
    return scores


def best_move(board: Board) -> int | None:
    """Return the cell the computer should play, or None when no cell is empty.

    Ties are broken in favour of the lowest index.
    """
    best_score = -2
    chosen: int | None = None

    for index, score in score_moves(board).items():
        if score > best_score:
            best_score = score
            chosen = index

    if chosen is not None:
        logger.debug("Computer chooses cell %d (score %d)", chosen, best_score)
    return chosen
