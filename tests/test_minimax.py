import random

from py_tic_tac_toe_minimax.board import COMPUTER, HUMAN, Board, Outcome
from py_tic_tac_toe_minimax.minimax import best_move, score_moves, search

X, O, _ = HUMAN, COMPUTER, None


def play_out(board: Board, index: int) -> set[Outcome]:
    """Apply the computer move ``index``, then collect every outcome reachable by any human reply."""
    board.apply_move(index, COMPUTER)
    try:
        if board.is_terminal():
            return {board.detect_outcome()}
        outcomes: set[Outcome] = set()
        for reply in board.legal_moves():
            board.apply_move(reply, HUMAN)
            if board.is_terminal():
                outcomes.add(board.detect_outcome())
            else:
                move = best_move(board)
                assert move is not None
                outcomes |= play_out(board, move)
            board.undo_move(reply)
        return outcomes
    finally:
        board.undo_move(index)


class TestSearch:
    def test_terminal_scores(self) -> None:
        assert search(Board.from_cells([O, O, O, X, X, _, X, _, _]), maximizing=False) == 1
        assert search(Board.from_cells([X, X, X, O, O, _, _, _, _]), maximizing=True) == -1
        assert search(Board.from_cells([X, O, X, X, O, O, O, X, X]), maximizing=True) == 0

    def test_empty_board_is_a_draw(self) -> None:
        assert search(Board(), maximizing=False) == 0

    def test_search_restores_board(self) -> None:
        board = Board.from_cells([X, _, _, _, O, _, _, _, X])
        before = board.cells.copy()
        search(board, maximizing=True)
        assert board.cells == before


class TestBestMove:
    def test_takes_immediate_win_or_equivalent_forced_win(self) -> None:
        board = Board.from_cells([X, X, _, O, O, _, _, _, _])

        scores = score_moves(board)
        assert scores[5] == 1
        # Cell 2 blocks and creates a double threat: it is also a forced win and, being
        # the lowest index with the maximum score, is the one chosen.
        assert scores[2] == 1
        move = best_move(board)
        assert move == 2
        assert play_out(board, move) == {Outcome.COMPUTER_WIN}

    def test_winning_immediately_when_it_is_the_first_best_move(self) -> None:
        board = Board.from_cells([X, X, _, _, _, O, X, _, O])
        move = best_move(board)
        assert move == 2
        board.apply_move(move, COMPUTER)
        assert board.detect_outcome() is Outcome.COMPUTER_WIN

    def test_blocks_human_threat(self) -> None:
        board = Board.from_cells([X, X, _, _, O, _, _, _, _])
        assert best_move(board) == 2

    def test_regression_fixture_returns_legal_move(self) -> None:
        board = Board.from_cells([X, _, _, _, X, _, _, _, O])
        move = best_move(board)
        assert move is not None
        assert board[move] is None
        assert Outcome.HUMAN_WIN not in play_out(board, move)

    def test_empty_board(self) -> None:
        board = Board()
        scores = score_moves(board)
        assert set(scores.values()) == {0}
        # Every opening draws under perfect play, so the first cell wins the tie.
        assert best_move(board) == 0
        assert scores[0] == max(scores.values())

    def test_full_board_returns_none(self) -> None:
        board = Board.from_cells([X, O, X, X, O, O, O, X, X])
        assert board.detect_outcome() is Outcome.DRAW
        assert best_move(board) is None

    def test_board_unchanged_after_search(self) -> None:
        board = Board.from_cells([X, _, _, _, _, _, _, _, _])
        before = board.cells.copy()
        best_move(board)
        assert board.cells == before

    def test_deterministic(self) -> None:
        board = Board.from_cells([_, _, X, _, _, _, _, _, _])
        assert best_move(board) == best_move(board)


class TestNeverLoses:
    def test_against_every_human_move_sequence(self) -> None:
        """Exhaustive: the human moves first and tries every legal move at every turn."""
        board = Board()
        outcomes: set[Outcome] = set()
        for opening in board.legal_moves():
            board.apply_move(opening, HUMAN)
            move = best_move(board)
            assert move is not None
            assert board[move] is None
            outcomes |= play_out(board, move)
            board.undo_move(opening)

        assert Outcome.HUMAN_WIN not in outcomes
        assert Outcome.ONGOING not in outcomes
        assert board == Board()

    def test_against_random_human(self) -> None:
        rng = random.Random(1234)
        for _game in range(10):
            board = Board()
            while not board.is_terminal():
                board.apply_move(rng.choice(board.legal_moves()), HUMAN)
                if board.is_terminal():
                    break
                move = best_move(board)
                assert move is not None
                assert board.apply_move(move, COMPUTER)
            assert board.detect_outcome() is not Outcome.HUMAN_WIN
