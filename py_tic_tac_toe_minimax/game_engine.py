import logging
import threading
import time
from collections.abc import Callable

from py_tic_tac_toe_minimax.board import Move, Outcome
from py_tic_tac_toe_minimax.exception import InvalidMoveError, LogicError, ScoreFileError
from py_tic_tac_toe_minimax.game import Game
from py_tic_tac_toe_minimax.player import Player
from py_tic_tac_toe_minimax.score import Scoreboard, ScoreStore

logger = logging.getLogger(__name__)


class GameEngine:
    def __init__(self, score_store: ScoreStore | None = None) -> None:
        self._game = Game()
        self._score_store = score_store
        self._scoreboard = score_store.load() if score_store is not None else Scoreboard()
        self._board_updated_cbs: list[Callable[[], None]] = []
        self._game_over_cbs: list[Callable[[Outcome], None]] = []
        self._new_game_cbs: list[Callable[[], None]] = []
        self._score_updated_cbs: list[Callable[[], None]] = []
        self._on_error_cbs: list[Callable[[Exception], None]] = []
        self._lock = threading.RLock()  # Serializes ticks from the game loop and commands from UI threads.
        self._running = False
        self._game_thread: threading.Thread | None = None

    @property
    def game(self) -> Game:
        return self._game

    @property
    def scoreboard(self) -> Scoreboard:
        return self._scoreboard

    @property
    def current_player(self) -> Player:
        return self._player1 if self._game.current_player == self._player1.symbol else self._player2

    def set_players(self, player1: Player, player2: Player) -> None:
        if player1.symbol == player2.symbol:
            raise LogicError("Players must use different symbols.")
        self._player1 = player1
        self._player2 = player2

    def add_board_updated_cb(self, callback: Callable[[], None]) -> None:
        self._board_updated_cbs.append(callback)

    def add_game_over_cb(self, callback: Callable[[Outcome], None]) -> None:
        self._game_over_cbs.append(callback)

    def add_new_game_cb(self, callback: Callable[[], None]) -> None:
        self._new_game_cbs.append(callback)

    def add_score_updated_cb(self, callback: Callable[[], None]) -> None:
        self._score_updated_cbs.append(callback)

    def add_on_error_cb(self, callback: Callable[[Exception], None]) -> None:
        self._on_error_cbs.append(callback)

    def start(self) -> None:
        """Start the game in manual mode. The caller must call tick() to advance the game."""
        with self._lock:
            self._notify_board_updated()
            self._notify_score_updated()
            self.current_player.start_turn()

    def start_game_loop(self) -> None:
        """Start the game with an automatic game loop running in a background thread."""
        self._running = True
        self.start()
        self._game_thread = threading.Thread(target=self._game_loop, daemon=True)
        self._game_thread.start()

    def stop_game_loop(self) -> None:
        """Stop the automatic game loop."""
        self._running = False
        if self._game_thread:
            self._game_thread.join(timeout=1.0)
            self._game_thread = None

    def tick(self, *, block: bool = False, timeout: float | None = None) -> None:
        """Process one iteration of the game logic.

        Checks if the current player has a pending move, applies it if available,
        and starts the next player's turn. Call this repeatedly from a UI loop
        when using manual mode, or let start_game_loop() handle it automatically.
        """
        if self._game.is_over():
            return

        player = self.current_player
        move = player.get_pending_move(block=block, timeout=timeout)
        if move is None:
            return

        with self._lock:
            if player is not self.current_player:
                # A new game started while the move was pending.
                return
            try:
                self._game.apply_move(Move(player.symbol, move))
            except (InvalidMoveError, IndexError) as e:
                logger.warning("Rejected move %r by %s: %s", move, player.symbol, e)
                self._notify_on_error(e)
                # Same player tries again.
                player.start_turn()
                return

            logger.debug("Player %s played cell %d", player.symbol, move)
            self._notify_board_updated()

            if self._game.is_over():
                self._finish_game()
                return
            self.current_player.start_turn()

    def queue_move(self, index: int) -> None:
        """Submit a move from the UI or external source.

        This queues the move for the current player to be processed by the next tick().
        """
        self.current_player.queue_move(index)

    def new_game(self) -> None:
        """Clear the board and give the first turn back to the human."""
        with self._lock:
            self._player1.clear_pending_move()
            self._player2.clear_pending_move()
            self._game.reset()
            logger.info("New game started")
            for callback in list(self._new_game_cbs):
                callback()
            self._notify_board_updated()
            self.current_player.start_turn()

    def reset_score(self) -> None:
        with self._lock:
            self._scoreboard.reset()
            self._save_score()
            self._notify_score_updated()

    def _finish_game(self) -> None:
        outcome = self._game.outcome
        logger.info("Game over: %s", outcome)
        self._scoreboard.record(outcome)
        for callback in list(self._game_over_cbs):
            callback(outcome)
        self._save_score()
        self._notify_score_updated()

    def _save_score(self) -> None:
        if self._score_store is None:
            return
        try:
            self._score_store.save(self._scoreboard)
        except ScoreFileError as e:
            # The score stays in memory; the game goes on.
            logger.warning("Score not saved: %s", e)
            self._notify_on_error(e)

    def _game_loop(self, tick_timeout: float = 0.1) -> None:
        """Background thread that continuously calls tick() to drive the game forward."""
        while self._running:
            if self._game.is_over():
                # Idle until a UI starts a new game or the loop is stopped.
                time.sleep(tick_timeout)
                continue
            self.tick(block=True, timeout=tick_timeout)

    def _notify_board_updated(self) -> None:
        for callback in list(self._board_updated_cbs):
            callback()

    def _notify_score_updated(self) -> None:
        for callback in list(self._score_updated_cbs):
            callback()

    def _notify_on_error(self, exception: Exception) -> None:
        """Notify error callbacks when any error occurs."""
        for callback in list(self._on_error_cbs):
            callback(exception)
