"""Factory functions for creating game components.

Provides factories for creating:
- Players (local human and minimax computer)
- Game engines
"""

from py_tic_tac_toe_minimax.board import HUMAN
from py_tic_tac_toe_minimax.game_engine import GameEngine
from py_tic_tac_toe_minimax.player import Player
from py_tic_tac_toe_minimax.player_ai import AiPlayer
from py_tic_tac_toe_minimax.player_local import LocalPlayer
from py_tic_tac_toe_minimax.score import ScoreStore
from py_tic_tac_toe_minimax.ui import Ui


def create_game_engine(score_store: ScoreStore | None = None) -> GameEngine:
    return GameEngine(score_store)


def create_players(game_engine: GameEngine, uis: list[Ui], ai_delay: float = 0.0) -> tuple[Player, Player]:
    """Human plays X and moves first; the computer plays O."""
    human_player = LocalPlayer(HUMAN)
    for ui in uis:
        human_player.add_enable_input_cb(ui.enable_input)
    computer_player = AiPlayer(game_engine.game.board, delay=ai_delay)
    return human_player, computer_player


def config_game_engine(game_engine: GameEngine, players: tuple[Player, Player], uis: list[Ui]) -> GameEngine:
    game_engine.set_players(*players)
    for ui in uis:
        game_engine.add_board_updated_cb(ui.on_board_updated)
        game_engine.add_game_over_cb(ui.on_game_over)
        game_engine.add_new_game_cb(ui.on_new_game)
        game_engine.add_score_updated_cb(ui.on_score_updated)
        game_engine.add_on_error_cb(ui.on_error)

    return game_engine
