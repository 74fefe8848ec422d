from collections.abc import Callable

from py_tic_tac_toe_minimax.board import HUMAN, PlayerSymbol
from py_tic_tac_toe_minimax.player import Player


class LocalPlayer(Player):
    def __init__(self, symbol: PlayerSymbol = HUMAN) -> None:
        super().__init__(symbol)
        self._enable_input_cbs: list[Callable[[], None]] = []

    def add_enable_input_cb(self, callback: Callable[[], None]) -> None:
        self._enable_input_cbs.append(callback)

    def start_turn(self) -> None:
        for callback in list(self._enable_input_cbs):
            callback()
