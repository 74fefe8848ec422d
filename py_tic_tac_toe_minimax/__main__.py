import logging
import threading
import time

from py_tic_tac_toe_minimax.config import parse_args
from py_tic_tac_toe_minimax.exception import ScoreFileError
from py_tic_tac_toe_minimax.factories import config_game_engine, create_game_engine, create_players
from py_tic_tac_toe_minimax.game_engine import GameEngine
from py_tic_tac_toe_minimax.score import ScoreStore
from py_tic_tac_toe_minimax.ui import Ui
from py_tic_tac_toe_minimax.ui_pygame import PygameUi
from py_tic_tac_toe_minimax.ui_terminal import TerminalUi
from py_tic_tac_toe_minimax.ui_tk import TkUi


def main() -> None:
    ui_choices: dict[str, type[Ui]] = {"terminal": TerminalUi, "pygame": PygameUi, "tk": TkUi}
    settings = parse_args(ui_choices.keys())

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    # Build game components

    score_store = ScoreStore(settings.score_file) if settings.score_file is not None else None
    try:
        game_engine = create_game_engine(score_store)
    except ScoreFileError as e:
        logging.getLogger(__name__).error("%s (use --no-score-file or remove the file)", e)
        raise SystemExit(1) from e
    uis: list[Ui] = [ui_choices[ui](game_engine) for ui in settings.uis]
    players = create_players(game_engine, uis, ai_delay=settings.ai_delay)
    config_game_engine(game_engine, players, uis)

    # -----------------------------
    # UI
    # -----------------------------
    # The first UI owns the main thread (Tk and pygame need it); the others run in daemon threads.
    ui_threads = [threading.Thread(target=ui.run, daemon=True) for ui in uis[1:]]

    for ui_thread in ui_threads:
        ui_thread.start()

    threading.Thread(target=_start_when_ready, args=(game_engine, uis), daemon=True).start()
    uis[0].run()

    game_engine.stop_game_loop()


def _start_when_ready(game_engine: GameEngine, uis: list[Ui]) -> None:
    while not all(ui.running for ui in uis):
        time.sleep(0.1)
    game_engine.start_game_loop()


if __name__ == "__main__":
    main()
