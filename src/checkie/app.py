"""Application entry point: an engine-vs-engine game on the console."""

from __future__ import annotations

import logging
import os
import sys

from checkie.core.enums import Color, GameResult
from checkie.core.move import Move
from checkie.core.position import Position
from checkie.engine.config import RateConfig, load_rate_config
from checkie.engine.search import SearchEngine
from checkie.game.controller import GameController

_LOGGER = logging.getLogger(__name__)

_DEFAULT_ROWS = 2


def _load_config() -> RateConfig:
    path = os.environ.get("CHECKIE_CONFIG")
    if not path:
        return RateConfig()
    return load_rate_config(path)


def _log_level() -> int:
    name = os.environ.get("CHECKIE_LOG_LEVEL", "INFO").upper()
    try:
        return logging.getLevelNamesMapping()[name]
    except KeyError:
        raise ValueError(f"Unknown log level: {name}") from None


def _log_board(_move: Move, _mover: Color, position: Position) -> None:
    _LOGGER.debug("\n%r", position)


def main(argv: list[str] | None = None) -> int:
    """Play a self-play game and report the result."""
    args = sys.argv[1:] if argv is None else argv
    try:
        logging.basicConfig(level=_log_level(), format="%(message)s")
        rows = int(args[0]) if args else _DEFAULT_ROWS
        config = _load_config()
        controller = GameController(SearchEngine(config))
        controller.new_game(rows)
    except ValueError as exc:
        _LOGGER.error("%s", exc)
        return 2

    controller.events.on_move.append(_log_board)
    _LOGGER.debug("\n%r", controller.position)

    result = controller.play_to_end()
    if result == GameResult.DRAW:
        _LOGGER.info("Draw")
    else:
        winner = Color.WHITE if result == GameResult.WHITE_WINS else Color.BLACK
        _LOGGER.info("Player %s won!", winner)
    return 0


if __name__ == "__main__":
    sys.exit(main())
