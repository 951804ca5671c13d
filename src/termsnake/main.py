# main.py
import argparse
import curses
import logging
import random
import sys
import time

from .config import (
    Config, DEFAULT_HEIGHT, DEFAULT_WIDTH, DEFAULT_INTERVAL_MS, CELL_SIZE, FRONTENDS,
)
from .game import Game

logger = logging.getLogger(__name__)


def run(game: Game, frontend, interval_s: float, sleep=time.sleep, max_ticks=None) -> int:
    """
    Fixed-rate loop: poll input, step, draw, sleep.
    Returns the number of ticks played once the player quits
    (or max_ticks is reached).
    """
    running = True
    while running:
        # 1) input: at most one action per tick
        action = frontend.poll()
        if action is not None:
            running = game.keyboard_action(action)
            if not running:
                break

        # 2) update
        game.step()

        # 3) render
        frontend.draw(game.frame())

        if max_ticks is not None and game.ticks >= max_ticks:
            break
        sleep(interval_s)

    return game.ticks


def play_terminal(game: Game, cfg: Config) -> int:
    from .frontends.terminal import TerminalFrontend

    def _session(stdscr):
        frontend = TerminalFrontend(stdscr, cfg.height, cfg.width)
        try:
            return run(game, frontend, cfg.interval_s)
        finally:
            frontend.close()

    return curses.wrapper(_session)


def play_window(game: Game, cfg: Config) -> int:
    from .frontends.window import WindowFrontend

    frontend = WindowFrontend(cfg.height, cfg.width, cfg.cell_size)
    try:
        return run(game, frontend, cfg.interval_s)
    finally:
        frontend.close()


def configure_logging(level: str, log_file=None) -> None:
    # without a file, records go to stderr
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        filename=log_file,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="termsnake",
        description="Snake on a wrap-around board. Arrow keys steer, q quits.",
    )
    parser.add_argument("--width", type=int, default=DEFAULT_WIDTH)
    parser.add_argument("--height", type=int, default=DEFAULT_HEIGHT)
    parser.add_argument(
        "--interval-ms",
        type=int,
        default=DEFAULT_INTERVAL_MS,
        help="time between ticks in milliseconds",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="seed for fruit placement (default: seeded from the environment)",
    )
    parser.add_argument("--frontend", choices=FRONTENDS, default="terminal")
    parser.add_argument(
        "--cell-size",
        type=int,
        default=CELL_SIZE,
        help="pixels per cell for the window frontend",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
    )
    parser.add_argument("--log-file", type=str, default=None)
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level, args.log_file)

    try:
        cfg = Config(
            height=args.height,
            width=args.width,
            interval_ms=args.interval_ms,
            seed=args.seed,
            frontend=args.frontend,
            cell_size=args.cell_size,
        )
    except ValueError as e:
        parser.error(str(e))

    # stderr shares the terminal with curses
    if (cfg.frontend == "terminal" and args.log_file is None
            and getattr(logging, args.log_level) < logging.WARNING):
        parser.error(f"--log-level {args.log_level} needs --log-file with the terminal frontend")

    game = Game(cfg.height, cfg.width, rng=random.Random(cfg.seed))
    game.init()
    logger.info("Starting %s frontend, %d ms per tick", cfg.frontend, cfg.interval_ms)

    try:
        if cfg.frontend == "window":
            ticks = play_window(game, cfg)
        else:
            ticks = play_terminal(game, cfg)
    except ValueError as e:
        # raised before the first tick, e.g. a terminal too small for the board
        print(f"[SNAKE] {e}", file=sys.stderr)
        return 1

    print(f"[SNAKE] Quit after {ticks} ticks")
    return 0


if __name__ == "__main__":
    sys.exit(main())
