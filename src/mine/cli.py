"""
Command line entry point.

Usage:
    mine [--width N] [--height N] [--mines N]
    mine --preset {beginner,intermediate,expert}
    mine HEIGHT WIDTH MINES
    mine --prompt
"""
import argparse
import logging
import random
import sys
import termios
from typing import List, Optional

from rich.console import Console

from .game import Field, FieldConfig, GameState, InvalidConfiguration, PRESETS
from .tui import Game, KeyReader, cbreak_mode, prompt_config, terminal_session, welcome

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_TERMINAL = 1
EXIT_INTERRUPTED = 130


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mine",
        description="Mine: a minesweeper game for the terminal.",
    )
    parser.add_argument(
        "dimensions", nargs="*", type=int, metavar="HEIGHT WIDTH MINES",
        help="Field height, width and number of mines",
    )
    parser.add_argument("--width", type=int, default=None, help="Field width (default: 9)")
    parser.add_argument("--height", type=int, default=None, help="Field height (default: 9)")
    parser.add_argument(
        "-m", "--mines", type=int, default=None,
        help="Number of mines to place (default: 10)",
    )
    parser.add_argument(
        "--preset", choices=sorted(PRESETS), default="beginner",
        help="Start from a difficulty preset",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for the mine layout")
    parser.add_argument(
        "--prompt", action="store_true",
        help="Show the welcome screen and optionally ask for field parameters "
        "(skipped when HEIGHT WIDTH MINES are given)",
    )
    parser.add_argument("--log-file", default=None, help="Write log records to this file")
    parser.add_argument(
        "--log-level", default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level for --log-file (default: INFO)",
    )
    return parser


def configure_logging(log_file: Optional[str], level: str) -> None:
    """Log to a file when asked; otherwise only warnings reach stderr."""
    if log_file:
        logging.basicConfig(
            filename=log_file,
            level=getattr(logging, level),
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
    else:
        logging.basicConfig(level=logging.WARNING, format="%(levelname)s: %(message)s")


def resolve_config(
    args: argparse.Namespace, parser: argparse.ArgumentParser
) -> FieldConfig:
    """
    Build the field configuration from parsed arguments.

    Positional dimensions win over --height/--width/--mines, which win
    over the preset. Invalid values end the program with a usage error.
    """
    preset = PRESETS[args.preset]
    height = preset.height if args.height is None else args.height
    width = preset.width if args.width is None else args.width
    mines = preset.mines if args.mines is None else args.mines

    if args.dimensions:
        if len(args.dimensions) != 3:
            parser.error("positional arguments must be HEIGHT WIDTH MINES")
        height, width, mines = args.dimensions

    try:
        return FieldConfig(height, width, mines)
    except InvalidConfiguration as exc:
        parser.error(str(exc))


def play(config: FieldConfig, rng: random.Random, ask: bool, console: Console) -> GameState:
    reader = KeyReader(sys.stdin)
    if ask:
        with cbreak_mode(sys.stdin):
            custom = welcome(console, reader)
        if custom:
            config = prompt_config(console)

    field = Field(config, rng)
    with terminal_session(console, sys.stdin):
        return Game(field, reader, console).run()


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_file, args.log_level)
    config = resolve_config(args, parser)
    rng = random.Random(args.seed) if args.seed is not None else random.Random()

    console = Console()
    try:
        state = play(config, rng, args.prompt and not args.dimensions, console)
    except (termios.error, OSError) as exc:
        logger.error("Terminal unavailable: %s", exc)
        console.print(f"[red]mine: stdin is not a terminal ({exc})[/red]")
        return EXIT_TERMINAL
    except KeyboardInterrupt:
        return EXIT_INTERRUPTED

    logger.info("Session ended: %s", state.name)
    console.print("Thanks for playing!")
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
