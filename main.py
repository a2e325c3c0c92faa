from __future__ import annotations

import argparse
import logging

from console.schemas import SessionSettings
from console.session import ConsoleSession


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play two-player checkers in the console.")
    parser.add_argument("--red", default=None, help="Red player's name (skips the prompt).")
    parser.add_argument("--black", default=None, help="Black player's name (skips the prompt).")
    parser.add_argument("--no-board", action="store_true", help="Do not print the board every turn.")
    parser.add_argument("--log-level", default="warning", help="Logging level for engine diagnostics.")
    return parser.parse_args(argv)


def build_settings(args: argparse.Namespace) -> SessionSettings:
    return SessionSettings(
        red_name=args.red,
        black_name=args.black,
        show_board=not args.no_board,
        log_level=args.log_level.lower(),
    )


def main(argv: list[str] | None = None) -> None:
    settings = build_settings(parse_args(argv))
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    ConsoleSession(settings).run()


if __name__ == "__main__":
    main()
