from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

from pydantic import ValidationError

from checkers.game import Game
from checkers.pieces import Side
from checkers.player import PlayerRoster

from .render import render_board, render_recent_move, render_scores
from .schemas import MoveCommand, SessionSettings

logger = logging.getLogger(__name__)

QUIT_SYMBOLS = {"Q"}
FAREWELL = "Thanks for playing! Hope you had fun! Goodbye."


class ConsoleSession:
    """Line-oriented console loop around a single ``Game``."""

    def __init__(
        self,
        settings: Optional[SessionSettings] = None,
        *,
        game: Optional[Game] = None,
        roster: Optional[PlayerRoster] = None,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
    ) -> None:
        self.settings = settings if settings is not None else SessionSettings()
        self.game = game if game is not None else Game()
        self.roster = roster if roster is not None else PlayerRoster()
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout

    # public API ---------------------------------------------------------

    def run(self) -> None:
        if not self.register_players():
            self._write(FAREWELL)
            return
        while self.play_turn():
            pass
        self._write(FAREWELL)

    def register_players(self) -> bool:
        for side, preset in (
            (Side.RED, self.settings.red_name),
            (Side.BLACK, self.settings.black_name),
        ):
            label = "Red" if side is Side.RED else "Black"
            name = preset
            while name is None:
                answer = self._prompt(f"Enter {label} Player's name: ")
                if answer is None:
                    return False
                if answer.strip():
                    name = answer
            self.roster.register(side, name)
            logger.info("Registered %s player %r", label.lower(), name)
        return True

    def play_turn(self) -> bool:
        """Run one prompt cycle. Returns ``False`` once the session should end."""
        if self.settings.show_board:
            self._write(render_board(self.game.boardSnapshot()))
        self._write(render_scores(self.game, self.roster))

        player = self._prompt("Enter the player (R for Red, B for Black, Q to quit): ")
        if player is None or player.strip().upper() in QUIT_SYMBOLS:
            return False

        coordinates = self._prompt("Enter move coordinates (x1 y1 x2 y2): ")
        if coordinates is None:
            return False

        try:
            command = MoveCommand.from_input(player, coordinates)
        except (ValidationError, ValueError) as exc:
            logger.debug("Unparseable move input %r %r: %s", player, coordinates, exc)
            self._write("Invalid input. Try again.")
            return True

        if self.game.applyMove(*command.as_args()):
            self._write("Move made successfully!")
            self._write(render_recent_move(self.game))
        else:
            self._write("Invalid move. Try again.")
        return True

    # helpers ------------------------------------------------------------

    def _prompt(self, text: str) -> Optional[str]:
        self.stdout.write(text)
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            return None
        return line.strip()

    def _write(self, text: str) -> None:
        self.stdout.write(text + "\n")
