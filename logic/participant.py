"""
Participants in a Tic Tac Toe match.

A Participant is a plain record (marker, name, score). How it picks a
square is up to its move source:
- HumanMoveSource asks through the I/O boundary until the answer is usable
- AIMoveSource asks the AI player
"""

import logging
from dataclasses import dataclass
from typing import Optional, Protocol

from .board import Board, Marker
from .boundary import GameIO
from .move_validator import MoveValidator
from .ai_player import AIPlayer

log = logging.getLogger(__name__)


class MoveSource(Protocol):
    def choose(self, board: Board, player: "Participant", opponent: "Participant") -> str:
        ...


class HumanMoveSource:
    """Prompts the human for a square; repeats until valid and unmarked."""

    def __init__(self, io: GameIO, validator: Optional[MoveValidator] = None):
        self.io = io
        self.validator = validator or MoveValidator()

    def choose(self, board: Board, player: "Participant", opponent: "Participant") -> str:
        while True:
            raw = self.io.prompt_cell_choice(self.validator.get_valid_moves(board))
            result = self.validator.validate_move(board, raw)
            if result.is_valid:
                return result.value
            log.debug("Rejected square %r from %s", raw, player.name)
            self.io.announce(result.error_message)


class AIMoveSource:
    """Delegates the choice to an AIPlayer."""

    def __init__(self, ai_player: AIPlayer):
        self.ai_player = ai_player

    def choose(self, board: Board, player: "Participant", opponent: "Participant") -> str:
        # The marker is chosen at match start, after the AI was built
        self.ai_player.marker = player.marker
        return self.ai_player.get_best_move(board, opponent.marker)


@dataclass(eq=False)
class Participant:
    """
    One side of the match.

    The score survives between rounds of a set and is only reset
    when the whole match restarts.
    """
    marker: Marker
    move_source: Optional[MoveSource] = None
    name: str = ""
    score: int = 0

    def update_score(self, board: Board) -> bool:
        """
        Count a round win if the board's complete line is ours.

        Returns:
            True if the score went up.
        """
        if board.winning_marker() == self.marker:
            self.score += 1
            return True
        return False

    def reset_score(self):
        self.score = 0

    def choose_move(self, board: Board, opponent: "Participant") -> str:
        if self.move_source is None:
            raise RuntimeError(f"{self.name or self.marker.value} has no move source")
        return self.move_source.choose(board, self, opponent)
