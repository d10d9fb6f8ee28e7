"""
Move validator for Tic Tac Toe.
Checks raw player input (cell keys, marker letters, yes/no answers)
before it reaches the board.
"""

from typing import Optional, Sequence
from dataclasses import dataclass

from .board import Board, Marker


@dataclass
class ValidationResult:
    """Result of validating one piece of input."""
    is_valid: bool
    error_message: Optional[str] = None
    value: object = None


INVALID_SQUARE_MESSAGE = "Sorry, that's not a valid choice."
INVALID_CHOICE_MESSAGE = "Sorry, invalid choice."
INVALID_YES_NO_MESSAGE = "Sorry, must be y or n"


class MoveValidator:
    """
    Validates Tic Tac Toe input.

    Rules:
    1. A square must be one of the 9 board keys
    2. A square must be unmarked
    3. A marker must be one of the offered markers
    4. A yes/no answer must be y or n
    """

    @staticmethod
    def normalize_key(raw: str) -> str:
        """Turn ' b2 ' into 'B2'."""
        return (raw or "").strip().upper()

    def validate_move(self, board: Board, raw_key: str) -> ValidationResult:
        """
        Validate a square choice.

        Args:
            board: Current board.
            raw_key: The square as typed by the player.

        Returns:
            ValidationResult with the normalized key as value when valid.
        """
        key = self.normalize_key(raw_key)

        if not board.is_valid_key(key):
            return ValidationResult(
                is_valid=False,
                error_message=INVALID_SQUARE_MESSAGE,
            )

        if board.is_marked(key):
            return ValidationResult(
                is_valid=False,
                error_message=INVALID_SQUARE_MESSAGE,
            )

        return ValidationResult(is_valid=True, value=key)

    def validate_marker(
        self,
        raw: str,
        options: Sequence[Marker] = (Marker.X, Marker.O),
    ) -> ValidationResult:
        """Validate a marker letter against the offered markers."""
        letter = self.normalize_key(raw)
        for marker in options:
            if marker.value == letter:
                return ValidationResult(is_valid=True, value=marker)

        return ValidationResult(
            is_valid=False,
            error_message=INVALID_CHOICE_MESSAGE,
        )

    def validate_yes_no(self, raw: str) -> ValidationResult:
        """Validate a y/n answer. The value is True for yes."""
        answer = (raw or "").strip().lower()
        if answer in ("y", "n"):
            return ValidationResult(is_valid=True, value=answer == "y")

        return ValidationResult(
            is_valid=False,
            error_message=INVALID_YES_NO_MESSAGE,
        )

    def get_valid_moves(self, board: Board):
        """Get all squares a player may choose right now."""
        return board.unmarked_keys()
