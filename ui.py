"""
Tic Tac Toe console UI.
A text interface for the match engine: draws the board and the score
table, and reads the human's choices from the terminal.

Shows:
- The board with column letters A-C and row numbers 1-3
- The score table after every round
- Prompts for marker, first mover, squares and "play again?"
"""

import os
from typing import Callable, Optional, Sequence

from logic.board import Board, Marker
from logic.move_validator import MoveValidator
from logic.participant import Participant


def join_or(items: Sequence[str], delimiter: str = ", ", final_join: str = "or") -> str:
    """
    Join choices for a prompt.

    ["A1"] -> "A1", ["A1", "B1"] -> "A1 or B1",
    ["A1", "B1", "C1"] -> "A1, B1, or C1"
    """
    items = [str(item) for item in items]
    if not items:
        return ""
    if len(items) == 1:
        return items[0]
    if len(items) == 2:
        return f" {final_join} ".join(items)
    return delimiter.join(items[:-1] + [f"{final_join} {items[-1]}"])


class ConsoleUI:
    """
    Terminal implementation of the engine's I/O boundary.

    Input and output functions are injectable so the UI can be
    driven without a real terminal.
    """

    SCORE_COLUMN_WIDTH = 16

    def __init__(
        self,
        clear: bool = True,
        input_func: Optional[Callable[[str], str]] = None,
        output_func: Optional[Callable[[str], None]] = None,
        validator: Optional[MoveValidator] = None,
    ):
        self.clear = clear
        self.input_func = input_func or input
        self.output_func = output_func or print
        self.validator = validator or MoveValidator()

    # ==================== OUTPUT ====================

    def announce(self, message: str = ""):
        self.output_func(message)

    def clear_screen(self):
        if self.clear:
            os.system("cls" if os.name == "nt" else "clear")

    def render(self, board: Board) -> str:
        """Draw the board as text."""
        separator = "  +---+---+---+"
        lines = ["    A   B   C  ", separator]
        for row in "123":
            cells = " | ".join(str(board.cell(f"{col}{row}")) for col in "ABC")
            lines.append(f"{row} | {cells} |")
            lines.append(separator)
        return "\n".join(lines)

    def render_scores(self, participants: Sequence[Participant]) -> str:
        """Draw the score table, one column per participant."""
        width = self.SCORE_COLUMN_WIDTH
        total = width * len(participants) + len(participants) - 1
        rule = "+" + "+".join("-" * width for _ in participants) + "+"

        names = "|" + "|".join(p.name.center(width) for p in participants) + "|"
        scores = "|" + "|".join(str(p.score).center(width) for p in participants) + "|"

        return "\n".join([
            "+" + "SCORE".center(total, "=") + "+",
            names,
            rule,
            scores,
            rule,
        ])

    # ==================== INPUT ====================

    def _ask(self, question: str) -> str:
        return self.input_func(question + " ")

    def prompt_marker_choice(self, options: Sequence[Marker]) -> Marker:
        letters = join_or([m.value for m in options])
        while True:
            self.announce()
            result = self.validator.validate_marker(
                self._ask(f"Which player do you want to be? {letters}?"), options
            )
            if result.is_valid:
                return result.value
            self.announce()
            self.announce(result.error_message)

    def prompt_first_mover_choice(self, first: Participant, second: Participant) -> Participant:
        options = [first.marker, second.marker]
        while True:
            self.announce()
            self.announce("Who should go first?")
            result = self.validator.validate_marker(
                self._ask(f"Choose: {first.marker.value} or {second.marker.value}"), options
            )
            if result.is_valid:
                return first if result.value == first.marker else second
            self.announce()
            self.announce(result.error_message)

    def prompt_cell_choice(self, valid_keys: Sequence[str]) -> str:
        return self._ask(f"Choose a square ({join_or(valid_keys)}):")

    def prompt_yes_no(self, question: str) -> bool:
        while True:
            self.announce()
            result = self.validator.validate_yes_no(self._ask(f"{question} (y/n)"))
            if result.is_valid:
                return result.value
            self.announce(result.error_message)
