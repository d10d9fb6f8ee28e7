"""
The I/O boundary the match engine talks to.
The console UI implements it for real games; tests pass a scripted one.
"""

from typing import Protocol, Sequence, TYPE_CHECKING

if TYPE_CHECKING:
    from .board import Board, Marker
    from .participant import Participant


class GameIO(Protocol):
    """Everything the engine needs from the outside world."""

    def render(self, board: "Board") -> str:
        """Draw the board as text. Must not modify it."""
        ...

    def render_scores(self, participants: Sequence["Participant"]) -> str:
        """Draw the cumulative score table."""
        ...

    def prompt_marker_choice(self, options: Sequence["Marker"]) -> "Marker":
        """Block until the human picks one of the markers."""
        ...

    def prompt_first_mover_choice(
        self, first: "Participant", second: "Participant"
    ) -> "Participant":
        """Block until the human picks who moves first."""
        ...

    def prompt_cell_choice(self, valid_keys: Sequence[str]) -> str:
        """Ask for a square. The answer is raw text; the caller validates it."""
        ...

    def prompt_yes_no(self, question: str) -> bool:
        ...

    def announce(self, message: str = "") -> None:
        ...

    def clear_screen(self) -> None:
        ...
