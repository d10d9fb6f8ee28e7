"""
Win checker for Tic Tac Toe.
Finds completed lines (wins) and lines one move away from completion (threats).
"""

from typing import Optional, List, Tuple, Sequence, TYPE_CHECKING

if TYPE_CHECKING:
    from .board import Board, Marker

Line = Tuple[str, str, str]

# All possible winning lines, in the order they are checked
WINNING_LINES: Tuple[Line, ...] = (
    # Rows
    ("A1", "B1", "C1"),
    ("A2", "B2", "C2"),
    ("A3", "B3", "C3"),
    # Columns
    ("A1", "A2", "A3"),
    ("B1", "B2", "B3"),
    ("C1", "C2", "C3"),
    # Diagonals
    ("A1", "B2", "C3"),
    ("C1", "B2", "A3"),
)


def count_identical_markers(markers: Sequence[Optional["Marker"]]) -> int:
    """
    Count the marked cells of a line if they all hold the same marker.

    Args:
        markers: The markers along a line (None for unmarked cells).

    Returns:
        0 if nothing is marked or two different markers are present,
        otherwise the number of marked cells.
    """
    marked = [m for m in markers if m is not None]
    if not marked:
        return 0
    if all(m == marked[0] for m in marked):
        return len(marked)
    return 0


class WinChecker:
    """
    Checks for win conditions in Tic Tac Toe.

    Win condition: 3 cells of a line holding the same marker
    (horizontally, vertically, or diagonally)
    """

    WINNING_LINES = WINNING_LINES

    def check_winner(self, board: "Board") -> Optional["Marker"]:
        """
        Check if there's a winner.

        Args:
            board: The board to inspect.

        Returns:
            The winning Marker, or None if no line is complete.
        """
        line = self.get_winning_line(board)
        if line is None:
            return None
        return board.get(line[0])

    def get_winning_line(self, board: "Board") -> Optional[Line]:
        """Get the first complete line, or None."""
        for line in self.WINNING_LINES:
            if count_identical_markers(board.markers_in(line)) == 3:
                return line
        return None

    def threatened_lines(self, board: "Board") -> List[Line]:
        """
        Get every line that one more marker would complete.

        A line qualifies when two cells share a marker and the third is
        unmarked. A line already blocked by the other marker never counts.

        Args:
            board: The board to inspect.

        Returns:
            Matching lines, in WINNING_LINES order.
        """
        threatened = []
        for line in self.WINNING_LINES:
            markers = board.markers_in(line)
            if count_identical_markers(markers) == 2 and None in markers:
                threatened.append(line)
        return threatened

    def check_draw(self, board: "Board") -> bool:
        """A draw is a full board with no complete line."""
        return board.is_full() and self.check_winner(board) is None
