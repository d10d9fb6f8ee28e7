"""
Board state for Tic Tac Toe.
Tracks the 9 cells, which marker sits in each, and the lines through them.
"""

from enum import Enum
from typing import Optional, List, Tuple, Dict
from dataclasses import dataclass

from .win_checker import WinChecker, Line


class Marker(Enum):
    """The two markers a participant can play."""
    X = "X"
    O = "O"

    def opposite(self) -> "Marker":
        """Get the other marker."""
        return Marker.O if self == Marker.X else Marker.X


# Columns A-C, rows 1-3, listed row by row
CELL_KEYS: Tuple[str, ...] = tuple(
    f"{col}{row}" for row in "123" for col in "ABC"
)
CENTER_KEY = "B2"


class InvalidCellError(LookupError):
    """Raised when a cell key is not one of the 9 board keys."""

    def __init__(self, key):
        super().__init__(f"Invalid cell key: {key!r}")
        self.key = key


@dataclass
class Cell:
    """One square of the board. None means unmarked."""
    marker: Optional[Marker] = None

    def is_marked(self) -> bool:
        return self.marker is not None

    def is_unmarked(self) -> bool:
        return self.marker is None

    def __str__(self) -> str:
        return self.marker.value if self.marker else " "


class Board:
    """
    The 3x3 Tic Tac Toe board.

    The key set is fixed at construction; reset() only clears markers.
    Line scans (wins and threats) are delegated to WinChecker.
    """

    def __init__(self):
        self._cells: Dict[str, Cell] = {key: Cell() for key in CELL_KEYS}
        self._checker = WinChecker()

    def cell(self, key: str) -> Cell:
        """
        Get the Cell behind a key.

        Raises:
            InvalidCellError: If the key is not a board key.
        """
        try:
            return self._cells[key]
        except (KeyError, TypeError):
            raise InvalidCellError(key) from None

    def place(self, key: str, marker: Marker):
        """
        Put a marker in a cell.

        Overwrites whatever was there; callers check is_marked() first.

        Raises:
            InvalidCellError: If the key is not a board key.
        """
        self.cell(key).marker = marker

    def get(self, key: str) -> Optional[Marker]:
        """Get the marker in a cell, or None if it is unmarked."""
        return self.cell(key).marker

    def is_valid_key(self, key: str) -> bool:
        """Check whether a key is one of the 9 board keys."""
        return key in self._cells

    def is_marked(self, key: str) -> bool:
        """
        Check whether a cell holds a marker.

        Args:
            key: The cell key.

        Returns:
            True if marked. Unknown keys count as unmarked.
        """
        cell = self._cells.get(key)
        return cell is not None and cell.is_marked()

    def marked_keys(self) -> List[str]:
        """Get the marked keys, in CELL_KEYS order."""
        return [key for key in CELL_KEYS if self._cells[key].is_marked()]

    def unmarked_keys(self) -> List[str]:
        """Get the unmarked keys, in CELL_KEYS order."""
        return [key for key in CELL_KEYS if self._cells[key].is_unmarked()]

    def is_full(self) -> bool:
        """True when no unmarked cell is left."""
        return not self.unmarked_keys()

    def markers_in(self, line: Line) -> List[Optional[Marker]]:
        """Get the markers along a line, in the line's own order."""
        return [self.get(key) for key in line]

    def threatened_lines(self) -> List[Line]:
        """Lines with two identical markers and one unmarked cell."""
        return self._checker.threatened_lines(self)

    def line_dominated_by(self, marker: Marker) -> Optional[Line]:
        """
        Get the first threatened line held by the given marker.

        Args:
            marker: The marker of the participant to look for.

        Returns:
            The line, or None if that marker threatens no line.
        """
        for line in self.threatened_lines():
            if marker in self.markers_in(line):
                return line
        return None

    def available_key_in_line(self, line: Line) -> Optional[str]:
        """Get the first unmarked key along a line, or None if it is full."""
        for key in line:
            if not self.is_marked(key):
                return key
        return None

    def winning_marker(self) -> Optional[Marker]:
        return self._checker.check_winner(self)

    def winning_line(self) -> Optional[Line]:
        return self._checker.get_winning_line(self)

    def someone_won(self) -> bool:
        return self.winning_marker() is not None

    def reset(self):
        """Clear every cell. The key set stays the same."""
        for cell in self._cells.values():
            cell.marker = None

    def copy(self) -> "Board":
        """Create an independent copy of the board."""
        new_board = Board()
        for key in self.marked_keys():
            new_board.place(key, self.get(key))
        return new_board

    def __repr__(self) -> str:
        cells = "".join(str(self._cells[key]) for key in CELL_KEYS)
        return f"Board({cells!r})"
