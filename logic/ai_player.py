"""
AI player for Tic Tac Toe.
Picks the computer's square: a fixed priority heuristic by default,
with random and Minimax alternatives for other difficulty levels.
"""

import logging
import random
from enum import Enum
from typing import Callable, Optional, Sequence

from .board import Board, Marker, CENTER_KEY
from .win_checker import WinChecker

log = logging.getLogger(__name__)


class Difficulty(Enum):
    """AI difficulty levels."""
    EASY = "easy"        # Random moves
    MEDIUM = "medium"    # Center, win, block, else random
    HARD = "hard"        # Full minimax


def choose_move(
    board: Board,
    marker: Marker,
    opponent_marker: Marker,
    pick: Callable[[Sequence[str]], str] = random.choice,
) -> str:
    """
    Choose a square with the fixed priority heuristic.

    First rule that applies wins:
    1. Take the center if it is free
    2. Complete a line we already hold two of
    3. Block a line the opponent holds two of
    4. Any free square, chosen by `pick`

    Args:
        board: Current board (not modified).
        marker: The marker we play.
        opponent_marker: The marker the opponent plays.
        pick: Chooses among the free squares for rule 4.

    Returns:
        The chosen cell key.

    Raises:
        ValueError: If the board is full.
    """
    unmarked = board.unmarked_keys()
    if not unmarked:
        raise ValueError("No unmarked squares left to choose from")

    if CENTER_KEY in unmarked:
        log.debug("Policy: center %s", CENTER_KEY)
        return CENTER_KEY

    own_line = board.line_dominated_by(marker)
    if own_line is not None:
        key = board.available_key_in_line(own_line)
        log.debug("Policy: completing %s at %s", own_line, key)
        return key

    opponent_line = board.line_dominated_by(opponent_marker)
    if opponent_line is not None:
        key = board.available_key_in_line(opponent_line)
        log.debug("Policy: blocking %s at %s", opponent_line, key)
        return key

    key = pick(unmarked)
    log.debug("Policy: random square %s", key)
    return key


class AIPlayer:
    """
    The computer participant's brain.

    MEDIUM (the default) plays the priority heuristic from choose_move().
    EASY picks any free square. HARD searches the whole game tree with
    Minimax and alpha-beta pruning, so it never loses.
    """

    def __init__(
        self,
        marker: Marker = Marker.O,
        difficulty: Difficulty = Difficulty.MEDIUM,
        rng: Optional[random.Random] = None,
    ):
        """
        Initialize the AI player.

        Args:
            marker: Which marker the AI plays (default: O)
            difficulty: How the AI picks its squares.
            rng: Random source for random choices; pass a seeded one
                for reproducible games.
        """
        self.marker = marker
        self.difficulty = difficulty
        self.rng = rng or random.Random()
        self.win_checker = WinChecker()

        # Keep track of how many positions we've evaluated (for debugging)
        self.moves_evaluated = 0

    def get_best_move(
        self,
        board: Board,
        opponent_marker: Optional[Marker] = None,
    ) -> str:
        """
        Get the square to play on the current board.

        Args:
            board: Current board.
            opponent_marker: The other participant's marker
                (default: the opposite of ours).

        Returns:
            The chosen cell key.

        Raises:
            ValueError: If the board is full.
        """
        opponent_marker = opponent_marker or self.marker.opposite()

        if self.difficulty == Difficulty.EASY:
            valid_moves = board.unmarked_keys()
            if not valid_moves:
                raise ValueError("No unmarked squares left to choose from")
            return self.rng.choice(valid_moves)

        if self.difficulty == Difficulty.HARD:
            return self._get_minimax_move(board, opponent_marker)

        return choose_move(board, self.marker, opponent_marker, pick=self.rng.choice)

    def _get_minimax_move(self, board: Board, opponent_marker: Marker) -> str:
        self.moves_evaluated = 0

        valid_moves = board.unmarked_keys()
        if not valid_moves:
            raise ValueError("No unmarked squares left to choose from")

        # Special case: if only one move, just take it
        if len(valid_moves) == 1:
            return valid_moves[0]

        # Special case: empty board, the center is as good as any
        if len(valid_moves) == 9:
            return CENTER_KEY

        best_score = float('-inf')
        best_move = valid_moves[0]

        for key in valid_moves:
            new_board = board.copy()
            new_board.place(key, self.marker)

            score = self._minimax(
                new_board, opponent_marker, depth=len(valid_moves) - 1, is_maximizing=False
            )

            if score > best_score:
                best_score = score
                best_move = key

        log.debug(
            "AI evaluated %d positions. Best move: %s (score: %s)",
            self.moves_evaluated, best_move, best_score,
        )
        return best_move

    def _minimax(
        self,
        board: Board,
        opponent_marker: Marker,
        depth: int,
        is_maximizing: bool,
        alpha: float = float('-inf'),
        beta: float = float('inf'),
    ) -> float:
        """
        Minimax algorithm with alpha-beta pruning.

        Args:
            board: Position to evaluate.
            opponent_marker: The other participant's marker.
            depth: Moves left to search.
            is_maximizing: True if it is our move.
            alpha: Alpha value for pruning.
            beta: Beta value for pruning.

        Returns:
            The score of the position.
        """
        self.moves_evaluated += 1

        winner = self.win_checker.check_winner(board)

        if winner == self.marker:
            return 10 + depth  # Win (prefer faster wins)
        elif winner == opponent_marker:
            return -10 - depth  # Loss (prefer slower losses)
        elif self.win_checker.check_draw(board) or depth == 0:
            return 0

        to_move = self.marker if is_maximizing else opponent_marker

        if is_maximizing:
            max_score = float('-inf')
            for key in board.unmarked_keys():
                new_board = board.copy()
                new_board.place(key, to_move)
                score = self._minimax(new_board, opponent_marker, depth - 1, False, alpha, beta)
                max_score = max(max_score, score)
                alpha = max(alpha, score)
                if beta <= alpha:
                    break  # Prune
            return max_score
        else:
            min_score = float('inf')
            for key in board.unmarked_keys():
                new_board = board.copy()
                new_board.place(key, to_move)
                score = self._minimax(new_board, opponent_marker, depth - 1, True, alpha, beta)
                min_score = min(min_score, score)
                beta = min(beta, score)
                if beta <= alpha:
                    break  # Prune
            return min_score
