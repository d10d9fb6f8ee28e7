"""
Logic module for Tic Tac Toe.
Handles the board, participants, the computer's moves and the match flow.
"""

__version__ = "1.0.0"

from .board import Board, Cell, Marker, InvalidCellError, CELL_KEYS, CENTER_KEY
from .win_checker import WinChecker, WINNING_LINES
from .move_validator import MoveValidator, ValidationResult
from .ai_player import AIPlayer, Difficulty, choose_move
from .participant import Participant, HumanMoveSource, AIMoveSource
from .config import GameConfig
from .match_engine import MatchEngine, MatchState, FirstMover
