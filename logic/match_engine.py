"""
Match engine for Tic Tac Toe.

Runs a set of rounds between the human and the computer:
1. Human picks a marker (computer gets the other)
2. First mover is picked, unless the config fixes it
3. Participants alternate until a line is complete or the board is full
4. Scores are updated and shown
5. Repeat until someone reaches GAMES_IN_SET wins or the human stops
"""

import logging
import random
from enum import Enum
from typing import Optional, Union

from .board import Board, Marker
from .boundary import GameIO
from .config import GameConfig
from .move_validator import MoveValidator
from .ai_player import AIPlayer, Difficulty
from .participant import Participant, HumanMoveSource, AIMoveSource

log = logging.getLogger(__name__)


class MatchState(Enum):
    """Where the engine is in the match."""
    CHOOSING_MARKERS = "choosing_markers"
    CHOOSING_FIRST_MOVER = "choosing_first_mover"
    ROUND_IN_PROGRESS = "round_in_progress"
    ROUND_CONCLUDED = "round_concluded"
    NEXT_ROUND = "next_round"
    SET_CONCLUDED = "set_concluded"


class FirstMover(Enum):
    """Who opens each round."""
    HUMAN = "human"
    COMPUTER = "computer"
    CHOOSE = "choose"


class MatchEngine:
    """
    Owns the board and both participants and drives the match.

    All output goes through the injected GameIO; the engine never
    prints or reads input itself.
    """

    def __init__(
        self,
        io: GameIO,
        config: Optional[GameConfig] = None,
        ai_player: Optional[AIPlayer] = None,
        validator: Optional[MoveValidator] = None,
    ):
        """
        Initialize the match engine.

        Args:
            io: The I/O boundary (console UI or a test double).
            config: Match settings (default: GameConfig()).
            ai_player: The computer's brain (default: built from config).
            validator: Input validator for the human's squares.
        """
        self.io = io
        self.config = config or GameConfig()

        if ai_player is None:
            ai_player = AIPlayer(
                difficulty=Difficulty(self.config.DIFFICULTY),
                rng=random.Random(self.config.RANDOM_SEED),
            )

        self.board = Board()
        self.human = Participant(Marker.X, HumanMoveSource(io, validator))
        self.computer = Participant(Marker.O, AIMoveSource(ai_player))

        self.first_to_move: Optional[Participant] = None
        self.current_player: Optional[Participant] = None
        self.rounds_played = 0
        self.state = MatchState.CHOOSING_MARKERS

    # ==================== MATCH ====================

    def play(self, first_mover: Union[FirstMover, str, None] = None) -> Optional[Participant]:
        """
        Play a whole match.

        Args:
            first_mover: Overrides config.FIRST_MOVER for this match.

        Returns:
            The participant who won the set, or None if the human
            stopped before anyone reached GAMES_IN_SET.
        """
        first_mover = FirstMover(first_mover or self.config.FIRST_MOVER)
        self.restart()

        self.io.clear_screen()
        self.io.announce("Welcome to Tic Tac Toe!")
        self.human.name = self.config.HUMAN_NAME
        self.computer.name = self.config.COMPUTER_NAME

        self.choose_markers()

        if first_mover == FirstMover.CHOOSE:
            self.choose_first_mover()
        else:
            self.first_to_move = self.human if first_mover == FirstMover.HUMAN else self.computer
        self.current_player = self.first_to_move

        self.play_set()

        winner = self.set_winner()
        if winner is not None:
            self.display_set_result(winner)
        self.io.announce()
        self.io.announce("Thanks for playing Tic Tac Toe! Goodbye!")
        return winner

    def restart(self):
        """Full match restart: empty board, scores back to zero."""
        self.board.reset()
        self.human.reset_score()
        self.computer.reset_score()
        self.first_to_move = None
        self.current_player = None
        self.rounds_played = 0
        self._set_state(MatchState.CHOOSING_MARKERS)

    def _set_state(self, state: MatchState):
        log.debug("Match state %s -> %s", self.state.value, state.value)
        self.state = state

    # ==================== SETUP ====================

    def choose_markers(self):
        """Let the human pick a marker; the computer takes the other one."""
        self._set_state(MatchState.CHOOSING_MARKERS)
        marker = self.io.prompt_marker_choice([Marker.X, Marker.O])
        self.human.marker = marker
        self.computer.marker = marker.opposite()
        log.info("%s plays %s, %s plays %s", self.human.name, self.human.marker.value,
                 self.computer.name, self.computer.marker.value)

    def choose_first_mover(self):
        self._set_state(MatchState.CHOOSING_FIRST_MOVER)
        self.first_to_move = self.io.prompt_first_mover_choice(self.human, self.computer)
        log.info("%s moves first", self.first_to_move.name)

    # ==================== ROUNDS ====================

    def play_set(self):
        """Play rounds until the set is decided or the human stops."""
        while True:
            self.clear_screen_and_display_board()
            self.play_round()

            self._set_state(MatchState.ROUND_CONCLUDED)
            self.rounds_played += 1
            self.human.update_score(self.board)
            self.computer.update_score(self.board)
            self.display_round_result()
            self.display_score()

            if self.set_winner() is not None:
                break
            if not self.io.prompt_yes_no("Would you like to play again?"):
                break

            self._set_state(MatchState.NEXT_ROUND)
            self.reset_round()
            self.io.announce("Let's play again!")
            self.io.announce()

        self._set_state(MatchState.SET_CONCLUDED)

    def play_round(self):
        """Alternate moves until someone completes a line or the board is full."""
        self._set_state(MatchState.ROUND_IN_PROGRESS)
        while True:
            self.current_player_moves()
            if self.round_over():
                break
            self.clear_screen_and_display_board()

    def round_over(self) -> bool:
        return self.board.someone_won() or self.board.is_full()

    def current_player_moves(self):
        """Ask the current participant for a square, place it, pass the turn."""
        player = self.current_player
        opponent = self.opponent_of(player)

        key = player.choose_move(self.board, opponent)
        self.board.place(key, player.marker)
        log.debug("%s (%s) -> %s", player.name, player.marker.value, key)

        self.current_player = opponent

    def reset_round(self):
        """Empty the board for the next round. Scores are kept."""
        self.board.reset()
        self.current_player = self.first_to_move
        self.io.clear_screen()

    def opponent_of(self, player: Participant) -> Participant:
        return self.computer if player is self.human else self.human

    def set_winner(self) -> Optional[Participant]:
        """The participant who reached GAMES_IN_SET round wins, if any."""
        for player in (self.human, self.computer):
            if player.score >= self.config.GAMES_IN_SET:
                return player
        return None

    # ==================== DISPLAY ====================

    def display_board(self):
        self.io.announce(
            f"{self.human.name}'s marker is {self.human.marker.value}. "
            f"{self.computer.name}'s marker is {self.computer.marker.value}."
        )
        self.io.announce()
        self.io.announce(self.io.render(self.board))
        self.io.announce()

    def clear_screen_and_display_board(self):
        self.io.clear_screen()
        self.display_board()

    def display_round_result(self):
        self.clear_screen_and_display_board()

        winner = self.board.winning_marker()
        if winner == self.human.marker:
            self.io.announce("You won the game!")
        elif winner == self.computer.marker:
            self.io.announce(f"{self.computer.name} won the game!")
        else:
            self.io.announce("The game is a tie!")

    def display_score(self):
        self.io.announce()
        self.io.announce(self.io.render_scores([self.human, self.computer]))

    def display_set_result(self, winner: Participant):
        self.io.announce()
        if winner is self.human:
            self.io.announce("You won the set!!!")
        else:
            self.io.announce(f"{winner.name} won the set!!!")
