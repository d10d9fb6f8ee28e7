"""
Shared pytest fixtures for the Tic Tac Toe tests.
"""

from collections import deque

import pytest

from logic.board import Board, Marker


class ScriptedIO:
    """
    I/O boundary fed from queued answers.

    Every announcement is recorded. Running out of answers raises
    IndexError, so an unexpected extra prompt fails the test.
    """

    def __init__(self, markers=(), first_movers=(), cells=(), answers=()):
        self.markers = deque(markers)
        self.first_movers = deque(first_movers)
        self.cells = deque(cells)
        self.answers = deque(answers)

        self.messages = []
        self.questions = []
        self.cell_prompts = []
        self.clears = 0

    def render(self, board):
        return repr(board)

    def render_scores(self, participants):
        return " ".join(f"{p.name}={p.score}" for p in participants)

    def prompt_marker_choice(self, options):
        return self.markers.popleft()

    def prompt_first_mover_choice(self, first, second):
        marker = self.first_movers.popleft()
        return first if marker == first.marker else second

    def prompt_cell_choice(self, valid_keys):
        self.cell_prompts.append(list(valid_keys))
        return self.cells.popleft()

    def prompt_yes_no(self, question):
        self.questions.append(question)
        return self.answers.popleft()

    def announce(self, message=""):
        self.messages.append(message)

    def clear_screen(self):
        self.clears += 1


class FirstChoice:
    """Stand-in for random.Random that always picks the first option."""

    def choice(self, seq):
        return seq[0]


def build_board(**cells) -> Board:
    """Build a board from keyword cells, e.g. build_board(A1="X", B2="O")."""
    board = Board()
    for key, value in cells.items():
        board.place(key, Marker(value))
    return board


@pytest.fixture
def board():
    return Board()


@pytest.fixture
def scripted_io():
    return ScriptedIO


@pytest.fixture
def make_board():
    return build_board


@pytest.fixture
def first_choice():
    return FirstChoice()
