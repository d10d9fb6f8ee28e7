"""
Tests for the console UI and the command line entry point.
"""

import argparse

import pytest

import main
from logic.board import Marker
from logic.config import GameConfig
from logic.participant import Participant
from ui import ConsoleUI, join_or


def make_ui(answers):
    """A ConsoleUI reading from a list and writing into another."""
    answers = iter(answers)
    output = []
    asked = []

    def fake_input(prompt):
        asked.append(prompt)
        return next(answers)

    ui = ConsoleUI(clear=False, input_func=fake_input, output_func=output.append)
    return ui, asked, output


@pytest.mark.parametrize("items,expected", [
    ([], ""),
    (["A1"], "A1"),
    (["A1", "B1"], "A1 or B1"),
    (["A1", "B1", "C1"], "A1, B1, or C1"),
])
def test_join_or(items, expected):
    assert join_or(items) == expected


def test_join_or_custom_words():
    assert join_or(["X", "O", "Z"], "; ", "and") == "X; O; and Z"


def test_render_board(make_board):
    ui = ConsoleUI(clear=False)
    board = make_board(A1="X", B2="O", C3="X")

    assert ui.render(board) == "\n".join([
        "    A   B   C  ",
        "  +---+---+---+",
        "1 | X |   |   |",
        "  +---+---+---+",
        "2 |   | O |   |",
        "  +---+---+---+",
        "3 |   |   | X |",
        "  +---+---+---+",
    ])


def test_render_scores():
    ui = ConsoleUI(clear=False)
    human = Participant(Marker.X, name="Human", score=2)
    computer = Participant(Marker.O, name="Computer", score=3)

    lines = ui.render_scores([human, computer]).splitlines()

    assert lines[0] == "+" + "SCORE".center(33, "=") + "+"
    assert lines[1] == "|" + "Human".center(16) + "|" + "Computer".center(16) + "|"
    assert lines[2] == "+----------------+----------------+"
    assert lines[3] == "|" + "2".center(16) + "|" + "3".center(16) + "|"
    assert len({len(line) for line in lines}) == 1


def test_prompt_marker_choice_retries():
    ui, asked, output = make_ui(["Z", "", "o"])

    assert ui.prompt_marker_choice([Marker.X, Marker.O]) == Marker.O
    assert len(asked) == 3
    assert "X or O" in asked[0]
    assert output.count("Sorry, invalid choice.") == 2


def test_prompt_first_mover_choice():
    ui, asked, output = make_ui(["q", "x"])
    human = Participant(Marker.O, name="Human")
    computer = Participant(Marker.X, name="Computer")

    assert ui.prompt_first_mover_choice(human, computer) is computer
    assert "Who should go first?" in output
    assert output.count("Sorry, invalid choice.") == 1


def test_prompt_cell_choice_lists_squares():
    ui, asked, output = make_ui(["b2"])

    # Validation happens in the engine; the UI hands back the raw answer
    assert ui.prompt_cell_choice(["A1", "B2", "C3"]) == "b2"
    assert asked == ["Choose a square (A1, B2, or C3): "]


def test_prompt_yes_no():
    ui, asked, output = make_ui(["maybe", "Y"])

    assert ui.prompt_yes_no("Would you like to play again?") is True
    assert asked[0] == "Would you like to play again? (y/n) "
    assert "Sorry, must be y or n" in output


def test_clear_screen_disabled(monkeypatch):
    calls = []
    monkeypatch.setattr("ui.os.system", calls.append)

    ConsoleUI(clear=False).clear_screen()
    assert calls == []

    ConsoleUI(clear=True).clear_screen()
    assert len(calls) == 1


# ==================== COMMAND LINE ====================

def test_config_from_args_defaults():
    config = main.config_from_args(main.build_parser().parse_args([]))

    assert config.FIRST_MOVER == "choose"
    assert config.DIFFICULTY == "medium"
    assert config.GAMES_IN_SET == 5
    assert config.CLEAR_SCREEN is True
    assert config.RANDOM_SEED is None


def test_config_from_args_overrides():
    args = main.build_parser().parse_args(
        ["--first", "computer", "--difficulty", "hard", "--games", "3",
         "--name", "Ada", "--seed", "42", "--no-clear"]
    )
    config = main.config_from_args(args)

    assert config.FIRST_MOVER == "computer"
    assert config.DIFFICULTY == "hard"
    assert config.GAMES_IN_SET == 3
    assert config.HUMAN_NAME == "Ada"
    assert config.RANDOM_SEED == 42
    assert config.CLEAR_SCREEN is False


def test_config_rejects_unknown_options():
    with pytest.raises(AttributeError):
        GameConfig(GAMES=3)
    with pytest.raises(ValueError):
        GameConfig(GAMES_IN_SET=0)


def test_config_overrides_stay_on_the_instance():
    GameConfig(GAMES_IN_SET=2)
    assert GameConfig().GAMES_IN_SET == 5


def test_main_handles_end_of_input(monkeypatch, capsys):
    def no_input(prompt=""):
        raise EOFError

    monkeypatch.setattr("builtins.input", no_input)
    monkeypatch.setattr("ui.os.system", lambda command: 0)

    main.main(["--no-clear"])

    out = capsys.readouterr().out
    assert "Welcome to Tic Tac Toe!" in out
    assert "Game interrupted by user." in out
    assert "Goodbye!" in out


@pytest.mark.parametrize("games", ["0", "-2", "three"])
def test_bad_games_value_is_rejected(games, capsys):
    with pytest.raises(SystemExit):
        main.main(["--games", games, "--no-clear"])

    assert "--games" in capsys.readouterr().err


def test_positive_int():
    assert main.positive_int("3") == 3
    with pytest.raises(argparse.ArgumentTypeError):
        main.positive_int("0")


@pytest.mark.parametrize("level", ["root", "verbose"])
def test_unknown_log_level_is_rejected(level):
    with pytest.raises(SystemExit):
        main.build_parser().parse_args(["--log-level", level])


def test_log_level_is_case_insensitive():
    args = main.build_parser().parse_args(["--log-level", "debug"])
    assert args.log_level == "DEBUG"
