"""
Game configuration for Tic Tac Toe.
Defaults for the set, the participants and the console.
"""


class GameConfig:
    """
    Configuration for a Tic Tac Toe match.

    Class attributes are the defaults. Override any of them per instance:

        config = GameConfig(GAMES_IN_SET=3, FIRST_MOVER="human")
    """

    # ==================== SET SETTINGS ====================
    # Round wins needed to take the set
    GAMES_IN_SET = 5

    # Who moves first in every round: "human", "computer" or "choose"
    # ("choose" asks once per match)
    FIRST_MOVER = "choose"

    # ==================== PARTICIPANTS ====================
    HUMAN_NAME = "Human"
    COMPUTER_NAME = "Computer"

    # Computer strength: "easy" (random), "medium" (heuristic), "hard" (minimax)
    DIFFICULTY = "medium"

    # Seed for the computer's random choices (None = not reproducible)
    RANDOM_SEED = None

    # ==================== CONSOLE ====================
    # Clear the terminal between moves
    CLEAR_SCREEN = True

    def __init__(self, **overrides):
        for name, value in overrides.items():
            if not name.isupper() or not hasattr(type(self), name):
                raise AttributeError(f"Unknown config option: {name}")
            setattr(self, name, value)

        if int(self.GAMES_IN_SET) < 1:
            raise ValueError(f"GAMES_IN_SET must be at least 1, got {self.GAMES_IN_SET}")

    def __repr__(self) -> str:
        options = {
            name: getattr(self, name)
            for name in dir(type(self))
            if name.isupper()
        }
        return f"GameConfig({options})"
