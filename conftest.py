"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

import pytest

from tictactoe.logic.engine import GameEngine
from tictactoe.logic.game_state import Player


class ScriptedRandom:
    """
    Stands in for random.Random; choice() follows a script.

    Each call to choice() pops the next index from `picks` (modulo the
    sequence length); once the script runs out it always picks the first
    element.
    """

    def __init__(self, picks=()):
        self.picks = list(picks)

    def choice(self, seq):
        if self.picks:
            return seq[self.picks.pop(0) % len(seq)]
        return seq[0]


def parse_board(text):
    """Build a board from a 9-character string like 'XX.O.....'."""
    marks = {"X": Player.X, "O": Player.O, ".": None}
    assert len(text) == 9
    return [marks[ch] for ch in text]


@pytest.fixture
def scripted_random():
    """Factory for ScriptedRandom instances."""
    return ScriptedRandom


@pytest.fixture
def engine() -> GameEngine:
    """Engine where the human (X) always starts and the AI plays O."""
    return GameEngine(ai_player=Player.O, rng=ScriptedRandom())


@pytest.fixture
def ai_first_engine() -> GameEngine:
    """Engine where the AI (O) starts."""
    return GameEngine(ai_player=Player.O, rng=ScriptedRandom([1]))
