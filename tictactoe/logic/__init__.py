"""
Logic module for TicTacToe vs AI.
Handles game state, rules, and the AI opponent.
"""

from .game_state import GameState, GameStatus, Move, Player, WINNING_LINES
from .move_validator import MoveValidator, ValidationResult
from .win_checker import WinChecker
from .ai_player import AIPlayer
from .engine import GameEngine
