"""
TicTacToe vs AI
===============
Play TicTacToe against a human-like AI opponent, in a Tkinter window
or in the console.

The AI takes a winning move if it has one, blocks yours if you have
one, and otherwise plays a random empty cell.
"""

__version__ = "1.0.0"
