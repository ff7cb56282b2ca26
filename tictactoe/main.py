"""
Main entry point for TicTacToe vs AI.

Launches the Tkinter window by default, or a console game with --no-ui.

Run this script to play TicTacToe against the AI!
"""

import argparse
import logging
import random
from typing import Callable, Optional

from .config import GameConfig
from .logic.engine import GameEngine
from .logic.game_state import GameStatus, Player

logger = logging.getLogger(__name__)


class ConsoleGame:
    """
    Plays TicTacToe in the terminal.

    Game flow:
    1. If the AI starts, it moves right away
    2. Human types a cell number (0-8)
    3. AI answers
    4. Repeat until someone wins or it's a draw
    5. Human can reset ('r') or quit ('q') at any prompt
    """

    def __init__(
        self,
        engine: GameEngine,
        input_func: Callable[[str], str] = input,
        output_func: Callable[..., None] = print
    ):
        self.engine = engine
        self.input = input_func
        self.output = output_func

    def _show_board(self):
        state = self.engine.get_state()
        self.output()
        self.output(state.format_board())

    def _show_result(self):
        status = self.engine.get_status()
        if status == GameStatus.WON:
            if self.engine.get_winner() == self.engine.get_ai_player():
                self.output("\n🤖 AI wins! Better luck next time!")
            else:
                self.output("\n🎉 Congratulations! You won!")
        elif status == GameStatus.DRAWN:
            self.output("\n🤝 It's a draw! Good game!")

    def _ai_move(self):
        if self.engine.make_ai_move():
            last = self.engine.get_moves()[-1]
            self.output(f"\n>>> AI plays {last.player.value} at {last.index}")

    def play(self) -> Optional[Player]:
        """
        Play games until the user quits.

        Returns:
            Winner of the last game (None for a draw or unfinished game).
        """
        human = self.engine.get_ai_player().opposite()
        self.output(f"You play {human.value}. Enter a cell (0-8), 'r' to reset, 'q' to quit.")

        self._ai_move()

        while True:
            self._show_board()

            if self.engine.get_status() != GameStatus.IN_PROGRESS:
                self._show_result()
                prompt = "Play again? ('r' to reset, 'q' to quit): "
            else:
                prompt = f"Your move ({human.value}): "

            try:
                answer = self.input(prompt).strip().lower()
            except (EOFError, KeyboardInterrupt):
                self.output("\nGame interrupted by user.")
                break

            if answer == "q":
                break

            if answer == "r":
                self.engine.reset()
                self.output("\nGame reset!")
                self._ai_move()
                continue

            try:
                index = int(answer)
            except ValueError:
                self.output(f"'{answer}' is not a cell number.")
                continue

            if not self.engine.make_move(index):
                self.output(f"Can't play at {index}!")
                continue

            self._ai_move()

        return self.engine.get_winner()


def main(argv=None):
    """Main entry point."""
    parser = argparse.ArgumentParser(description="TicTacToe vs AI")
    parser.add_argument(
        "--no-ui",
        action="store_true",
        help="Run without UI (console mode)"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the random starting player and AI moves"
    )
    parser.add_argument(
        "--ai-mark",
        choices=[p.value for p in Player],
        default=GameConfig.AI_MARK,
        help="Mark played by the AI"
    )
    parser.add_argument(
        "--log-level",
        default=GameConfig.LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level, format=GameConfig.LOG_FORMAT)

    engine = GameEngine(ai_player=Player(args.ai_mark), rng=random.Random(args.seed))
    logger.info("Starting game (AI plays %s)", args.ai_mark)

    # Launch UI by default
    if not args.no_ui:
        from .ui import TicTacToeUI
        ui = TicTacToeUI(engine)
        ui.run()
        return

    # Console mode (--no-ui)
    print("\n" + "="*60)
    print("   TicTacToe vs AI")
    print("="*60)

    ConsoleGame(engine).play()
    print("Goodbye!")


if __name__ == "__main__":
    main()
