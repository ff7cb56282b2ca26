"""
TicTacToe vs AI UI
A graphical interface for the game using Tkinter.

Shows:
- The 3x3 board (click a cell to play)
- Game status (whose turn, who won)
- A reset button
- Fireworks when somebody wins (click them to dismiss)
"""

import logging
import tkinter as tk
from tkinter import ttk
from typing import List, Optional

from .config import GameConfig
from .fireworks import Fireworks
from .logic.engine import GameEngine
from .logic.game_state import GameStatus, to_row_col

logger = logging.getLogger(__name__)


def fade_color(color: str, life: float, background: str = GameConfig.BACKGROUND) -> str:
    """Blend `color` towards `background` as life goes from 1 to 0."""
    life = max(0.0, min(1.0, life))
    fg = [int(color[i:i + 2], 16) for i in (1, 3, 5)]
    bg = [int(background[i:i + 2], 16) for i in (1, 3, 5)]
    mixed = [round(b + (f - b) * life) for f, b in zip(fg, bg)]
    return "#{:02x}{:02x}{:02x}".format(*mixed)


class TicTacToeUI:
    """
    Main UI class for the game.

    Reads everything it shows from the engine and only changes the game
    through engine.make_move(), engine.make_ai_move() and engine.reset().
    """

    def __init__(self, engine: Optional[GameEngine] = None, fireworks: Optional[Fireworks] = None):
        """Initialize the UI."""
        self.engine = engine if engine is not None else GameEngine()
        self.fireworks = fireworks if fireworks is not None else Fireworks()

        self._ai_job: Optional[str] = None
        self._fireworks_job: Optional[str] = None

        # Create UI
        self._create_ui()

    def _create_ui(self):
        """Create the Tkinter UI."""
        self.root = tk.Tk()
        self.root.title(GameConfig.WINDOW_TITLE)
        self.root.configure(bg=GameConfig.BACKGROUND)

        # Main container
        main_frame = ttk.Frame(self.root)
        main_frame.pack(fill=tk.BOTH, expand=True, padx=10, pady=10)

        # Configure style
        style = ttk.Style()
        style.theme_use('clam')
        style.configure('TFrame', background=GameConfig.BACKGROUND)
        style.configure('TLabel', background=GameConfig.BACKGROUND, foreground='white', font=('Segoe UI', 11))
        style.configure('Title.TLabel', font=GameConfig.TITLE_FONT, foreground='#00d4ff')
        style.configure('Status.TLabel', font=GameConfig.STATUS_FONT, foreground=GameConfig.STATUS_FG)

        ttk.Label(main_frame, text="🎮 TicTacToe vs AI", style='Title.TLabel').pack(pady=(0, 10))

        self.status_label = ttk.Label(main_frame, text="", style='Status.TLabel')
        self.status_label.pack(pady=5)

        # Board grid
        self.board_frame = ttk.Frame(main_frame)
        self.board_frame.pack(pady=10)

        self.board_cells: List[tk.Button] = []
        for index in range(GameConfig.NUM_CELLS):
            row, col = to_row_col(index)
            cell = tk.Button(
                self.board_frame,
                text="",
                font=GameConfig.CELL_FONT,
                width=3,
                height=1,
                bg=GameConfig.CELL_BG,
                fg=GameConfig.CELL_FG,
                disabledforeground=GameConfig.CELL_FG,
                relief='ridge',
                borderwidth=2,
                command=lambda i=index: self._on_cell_click(i)
            )
            cell.grid(row=row, column=col, padx=2, pady=2)
            self.board_cells.append(cell)

        # Legend
        ai = self.engine.get_ai_player()
        legend_frame = ttk.Frame(main_frame)
        legend_frame.pack(pady=5)
        ttk.Label(legend_frame, text=f"{ai.opposite().value} = Human  ", foreground=GameConfig.HUMAN_FG).pack(side=tk.LEFT)
        ttk.Label(legend_frame, text=f"{ai.value} = AI", foreground=GameConfig.AI_FG).pack(side=tk.LEFT)

        # Control buttons
        ttk.Separator(main_frame, orient='horizontal').pack(fill=tk.X, pady=15)

        self.reset_btn = tk.Button(
            main_frame,
            text="🔄 Reset Game",
            font=('Segoe UI', 11, 'bold'),
            bg='#6366f1',
            fg='white',
            width=16,
            command=self._reset_game
        )
        self.reset_btn.pack(pady=5)

        # Fireworks canvas - a separate window on top, hidden until somebody wins
        self.fireworks_window = tk.Toplevel(self.root)
        self.fireworks_window.title("🎆")
        self.fireworks_window.withdraw()
        self.fireworks_window.protocol("WM_DELETE_WINDOW", self._stop_fireworks)
        self.fireworks_canvas = tk.Canvas(
            self.fireworks_window,
            width=self.fireworks.width,
            height=self.fireworks.height,
            bg=GameConfig.BACKGROUND,
            highlightthickness=0
        )
        self.fireworks_canvas.pack()
        self.fireworks_canvas.bind("<Button-1>", lambda _event: self._stop_fireworks())

        # Bind close event
        self.root.protocol("WM_DELETE_WINDOW", self._quit)

    def _render(self):
        """Update every widget from the engine state."""
        board = self.engine.get_board()
        status = self.engine.get_status()
        winning_line = self.engine.get_winning_line()
        ai = self.engine.get_ai_player()

        for index, cell in enumerate(self.board_cells):
            player = board[index]
            fg = GameConfig.CELL_FG
            if player is not None:
                fg = GameConfig.AI_FG if player == ai else GameConfig.HUMAN_FG

            cell.configure(
                text=player.value if player is not None else "",
                state='normal' if status == GameStatus.IN_PROGRESS and player is None else 'disabled',
                bg=GameConfig.WIN_CELL_BG if index in winning_line else GameConfig.CELL_BG,
                fg=fg,
                disabledforeground=fg
            )

        if status == GameStatus.WON:
            winner_label = "AI" if self.engine.get_winner() == ai else "Human"
            self.status_label.configure(text=f"🏆 {winner_label} wins!")
            self._start_fireworks()
        elif status == GameStatus.DRAWN:
            self.status_label.configure(text="🤝 It's a draw!")
            self._stop_fireworks()
        else:
            current = self.engine.get_current_player()
            label = "AI" if current == ai else "Human"
            self.status_label.configure(text=f"Current player: {label} ({current.value})")
            self._stop_fireworks()

    def _schedule_ai_move(self):
        """Let the AI answer after a short pause, if it is its turn."""
        if self._ai_job is not None:
            self.root.after_cancel(self._ai_job)
            self._ai_job = None

        if self.engine.is_ai_turn():
            self._ai_job = self.root.after(GameConfig.AI_MOVE_DELAY_MS, self._ai_move)

    def _ai_move(self):
        """Play the AI's move (runs on the UI thread)."""
        self._ai_job = None
        if self.engine.make_ai_move():
            self._render()

    def _on_cell_click(self, index: int):
        """Handle a click on one of the board cells."""
        # Ignore clicks while the AI is about to move
        if self.engine.is_ai_turn():
            return

        if self.engine.make_move(index):
            self._render()
            self._schedule_ai_move()

    def _reset_game(self):
        """Reset the game."""
        logger.info("Resetting game from UI")
        self.engine.reset()
        self._render()
        self._schedule_ai_move()

    def _start_fireworks(self):
        if self.fireworks.is_running:
            return

        self.fireworks.start()
        self.fireworks.burst()
        self.fireworks_window.deiconify()
        self.fireworks_window.lift()
        self._animate_fireworks()

    def _animate_fireworks(self):
        """Draw one frame and schedule the next (~60 FPS)."""
        if not self.fireworks.is_running:
            return

        self.fireworks.step()
        self.fireworks_canvas.delete("all")
        for x, y, life, color in self.fireworks.particles():
            self.fireworks_canvas.create_rectangle(
                x, y, x + 3, y + 3,
                fill=fade_color(color, life),
                width=0
            )

        self._fireworks_job = self.root.after(GameConfig.FIREWORK_FRAME_MS, self._animate_fireworks)

    def _stop_fireworks(self):
        if self._fireworks_job is not None:
            self.root.after_cancel(self._fireworks_job)
            self._fireworks_job = None

        self.fireworks.stop()
        self.fireworks_canvas.delete("all")
        self.fireworks_window.withdraw()

    def _quit(self):
        """Quit the application."""
        logger.info("Quitting")
        self._stop_fireworks()
        self.root.quit()
        self.root.destroy()

    def run(self):
        """Run the UI main loop."""
        self._render()
        # The AI moves straight away if it starts
        self._schedule_ai_move()
        self.root.mainloop()
