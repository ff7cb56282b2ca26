"""
Game state for TicTacToe vs AI.
Tracks the board, current player, result and move history.
"""

from enum import Enum
from typing import Optional, List, Tuple
from dataclasses import dataclass, field

from ..config import GameConfig


class Player(Enum):
    """The two marks in the game."""
    X = "X"
    O = "O"

    def opposite(self) -> "Player":
        """Get the opposite player."""
        return Player.O if self == Player.X else Player.X


class GameStatus(Enum):
    """Where the game is in its lifecycle."""
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAWN = "drawn"


# A board is 9 cells in row-major order (index = row * 3 + col).
# None means empty.
Board = List[Optional[Player]]

# All possible winning lines, in the order they are checked
WINNING_LINES: Tuple[Tuple[int, int, int], ...] = (
    # Rows
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    # Columns
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    # Diagonals
    (0, 4, 8),
    (2, 4, 6),
)


def empty_board() -> Board:
    """Create a board with all 9 cells empty."""
    return [None] * GameConfig.NUM_CELLS


def get_empty_cells(board: Board) -> List[int]:
    """Indices of all empty cells, in ascending order."""
    return [index for index, cell in enumerate(board) if cell is None]


def to_row_col(index: int) -> Tuple[int, int]:
    """Convert a board index to (row, col)."""
    return divmod(index, GameConfig.BOARD_SIZE)


@dataclass(frozen=True)
class Move:
    """
    A move in the game.
    """
    player: Player          # Who made the move
    index: int              # Cell (0-8)
    move_number: int        # Which move this is (0-8)


@dataclass
class GameState:
    """
    The complete state of one TicTacToe game.

    Tracks:
    - The 3x3 board (which mark is where)
    - Current player
    - Game status (in progress, won, drawn) with winner and winning line
    - Which mark the AI plays
    - Move history
    """

    # The board - 9 cells, None means empty
    board: Board = field(default_factory=empty_board)

    # Current player's turn
    current_player: Player = Player.X

    # Game result
    status: GameStatus = GameStatus.IN_PROGRESS
    winner: Optional[Player] = None
    winning_line: Optional[Tuple[int, int, int]] = None

    # The AI's mark, fixed for the lifetime of the game
    ai_player: Player = Player.O

    # Move history
    moves: List[Move] = field(default_factory=list)

    @property
    def is_game_over(self) -> bool:
        return self.status != GameStatus.IN_PROGRESS

    def get_empty_cells(self) -> List[int]:
        """Get all empty cells on the board."""
        return get_empty_cells(self.board)

    def copy(self) -> "GameState":
        """Create a deep copy of the game state."""
        return GameState(
            board=list(self.board),
            current_player=self.current_player,
            status=self.status,
            winner=self.winner,
            winning_line=self.winning_line,
            ai_player=self.ai_player,
            moves=list(self.moves),
        )

    def format_board(self) -> str:
        """Render the board as text (empty cells show their index)."""
        lines = []
        for row in range(GameConfig.BOARD_SIZE):
            cells = []
            for col in range(GameConfig.BOARD_SIZE):
                index = row * GameConfig.BOARD_SIZE + col
                cell = self.board[index]
                cells.append(cell.value if cell is not None else str(index))
            lines.append(" " + " | ".join(cells))
            if row < GameConfig.BOARD_SIZE - 1:
                lines.append("---+---+---")
        return "\n".join(lines)

