"""
Game configuration for TicTacToe vs AI.
All the settings for the rules, the AI, the window and the fireworks.
"""


class GameConfig:
    """
    Configuration class for game settings.
    Change these values to tweak the look and feel!
    """

    # ==================== BOARD SETTINGS ====================
    # TicTacToe is a 3x3 grid
    BOARD_SIZE = 3
    NUM_CELLS = BOARD_SIZE * BOARD_SIZE  # 9 cells, row-major

    # ==================== AI SETTINGS ====================
    # Mark played by the AI ("X" or "O"). The human gets the other one.
    AI_MARK = "O"

    # Delay before the AI answers a human move (milliseconds, UI only)
    AI_MOVE_DELAY_MS = 250

    # ==================== WINDOW SETTINGS ====================
    WINDOW_TITLE = "TicTacToe vs AI"
    BACKGROUND = '#1a1a2e'
    CELL_BG = '#16213e'
    CELL_FG = 'white'
    WIN_CELL_BG = '#b8860b'
    HUMAN_FG = '#00ff88'
    AI_FG = '#ff6b6b'
    STATUS_FG = '#ffd700'
    TITLE_FONT = ('Segoe UI', 16, 'bold')
    CELL_FONT = ('Segoe UI', 28, 'bold')
    STATUS_FONT = ('Segoe UI', 12)

    # ==================== FIREWORKS SETTINGS ====================
    CANVAS_WIDTH = 800
    CANVAS_HEIGHT = 600
    FIREWORK_PARTICLES = 30       # Particles per burst
    FIREWORK_MIN_SPEED = 2.0
    FIREWORK_SPEED_RANGE = 3.0    # Speed is MIN + U(0, RANGE)
    FIREWORK_GRAVITY = 0.1        # Added to vy every frame
    FIREWORK_DECAY = 0.01         # Life lost every frame
    FIREWORK_SPAWN_CHANCE = 0.05  # Chance of a new burst every frame
    FIREWORK_FRAME_MS = 16        # ~60 FPS
    FIREWORK_COLORS = [
        '#ff0000',
        '#00ff00',
        '#0000ff',
        '#ffff00',
        '#ff00ff',
        '#00ffff',
    ]

    # ==================== LOGGING SETTINGS ====================
    LOG_LEVEL = "WARNING"
    LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
