
# Gameplay constants; bounds derived from these are recomputed where used
GRID_WIDTH, GRID_HEIGHT = 10, 20
TICK_RATE_MS = 500

POINTS_PER_ROW = 10
SCORE_PER_LEVEL = 40

EMPTY_COLOR = "black"
OBSTACLE_COLOR = "gray"

CONFIG = {
    "CELL_SIZE": 20,
    "PREVIEW_W": 160,
    "PREVIEW_H": 80,
    "FPS": 60,
    "SEED": None,
    "HIGH_SCORE_PATH": "~/.tetris_obstacles.json",
    "HIGH_SCORE_KEY": "highScore",
    "LOG_LEVEL": "INFO",
}
