"""Game-wide configuration constants for Hunter Chase."""

import os

GRID_ROWS = int(os.environ.get("HUNTER_CHASE_ROWS", "20"))
GRID_COLS = int(os.environ.get("HUNTER_CHASE_COLS", "40"))
WALL_PERCENTAGE = int(os.environ.get("HUNTER_CHASE_WALLS", "5"))  # % of non-border cells
INITIAL_CHASERS = 1
PURSUIT_DEPTH = 5            # BFS steps a chaser expands looking for the hunter
TURN_PERCENTAGE = 15         # Chance a wandering chaser picks a new direction
CHASER_TICK_INTERVAL = 2     # Chasers act on every Nth tick in the terminal game
FRAME_SECONDS = 0.1
COUNTDOWN_SECONDS = 3
LOG_FILE = os.environ.get("HUNTER_CHASE_LOG", "hunter_chase.log")

# Board glyphs
EMPTY_GLYPH = " "
WALL_GLYPH = "I"
HUNTER_GLYPH = "O"

# Key bindings
UP_KEY = "w"
DOWN_KEY = "s"
LEFT_KEY = "a"
RIGHT_KEY = "d"
ADD_CHASER_KEY = " "
QUIT_KEY = "q"
