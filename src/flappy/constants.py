"""
constants.py: Centralized tuning values for the world, pipes, physics and scores.
"""

import os

# -------- Game World Config --------
SCREEN_WIDTH = 360
SCREEN_HEIGHT = 640
GROUND_HEIGHT = 112             # Decorative ground strip below the ground line
GROUND_TILE_WIDTH = 336         # Ground strip scroll wraps at this width

# -------- Bird Config --------
BIRD_X = 120                    # Fixed bird X position
BIRD_WIDTH = 34
BIRD_HEIGHT = 24
CEILING_Y = -40                 # Bird may rise off-screen, but not past this
ANIMATION_FRAMES = 3
ANIMATION_EVERY_TICKS = 5

# -------- Physics Config (pixels / tick) --------
# Frame-coupled: one tick per rendered frame
GRAVITY = 0.45
FLAP_IMPULSE = 7.0              # Upward speed set by a flap

# -------- Pipe Config --------
PIPE_WIDTH = 52
PIPE_SPAWN_OFFSET = 10          # Pipes appear just past the right edge
PIPE_MIN_DISTANCE = 140         # Clearance from the right edge before a new spawn
GAP_MARGIN = 40                 # Gap never gets closer than this to top or ground
RED_PIPE_CHANCE = 0.45

# -------- Difficulty Config --------
BASE_SPEED = 2.2
SPEED_PER_POINT = 0.03
MAX_SPEED_BONUS = 3.3
BASE_GAP = 200
GAP_PER_POINT = 2
MIN_GAP = 120
BASE_SPAWN_INTERVAL = 110       # ticks
SPAWN_INTERVAL_PER_POINT = 0.6
MIN_SPAWN_INTERVAL = 50

# -------- Scores Config --------
RANKING_SIZE = 5
MAX_NAME_LENGTH = 16
ANONYMOUS_NAME = "Anonymous"
HIGH_SCORE_KEY = "flappy_best"
DB_FILE = "flappy_scores.db"

# -------- Audio Config --------
SOUND_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "assets", "audio")
DEATH_CUE_DELAY_TICKS = 6       # ~100 ms at 60 FPS after the hit cue
RENDER_FPS = 60
