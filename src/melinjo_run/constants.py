"""
constants.py: Centralized default configuration for the game and its renderer.
"""

# -------- Viewport Config --------
SCREEN_WIDTH = 800
SCREEN_HEIGHT = 400
GROUND_HEIGHT = 50              # Ground strip drawn at the bottom of the viewport

# -------- Player Config --------
PLAYER_X = 100                  # Fixed player X position
PLAYER_WIDTH = 50
PLAYER_HEIGHT = 40

# -------- Physics Config (pixels / frame) --------
# Per-frame increments; not scaled by delta time unless configured to be.
GRAVITY = 0.6
JUMP_FORCE = -15.0              # Initial upward velocity of a ground jump
FLYING_FORCE_MULTIPLIER = 0.5   # Mid-air impulse = JUMP_FORCE * multiplier / jump_count

# -------- Energy Config --------
ENERGY_MAX = 100.0
ENERGY_JUMP_COST = 20.0
ENERGY_REFILL_RATE = 0.3        # Added every active frame
ENERGY_PICKUP_BONUS = 30.0      # Added per melinjo collected

# -------- Timing Config --------
GAME_DURATION = 30.0            # Seconds to survive for a win
SCROLL_SPEED = 5.0              # World units per frame
FRAME_RATE_ASSUMPTION = 60      # Frames per second used to size the track

# -------- Level Generation Config --------
# Ranges are half-open [low, high)
OBSTACLE_GAP_RANGE = (300.0, 600.0)
ROCK_WIDTH_RANGE = (30.0, 50.0)
ROCK_HEIGHT_RANGE = (20.0, 50.0)
WATER_WIDTH_RANGE = (60.0, 100.0)
WATER_HEIGHT = 20.0

PICKUP_GAP_RANGE = (200.0, 600.0)
PICKUP_SIZE = 20.0
PICKUP_ALTITUDE_RANGE = (100.0, 250.0)  # Height above the ground line

# -------- Render Config --------
RENDER_FPS = 60
MAX_FRAME_DT = 0.25             # Clamp for measured delta time after stalls (seconds)
WINDOW_TITLE = "Melinjo Run"
