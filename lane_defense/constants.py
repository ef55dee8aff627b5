"""
Game constants - all magic numbers in one place.
NO UI DEPENDENCIES.
"""

# =============================================================================
# BOARD
# =============================================================================
ROWS = 5                      # lanes
COLS = 9                      # tiles per lane

DEFAULT_BOARD_WIDTH = 1200    # pixels
DEFAULT_BOARD_HEIGHT = 700
MIN_BOARD_WIDTH = 720
MIN_BOARD_HEIGHT = 400

# =============================================================================
# TIMING (all in seconds)
# =============================================================================
MAX_FRAME_DT = 0.05           # long frames are clamped to this

# =============================================================================
# ECONOMY
# =============================================================================
STARTING_BALANCE = 100
RESOURCE_AMOUNT = 25          # credited per collected resource
RESOURCE_TTL = 6.5            # seconds before an uncollected resource expires
EXPIRY_EPSILON = 1e-9         # absorbs float drift from summing frame deltas
GENERATOR_INTERVAL = 7.0      # seconds between generator emissions

# =============================================================================
# PLANTS
# =============================================================================
PLANT_HP = 300
PLANT_INITIAL_COOLDOWN = 0.3

SINGLE_SHOOTER_CADENCE = 0.9
DOUBLE_SHOOTER_CADENCE = 0.65
DOUBLE_SHOT_DELAY = 0.14      # second projectile of a double-shooter
SHOOTER_SIGHT_OFFSET = 24     # attacker must be this far right of the tile edge

# =============================================================================
# PROJECTILES
# =============================================================================
PROJECTILE_SPEED = 260.0      # pixels per second
PROJECTILE_DAMAGE = 20
PROJECTILE_SPAWN_FRACTION = 0.7
PROJECTILE_EXIT_MARGIN = 80   # removed once past board width + margin

HIT_THRESHOLD_FRACTION = 0.15 # of tile width
MIN_HIT_THRESHOLD = 12.0      # pixels

# =============================================================================
# ATTACKERS
# =============================================================================
ATTACKER_BASE_HP = 450
ATTACKER_BASE_SPEED = 18.0    # pixels per second
ATTACKER_SPAWN_MARGIN = 60    # spawn at board width + margin
SPEED_JITTER_MIN = 0.9
SPEED_JITTER_RANGE = 0.25
EAT_DPS = 15.0
NEAR_BOUNDARY = 0.0           # reaching this x ends the game

# =============================================================================
# ROUNDS
# =============================================================================
ROUND_BASE_COUNT = 5
ROUND_COUNT_INCREMENT = 2
ROUND_HP_GROWTH = 0.25        # fraction of base hp added per round
ROUND_SPEED_GROWTH = 0.10     # fraction of base speed added per round
SPAWN_STAGGER = 1.2
ROUND_CLEAR_DELAY = 2.5
ROUND_ANNOUNCE_DURATION = 2.0
