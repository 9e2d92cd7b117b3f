"""
Configuration constants for Planet Defense.

Gameplay tuning: five health points, a 2 s opening spawn interval that
decays by 0.5 % per spawn down to 400 ms, and missiles whose speed
grows with the player's score.
"""

# ---------------------------------------------------------------------------
# Display
# ---------------------------------------------------------------------------
SCREEN_WIDTH: int = 800
SCREEN_HEIGHT: int = 600
UPDATE_RATE: int = 60  # Hz – target refresh rate for the loop driver
TITLE: str = "Planet Defense"

# ---------------------------------------------------------------------------
# Game state
# ---------------------------------------------------------------------------
INITIAL_HEALTH: int = 5
POINTS_PER_MISSILE: int = 1

# ---------------------------------------------------------------------------
# Spawning (all times in milliseconds)
# ---------------------------------------------------------------------------
SPAWN_INTERVAL_INITIAL: float = 2000.0
SPAWN_INTERVAL_MIN: float = 400.0
SPAWN_DECAY: float = 0.995  # interval multiplier applied after each spawn

# ---------------------------------------------------------------------------
# Missiles
# ---------------------------------------------------------------------------
MISSILE_RADIUS_MIN: float = 15.0
MISSILE_RADIUS_RANGE: float = 10.0   # radius ∈ [15, 25)
MISSILE_SPEED_BASE: float = 40.0     # pixels / second
MISSILE_SPEED_RANGE: float = 30.0    # speed ∈ [40, 70) before score bonus
MISSILE_SPEED_PER_POINT: float = 1.0

# Silhouette proportions, relative to the missile radius
MISSILE_BODY_WIDTH: float = 0.4
MISSILE_BODY_HEIGHT: float = 1.6
MISSILE_FIN_HEIGHT: float = 0.3  # fraction of body height
MISSILE_FIN_WIDTH: float = 0.8   # fraction of body width

# ---------------------------------------------------------------------------
# Hit testing
# ---------------------------------------------------------------------------
HIT_ENLARGEMENT: float = 1.3  # radial hit area multiplier for sloppy taps
DEFAULT_HIT_TEST: str = "radial"

# ---------------------------------------------------------------------------
# Explosions
# ---------------------------------------------------------------------------
EXPLOSION_DURATION: float = 800.0       # ms
EXPLOSION_RADIUS_FACTOR: float = 3.0    # max radius = 3 × missile radius
EXPLOSION_DEFAULT_BASE_RADIUS: float = 20.0
EXPLOSION_CORE_FACTOR: float = 0.3

# ---------------------------------------------------------------------------
# Backdrop
# ---------------------------------------------------------------------------
STAR_COUNT: int = 100
EARTH_RADIUS_FACTOR: float = 0.4   # of min(width, height)
EARTH_CENTER_DROP: float = 0.5     # centre sits 0.5 R below the bottom edge

# Continent outlines in Earth-radius units, offset from the top of the planet
CONTINENTS: list[list[tuple[float, float]]] = [
    [(-0.3, -0.15), (-0.1, 0.1), (0.05, 0.0), (-0.05, -0.25), (-0.25, -0.3)],
    [(0.05, 0.05), (0.25, 0.2), (0.35, 0.15), (0.3, -0.05), (0.1, -0.1),
     (0.0, -0.05)],
]

# ---------------------------------------------------------------------------
# Colours
# ---------------------------------------------------------------------------
COLOR_BACKGROUND: tuple[int, int, int] = (0, 0, 0)
COLOR_MISSILE_BODY: tuple[int, int, int] = (0x55, 0x55, 0x55)
COLOR_MISSILE_TIP: tuple[int, int, int] = (0xE7, 0x4C, 0x3C)
COLOR_MISSILE_FIN: tuple[int, int, int] = (0x88, 0x88, 0x88)
COLOR_EARTH_LIGHT: tuple[int, int, int] = (0x2E, 0x8B, 0xC0)
COLOR_EARTH_DARK: tuple[int, int, int] = (0x06, 0x3C, 0x77)
COLOR_CONTINENT: tuple[int, int, int] = (0x15, 0x94, 0x47)
COLOR_EXPLOSION_INNER: tuple[int, int, int] = (255, 255, 200)
COLOR_EXPLOSION_MID: tuple[int, int, int] = (255, 140, 0)
COLOR_EXPLOSION_OUTER: tuple[int, int, int] = (255, 69, 0)
COLOR_TEXT: tuple[int, int, int] = (255, 255, 255)

# ---------------------------------------------------------------------------
# Audio (synthesised impact cue)
# ---------------------------------------------------------------------------
SAMPLE_RATE: int = 22050
IMPACT_FREQ_START: float = 300.0
IMPACT_FREQ_END: float = 50.0
IMPACT_GAIN_START: float = 0.8
IMPACT_GAIN_END: float = 0.001
IMPACT_DURATION: float = 0.3  # seconds
