from __future__ import annotations

"""Game configuration constants and tunable simulation parameters for Coffee Warrior."""

from dataclasses import dataclass

# Design reference canvas (every physical constant below is in design pixels)
DESIGN_WIDTH = 800
DESIGN_HEIGHT = 400
GROUND_HEIGHT = 50
FPS = 60

# Physics (per tick, not per second)
GRAVITY = 0.6
JUMP_FORCE = -13.0
# Jump impulse scales with scale_factor ** JUMP_SCALE_EXPONENT while gravity scales linearly
JUMP_SCALE_EXPONENT = 0.5

# Scrolling
BASE_SPEED = 6.0
SPEED_INCREASE_RATE = 0.002

# Player
PLAYER_HEIGHT = 100
PLAYER_WIDTH = 60  # replaced by the sprite's aspect-correct width when the image loads
PLAYER_X_FRACTION = 0.25

# Obstacles (cacti)
OBSTACLE_WIDTH = 55
OBSTACLE_HEIGHT = 50
MIN_OBSTACLE_INTERVAL = 70  # ticks
MAX_OBSTACLE_INTERVAL = 140

# Collectibles (coffee cups)
CUP_WIDTH = 25
CUP_HEIGHT = 30
CUP_HANDLE_SIZE = 10
COLLECTIBLE_SIZE = CUP_WIDTH + CUP_HANDLE_SIZE
MIN_COLLECTIBLE_INTERVAL = 90
MAX_COLLECTIBLE_INTERVAL = 180
COFFEE_SCORE_VALUE = 1
COLLECTIBLE_PHASE_STEP = 0.1
SPAWN_SPACING_FACTOR = 2.0  # collectibles keep this many obstacle widths away
SPAWN_REJECT_COOLDOWN = 10  # ticks

# Clouds
CLOUD_COUNT = 5
CLOUD_SPAWN_INTERVAL = 180  # ticks
CLOUD_SPEED_FACTOR = 0.5
CLOUD_MIN_SIZE = 40
CLOUD_MAX_SIZE = 80

# Audio
GAME_OVER_VOICE_DELAY_MS = 600
PLAYER_IMAGE = "player.png"
MUSIC_SOUND = "fun_music.mp3"
LOSE_SOUND = "sad_sound.wav"
GAME_OVER_VOICE = "grandes_merda.mp3"
JUMP_SOUND = "jump.wav"

# Palette (sunny desert)
COL_SKY = (135, 206, 250)
COL_GROUND = (100, 150, 80)
COL_GROUND_TUFT = (80, 130, 60)
COL_CLOUD = (255, 255, 255, 200)
COL_CACTUS = (34, 170, 34)
COL_CUP = (139, 69, 19)
COL_COFFEE = (92, 64, 51)
COL_CUP_RIM = (210, 180, 140)
COL_STEAM = (240, 240, 240, 150)
COL_PANEL = (0, 0, 0, 180)
COL_TEXT = (255, 255, 255)
COL_HUD_TEXT = (0, 0, 0)
COL_ERROR_TEXT = (255, 0, 0)
COL_PLAYER_PLACEHOLDER = (60, 40, 30)
COL_BUBBLE = (255, 255, 255, 245)
COL_BUBBLE_STROKE = (40, 40, 40)

TITLE = "THE COFFEE WARRIOR"
SUBTITLE = "The journey of an angejense in search for the best coffee"
STUDIO = "NSCA Games"
GAME_OVER_QUIP = "Grandes Merda!"


@dataclass(frozen=True)
class Tuning:
    """Every constant the simulation reads, in design units.

    Defaults mirror the module constants; build variants with ``dataclasses.replace``.
    """

    design_width: float = DESIGN_WIDTH
    design_height: float = DESIGN_HEIGHT
    ground_height: float = GROUND_HEIGHT

    gravity: float = GRAVITY
    jump_force: float = JUMP_FORCE
    jump_scale_exponent: float = JUMP_SCALE_EXPONENT

    base_speed: float = BASE_SPEED
    speed_increase_rate: float = SPEED_INCREASE_RATE

    player_width: float = PLAYER_WIDTH
    player_height: float = PLAYER_HEIGHT
    player_x_fraction: float = PLAYER_X_FRACTION

    obstacle_width: float = OBSTACLE_WIDTH
    obstacle_height: float = OBSTACLE_HEIGHT
    min_obstacle_interval: float = MIN_OBSTACLE_INTERVAL
    max_obstacle_interval: float = MAX_OBSTACLE_INTERVAL

    cup_width: float = CUP_WIDTH
    cup_height: float = CUP_HEIGHT
    cup_handle_size: float = CUP_HANDLE_SIZE
    min_collectible_interval: float = MIN_COLLECTIBLE_INTERVAL
    max_collectible_interval: float = MAX_COLLECTIBLE_INTERVAL
    collectible_value: int = COFFEE_SCORE_VALUE
    collectible_phase_step: float = COLLECTIBLE_PHASE_STEP
    spawn_spacing_factor: float = SPAWN_SPACING_FACTOR
    spawn_reject_cooldown: int = SPAWN_REJECT_COOLDOWN

    cloud_count: int = CLOUD_COUNT
    cloud_spawn_interval: int = CLOUD_SPAWN_INTERVAL
    cloud_speed_factor: float = CLOUD_SPEED_FACTOR
    cloud_min_size: float = CLOUD_MIN_SIZE
    cloud_max_size: float = CLOUD_MAX_SIZE

    @property
    def aspect_ratio(self) -> float:
        return self.design_width / self.design_height

    @property
    def collectible_size(self) -> float:
        return self.cup_width + self.cup_handle_size
