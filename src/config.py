WIDTH = 1280
HEIGHT = 720
TITLE = "Sooner Runner"
FPS = 60
VSYNC = False
MUTE = False
SHOW_FPS = False
# Longest simulation step a single frame may take (seconds)
MAX_FRAME_DT = 0.05
BACKGROUND_COLOR = (0.0, 0.0, 0.0, 1.0)

# Physics
GRAVITY = 2000.0
JUMP_FORCE = 700.0
PLAYER_START = (WIDTH / 2, HEIGHT / 2)

# Ground slab the player and boxes rest on
GROUND_Y = 500.0
GROUND_HEIGHT = 300.0
GROUND_OUTLINE = 3

# Background tiles scroll left at this speed (px/sec) and wrap every tile width
BACKGROUND_TILE_WIDTH = 1280.0
BACKGROUND_SCROLL_SPEED = 100.0

# Obstacles (boxes)
OBSTACLE_SPAWN_INTERVAL = 1.0
OBSTACLE_SPEEDS = (300.0, 500.0, 800.0)
OBSTACLE_SPAWN_X = 1000.0
OBSTACLE_SCALE = 0.1
MAX_OBSTACLES = 32

# Pills (collectibles)
PILL_SPAWN_INTERVAL = 5.0
PILL_SPAWN_CHANCE = 0.5
PILL_SPAWN_X = 1000.0
PILL_MIN_Y = 200.0
PILL_MAX_Y = 400.0
PILL_SPEED = 200.0
PILL_SCALE = 1.0
# Vertical bob: y = base_y + amplitude * sin(frequency * t)
PILL_FLOAT_AMPLITUDE = 6.0
PILL_FLOAT_FREQUENCY = 5.0
MAX_PILLS = 8

# Anything left of this x is dropped from the tracked collections
OFFSCREEN_CULL_X = -50.0

OBSTACLE_POINTS = 1
PILL_POINTS = 10

RESTART_KEY = "r"

# Audio
MUSIC_VOLUME = 0.5
JUMP_VOLUME = 0.2
COLLECT_VOLUME = 1.0

# Text
SCORE_FONT_SIZE = 32
TITLE_FONT_SIZE = 48
BODY_FONT_SIZE = 32
SCORE_LABEL_Y = 50

# Persistence
HIGH_SCORE_KEY = "highScore"
STATE_DIR_ENV = "SOONER_STATE_DIR"
