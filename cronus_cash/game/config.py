# --- Display ---
WIDTH = 800
HEIGHT = 600
FPS = 60
MAX_DT = 1.0 / 30.0          # host loop clamps stalls to this (sec)

# --- World / Physics ---
GRAVITY = 1500.0             # px/s^2, pulls down
MOVE_SPEED = 200.0           # input move speed (px/s)
JUMP_SPEED = 600.0           # initial vertical jump velocity (px/s)
WALL_JUMP_IMPULSE = 300.0    # horizontal push when wall-jumping (px/s)
HORIZONTAL_FRICTION = 8.0    # declared impulse decay, not applied (impulse is a hard stop)
WALL_THICKNESS = 20.0
WALL_JUMP_NUDGE = 0.5        # px clearance after leaving a wall
LANDING_TOLERANCE = 1.0      # px, previous bottom may sit this far below a platform top

# --- Jump assists ---
COYOTE_TIME = 0.12           # jump still allowed shortly after leaving ground (sec)
JUMP_BUFFER_TIME = 0.12      # jump input remembered slightly before landing (sec)
MAX_JUMPS = 2

# --- Player ---
PLAYER_RADIUS = 20.0
PLAYER_START = (100.0, 100.0)

# --- Session ---
TIME_LIMIT_S = 120.0

# --- Collectible (coin) ---
COIN_RADIUS = 8.0
COIN_SPAWN_ATTEMPTS = 500
COIN_PLAYER_MARGIN = 20.0
COIN_FLOOR_CLEARANCE = 50.0  # bottom strip kept free of coins

# --- Time orb ---
ORB_RADIUS = 10.0
ORB_INTERVAL_S = 15.0        # attempt a spawn every interval
ORB_SPAWN_ODDS = 3           # 1 in ORB_SPAWN_ODDS attempts succeeds
ORB_SPAWN_ATTEMPTS = 200
ORB_PLAYER_MARGIN = 30.0
ORB_TIME_BONUS_S = 30.0

# --- Moving platforms: (x, y, w, h), axis min, axis max, (vx, vy), horizontal ---
PLATFORM_LAYOUT = (
    ((200.0, 450.0, 240.0, 16.0), 200.0, 600.0, (80.0, 0.0), True),
    ((520.0, 350.0, 140.0, 16.0), 300.0, 520.0, (-60.0, 0.0), True),
    ((800.0, 400.0, 160.0, 16.0), 380.0, 520.0, (0.0, 40.0), False),
    ((100.0, 250.0, 120.0, 16.0), 100.0, 600.0, (50.0, 0.0), True),
)

# --- Colors (RGB) ---
COLOR_BG = (245, 245, 245)
COLOR_BG_GAME_OVER = (200, 200, 200)
COLOR_WALL = (80, 80, 80)
COLOR_PLAT = (0, 0, 0)
COLOR_PLAYER = (230, 41, 55)
COLOR_COIN = (253, 249, 0)
COLOR_ORB = (0, 121, 241)
COLOR_ORB_RING = (0, 255, 255)
COLOR_HUD = (0, 0, 0)
COLOR_TITLE = (253, 249, 0)
COLOR_SUBTLE = (80, 80, 80)
