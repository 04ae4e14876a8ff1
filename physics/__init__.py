# ── Central defaults (tune here, not scattered across files) ──

# Window
WINDOW_WIDTH = 1600
WINDOW_HEIGHT = 900
WINDOW_TITLE = 'Balls'
FPS = 60

# Motion
ACCELERATION = 0.25          # launch speed per pixel of drag
MAX_VELOCITY = 100.0
FRICTION_DECELERATION = 0.25
BOUNCE_DECELERATION = 5.0
SLOW_MODE_MULTIPLIER = 0.1
COLLISION_REPULSION = 10.0

# Spawning (reset and headless runs)
BALL_COUNT_RANGE = (5, 15)
RADIUS_RANGE = (20.0, 80.0)
COLOR_RANGE = (60, 255)
SEED = 42
KICK_RANGE = (20.0, 100.0)   # headless runs only

# Rendering
BG_COLOR = (0, 0, 0)
HIGHLIGHT_COLOR = (255, 255, 255)
COLLISION_COLOR = (255, 0, 0)
OVERLAY_COLOR = (0, 255, 255)
SELECTION_WIDTH = 10
DRAG_LINE_WIDTH = 5
OVERLAY_VELOCITY_SCALE = 2.0

# Key bindings (pygame K_* suffixes)
SLOW_KEY = 'LSHIFT'
SNAP_KEY = 'LCTRL'
OVERLAY_KEY = 'd'
RESET_KEY = 'r'
QUIT_KEYS = ('q', 'ESCAPE')
