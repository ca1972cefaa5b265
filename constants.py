# --- Demo host ---
WIDTH, HEIGHT = 960, 260
FPS = 60
DEVICE_PIXEL_RATIO = 1.0

# --- Header colors (gradient behind the circles) ---
HEADER_TOP = (99, 102, 241)
HEADER_BOTTOM = (168, 85, 247)
TITLE_COLOR = (255, 255, 255)

# --- Scaling ---
REFERENCE_SIZE = 400  # min(width, height) at which scale_factor == 1

# --- Population ---
MIN_CIRCLES = 6
MAX_CIRCLES = 12
AREA_PER_CIRCLE = 15000
RADIUS_RANGE = (15.0, 35.0)
MAX_SPEED = 0.5  # speed bound, times scale_factor
OPACITY_RANGE = (0.15, 0.35)

# --- Resize ---
RESIZE_DEBOUNCE_MS = 100
MIN_RESCALED_SPEED = 0.2

# --- Rendering ---
GLOW_RADIUS_SCALE = 1.3
GLOW_MID_STOP = 0.7
GLOW_MID_ALPHA = 0.1
GLOW_MAX_RINGS = 48
HIGHLIGHT_RADIUS_SCALE = 0.4
HIGHLIGHT_OFFSET = 0.3
HIGHLIGHT_ALPHA = 0.4
