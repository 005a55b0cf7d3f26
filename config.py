# ============================================================================
# SIMULATION
# ============================================================================

TOTAL_TIME = 10.0              # simulated seconds
DT = 0.1                       # step size (s)
VELOCITY = 1.0                 # true constant velocity (units/s)
SENSOR_NOISE_STDDEV = 2.0      # measurement noise; R = SENSOR_NOISE_STDDEV**2
PROCESS_NOISE_VARIANCE = 0.01  # q in Q = q * [[dt^4/4, dt^3/2], [dt^3/2, dt^2]]
SEED = None                    # int for reproducible runs, None for fresh randomness

# Initial filter state
INITIAL_STATE = None           # [position, velocity]; None -> [0, 0]
INITIAL_COVARIANCE = 1000.0    # P0 = INITIAL_COVARIANCE * I

# ============================================================================
# ANIMATION
# ============================================================================

RENDER_ANIMATION = True
OUTPUT_VIDEO = "output.mp4"
VIDEO_FPS = 10
CANVAS_SIZE = 500              # square canvas, pixels
PROGRESS_EVERY = 10            # print render progress every N frames

# Colours (BGR)
TRUE_COLOR = (0, 0, 255)       # red line
ESTIMATE_COLOR = (0, 160, 0)   # green line
MEASUREMENT_COLOR = (255, 0, 0)  # blue dots
BACKGROUND_COLOR = (255, 255, 255)
LINE_THICKNESS = 2
MEASUREMENT_RADIUS = 2
