import os

# --- SAMPLING ---
# Each stabilized vector is the mean of SAMPLE_COUNT raw readings.
SAMPLE_COUNT = 3
SAMPLE_DELAY = 0.2  # seconds after every raw read

# --- TIMING (seconds) ---
SETTLE_SECONDS = 4        # operator moves the flap before a capture
CALIBRATION_COOLDOWN = 4  # pause before the monitor loop takes over
QUIET_PERIOD = 15         # no sampling after a notification

# --- SENSOR TUNING ---
# ADXL345 measurement range (+/- g). Readings are reported in g.
GRAVITY_RANGE_G = 4

# --- DATA STORAGE ---
BASE_DIR = os.path.dirname(os.path.abspath(__file__))
DATA_DIR = os.environ.get("FLAPGATE_DATA_DIR", os.path.join(BASE_DIR, "data"))
STATES_FILE = os.environ.get("FLAPGATE_STATES_FILE", os.path.join(DATA_DIR, "states.max"))

# --- NOTIFICATIONS ---
MASTODON_INSTANCE = os.environ.get("FLAPGATE_MASTODON_INSTANCE", "https://botsin.space")
SECRET_FILE = os.environ.get("FLAPGATE_SECRET_FILE", os.path.join(DATA_DIR, "secret.txt"))
PET_NAME = os.environ.get("FLAPGATE_PET_NAME", "Max")
