from pathlib import Path

# --- Save Files ---
SAVE_FILE_DIR = Path.home() / ".vpet"
SAVE_FILE_SUFFIX = ".json"

# --- Attributes ---
ATTRIBUTE_MIN = 0
ATTRIBUTE_MAX = 100
INITIAL_HUNGER = 50
INITIAL_HAPPINESS = 50
INITIAL_ENERGY = 100
DEFAULT_PET_NAME = "Critter"

# --- Actions ---
FEED_HUNGER_DECREASE = 30
FEED_HAPPINESS_BOOST = 10

PLAY_MIN_ENERGY = 20
PLAY_HAPPINESS_BOOST = 20
PLAY_ENERGY_COST = 20
PLAY_HUNGER_INCREASE = 10

REST_ENERGY = ATTRIBUTE_MAX
REST_HUNGER_INCREASE = 10
REST_DELAY_SECONDS = 2

# --- Random Events ---
EVENT_CHANCE_DENOMINATOR = 5  # 1 in 5 status cycles

# --- Driver ---
ACTION_PAUSE_SECONDS = 1

# Mood thresholds
HANGRY_HUNGER = 80
ECSTATIC_HAPPINESS = 80
HAPPY_HAPPINESS = 60
HAPPY_MAX_HUNGER = 50
SAD_HAPPINESS = 30

# Status bar colour thresholds
BAR_LOW_THRESHOLD = 30
BAR_HIGH_THRESHOLD = 70
