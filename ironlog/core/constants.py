"""Application constants."""

# Session limits
MAX_SESSION_DURATION_MINUTES = 1440
DEFAULT_SESSION_NAME = "Untitled Workout"
DEFAULT_GROUP = "Other"
CARDIO_GROUP = "Cardio"

# Analytics windows
VOLUME_WINDOW_DAYS = 7
STREAK_MAX_DAYS_SINCE_LAST = 2
STREAK_GRACE_GAP_DAYS = 2

# Trend classification: weight is weighted 10x against volume (coach heuristic)
TREND_WEIGHT_FACTOR = 10
TREND_PROGRESS_RATIO = 1.02
TREND_REGRESS_RATIO = 0.98

# Plateau detection
PLATEAU_SESSIONS_THRESHOLD = 3
VOLUME_DROP_RATIO = 0.9
MAX_DASHBOARD_ALERTS = 4

# Imbalance: top group above this multiple of the bottom group
IMBALANCE_RATIO = 2

# Progression
HEAVY_LOAD_THRESHOLD = 50
HEAVY_INCREMENT = 5
LIGHT_INCREMENT = 2.5
MIN_REPS_AFTER_PLATEAU = 6
MIN_REPS_SINGLE_SESSION = 8
TARGET_REPS = 8

# Milestones (total logged sessions)
MILESTONE_THRESHOLDS = frozenset({10, 25, 50, 75, 100})

# Lifts shown on the personal records board
KEY_LIFTS = ("Barbell Bench Press", "Barbell Squat", "Deadlift", "Overhead Press")

# Coach
NEW_CHAT_TITLE = "New Chat"
THREAD_PREVIEW_LENGTH = 120
THREAD_TITLE_LENGTH = 40

# Notifications
NOTIFICATION_TITLE = "BFit"
DEFAULT_REMINDER_TIME = "18:00"
REMINDER_TITLE = "Time to train"
REMINDER_BODY = "Log your workout for today."

# Program presets
PRESET_REPS = 10
