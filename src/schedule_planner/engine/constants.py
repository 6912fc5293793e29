"""Constants for schedule proposal generation."""

# Slot code: <day 2-7><shift M|T|N><ordinal within the shift>
# Days follow the 2=Monday ... 7=Saturday convention.
SLOT_CODE_PATTERN = r"^([2-7])([MTN])(\d+)$"

# Canonical afternoon class start times.
# Offerings only start afternoon classes at these boundaries, so a preferred
# time is snapped to the closest one.
AFTERNOON_START_TIMES = [
    {"slot": 4, "start": "13:50"},
    {"slot": 5, "start": "14:50"},
    {"slot": 6, "start": "15:50"},
    {"slot": 7, "start": "16:40"},
]

# Search bounds
DEFAULT_BEAM_WIDTH = 300
DEFAULT_MAX_SECTIONS_PER_COURSE = 4

DEFAULT_PROPOSAL_COUNT = 3

# Weekly credit load assumed when the profile has no target
DEFAULT_TARGET_CREDITS = 18

# Hand-tuned scoring weights. Regression tests pin the resulting ordering.
SOFT_CONSTRAINT_WEIGHTS = {
    "morning_load": 4,
    "afternoon_load": 1,
    "preferred_distance": 2,
    "preferred_missing": 8,
    "afternoon_cap_overflow": 20,
    "subject_gap": 20,
    "subject_each": 12,
    "credit_gap": 4,
}

MAX_SCORE = 100

# Composite total = schedule * 1_000_000 + subjects * 1_000 + credits
SCHEDULE_SCORE_FACTOR = 1_000_000
SUBJECTS_SCORE_FACTOR = 1_000

# Preferred time counts as met when the closest afternoon slot is this near
PREFERRED_DISTANCE_TOLERANCE = 1

