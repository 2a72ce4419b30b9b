# excatalog/utils/taxonomy.py

# Labels exactly as they appear in the dataset; matching is case-sensitive.

DIFFICULTIES: tuple[str, ...] = (
    "Novice",
    "Beginner",
    "Intermediate",
    "Advanced",
    "Expert",
)

DEFAULT_DIFFICULTY = "Beginner"

FORCES: tuple[str, ...] = (
    "Push",
    "Pull",
    "Hold",
    "Static",
)

GRIPS: tuple[str, ...] = (
    "Overhand: Pronated",
    "Underhand: Supinated",
    "Neutral",
    "Mixed",
    "Hook",
    "Wide",
    "Narrow",
)

MECHANICS: tuple[str, ...] = (
    "Isolation",
    "Compound",
)

# "-" is the dataset's placeholder for "no value"
SENTINEL = "-"

# ──────────────────── Dataset columns ─────────────────────

COL_MUSCLE_GROUP = "Muscle Group"
COL_NAME = "Exercise Name"
COL_EQUIPMENT = "Equipment"
COL_VIDEO_LINKS = "Video Links"
COL_DIFFICULTY = "Difficulty"
COL_FORCE = "Force"
COL_GRIPS = "Grips"
COL_MECHANIC = "Mechanic"
COL_INSTRUCTIONS = "Instructions"

DATASET_COLUMNS: tuple[str, ...] = (
    COL_MUSCLE_GROUP,
    COL_NAME,
    COL_EQUIPMENT,
    COL_VIDEO_LINKS,
    COL_DIFFICULTY,
    COL_FORCE,
    COL_GRIPS,
    COL_MECHANIC,
    COL_INSTRUCTIONS,
)
