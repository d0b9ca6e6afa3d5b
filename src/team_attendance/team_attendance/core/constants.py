"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_HISTORY_LIMIT = 50
MAX_MANDATORY_COACHES = 2
SPONTANEOUS_TRAINING_DESCRIPTION = "Spontanes Training"
EMPTY_CELL = "-"
PRESENT_MARK = "X"
