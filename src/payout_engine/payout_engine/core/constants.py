"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

HOURS_PER_DAY = 8
DEFAULT_EXCLUDED_WEEKDAY_NAMES = ("saturday", "sunday")
