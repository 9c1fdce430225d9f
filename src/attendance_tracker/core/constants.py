"""Constants and defaults.

Note: Keep constants here to avoid magic strings spread across code.
"""

ROSTER_FIELDS = ("id", "name", "email", "class")
SNAPSHOT_FIELDS = ("id", "status", "timestamp")
HISTORY_FIELDS = ("date", "status", "timestamp")

RECORD_SUFFIX = ".csv"
FIELD_DELIMITER = ","

DATE_FORMAT = "%Y-%m-%d"
TIME_FORMAT = "%H:%M:%S"
LOG_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"

PERSON_ID_PATTERN = r"^[A-Za-z0-9]+$"
EMAIL_PATTERN = r"^[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}$"

DIR_MODE = 0o750
FILE_MODE = 0o640
