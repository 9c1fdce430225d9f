import os
import tempfile

DATA_CONFIG = {
    "data_dir": os.getenv("ATTENDANCE_DATA_DIR", os.path.join(tempfile.gettempdir(), "attendance_tracker_test")),
    "roster_file": "students.csv",
    "attendance_dir": "attendance",
    "log_file": "attendance.log",
}

LOG_LEVEL = "WARNING"

DEBUG = False
TESTING = True
