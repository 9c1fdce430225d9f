import os

# Relative entries are resolved inside data_dir
DATA_CONFIG = {
    "data_dir": os.getenv("ATTENDANCE_DATA_DIR", "data"),
    "roster_file": os.getenv("ATTENDANCE_ROSTER_FILE", "students.csv"),
    "attendance_dir": os.getenv("ATTENDANCE_DIR", "attendance"),
    "log_file": os.getenv("ATTENDANCE_LOG_FILE", "attendance.log"),
}

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

DEBUG = bool(int(os.getenv("DEBUG", "1")))
