"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_SESSION_DAYS = 7
WEEKLY_WINDOW_DAYS = 7
DEFAULT_SEED_HISTORY_DAYS = 7
DEFAULT_SEED_RANDOM_SEED = 20240110

DEMO_USERNAMES = ("admin", "teacher", "student")
SEED_LEAVE_REMARK = "Sick Leave"

# Students present on fewer than this share (percent) of their recorded days
# in the weekly window raise a low attendance alert.
LOW_ATTENDANCE_THRESHOLD = 75
