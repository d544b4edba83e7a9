"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_SESSION_DAYS = 7
DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100
DEFAULT_API_TIMEOUT = 30

DAYS_IN_WEEK = 7
# date.weekday(): Monday=0 ... Sunday=6
SUNDAY = 6
EXCLUDED_WEEKDAY = 4  # Friday

ISO_DATE_FORMAT = "%Y-%m-%d"
