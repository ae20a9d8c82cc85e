"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 500
DEFAULT_INTERFACE_PAGE_SIZE = 100
DEFAULT_IMPORT_BATCH_SIZE = 1000
DEFAULT_TOKEN_TTL_MINUTES = 60
MIN_PASSWORD_LENGTH = 6
REPORT_DATE_FORMAT = "%Y-%m-%d"

# Status filter value the reviewers' screen sends for "all statuses".
INTERFACE_STATUS_ALL = "הכל"
