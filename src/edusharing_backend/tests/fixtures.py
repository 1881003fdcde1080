"""
Shared test constants.
"""

OBJECT_URL = "ccrep://homeRepository/abc-123-xyz-456789"
OBJECT_ID = "abc-123-xyz-456789"
REPOSITORY_ID = "homeRepository"
FIXED_TIME = 1700000000
