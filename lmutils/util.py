"""Utility constants for lmutils.

Time unit constants represent durations in seconds.
Months and years are fixed-length approximations (30 and 365 days), not
calendar-accurate spans.
"""

# Time unit constants (all values in seconds)
SECOND = 1
MINUTE = 60
HOUR = 3600
DAY = 86400
WEEK = 604800
MONTH = 2592000
YEAR = 31536000
