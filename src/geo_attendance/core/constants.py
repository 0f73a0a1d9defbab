"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

EARTH_RADIUS_M = 6371000

DEFAULT_OFFICE_LATITUDE = 13.274497
DEFAULT_OFFICE_LONGITUDE = 79.121317
DEFAULT_RADIUS_METERS = 100.0

DEFAULT_IMGBB_UPLOAD_URL = "https://api.imgbb.com/1/upload"
IMGBB_PLACEHOLDER_KEY = "YOUR_FREE_IMGBB_KEY"
DEFAULT_UPLOAD_TIMEOUT_SECONDS = 10.0

WORK_DATE_FORMAT = "%Y-%m-%d"
