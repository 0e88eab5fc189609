"""Saigai Watch: all default values and configuration constants.

All tuneable values live here. Never hard-code magic numbers in source files.
Import constants from this module; override via WatchConfig at runtime.
"""

# ── USGS FDSN event feed ───────────────────────────────────────────────────────
USGS_BASE_URL: str = "https://earthquake.usgs.gov/fdsnws/event/1/query"

# Response format requested from the event service
FEED_FORMAT: str = "geojson"

# Lookback window; starttime = now − LOOKBACK_HOURS, truncated to a UTC date
LOOKBACK_HOURS: int = 48

# Minimum magnitude filter sent to the feed
MIN_MAGNITUDE: float = 2.5

# Search circle centre (roughly central Japan) and radius
SEARCH_LATITUDE: float = 36.0
SEARCH_LONGITUDE: float = 138.0
SEARCH_RADIUS_KM: int = 1500

# HTTP request timeout for the feed call (seconds)
USGS_REQUEST_TIMEOUT: int = 30

# Upper bound applied to any configured timeout
MAX_REQUEST_TIMEOUT: int = 300

# ── Map view ───────────────────────────────────────────────────────────────────
# Initial centre (Tokyo) and zoom for every cycle
MAP_CENTER: tuple = (35.6895, 139.6917)
MAP_ZOOM: int = 5

# Zoom used when a card is activated
FLY_TO_ZOOM: int = 8

TILE_URL: str = "https://{s}.tile.openstreetmap.org/{z}/{x}/{y}.png"
TILE_ATTRIBUTION: str = "© OpenStreetMap contributors"
TILE_MAX_ZOOM: int = 18

# ── Magnitude tiers ────────────────────────────────────────────────────────────
TIER_HIGH_THRESHOLD: float = 6.0
TIER_MEDIUM_THRESHOLD: float = 4.5

TIER_HIGH_COLOR: str = "#D82C2C"     # Red
TIER_MEDIUM_COLOR: str = "orange"
TIER_LOW_COLOR: str = "#0077B6"      # Blue

# Marker diameter (px) = MARKER_BASE_SIZE + magnitude * MARKER_SCALE
MARKER_BASE_SIZE: float = 10.0
MARKER_SCALE: float = 3.0

# ── Cross-link highlight ───────────────────────────────────────────────────────
FLASH_COLOR: str = "rgba(255, 255, 0, 0.4)"
FLASH_DURATION_SECONDS: float = 0.5

# ── Cycle history ──────────────────────────────────────────────────────────────
CYCLE_LOG_LIMIT: int = 20                # Most recent CycleRecords kept on AppState

# ── Localization ──────────────────────────────────────────────────────────────
DEFAULT_LOCALE: str = "en"
SUPPORTED_LOCALES: tuple = ("en", "ja")

# ── Theme preference ──────────────────────────────────────────────────────────
THEME_KEY: str = "theme"
THEME_LIGHT: str = "light"
THEME_DARK: str = "dark"

# Local preference file (one key: THEME_KEY)
PREFERENCES_PATH: str = "~/.saigaiwatch/preferences.json"

# ── Output paths ──────────────────────────────────────────────────────────────
OUTPUT_PATH: str = "outputs/saigai_watch.html"

# ── Logging ────────────────────────────────────────────────────────────────────
DEFAULT_LOG_LEVEL: str = "INFO"
