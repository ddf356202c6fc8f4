"""Constants for YouTube Creator Dashboard integration."""

DOMAIN = "youtube_creator_dashboard"

# OAuth Scopes (read-only account, analytics and monetary analytics)
OAUTH_SCOPES = [
    "https://www.googleapis.com/auth/youtube.readonly",
    "https://www.googleapis.com/auth/yt-analytics.readonly",
    "https://www.googleapis.com/auth/yt-analytics-monetary.readonly",
]

# OAuth URLs
OAUTH_AUTHORIZE_URL = "https://accounts.google.com/o/oauth2/v2/auth"
OAUTH_TOKEN_URL = "https://oauth2.googleapis.com/token"

# API Endpoints
YOUTUBE_DATA_API_BASE = "https://www.googleapis.com/youtube/v3"
YOUTUBE_ANALYTICS_API_BASE = "https://youtubeanalytics.googleapis.com/v2"
ANALYTICS_REPORTS_PATH = "/reports"
EXCHANGE_RATE_URL = "https://api.frankfurter.dev/v1/latest"

# Config entry keys
CONF_CHANNEL_ID = "channel_id"
CONF_CHANNEL_TITLE = "channel_title"
CONF_UPDATE_INTERVAL = "update_interval"
CONF_REPORT_DAYS = "report_days"
CONF_CURRENCY = "currency"

# Update Interval (seconds)
DEFAULT_UPDATE_INTERVAL = 3600  # 1 hour
MIN_UPDATE_INTERVAL = 300

# Timeout for one full dashboard refresh (seconds)
UPDATE_TIMEOUT = 60

# Date Range (days)
DEFAULT_REPORT_DAYS = 28
MAX_REPORT_DAYS = 365

# Result limits
DEFAULT_MAX_VIDEOS = 50
DEFAULT_TOP_VIDEOS = 20

# Revenue is reported in USD
REVENUE_CURRENCY = "USD"
DEFAULT_CURRENCY = "SEK"

# Videos shorter than this (or tagged) count as Shorts
SHORTS_MAX_SECONDS = 60
SHORTS_TAG = "#shorts"

# Analytics channel selector
ANALYTICS_CHANNEL_IDS = "channel==MINE"

# YouTube Analytics API metric sets
VIDEO_ANALYTICS_METRICS = [
    "views",
    "estimatedMinutesWatched",
    "averageViewDuration",
    "likes",
    "subscribersGained",
    "estimatedRevenue",
]

REVENUE_METRICS = [
    "views",
    "estimatedRevenue",
    "estimatedAdRevenue",
    "grossRevenue",
    "cpm",
    "monetizedPlaybacks",
]

OVERVIEW_METRICS = [
    "views",
    "estimatedMinutesWatched",
    "averageViewDuration",
    "likes",
    "subscribersGained",
    "subscribersLost",
]

TOP_VIDEO_METRICS = [
    "views",
    "estimatedMinutesWatched",
    "likes",
    "estimatedRevenue",
]

# Services
SERVICE_GET_VIDEO_ANALYTICS = "get_video_analytics"
ATTR_CONFIG_ENTRY_ID = "config_entry_id"
ATTR_VIDEO_ID = "video_id"
ATTR_START_DATE = "start_date"
ATTR_END_DATE = "end_date"
