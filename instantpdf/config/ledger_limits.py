"""
Ledger capacities, plan defaults and storage keys.

Centralized configuration for the local usage ledger. Every store owns
exactly one storage key and never touches another store's key.
"""

# Bounded log capacities
MAX_HISTORY_ITEMS = 50
"""Maximum processing-history entries kept (oldest discarded first)"""

MAX_RECENT_FILES = 10
"""Maximum recent-file shortcuts kept (oldest discarded first)"""

# Plan defaults
DEFAULT_ANONYMOUS_DAILY_LIMIT = 8
"""Daily operation cap shown to anonymous users when the backend omits it"""

TOP_TOOLS_COUNT = 5
"""Number of most-used tools reported by the usage summary"""

# Storage keys
USAGE_STATS_KEY = "instantpdf_usage_stats"
HISTORY_KEY = "instantpdf_processing_history"
RECENT_FILES_KEY = "instantpdf_recent_files"
FAVORITES_KEY = "instantpdf_favorites"

TOKEN_KEY = "token"
"""Key holding the bearer token written by the sign-in flow"""
