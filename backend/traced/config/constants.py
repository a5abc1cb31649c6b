"""
Centralized constants for the Traced local discovery backend.

Import from here instead of redefining.
"""

# Editorial freshness window, in days (same resolution as verified dates)
STALE_AFTER_DAYS = 180

# Score bounds for the sort weight (5 = most prominent)
MIN_SCORE = 1
MAX_SCORE = 5

# Filter value meaning "no restriction"
DEFAULT_FILTER = "all"

# Ambient query parameter names read by the context resolver
FROM_PARAM = "from"
CITY_PARAM = "city"
CATEGORY_PARAM = "category"
MAX_CARDS_PARAM = "max_cards"

# Where the "clear filters" affordance points on an empty result
CLEAR_FILTERS_HREF = "index.html#local"

# Prefix for stale verification labels
NEEDS_REVIEW_LABEL = "Needs review"
