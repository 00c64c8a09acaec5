"""Constants for segstring - granularities and cache key conventions."""

# Closed set of segmentation units
GRANULARITIES = ("grapheme", "word", "sentence")

# Cache key used when no locale is given (engine default locale)
DEFAULT_LOCALE_KEY = "default"

# Joins the identifiers of a locale list. BCP 47 tags never contain a comma,
# so two different lists can never produce the same key.
LOCALE_KEY_SEPARATOR = ","
