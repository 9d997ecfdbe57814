import os

# Sentinel score for candidates that must never lose a comparison
# (typed word, app-defined completions, hardcoded punctuation).
MAX_SCORE: int = 2**31 - 1

# Source ids stamped on candidates the core creates itself
SOURCE_USER_TYPED: str = "user-typed"
SOURCE_APP_DEFINED: str = "application-defined"
SOURCE_HARDCODED: str = "hardcoded"

# Default punctuation strip shown when no word is being composed
PUNCTUATION_SUGGESTIONS: list[str] = ["!", "?", ",", ":", ";", "\"", "(", ")", "'", "-", "/", "@", "_"]

# Wire-format defaults for rows that omit a field
DEFAULT_KIND: str = "correction"
DEFAULT_SOURCE: str = "unknown"

# Flask UI
WEB_HOST: str = "127.0.0.1"
WEB_PORT: int = 8000

# Progress logging (set WORDSUGGEST_VERBOSE=1 to enable)
VERBOSE_ENV: str = "WORDSUGGEST_VERBOSE"
VERBOSE: bool = os.environ.get(VERBOSE_ENV) == "1"
