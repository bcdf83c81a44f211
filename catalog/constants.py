"""
Application-level constants for hardcoded business logic.

These values describe the shape of the catalog domain and the response
envelope and should NEVER be changed via environment variables. For
configurable values (cache TTL, pools, logging) see catalog/settings.py.
"""

# ============================================================================
# Field Limits
# ============================================================================

# Maximum length of Author.name and Book.title
MAX_NAME_LENGTH = 100

# Largest primary key an integer id column can hold on every supported
# backend (PostgreSQL INTEGER is 32-bit). Ids outside 1..MAX_ID never
# name a stored row.
MAX_ID = 2**31 - 1


# ============================================================================
# Cache Keys
# ============================================================================

# List keys cache the full serialized table
AUTHORS_CACHE_KEY = "authors"
BOOKS_CACHE_KEY = "books"

# Entity keys are formatted with the primary key, e.g. "author_1"
AUTHOR_CACHE_KEY = "author_{id}"
BOOK_CACHE_KEY = "book_{id}"


# ============================================================================
# Logging
# ============================================================================

# Maximum size of one JSON log line before the message is truncated
MAX_LOG_SIZE_BYTES = 256 * 1024
