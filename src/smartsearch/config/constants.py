"""Configuration constants.

Fixed properties of the Smart Connections on-disk format and hard API caps.
These are NOT user-configurable. For configurable values, see models.py.
"""

# =============================================================================
# Smart Connections Record Format
# =============================================================================

MODEL_ID = "TaylorAI/bge-micro-v2"
"""Model key under which Smart Connections stores vectors in .ajson records."""

DOCUMENT_PREFIX = "smart_sources:"
"""Key prefix of whole-note records."""

SECTION_PREFIX = "smart_blocks:"
"""Key prefix of heading-level block records."""

FRAGMENT_DELIMITER = "#"
"""Separates the note path from the heading in section paths."""

EMBEDDINGS_SUBDIR = (".smart-env", "multi")
"""Record directory, relative to the vault root."""

RECORD_EXTENSION = ".ajson"
"""Extension of record files."""

# =============================================================================
# Ranking Defaults and Caps
# =============================================================================

DEFAULT_LIMIT = 10
"""Results returned when the caller does not pass a limit."""

DEFAULT_THRESHOLD = 0.3
"""Minimum cosine similarity when the caller does not pass a threshold."""

SEARCH_MAX_LIMIT = 100
"""Hard cap on results per call."""

SCORE_DECIMALS = 3
"""Similarity scores are rounded to this many decimal places."""

# =============================================================================
# Collaborator Limits
# =============================================================================

MAX_NOTE_CHARS = 10_000
"""Default truncation point for read_note."""

ENCODER_MAX_CHARS = 1800
"""bge-micro-v2 has a 512-token window; ~3.5 chars/token keeps 1800 chars under it."""

QUERY_MAX_CHARS = 2000
"""Maximum query length accepted by the semantic_search tool."""

NOTE_PATH_MAX_CHARS = 500
"""Maximum note path length accepted by tools."""
