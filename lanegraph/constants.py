"""
Centralized constants for lanegraph.

Palette, lane width and log defaults live here so the engine, the reader
and the command line agree on them.
"""

# Branch colors, indexed by ref-name hash or lane position
BRANCH_COLORS = [
    "#f59e0b",  # amber
    "#3b82f6",  # blue
    "#22c55e",  # green
    "#a855f7",  # purple
    "#ec4899",  # pink
    "#06b6d4",  # cyan
    "#f97316",  # orange
    "#6366f1",  # indigo
]

# The graph column is two lanes wide
MAX_LANES = 2

# Commit log defaults
DEFAULT_LOG_LIMIT = 50
SHORT_HASH_LENGTH = 7
