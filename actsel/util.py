"""Shared constants for actsel.

Sizes are interval counts. The exhaustive bounds reflect the point where
enumerating 2^n subsets stops finishing in interactive time.
"""

# Largest input the harness hands to exhaustive search by default
EXHAUSTIVE_LIMIT = 20
# Ceiling accepted from configuration
EXHAUSTIVE_HARD_LIMIT = 25

DEFAULT_SIZES = (10, 15, 20, 10000)
DEFAULT_MAX_TIME = 1000
DEFAULT_MAX_DURATION = 50
EDGE_CASE_SIZE = 100
MEMORY_PROBE_SIZE = 1000
