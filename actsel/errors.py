"""Common exceptions for actsel."""


class SelectionError(ValueError):
    """Base error for invalid selection requests."""


class ExhaustiveLimitError(SelectionError):
    """Raised when an input is too large for exhaustive subset search."""

    def __init__(self, size: int, limit: int):
        super().__init__(
            f"Exhaustive search over {size} intervals exceeds the limit of {limit}.\n"
            f"It enumerates 2^{size} subsets; use greedy_select() for large inputs\n"
            f"or raise the limit explicitly for a one-off oracle check."
        )
        self.size = size
        self.limit = limit
