"""Inventory domain errors."""


class InventoryError(Exception):
    """Base class for inventory lookup failures."""


class SearchTermTooShortError(InventoryError):
    """Raised when a search term is shorter than the minimum length."""

    def __init__(self, term: str, min_length: int):
        self.term = term
        self.min_length = min_length
        super().__init__(
            f"Search term cannot be less than {min_length} characters: {term!r}"
        )


class NoSystemsFoundError(InventoryError):
    """Raised when a search matches no systems."""

    def __init__(self, term: str):
        self.term = term
        super().__init__(f"No systems found matching {term!r}")
