class WealthError(ValueError):
    """Base class for projection engine errors."""


class InvalidInputError(WealthError):
    """Raised before any trial runs when an input cannot be simulated."""


class EmptyInputError(WealthError):
    """Raised when a reduction is asked for over an empty collection."""
