class PuzzleError(Exception):
    """Base class for puzzle setup failures."""


class ConfigurationError(PuzzleError):
    """The category catalog breaks one of its invariants."""


class InsufficientCategoriesError(PuzzleError):
    """The catalog is smaller than the requested session size."""
