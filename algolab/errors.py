"""Exceptions shared by the algorithms in this package."""


class NegativeCycleError(ValueError):
    """Raised when a graph holds a cycle of negative total weight."""

    def __init__(self, message: str = "Graph contains a negative-weight cycle.") -> None:
        super().__init__(message)