"""Domain error types."""

from __future__ import annotations


class InvalidArgument(ValueError):
    """Raised when an exercise receives input it cannot compute on.

    Attributes:
        field: Name of the offending argument, when one can be singled out.
    """

    def __init__(self, message: str, *, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field
