"""Domain errors."""


class InvalidInputError(ValueError):
    """Raised when a volume, goal or time-of-day input is rejected."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field
        self.message = message
