"""Exceptions raised by the vitals engine."""


class InvalidInput(ValueError):
    """Raised when anthropometric input is non-numeric or non-positive."""

    def __init__(self, field: str, value):
        self.field = field
        self.value = value
        super().__init__(f"{field} must be a positive number, got {value!r}")
