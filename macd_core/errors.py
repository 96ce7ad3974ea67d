"""Errors raised by the indicator core."""


class InsufficientDataError(ValueError):
    """Input series is shorter than the requested periods need.

    Attributes:
        required: Minimum number of samples needed.
        available: Number of samples actually supplied.
    """

    def __init__(self, required: int, available: int, what: str = "calculation"):
        self.required = required
        self.available = available
        super().__init__(
            f"Insufficient data for {what}: need {required} values, got {available}"
        )
