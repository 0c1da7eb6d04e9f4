from typing import Optional


class ActivityAnalysisError(Exception):
    """Base class for failures raised by the activity pipeline."""


class InvalidDateFormatError(ActivityAnalysisError, ValueError):
    def __init__(self, value: str, expected: str = "YYYY-MM-DD") -> None:
        self.value = value
        self.expected = expected
        super().__init__(f"Invalid date format: {value!r} (expected {expected})")


class InsufficientDataError(ActivityAnalysisError, ValueError):
    def __init__(self, count: int, required: int = 2) -> None:
        self.count = count
        self.required = required
        super().__init__(
            f"Insufficient data for trend fit: {count} daily points (need at least {required})"
        )


class SampleSourceError(ActivityAnalysisError):
    def __init__(self, message: str, value: Optional[str] = None) -> None:
        self.value = value
        super().__init__(message)
