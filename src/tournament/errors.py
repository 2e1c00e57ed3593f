"""
Errors raised while parsing match results.
"""

from typing import Optional

from src.utils.constants import FIELD_DELIMITER, FIELDS_PER_RECORD, OUTCOME_NAMES


class TallyError(ValueError):
    """Base class for malformed match input."""

    def __init__(self, message: str, line_number: Optional[int] = None, line: Optional[str] = None):
        super().__init__(message)
        self.line_number = line_number
        self.line = line


class MalformedRecord(TallyError):
    """A line did not split into exactly three fields."""

    def __init__(self, line_number: int, line: str, field_count: int):
        message = (f"Line {line_number}: expected {FIELDS_PER_RECORD} fields "
                   f"separated by '{FIELD_DELIMITER}', got {field_count}: {line!r}")
        super().__init__(message, line_number, line)
        self.field_count = field_count


class MalformedOutcome(TallyError):
    """The outcome field is not one of the known outcomes."""

    def __init__(self, line_number: int, line: str, outcome: str):
        message = (f"Line {line_number}: unknown outcome {outcome!r} "
                   f"(expected one of: {', '.join(OUTCOME_NAMES)})")
        super().__init__(message, line_number, line)
        self.outcome = outcome
