# mentorium/exceptions.py
"""Errors raised by mentorium"""


class MentoriumError(Exception):
    """Base class for mentorium errors"""


class InvalidMentorCountError(MentoriumError, ValueError):
    """Raised when allocation is requested with a non-positive or fractional mentor count"""

    def __init__(self, value):
        self.value = value
        super().__init__(f"num_mentors must be a positive integer (got {value!r})")


class SpreadsheetReadError(MentoriumError):
    """Raised when an uploaded file cannot be parsed as a spreadsheet"""

    def __init__(self, path: str, reason: str = ''):
        self.path = path
        self.reason = reason
        message = "Failed to read file. Ensure it is a valid Excel document."
        super().__init__(message)
