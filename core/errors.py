# core/errors.py

"""
Exception types raised inside Tuthub.

Each exception carries the `ErrorCode` used when it is converted into a failed
`Response` at a command or runner boundary. Validators and value objects raise;
commands and the runner catch and report.
"""

from core.response import ErrorCode


class TuthubError(Exception):
    error_code: ErrorCode = ErrorCode.INTERNAL_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConstraintViolation(TuthubError, ValueError):
    """Raised when a value object is built from a payload that fails its rule."""

    error_code = ErrorCode.INVALID_FIELD_VALUE


class ParseError(TuthubError):
    error_code = ErrorCode.INVALID_INPUT


class NoFieldsEdited(ParseError):
    error_code = ErrorCode.NO_FIELDS_EDITED

    def __init__(self, message: str = "At least one field to edit must be provided."):
        super().__init__(message)


class CommandError(TuthubError):
    error_code = ErrorCode.VALIDATION_FAILED


class IndexOutOfRange(CommandError):
    error_code = ErrorCode.INDEX_OUT_OF_RANGE

    def __init__(self, message: str = "The tutor index provided is invalid."):
        super().__init__(message)


class DuplicateRecord(CommandError):
    error_code = ErrorCode.DUPLICATE_RECORD

    def __init__(self, message: str = "This tutor already exists in Tuthub."):
        super().__init__(message)
