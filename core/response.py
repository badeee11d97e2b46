# core/response.py

"""
Result objects passed back from Tuthub model mutators, commands, and the runner.

Every operation that can fail for a user-level reason reports through a `Response`
instead of raising. The CLI only ever inspects responses: `detail` is the text shown
to the user, `error` says what kind of failure occurred, and `data` carries the
payload plus the display flags the command loop reacts to.
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping


class ErrorCode(Enum):
    # === lookups ===
    # no stored tutor equals the one given
    NOT_FOUND = "NOT_FOUND"

    # displayed index is past the end of the displayed list
    INDEX_OUT_OF_RANGE = "INDEX_OUT_OF_RANGE"

    # === uniqueness ===
    # another tutor already holds the same student ID
    DUPLICATE_RECORD = "DUPLICATE_RECORD"

    # === user input ===
    # command word, argument layout, or data file structure is malformed
    INVALID_INPUT = "INVALID_INPUT"

    # a field payload breaks its value object's rule
    INVALID_FIELD_VALUE = "INVALID_FIELD_VALUE"

    # edit command carries no field to change
    NO_FIELDS_EDITED = "NO_FIELDS_EDITED"

    # the input is well formed, but the command cannot run against the current state
    VALIDATION_FAILED = "VALIDATION_FAILED"

    # === faults ===
    INTERNAL_ERROR = "INTERNAL_ERROR"


class Response:
    """
    Outcome of a single Tuthub operation.

    Attributes:
        success (bool): Indicates whether the operation succeeded.
        detail (str | None): Message for the user, on success and on failure.
        error (ErrorCode | None): Failure category; always None on success.
        data (Mapping[str, Any]): Read-only payload, varies by operation.
        trace (str | None): Formatted traceback, only for unexpected errors.

    Recognized payload keys:
        - "tutor": the tutor a command acted on, shown in full by the CLI.
        - "show_list": True when the displayed list changed and should be reprinted.
        - "exit": True when the session should end.
    """

    __slots__ = ("_success", "_detail", "_error", "_data", "_trace")

    def __init__(
        self,
        success: bool,
        detail: str | None = None,
        error: ErrorCode | None = None,
        data: Mapping[str, Any] | None = None,
        trace: str | None = None,
    ):
        if success and error is not None:
            raise ValueError("A successful response cannot carry an error code.")

        self._success = success
        self._detail = detail
        self._error = error
        self._data = MappingProxyType(dict(data or {}))
        self._trace = trace

    # === public classmethods ===

    @classmethod
    def succeed(
        cls,
        detail: str | None = None,
        data: Mapping[str, Any] | None = None,
    ) -> Response:
        return cls(True, detail=detail, data=data)

    @classmethod
    def fail(
        cls,
        detail: str | None = None,
        error: ErrorCode = ErrorCode.VALIDATION_FAILED,
        data: Mapping[str, Any] | None = None,
        trace: str | None = None,
    ) -> Response:
        return cls(False, detail=detail, error=error, data=data, trace=trace)

    # === properties ===

    @property
    def success(self) -> bool:
        return self._success

    @property
    def detail(self) -> str | None:
        return self._detail

    @property
    def error(self) -> ErrorCode | None:
        return self._error

    @property
    def data(self) -> Mapping[str, Any]:
        return self._data

    @property
    def trace(self) -> str | None:
        return self._trace

    # --- display flags ---

    @property
    def show_list(self) -> bool:
        return bool(self._data.get("show_list"))

    @property
    def exit_requested(self) -> bool:
        return bool(self._data.get("exit"))

    # === dunder methods ===

    def __repr__(self) -> str:
        return f"Response({self._success}, {self._error}, {self._detail!r})"

    def __str__(self) -> str:
        if self._success:
            return f"OK: {self._detail or ''}"

        code = self._error.name if self._error is not None else "ERROR"
        return f"{code}: {self._detail or ''}"
