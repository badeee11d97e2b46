# core/commands/base.py

"""
Shared behavior for Tuthub commands.

A command is built by the parser with already-validated arguments and run once
against a `Tuthub` through `execute()`. Subclasses implement `_execute()` and raise
`CommandError` subclasses for user-level failures; `execute()` turns those into a
failed `Response`, so no command failure ever escapes to the caller as an exception.
"""

from __future__ import annotations

import logging
import traceback

from core.errors import CommandError, IndexOutOfRange
from core.index import Index
from core.response import ErrorCode, Response
from models.tuthub import Tuthub
from models.tutor import Tutor

logger = logging.getLogger(__name__)


class Command:
    COMMAND_WORD: str = ""
    MESSAGE_USAGE: str = ""

    def execute(self, tuthub: Tuthub) -> Response:
        """
        Runs the command against `tuthub`.

        Returns:
            Response: The command result.
                - On success, `detail` is the message shown to the user.
                - On failure, `error` is the `ErrorCode` of the raised `CommandError`,
                  or `ErrorCode.INTERNAL_ERROR` for unexpected errors.

        Notes:
            - Failures are detected before any write, so a failed command leaves `tuthub` unchanged.
        """
        try:
            response = self._execute(tuthub)

        except CommandError as e:
            logger.info("%s failed: %s", self.COMMAND_WORD, e.message)
            return Response.fail(
                detail=e.message,
                error=e.error_code,
            )

        except Exception as e:
            logger.exception("Unexpected error while running %r", self)
            return Response.fail(
                detail=f"Unexpected error: {e}",
                error=ErrorCode.INTERNAL_ERROR,
                trace=traceback.format_exc(),
            )

        else:
            logger.debug("%s succeeded: %s", self.COMMAND_WORD, response.detail)
            return response

    def _execute(self, tuthub: Tuthub) -> Response:
        raise NotImplementedError

    # === helper methods ===

    @staticmethod
    def _tutor_at(tuthub: Tuthub, index: Index) -> Tutor:
        """
        Resolves a displayed index against the current filtered list.

        Raises:
            IndexOutOfRange: If the index is past the end of the displayed list.
        """
        displayed = tuthub.filtered_tutors

        if index.zero_based >= len(displayed):
            raise IndexOutOfRange()

        return displayed[index.zero_based]

    # === dunder methods ===

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True

        if type(other) is not type(self):
            return NotImplemented

        return vars(self) == vars(other)

    __hash__ = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({vars(self)})"
