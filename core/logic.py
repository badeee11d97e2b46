# core/logic.py

"""
Runs user input against a `Tuthub` and keeps the data file in sync.

`Logic` is the single entry point used by the CLI: it parses a line, executes the
resulting command, and saves the Tuthub after any successful command that left it
with unsaved changes. Every outcome, including parse failures and failed saves,
comes back as a `Response`.
"""

from __future__ import annotations

import logging

from core.errors import ParseError
from core.parser import parse_command
from core.response import Response
from models.tuthub import Tuthub
from models.tutor import Tutor

logger = logging.getLogger(__name__)


class Logic:

    def __init__(self, tuthub: Tuthub, data_path: str | None = None):
        self._tuthub = tuthub
        self._data_path = data_path

    # === properties ===

    @property
    def tuthub(self) -> Tuthub:
        return self._tuthub

    @property
    def data_path(self) -> str | None:
        return self._data_path

    @property
    def displayed_tutors(self) -> list[Tutor]:
        return self._tuthub.filtered_tutors

    # === command execution ===

    def execute(self, user_input: str) -> Response:
        """
        Parses and runs one line of user input.

        Returns:
            Response: The command's response, or a failed response with:
                - `ErrorCode.INVALID_INPUT` if parsing or field validation failed.
                - `ErrorCode.NO_FIELDS_EDITED` if an edit carried no fields.
                - `ErrorCode.INTERNAL_ERROR` if the command succeeded but saving failed.

        Notes:
            - Nothing is saved when `data_path` is None.
        """
        logger.info("Executing: %s", user_input)

        try:
            command = parse_command(user_input)

        except ParseError as e:
            return Response.fail(
                detail=e.message,
                error=e.error_code,
            )

        response = command.execute(self._tuthub)

        if (
            response.success
            and self._data_path is not None
            and self._tuthub.has_unsaved_changes
        ):
            save_response = self._tuthub.save(self._data_path)

            if not save_response.success:
                return Response.fail(
                    detail=f"{response.detail}\nCould not save changes: {save_response.detail}",
                    error=save_response.error,
                    data=response.data,
                )

        return response
