# core/commands/add.py

from __future__ import annotations

from core.commands.base import Command
from core.errors import DuplicateRecord
from core.response import Response
from core.syntax import (
    PREFIX_EMAIL,
    PREFIX_MODULE,
    PREFIX_NAME,
    PREFIX_PHONE,
    PREFIX_STUDENT_ID,
    PREFIX_TAG,
    PREFIX_TEACHING_NOMINATION,
    PREFIX_YEAR,
)
from models.tuthub import Tuthub
from models.tutor import Tutor


class AddCommand(Command):
    COMMAND_WORD = "add"

    MESSAGE_USAGE = (
        f"{COMMAND_WORD}: Adds a tutor to Tuthub. "
        "Parameters: "
        f"{PREFIX_NAME}NAME "
        f"{PREFIX_PHONE}PHONE "
        f"{PREFIX_EMAIL}EMAIL "
        f"{PREFIX_MODULE}MODULE "
        f"{PREFIX_YEAR}YEAR "
        f"{PREFIX_STUDENT_ID}STUDENT ID "
        f"{PREFIX_TEACHING_NOMINATION}TEACHING NOMINATIONS "
        f"[{PREFIX_TAG}TAG]...\n"
        f"Example: {COMMAND_WORD} {PREFIX_NAME}John Doe {PREFIX_PHONE}98765432 "
        f"{PREFIX_EMAIL}johnd@example.com {PREFIX_MODULE}CS2100 {PREFIX_YEAR}3 "
        f"{PREFIX_STUDENT_ID}A1234567X {PREFIX_TEACHING_NOMINATION}1 {PREFIX_TAG}senior"
    )

    MESSAGE_SUCCESS = "New tutor added: {}"

    def __init__(self, tutor: Tutor):
        if tutor is None:
            raise TypeError("AddCommand requires a tutor.")

        self._tutor = tutor

    @property
    def tutor(self) -> Tutor:
        return self._tutor

    def _execute(self, tuthub: Tuthub) -> Response:
        if tuthub.has_tutor(self._tutor):
            raise DuplicateRecord()

        add_response = tuthub.add_tutor(self._tutor)

        if not add_response.success:
            return add_response

        return Response.succeed(
            detail=self.MESSAGE_SUCCESS.format(self._tutor),
            data={
                "tutor": self._tutor,
                "show_list": True,
            },
        )
