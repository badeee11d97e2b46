# core/commands/delete.py

from __future__ import annotations

from core.commands.base import Command
from core.index import Index
from core.response import Response
from models.tuthub import Tuthub


class DeleteCommand(Command):
    COMMAND_WORD = "delete"

    MESSAGE_USAGE = (
        f"{COMMAND_WORD}: Deletes the tutor identified by the index number used in the displayed tutor list.\n"
        "Parameters: INDEX (must be a positive integer)\n"
        f"Example: {COMMAND_WORD} 1"
    )

    MESSAGE_DELETE_TUTOR_SUCCESS = "Deleted Tutor: {}"

    def __init__(self, index: Index):
        if index is None:
            raise TypeError("DeleteCommand requires an index.")

        self._index = index

    @property
    def index(self) -> Index:
        return self._index

    def _execute(self, tuthub: Tuthub) -> Response:
        tutor_to_delete = self._tutor_at(tuthub, self._index)

        remove_response = tuthub.remove_tutor(tutor_to_delete)

        if not remove_response.success:
            return remove_response

        return Response.succeed(
            detail=self.MESSAGE_DELETE_TUTOR_SUCCESS.format(tutor_to_delete),
            data={
                "tutor": tutor_to_delete,
                "show_list": True,
            },
        )
