# core/commands/edit.py

from __future__ import annotations

from core.commands.base import Command
from core.edit_descriptor import EditTutorDescriptor, create_edited_tutor
from core.errors import DuplicateRecord, NoFieldsEdited
from core.index import Index
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


class EditCommand(Command):
    """
    Edits the details of the tutor at a displayed index.

    The target `Tutor` is never modified: a replacement is built with
    `create_edited_tutor()` and swapped into the same position.
    """

    COMMAND_WORD = "edit"

    MESSAGE_USAGE = (
        f"{COMMAND_WORD}: Edits the details of the tutor identified "
        "by the index number used in the displayed tutor list. "
        "Existing values will be overwritten by the input values.\n"
        "Parameters: INDEX (must be a positive integer) "
        f"[{PREFIX_NAME}NAME] "
        f"[{PREFIX_PHONE}PHONE] "
        f"[{PREFIX_EMAIL}EMAIL] "
        f"[{PREFIX_MODULE}MODULE] "
        f"[{PREFIX_YEAR}YEAR] "
        f"[{PREFIX_STUDENT_ID}STUDENT ID] "
        f"[{PREFIX_TEACHING_NOMINATION}TEACHING NOMINATIONS] "
        f"[{PREFIX_TAG}TAG]...\n"
        f"Example: {COMMAND_WORD} 1 {PREFIX_PHONE}91234567 {PREFIX_EMAIL}johndoe@example.com"
    )

    MESSAGE_EDIT_TUTOR_SUCCESS = "Edited Tutor: {}"

    def __init__(self, index: Index, descriptor: EditTutorDescriptor):
        if index is None:
            raise TypeError("EditCommand requires an index.")

        if descriptor is None:
            raise TypeError("EditCommand requires an edit descriptor.")

        self._index = index
        self._descriptor = descriptor.copy()

    @property
    def index(self) -> Index:
        return self._index

    @property
    def descriptor(self) -> EditTutorDescriptor:
        return self._descriptor.copy()

    def _execute(self, tuthub: Tuthub) -> Response:
        if not self._descriptor.is_any_field_edited():
            not_edited = NoFieldsEdited()
            return Response.fail(
                detail=not_edited.message,
                error=not_edited.error_code,
            )

        tutor_to_edit = self._tutor_at(tuthub, self._index)
        edited_tutor = create_edited_tutor(tutor_to_edit, self._descriptor)

        if not tutor_to_edit.is_same_tutor(edited_tutor) and tuthub.has_tutor(
            edited_tutor
        ):
            raise DuplicateRecord()

        set_response = tuthub.set_tutor(tutor_to_edit, edited_tutor)

        if not set_response.success:
            return set_response

        tuthub.update_filter(None)

        return Response.succeed(
            detail=self.MESSAGE_EDIT_TUTOR_SUCCESS.format(edited_tutor),
            data={
                "tutor": edited_tutor,
                "show_list": True,
            },
        )
