# core/commands/comment.py

from __future__ import annotations

from core.commands.base import Command
from core.index import Index
from core.response import Response
from core.syntax import PREFIX_COMMENT
from models.fields import Comment
from models.tuthub import Tuthub
from models.tutor import Tutor


class CommentCommand(Command):
    """
    Replaces the comment of the tutor at a displayed index.

    This is the only command that changes a comment; `edit` always carries it over.
    """

    COMMAND_WORD = "comment"

    MESSAGE_USAGE = (
        f"{COMMAND_WORD}: Sets the comment of the tutor identified by the index number "
        "used in the displayed tutor list. An empty comment clears it.\n"
        f"Parameters: INDEX (must be a positive integer) {PREFIX_COMMENT}COMMENT\n"
        f"Example: {COMMAND_WORD} 1 {PREFIX_COMMENT}Very punctual"
    )

    MESSAGE_ADD_COMMENT_SUCCESS = "Added comment to Tutor: {}"
    MESSAGE_CLEAR_COMMENT_SUCCESS = "Removed comment from Tutor: {}"

    def __init__(self, index: Index, comment: Comment):
        if index is None or comment is None:
            raise TypeError("CommentCommand requires an index and a comment.")

        self._index = index
        self._comment = comment

    def _execute(self, tuthub: Tuthub) -> Response:
        target = self._tutor_at(tuthub, self._index)

        commented = Tutor(
            name=target.name,
            phone=target.phone,
            email=target.email,
            module=target.module,
            year=target.year,
            student_id=target.student_id,
            comment=self._comment,
            teaching_nomination=target.teaching_nomination,
            tags=target.tags,
        )

        set_response = tuthub.set_tutor(target, commented)

        if not set_response.success:
            return set_response

        message = (
            self.MESSAGE_CLEAR_COMMENT_SUCCESS
            if self._comment.is_empty
            else self.MESSAGE_ADD_COMMENT_SUCCESS
        )

        return Response.succeed(
            detail=message.format(commented),
            data={
                "tutor": commented,
                "show_list": True,
            },
        )
