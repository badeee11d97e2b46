# core/commands/sort.py

from __future__ import annotations

from typing import Any, Callable

from core.commands.base import Command
from core.response import Response
from core.syntax import PREFIX_ASCENDING, PREFIX_DESCENDING
from models.tuthub import Tuthub
from models.tutor import Tutor

SORT_KEYS: dict[str, Callable[[Tutor], Any]] = {
    "name": lambda tutor: tutor.name.value.lower(),
    "module": lambda tutor: tutor.module.value.upper(),
    "year": lambda tutor: tutor.year.as_int,
    "id": lambda tutor: tutor.student_id.value,
    "nominations": lambda tutor: tutor.teaching_nomination.as_int,
}


class SortCommand(Command):
    """Orders the displayed list by one tutor field until the next `sort` or `list`."""

    COMMAND_WORD = "sort"

    MESSAGE_USAGE = (
        f"{COMMAND_WORD}: Sorts the displayed tutor list by a field, "
        f"in ascending ({PREFIX_ASCENDING}) or descending ({PREFIX_DESCENDING}) order.\n"
        f"Parameters: {PREFIX_ASCENDING}FIELD or {PREFIX_DESCENDING}FIELD, "
        f"where FIELD is one of: {', '.join(SORT_KEYS)}\n"
        f"Example: {COMMAND_WORD} {PREFIX_DESCENDING}nominations"
    )

    MESSAGE_SUCCESS = "Sorted tutors by {} in {} order."

    def __init__(self, field: str, reverse: bool = False):
        if field not in SORT_KEYS:
            raise ValueError(f"Unknown sort field: {field}")

        self._field = field
        self._reverse = reverse

    @property
    def field(self) -> str:
        return self._field

    @property
    def reverse(self) -> bool:
        return self._reverse

    def _execute(self, tuthub: Tuthub) -> Response:
        tuthub.update_sort(SORT_KEYS[self._field], self._reverse)

        order = "descending" if self._reverse else "ascending"

        return Response.succeed(
            detail=self.MESSAGE_SUCCESS.format(self._field, order),
            data={
                "show_list": True,
            },
        )
