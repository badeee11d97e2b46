# core/commands/find.py

from __future__ import annotations

from core.commands.base import Command
from core.response import Response
from models.predicates import (
    ModuleContainsKeywordPredicate,
    NameContainsKeywordsPredicate,
)
from models.tuthub import Tuthub

MESSAGE_TUTORS_LISTED_OVERVIEW = "{} tutors listed!"


class FindCommand(Command):
    COMMAND_WORD = "find"

    MESSAGE_USAGE = (
        f"{COMMAND_WORD}: Finds all tutors whose names contain any of "
        "the specified keywords (case-insensitive) and displays them as a list with index numbers.\n"
        "Parameters: KEYWORD [MORE_KEYWORDS]...\n"
        f"Example: {COMMAND_WORD} alice bob charlie"
    )

    def __init__(self, predicate: NameContainsKeywordsPredicate):
        self._predicate = predicate

    def _execute(self, tuthub: Tuthub) -> Response:
        tuthub.update_filter(self._predicate)

        return Response.succeed(
            detail=MESSAGE_TUTORS_LISTED_OVERVIEW.format(len(tuthub.filtered_tutors)),
            data={
                "show_list": True,
            },
        )


class FindByModuleCommand(Command):
    COMMAND_WORD = "findbymodule"

    MESSAGE_USAGE = (
        f"{COMMAND_WORD}: Finds all tutors whose module contains any of "
        "the specified keywords (case-insensitive) and displays them as a list with index numbers.\n"
        "Parameters: KEYWORD [MORE_KEYWORDS]...\n"
        f"Example: {COMMAND_WORD} cs2100 cs2105"
    )

    def __init__(self, predicate: ModuleContainsKeywordPredicate):
        self._predicate = predicate

    def _execute(self, tuthub: Tuthub) -> Response:
        tuthub.update_filter(self._predicate)

        return Response.succeed(
            detail=MESSAGE_TUTORS_LISTED_OVERVIEW.format(len(tuthub.filtered_tutors)),
            data={
                "show_list": True,
            },
        )
