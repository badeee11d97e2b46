# core/commands/general.py

from __future__ import annotations

from core.commands.base import Command
from core.response import Response
from models.tuthub import Tuthub


class ListCommand(Command):
    COMMAND_WORD = "list"

    MESSAGE_USAGE = f"{COMMAND_WORD}: Lists all tutors in their stored order."

    MESSAGE_SUCCESS = "Listed all tutors"

    def _execute(self, tuthub: Tuthub) -> Response:
        tuthub.update_filter(None)
        tuthub.update_sort(None)

        return Response.succeed(
            detail=self.MESSAGE_SUCCESS,
            data={
                "show_list": True,
            },
        )


class ClearCommand(Command):
    COMMAND_WORD = "clear"

    MESSAGE_USAGE = f"{COMMAND_WORD}: Removes every tutor from Tuthub."

    MESSAGE_SUCCESS = "Tuthub has been cleared!"

    def _execute(self, tuthub: Tuthub) -> Response:
        tuthub.clear()

        return Response.succeed(
            detail=self.MESSAGE_SUCCESS,
            data={
                "show_list": True,
            },
        )


class ExitCommand(Command):
    COMMAND_WORD = "exit"

    MESSAGE_USAGE = f"{COMMAND_WORD}: Exits the program."

    MESSAGE_EXIT_ACKNOWLEDGEMENT = "Exiting Tuthub as requested ..."

    def _execute(self, tuthub: Tuthub) -> Response:
        return Response.succeed(
            detail=self.MESSAGE_EXIT_ACKNOWLEDGEMENT,
            data={
                "exit": True,
            },
        )


class HelpCommand(Command):
    COMMAND_WORD = "help"

    MESSAGE_USAGE = f"{COMMAND_WORD}: Shows the usage of every command."

    def __init__(self, usages: list[str]):
        self._usages = list(usages)

    def _execute(self, tuthub: Tuthub) -> Response:
        return Response.succeed(detail="\n\n".join(self._usages))
