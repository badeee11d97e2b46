# cli/menu_helpers.py

"""
Terminal input and output for the Tuthub command loop.

Everything that touches `print()` or `input()` lives here, so `cli.main` only
decides *what* to show. EOFError from `input()` is never caught in this module;
the command loop treats it as the end of the session.
"""

from typing import Callable, Sequence

import core.formatters as formatters
from core.response import Response

PROMPT = ">> "

# === output ===


def display_banner(title: str) -> None:
    print(f"\n{formatters.format_banner_text(title)}")


def display_numbered(items: Sequence, formatter: Callable = str) -> None:
    """
    Prints one line per item, numbered from 1.

    Notes:
        - The numbers are the indices accepted by `edit`, `comment`, and `delete`.
        - An empty sequence prints a placeholder line instead.
    """
    if not items:
        print("  (no tutors to show)")
        return

    width = len(str(len(items)))

    for number, item in enumerate(items, 1):
        print(f"{number:>{width + 1}}. {formatter(item)}")


def display_failure(response: Response, debug: bool = False) -> None:
    """
    Prints a failed `Response` as `[ERROR_CODE] detail`.

    The traceback is printed too when `debug` is set and the response carries one.
    Successful responses are ignored.
    """
    if response.success:
        return

    code = response.error.name if response.error is not None else "ERROR"
    print(f"\n[{code}] {response.detail}")

    if debug and response.trace:
        print(f"\n{response.trace}")


# === input ===


def prompt_command() -> str:
    return input(f"\n{PROMPT}").strip()


def confirm_action(question: str) -> bool:
    """Asks a yes/no question until the answer is one of y, yes, n, or no."""
    while True:
        answer = input(f"\n{question} (y/n)\n  {PROMPT}").strip().lower()

        if answer in ("y", "yes"):
            return True

        if answer in ("n", "no"):
            return False

        print("Please answer y or n.")


def confirm_discard_unsaved_changes() -> bool:
    return confirm_action(
        "Some changes could not be saved to the data file and will be lost. Exit anyway?"
    )
