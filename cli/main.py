# cli/main.py

"""
Command loop for the Tuthub CLI.

Loads the data file named by the configuration, then reads commands one line at a
time, runs them through `Logic`, and prints the result along with the displayed
tutor list whenever a command changes it.
"""

import logging

import cli.menu_helpers as helpers
import cli.model_formatters as model_formatters
import core.formatters as formatters
from cli.config import TuthubConfig
from core.logic import Logic
from core.response import Response
from models.tuthub import Tuthub


def run_cli() -> None:
    """
    Top-level loop for a Tuthub session.

    Raises:
        SystemExit: When the user exits, input ends, or the configuration is invalid.
    """
    try:
        config = TuthubConfig.from_env()

    except ValueError as e:
        print(f"\n[ERROR] Invalid configuration: {e}")
        raise SystemExit(1)

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    debug = config.log_level == "DEBUG"

    helpers.display_banner("TUTHUB")

    tuthub = load_tuthub(config.data_path)

    if tuthub is None:
        exit_program()

    logic = Logic(tuthub, config.data_path)
    display_tutors(logic)

    while True:
        try:
            user_input = helpers.prompt_command()

        except EOFError:
            if confirm_exit(logic):
                exit_program()

            continue

        if not user_input:
            continue

        response = logic.execute(user_input)
        display_command_response(response, logic, debug)

        if response.exit_requested and confirm_exit(logic):
            exit_program()


def load_tuthub(data_path: str) -> Tuthub | None:
    """
    Loads the Tuthub stored at `data_path`.

    Returns:
        Tuthub: The loaded `Tuthub`, or an empty one if the user chooses to start over after a failed load.
        None: If loading fails and the user declines to start over.

    Notes:
        - Starting over does not touch the data file until the first change is saved.
    """
    print(f"\nLoading tutors from {data_path} ...")

    tuthub_response = Tuthub.load(data_path)

    if tuthub_response.success:
        print(f"... {tuthub_response.detail}")
        return tuthub_response.data["tuthub"]

    helpers.display_failure(tuthub_response)

    try:
        start_over = helpers.confirm_action(
            "The data file could not be loaded. Start with an empty Tuthub? "
            "The data file will be overwritten on the next change."
        )

    except EOFError:
        return None

    return Tuthub() if start_over else None


def display_command_response(
    response: Response, logic: Logic, debug: bool = False
) -> None:
    if not response.success:
        helpers.display_failure(response, debug)
        return

    print(f"\n{response.detail}")

    tutor = response.data.get("tutor")

    if tutor is not None:
        print(f"\n{model_formatters.format_tutor_multiline(tutor)}")

    if response.show_list:
        display_tutors(logic)


def display_tutors(logic: Logic) -> None:
    displayed = logic.displayed_tutors

    print(f"\nShowing {formatters.format_count(len(displayed), 'tutor')}:")
    helpers.display_numbered(displayed, model_formatters.format_tutor_oneline)


def confirm_exit(logic: Logic) -> bool:
    """
    Returns True if the session may end.

    Changes are saved after every command, so the Tuthub is only dirty here when the
    last save failed. The user is then asked before those changes are dropped.

    Notes:
        - If input has ended there is nobody to ask: a warning is printed and True is returned.
    """
    if not logic.tuthub.has_unsaved_changes:
        return True

    try:
        return helpers.confirm_discard_unsaved_changes()

    except EOFError:
        print("\n[WARNING] Exiting with changes that could not be saved.")
        return True


def exit_program():
    """
    Displays an exit banner and terminates the CLI program.

    Raises:
        SystemExit: Always raised to immediately terminate execution.

    Notes:
        - Callers check `confirm_exit()` first, so unsaved changes are only dropped with consent
          or once input has ended.
    """
    helpers.display_banner("Exiting Tuthub")
    print()

    raise SystemExit
