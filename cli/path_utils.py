# cli/path_utils.py

import os

DEFAULT_DATA_FILENAME = "tuthub.json"


def get_default_data_path() -> str:
    """
    Returns the default data file location: `~/Documents/Tuthub/tuthub.json`.
    """
    documents = os.path.join(os.path.expanduser("~"), "Documents")
    return os.path.join(documents, "Tuthub", DEFAULT_DATA_FILENAME)


def resolve_data_path(user_input: str | None) -> str:
    """
    Resolves the data file path from user input or the default location.

    Args:
        user_input (str | None): An optional user-specified path. If None or blank, the default path is used.

    Returns:
        An absolute path string. `~` is expanded. A path naming an existing directory
        resolves to `tuthub.json` inside that directory.

    Notes:
        - Nothing is created on disk; `Tuthub.save()` creates parent directories when writing.
    """
    if user_input is None or not user_input.strip():
        return get_default_data_path()

    path = os.path.abspath(os.path.expanduser(user_input.strip()))

    if os.path.isdir(path):
        return os.path.join(path, DEFAULT_DATA_FILENAME)

    return path
