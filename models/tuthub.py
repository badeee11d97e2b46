# models/tuthub.py

"""
The Tuthub model is the central data object of the program and the "source of truth" for all tutor records.

Tutors are stored in an ordered list and written to a single .json file upon saving.
Commands never see the list directly: they resolve user-supplied indices against
`filtered_tutors`, the displayed view produced by the active filter predicate and sort key.

Provides functions for loading a Tuthub from disk and saving it back, adding, removing,
and replacing tutors, and checking business-key uniqueness before writing.
Includes attributes that are session-scoped like the active filter, the active sort, and
unsaved_changes (unsaved mutations to tutor records).
"""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Iterable
from typing import Any, Callable

from core.errors import DuplicateRecord
from core.response import ErrorCode, Response
from models.predicates import show_all_tutors
from models.tutor import Tutor

logger = logging.getLogger(__name__)

TutorPredicate = Callable[[Tutor], bool]
TutorSortKey = Callable[[Tutor], Any]


class Tuthub:

    def __init__(self, tutors: Iterable[Tutor] = ()):
        self._tutors: list[Tutor] = []
        self._predicate: TutorPredicate = show_all_tutors
        self._sort_key: TutorSortKey | None = None
        self._sort_reverse: bool = False
        self._unsaved_changes: bool = False

        for tutor in tutors:
            self.require_unique_tutor(tutor)
            self._tutors.append(tutor)

    # === properties ===

    @property
    def tutors(self) -> list[Tutor]:
        return list(self._tutors)

    @property
    def filtered_tutors(self) -> list[Tutor]:
        """
        The displayed view: every tutor passing the active predicate, ordered by the active sort key.

        Notes:
            - Sorting is stable, so tutors with equal keys keep their stored order.
            - A fresh list is returned on every access; mutating it does not affect the Tuthub.
        """
        tutors = [tutor for tutor in self._tutors if self._predicate(tutor)]

        if self._sort_key is not None:
            tutors.sort(key=self._sort_key, reverse=self._sort_reverse)

        return tutors

    @property
    def has_unsaved_changes(self) -> bool:
        return self._unsaved_changes

    # === public classmethods ===

    @classmethod
    def load(cls, file_path: str) -> Response:
        """
        Loads previously serialized tutors from disk and returns a `Tuthub` instance.

        Args:
            file_path (str): The path of the JSON data file.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the file was read (or was absent) and every tutor was imported.
                    - False for JSON deserialization issues, malformed records, or duplicates.
                - detail (str | None):
                    - On failure, a human-readable description of the error.
                    - On success, a short summary of what was loaded.
                - error (ErrorCode | None):
                    - `ErrorCode.INVALID_INPUT` if the file is not valid JSON or has the wrong shape.
                    - `ErrorCode.INVALID_FIELD_VALUE` if a record fails validation or is a duplicate.
                    - `ErrorCode.INTERNAL_ERROR` for unexpected errors.
                - data (dict | None): Payload with the following keys:
                    - On success:
                        - "tuthub" (Tuthub): The loaded `Tuthub` object.

        Notes:
            - A missing data file is not an error: an empty `Tuthub` is returned.
            - This method fails fast: one bad record aborts the whole load.
        """
        if not os.path.exists(file_path):
            logger.info("No data file at %s, starting with an empty Tuthub", file_path)

            return Response.succeed(
                detail="No data file found. Starting with an empty Tuthub.",
                data={
                    "tuthub": cls(),
                },
            )

        try:
            with open(file_path, "r") as f:
                payload = json.load(f)

            if not isinstance(payload, dict) or not isinstance(
                payload.get("tutors"), list
            ):
                raise TypeError("expected an object with a 'tutors' list")

            tuthub = cls()
            tuthub.import_tutors(payload["tutors"])

        except json.JSONDecodeError as e:
            logger.warning("Failed to parse %s: %s", file_path, e)
            return Response.fail(
                detail=f"Failed to parse JSON data: {e}",
                error=ErrorCode.INVALID_INPUT,
            )

        except TypeError as e:
            logger.warning("Malformed data file %s: %s", file_path, e)
            return Response.fail(
                detail=f"Malformed data file: {e}",
                error=ErrorCode.INVALID_INPUT,
            )

        except ValueError as e:
            logger.warning("Invalid tutor data in %s: %s", file_path, e)
            return Response.fail(
                detail=f"Invalid field value: {e}",
                error=ErrorCode.INVALID_FIELD_VALUE,
            )

        except OSError as e:
            logger.warning("Could not read %s: %s", file_path, e)
            return Response.fail(
                detail=f"Failed to read data from disk: {e}",
                error=ErrorCode.INTERNAL_ERROR,
            )

        else:
            logger.info("Loaded %d tutors from %s", len(tuthub._tutors), file_path)

            return Response.succeed(
                detail=f"Loaded {len(tuthub._tutors)} tutors.",
                data={
                    "tuthub": tuthub,
                },
            )

    # === persistence and import ===

    def save(self, file_path: str) -> Response:
        """
        Serializes and saves every tutor to disk in JSON format.

        Args:
            file_path (str): The path of the JSON data file. Parent directories are created if needed.

        Returns:
            Response: A structured response with the following contract:
                - success (bool): True if the data was written.
                - detail (str | None):
                    - On success: "Tuthub successfully saved to disk."
                    - On failure: Description of the error.
                - error (ErrorCode | None):
                    - `ErrorCode.INTERNAL_ERROR` if an OSError is raised.

        Notes:
            - This intentionally overwrites existing data.
            - Clears the unsaved-changes marker on success.
        """
        try:
            parent_dir = os.path.dirname(file_path)

            if parent_dir:
                os.makedirs(parent_dir, exist_ok=True)

            with open(file_path, "w") as f:
                json.dump(
                    {"tutors": [tutor.to_dict() for tutor in self._tutors]},
                    f,
                    indent=2,
                    sort_keys=True,
                )

        except OSError as e:
            logger.warning("Could not write %s: %s", file_path, e)
            return Response.fail(
                detail=f"Failed to write data to disk: {e}",
                error=ErrorCode.INTERNAL_ERROR,
            )

        else:
            self._unsaved_changes = False
            logger.debug("Saved %d tutors to %s", len(self._tutors), file_path)

            return Response.succeed(detail="Tuthub successfully saved to disk.")

    def import_tutors(self, tutor_data: list[dict[str, Any]]) -> None:
        """
        Imports a list of serialized tutors.

        Raises:
            - ValueError:
                - If a record dictionary is malformed or fails field validation.
                - If a deserialized tutor duplicates an earlier one.

        Notes:
            - This method fails fast: if any record fails, the import is aborted.
            - Designed for internal use during loading, so it does not mark the Tuthub dirty.
        """
        for record_dict in tutor_data:
            try:
                tutor = Tutor.from_dict(record_dict)
            except (KeyError, TypeError, ValueError) as e:
                raise ValueError(f"Failed to deserialize tutor: {record_dict} - {e}")

            try:
                self.require_unique_tutor(tutor)
            except DuplicateRecord as e:
                raise ValueError(f"Failed to import tutor: {record_dict} - {e}")

            self._tutors.append(tutor)

    # === data accessors ===

    def has_tutor(self, tutor: Tutor) -> bool:
        """Returns True if any stored tutor is the same tutor as `tutor`."""
        return any(existing.is_same_tutor(tutor) for existing in self._tutors)

    # === data manipulators ===

    def _mark_dirty(self) -> None:
        self._unsaved_changes = True

    def add_tutor(self, tutor: Tutor) -> Response:
        """
        Appends a `Tutor` to the end of the list.

        Returns:
            Response: A structured response with the following contract:
                - success (bool): False if another tutor has the same student ID.
                - error (ErrorCode | None):
                    - `ErrorCode.DUPLICATE_RECORD` if the student ID is taken.
                - data (dict | None):
                    - On success: "record" (Tutor): the added tutor.

        Notes:
            - This method mutates `Tuthub` state and calls `_mark_dirty()` if successful.
        """
        try:
            self.require_unique_tutor(tutor)

        except DuplicateRecord as e:
            return Response.fail(
                detail=e.message,
                error=e.error_code,
            )

        self._tutors.append(tutor)
        self._mark_dirty()
        logger.debug("Added tutor %r", tutor)

        return Response.succeed(
            detail="Tutor successfully added to Tuthub.",
            data={
                "record": tutor,
            },
        )

    def remove_tutor(self, tutor: Tutor) -> Response:
        """
        Removes a `Tutor` from the list.

        Returns:
            Response: A structured response with the following contract:
                - success (bool): False if the tutor is not stored.
                - error (ErrorCode | None):
                    - `ErrorCode.NOT_FOUND` if no equal tutor is stored.

        Notes:
            - This method mutates `Tuthub` state and calls `_mark_dirty()` if successful.
        """
        try:
            self._tutors.remove(tutor)

        except ValueError:
            return Response.fail(
                detail=f"No matching tutor could be found for deletion: {tutor!r}.",
                error=ErrorCode.NOT_FOUND,
            )

        self._mark_dirty()
        logger.debug("Removed tutor %r", tutor)

        return Response.succeed(
            detail="Tutor successfully removed from Tuthub.",
            data={
                "record": tutor,
            },
        )

    def set_tutor(self, target: Tutor, edited: Tutor) -> Response:
        """
        Replaces `target` with `edited` in place, preserving its position.

        Returns:
            Response: A structured response with the following contract:
                - success (bool): False if `target` is absent or `edited` collides with another tutor.
                - error (ErrorCode | None):
                    - `ErrorCode.NOT_FOUND` if `target` is not stored.
                    - `ErrorCode.DUPLICATE_RECORD` if `edited` is the same tutor as a tutor other than `target`.
                - data (dict | None):
                    - On success: "record" (Tutor): the stored replacement.

        Notes:
            - Both checks happen before the write, so a failure leaves the list untouched.
        """
        try:
            position = self._tutors.index(target)

        except ValueError:
            return Response.fail(
                detail=f"No matching tutor could be found to replace: {target!r}.",
                error=ErrorCode.NOT_FOUND,
            )

        if any(
            i != position and existing.is_same_tutor(edited)
            for i, existing in enumerate(self._tutors)
        ):
            return Response.fail(
                detail=DuplicateRecord().message,
                error=ErrorCode.DUPLICATE_RECORD,
            )

        self._tutors[position] = edited
        self._mark_dirty()
        logger.debug("Replaced tutor %r with %r", target, edited)

        return Response.succeed(
            detail="Tutor successfully updated.",
            data={
                "record": edited,
            },
        )

    def clear(self) -> None:
        self._tutors.clear()
        self._mark_dirty()

    # --- displayed view ---

    def update_filter(self, predicate: TutorPredicate | None) -> None:
        self._predicate = predicate if predicate is not None else show_all_tutors

    def update_sort(self, sort_key: TutorSortKey | None, reverse: bool = False) -> None:
        self._sort_key = sort_key
        self._sort_reverse = reverse

    # === data validators ===

    def require_unique_tutor(self, tutor: Tutor) -> None:
        """
        Validates that no stored tutor has the same student ID.

        Raises:
            DuplicateRecord: If a tutor with the same student ID is already stored.
        """
        if self.has_tutor(tutor):
            raise DuplicateRecord()

    # === dunder methods ===

    def __len__(self) -> int:
        return len(self._tutors)

    def __repr__(self) -> str:
        return f"Tuthub({len(self._tutors)} tutors)"
