# core/edit_descriptor.py

"""
Staging object for partial updates to a `Tutor`.

`EditTutorDescriptor` holds one optional override per editable field. An absent
slot (None) means "no change requested". The descriptor is short-lived: the parser
fills it in, `EditCommand` copies it on construction, and it is discarded once the
command has run.

`create_edited_tutor()` overlays the present slots onto a target `Tutor` and returns
a brand new `Tutor`; neither argument is modified. The comment is not an editable
slot and always carries over from the target.
"""

from __future__ import annotations

from collections.abc import Iterable

from models.fields import (
    Email,
    Module,
    Name,
    Phone,
    StudentId,
    Tag,
    TeachingNomination,
    Year,
)
from models.tutor import Tutor


class EditTutorDescriptor:
    """
    Optional per-field overrides used to build a replacement `Tutor`.

    Notes:
        - Assigning None to a property clears that slot.
        - Scalar slots hold immutable value objects and are shared by reference on copy.
        - Tags are kept in a private set; `tags` reads back a frozenset snapshot, so callers
          cannot reach the internal set.
    """

    _FIELD_NAMES = (
        "name",
        "phone",
        "email",
        "module",
        "year",
        "student_id",
        "teaching_nomination",
        "tags",
    )

    def __init__(self):
        self._name: Name | None = None
        self._phone: Phone | None = None
        self._email: Email | None = None
        self._module: Module | None = None
        self._year: Year | None = None
        self._student_id: StudentId | None = None
        self._teaching_nomination: TeachingNomination | None = None
        self._tags: set[Tag] | None = None

    def copy(self) -> EditTutorDescriptor:
        """Returns a copy whose tag set is independent of this descriptor's."""
        duplicate = EditTutorDescriptor()
        duplicate.name = self._name
        duplicate.phone = self._phone
        duplicate.email = self._email
        duplicate.module = self._module
        duplicate.year = self._year
        duplicate.student_id = self._student_id
        duplicate.teaching_nomination = self._teaching_nomination
        duplicate.tags = self._tags
        return duplicate

    def is_any_field_edited(self) -> bool:
        return any(value is not None for value in self._slots())

    # === properties ===

    @property
    def name(self) -> Name | None:
        return self._name

    @name.setter
    def name(self, name: Name | None) -> None:
        self._name = name

    @property
    def phone(self) -> Phone | None:
        return self._phone

    @phone.setter
    def phone(self, phone: Phone | None) -> None:
        self._phone = phone

    @property
    def email(self) -> Email | None:
        return self._email

    @email.setter
    def email(self, email: Email | None) -> None:
        self._email = email

    @property
    def module(self) -> Module | None:
        return self._module

    @module.setter
    def module(self, module: Module | None) -> None:
        self._module = module

    @property
    def year(self) -> Year | None:
        return self._year

    @year.setter
    def year(self, year: Year | None) -> None:
        self._year = year

    @property
    def student_id(self) -> StudentId | None:
        return self._student_id

    @student_id.setter
    def student_id(self, student_id: StudentId | None) -> None:
        self._student_id = student_id

    @property
    def teaching_nomination(self) -> TeachingNomination | None:
        return self._teaching_nomination

    @teaching_nomination.setter
    def teaching_nomination(
        self, teaching_nomination: TeachingNomination | None
    ) -> None:
        self._teaching_nomination = teaching_nomination

    @property
    def tags(self) -> frozenset[Tag] | None:
        return frozenset(self._tags) if self._tags is not None else None

    @tags.setter
    def tags(self, tags: Iterable[Tag] | None) -> None:
        self._tags = set(tags) if tags is not None else None

    # === helper methods ===

    def _slots(self) -> tuple:
        return (
            self.name,
            self.phone,
            self.email,
            self.module,
            self.year,
            self.student_id,
            self.teaching_nomination,
            self.tags,
        )

    # === dunder methods ===

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True

        if not isinstance(other, EditTutorDescriptor):
            return NotImplemented

        return self._slots() == other._slots()

    __hash__ = None

    def __repr__(self) -> str:
        edited = {
            field: value
            for field, value in zip(self._FIELD_NAMES, self._slots())
            if value is not None
        }
        return f"EditTutorDescriptor({edited})"


def create_edited_tutor(tutor: Tutor, descriptor: EditTutorDescriptor) -> Tutor:
    """
    Returns a new `Tutor` with the details of `tutor` overlaid by the present slots of `descriptor`.

    Args:
        tutor (Tutor): The tutor being edited. It is not modified.
        descriptor (EditTutorDescriptor): The overrides to apply. Absent slots keep the tutor's value.

    Returns:
        The replacement `Tutor`. Its comment is always the original tutor's comment.
    """

    def pick(override, current):
        return override if override is not None else current

    return Tutor(
        name=pick(descriptor.name, tutor.name),
        phone=pick(descriptor.phone, tutor.phone),
        email=pick(descriptor.email, tutor.email),
        module=pick(descriptor.module, tutor.module),
        year=pick(descriptor.year, tutor.year),
        student_id=pick(descriptor.student_id, tutor.student_id),
        comment=tutor.comment,
        teaching_nomination=pick(
            descriptor.teaching_nomination, tutor.teaching_nomination
        ),
        tags=pick(descriptor.tags, tutor.tags),
    )
