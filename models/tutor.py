# models/tutor.py

"""
Represents a tutor candidate tracked in Tuthub.

A `Tutor` is an immutable aggregate of validated field value objects and a set of
tags. It is never mutated after construction: edits and comments produce a new
`Tutor` that replaces the old one in the owning `Tuthub`.

Two comparisons are provided and deliberately kept apart:
- `is_same_tutor()`: business-key equality on the student ID, used to reject duplicates.
- `==`: full structural equality over every field, including comment and tags.

Includes functionality for:
- Serializing to and from JSON-compatible dictionaries, re-validating every field on load
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from models.fields import (
    Comment,
    Email,
    Module,
    Name,
    Phone,
    StudentId,
    Tag,
    TeachingNomination,
    Year,
)


class Tutor:

    __slots__ = (
        "_name",
        "_phone",
        "_email",
        "_module",
        "_year",
        "_student_id",
        "_comment",
        "_teaching_nomination",
        "_tags",
    )

    def __init__(
        self,
        name: Name,
        phone: Phone,
        email: Email,
        module: Module,
        year: Year,
        student_id: StudentId,
        comment: Comment,
        teaching_nomination: TeachingNomination,
        tags: Iterable[Tag] = (),
    ):
        fields = {
            "name": name,
            "phone": phone,
            "email": email,
            "module": module,
            "year": year,
            "student_id": student_id,
            "comment": comment,
            "teaching_nomination": teaching_nomination,
        }
        missing = [field for field, value in fields.items() if value is None]

        if missing:
            raise TypeError(f"Tutor is missing required fields: {', '.join(missing)}")

        if tags is None:
            raise TypeError("Tutor tags must be an iterable, not None.")

        for field, value in fields.items():
            object.__setattr__(self, f"_{field}", value)

        # frozenset doubles as the defensive copy and the read-only view
        object.__setattr__(self, "_tags", frozenset(tags))

    # === properties ===

    @property
    def name(self) -> Name:
        return self._name

    @property
    def phone(self) -> Phone:
        return self._phone

    @property
    def email(self) -> Email:
        return self._email

    @property
    def module(self) -> Module:
        return self._module

    @property
    def year(self) -> Year:
        return self._year

    @property
    def student_id(self) -> StudentId:
        return self._student_id

    @property
    def comment(self) -> Comment:
        return self._comment

    @property
    def teaching_nomination(self) -> TeachingNomination:
        return self._teaching_nomination

    @property
    def tags(self) -> frozenset[Tag]:
        return self._tags

    # === comparisons ===

    def is_same_tutor(self, other: Tutor | None) -> bool:
        """
        Returns True if both tutors share a student ID.

        This is weaker than `==` and is the relation used to detect duplicates.
        """
        if other is self:
            return True

        return other is not None and other.student_id == self._student_id

    # === persistence and import ===

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self._name.value,
            "phone": self._phone.value,
            "email": self._email.value,
            "module": self._module.value,
            "year": self._year.value,
            "student_id": self._student_id.value,
            "comment": self._comment.value,
            "teaching_nomination": self._teaching_nomination.value,
            "tags": sorted(tag.value for tag in self._tags),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Tutor:
        """
        Builds a `Tutor` from a dictionary produced by `to_dict()`.

        Raises:
            KeyError: If a required key is missing.
            TypeError: If the stored tags are not a list.
            ConstraintViolation: If any stored value fails its field validation.
        """
        tags = data.get("tags", [])

        if not isinstance(tags, list):
            raise TypeError(f"tags must be a list, got {type(tags).__name__}")

        return cls(
            name=Name(data["name"]),
            phone=Phone(data["phone"]),
            email=Email(data["email"]),
            module=Module(data["module"]),
            year=Year(data["year"]),
            student_id=StudentId(data["student_id"]),
            comment=Comment(data.get("comment", "")),
            teaching_nomination=TeachingNomination(data["teaching_nomination"]),
            tags=[Tag(tag) for tag in tags],
        )

    # === dunder methods ===

    def __setattr__(self, name, value) -> None:
        raise AttributeError("Tutor is immutable.")

    def __delattr__(self, name) -> None:
        raise AttributeError("Tutor is immutable.")

    def _key(self) -> tuple:
        return (
            self._name,
            self._phone,
            self._email,
            self._module,
            self._year,
            self._student_id,
            self._comment,
            self._teaching_nomination,
            self._tags,
        )

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True

        if not isinstance(other, Tutor):
            return NotImplemented

        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return f"Tutor({self._name}, {self._module}, {self._student_id})"

    def __str__(self) -> str:
        tags = "".join(f"[{tag}]" for tag in sorted(self._tags, key=str))
        rendered = (
            f"{self._name}; Phone: {self._phone}; Email: {self._email}; "
            f"Module: {self._module}; Year: {self._year}; "
            f"Student ID: {self._student_id}; "
            f"Teaching Nominations: {self._teaching_nomination}"
        )

        if not self._comment.is_empty:
            rendered += f"; Comment: {self._comment}"

        if tags:
            rendered += f"; Tags: {tags}"

        return rendered
