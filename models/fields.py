# models/fields.py

"""
Immutable, self-validating value objects for the fields of a `Tutor`.

Every field type wraps a single string payload and owns exactly one validation
rule, expressed as a regular expression and checked through `is_valid()`.
Construction fails with `ConstraintViolation` when the payload breaks the rule,
so an instance that exists is always valid. Instances have no setters and reject
attribute assignment after construction.

Equality is structural: two instances are equal when they are of the same type
and wrap the same payload. `str()` returns the payload unchanged.
"""

from __future__ import annotations

import re

from core.errors import ConstraintViolation


class Field:
    """
    Base class for the tutor field value objects.

    Subclasses supply `MESSAGE_CONSTRAINTS` and `VALIDATION_REGEX`; the regex must
    match the whole payload.
    """

    MESSAGE_CONSTRAINTS: str = ""
    VALIDATION_REGEX: str = ""

    __slots__ = ("_value",)

    def __init__(self, value: str):
        if value is None:
            raise TypeError(f"{type(self).__name__} requires a value.")

        if not type(self).is_valid(value):
            raise ConstraintViolation(self.MESSAGE_CONSTRAINTS)

        object.__setattr__(self, "_value", value)

    # === properties ===

    @property
    def value(self) -> str:
        return self._value

    # === data validators ===

    @classmethod
    def is_valid(cls, test: str) -> bool:
        return (
            isinstance(test, str)
            and re.fullmatch(cls.VALIDATION_REGEX, test, flags=re.ASCII) is not None
        )

    # === dunder methods ===

    def __setattr__(self, name, value) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable.")

    def __delattr__(self, name) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable.")

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True

        if type(other) is not type(self):
            return NotImplemented

        return self._value == other._value

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value!r})"

    def __str__(self) -> str:
        return self._value


class Name(Field):
    __slots__ = ()

    MESSAGE_CONSTRAINTS = (
        "Names should only contain alphanumeric characters and spaces, and it should not be blank"
    )
    # first character may not be a space, otherwise " " is a valid name
    VALIDATION_REGEX = r"[A-Za-z0-9][A-Za-z0-9 ]*"


class Phone(Field):
    __slots__ = ()

    MESSAGE_CONSTRAINTS = (
        "Phone numbers should only contain numbers, and it should be between 3 and 15 digits long"
    )
    VALIDATION_REGEX = r"\d{3,15}"


class Email(Field):
    __slots__ = ()

    MESSAGE_CONSTRAINTS = (
        "Emails should be of the format local-part@domain and adhere to the following constraints:\n"
        "1. The local-part should only contain alphanumeric characters and these special characters, "
        "excluding the parentheses, (+_.-). The local-part may not start or end with any special characters.\n"
        "2. This is followed by a '@' and then a domain name. The domain name is made up of domain labels "
        "separated by periods.\n"
        "The domain name must:\n"
        "    - end with a domain label at least 2 characters long\n"
        "    - have each domain label start and end with alphanumeric characters\n"
        "    - have each domain label consist of alphanumeric characters, separated only by hyphens, if any."
    )

    _ALNUM = r"[A-Za-z0-9]+"
    _LOCAL_PART = rf"{_ALNUM}(?:[+_.\-]{_ALNUM})*"
    _DOMAIN_LABEL = rf"{_ALNUM}(?:-{_ALNUM})*"
    _LAST_DOMAIN_LABEL = r"[A-Za-z0-9](?:-?[A-Za-z0-9])+"
    VALIDATION_REGEX = rf"{_LOCAL_PART}@(?:{_DOMAIN_LABEL}\.)*{_LAST_DOMAIN_LABEL}"


class Module(Field):
    __slots__ = ()

    MESSAGE_CONSTRAINTS = (
        "Modules should start with 2 or 3 letters, followed by 4 digits, "
        "and may end with a single letter (e.g. CS2103T)"
    )
    VALIDATION_REGEX = r"[A-Za-z]{2,3}\d{4}[A-Za-z]?"


class Year(Field):
    __slots__ = ()

    MESSAGE_CONSTRAINTS = "Year should be a single number from 1 to 6"
    VALIDATION_REGEX = r"[1-6]"

    @property
    def as_int(self) -> int:
        return int(self._value)


class StudentId(Field):
    __slots__ = ()

    MESSAGE_CONSTRAINTS = (
        "Student IDs should start with A, followed by 7 numbers, and end with any capital letter"
    )
    VALIDATION_REGEX = r"A\d{7}[A-Z]"


class TeachingNomination(Field):
    __slots__ = ()

    MESSAGE_CONSTRAINTS = (
        "Teaching nominations should be a non-negative whole number of at most 3 digits"
    )
    VALIDATION_REGEX = r"\d{1,3}"

    @property
    def as_int(self) -> int:
        return int(self._value)


class Tag(Field):
    __slots__ = ()

    MESSAGE_CONSTRAINTS = "Tags names should be alphanumeric"
    VALIDATION_REGEX = r"[A-Za-z0-9]+"


class Comment(Field):
    __slots__ = ()

    MESSAGE_CONSTRAINTS = "Comments can take any value on a single line"
    VALIDATION_REGEX = r"[^\r\n]*"

    @classmethod
    def empty(cls) -> Comment:
        return cls("")

    @property
    def is_empty(self) -> bool:
        return not self._value.strip()
