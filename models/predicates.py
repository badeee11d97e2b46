# models/predicates.py

"""
Filter predicates applied to the displayed tutor list.

Predicates are callables taking a `Tutor` and returning a bool. They compare equal
when they hold the same keywords, so commands carrying them can be compared too.
"""

from __future__ import annotations

from collections.abc import Iterable

from models.tutor import Tutor


def show_all_tutors(_: Tutor) -> bool:
    return True


class _KeywordPredicate:

    def __init__(self, keywords: Iterable[str]):
        self._keywords: tuple[str, ...] = tuple(keywords)

    @property
    def keywords(self) -> tuple[str, ...]:
        return self._keywords

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True

        if type(other) is not type(self):
            return NotImplemented

        return self._keywords == other._keywords

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._keywords))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._keywords)})"


class NameContainsKeywordsPredicate(_KeywordPredicate):
    """Matches tutors whose name contains any keyword as a whole word, ignoring case."""

    def __call__(self, tutor: Tutor) -> bool:
        words = {word.lower() for word in tutor.name.value.split()}
        return any(keyword.lower() in words for keyword in self._keywords)


class ModuleContainsKeywordPredicate(_KeywordPredicate):
    """Matches tutors whose module code contains any keyword, ignoring case."""

    def __call__(self, tutor: Tutor) -> bool:
        module = tutor.module.value.lower()
        return any(keyword.lower() in module for keyword in self._keywords)
