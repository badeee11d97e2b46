# core/index.py

from __future__ import annotations


class Index:
    """
    A position in the displayed tutor list.

    Users see one-based positions; list access uses the zero-based form.
    Negative positions are rejected on construction.
    """

    __slots__ = ("_zero_based",)

    def __init__(self, zero_based: int):
        if zero_based < 0:
            raise IndexError(f"Index must not be negative: {zero_based}")

        self._zero_based = zero_based

    @classmethod
    def from_zero_based(cls, zero_based: int) -> Index:
        return cls(zero_based)

    @classmethod
    def from_one_based(cls, one_based: int) -> Index:
        return cls(one_based - 1)

    @property
    def zero_based(self) -> int:
        return self._zero_based

    @property
    def one_based(self) -> int:
        return self._zero_based + 1

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Index):
            return NotImplemented

        return self._zero_based == other._zero_based

    def __hash__(self) -> int:
        return hash(self._zero_based)

    def __repr__(self) -> str:
        return f"Index({self.one_based})"
