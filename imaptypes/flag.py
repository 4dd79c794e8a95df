"""Message flags, system and custom, as defined in RFC 3501 section 2.3.2."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import ClassVar

_SYSTEM_FLAGS = frozenset(
    {
        "\\Seen",
        "\\Answered",
        "\\Flagged",
        "\\Deleted",
        "\\Draft",
        "\\Recent",
        "\\*",
    }
)


class Flag:
    """A message flag.

    System flags begin with a backslash and are matched exactly; any other
    string is a custom (keyword) flag.
    """

    __slots__ = ("_value",)

    SEEN: ClassVar[Flag]
    ANSWERED: ClassVar[Flag]
    FLAGGED: ClassVar[Flag]
    DELETED: ClassVar[Flag]
    DRAFT: ClassVar[Flag]
    RECENT: ClassVar[Flag]
    MAY_CREATE: ClassVar[Flag]

    def __init__(self, value: str | Flag) -> None:
        if isinstance(value, Flag):
            value = value._value
        self._value = str(value)

    @property
    def value(self) -> str:
        """The flag as it appears on the wire."""
        return self._value

    def is_system(self) -> bool:
        """Return True for the predefined system flags."""
        return self._value in _SYSTEM_FLAGS

    def __str__(self) -> str:
        return self._value

    def __repr__(self) -> str:
        return f"Flag({self._value!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Flag):
            return self._value == other._value
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._value)


Flag.SEEN = Flag("\\Seen")
Flag.ANSWERED = Flag("\\Answered")
Flag.FLAGGED = Flag("\\Flagged")
Flag.DELETED = Flag("\\Deleted")
Flag.DRAFT = Flag("\\Draft")
Flag.RECENT = Flag("\\Recent")
Flag.MAY_CREATE = Flag("\\*")


def flags_from_strs(values: Iterable[object]) -> Iterator[Flag]:
    """Turn each value's string form into a :class:`Flag`."""
    return (Flag(str(value)) for value in values)