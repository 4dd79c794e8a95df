"""Access control lists (RFC 4314): rights, entries and server responses."""

from __future__ import annotations

import enum
import string
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import ClassVar

_VALID_RIGHT_CHARS = frozenset(string.ascii_lowercase + string.digits)


class AclModifyMode(enum.Enum):
    """How a SETACL command changes an identifier's existing rights."""

    REPLACE = "replace"
    ADD = "add"
    REMOVE = "remove"


@dataclass(frozen=True)
class AclRight:
    """A single ACL right, identified by its one-character code.

    Characters not among the standard rights are custom rights.
    """

    char: str

    LOOKUP: ClassVar[AclRight]
    READ: ClassVar[AclRight]
    SEEN: ClassVar[AclRight]
    WRITE: ClassVar[AclRight]
    INSERT: ClassVar[AclRight]
    POST: ClassVar[AclRight]
    CREATE_MAILBOX: ClassVar[AclRight]
    DELETE_MAILBOX: ClassVar[AclRight]
    DELETE_MESSAGE: ClassVar[AclRight]
    EXPUNGE: ClassVar[AclRight]
    ADMINISTER: ClassVar[AclRight]
    LEGACY_CREATE: ClassVar[AclRight]
    LEGACY_DELETE: ClassVar[AclRight]

    def __post_init__(self) -> None:
        if not isinstance(self.char, str) or len(self.char) != 1:
            raise ValueError(f"an ACL right is a single character, got {self.char!r}")

    @classmethod
    def from_char(cls, char: str) -> AclRight:
        """Return the right for ``char``."""
        return cls(char)

    @property
    def is_custom(self) -> bool:
        """True if this is not one of the rights defined by RFC 4314."""
        return self.char not in _STANDARD_CHARS

    def __str__(self) -> str:
        return self.char


_STANDARD = {
    "LOOKUP": "l",
    "READ": "r",
    "SEEN": "s",
    "WRITE": "w",
    "INSERT": "i",
    "POST": "p",
    "CREATE_MAILBOX": "k",
    "DELETE_MAILBOX": "x",
    "DELETE_MESSAGE": "t",
    "EXPUNGE": "e",
    "ADMINISTER": "a",
    "LEGACY_CREATE": "c",
    "LEGACY_DELETE": "d",
}
_STANDARD_CHARS = frozenset(_STANDARD.values())
for _attr, _char in _STANDARD.items():
    setattr(AclRight, _attr, AclRight(_char))
del _attr, _char


class AclRightError(ValueError):
    """Raised when a rights string holds a character that is not allowed."""

    def __init__(self) -> None:
        super().__init__("Rights may only be lowercase alpha numeric characters")


def _coerce(right: AclRight | str) -> AclRight:
    if isinstance(right, AclRight):
        return right
    return AclRight.from_char(right)


class AclRights:
    """An unordered set of ACL rights."""

    __slots__ = ("_data",)

    def __init__(self, rights: Iterable[AclRight | str] = ()) -> None:
        self._data = frozenset(_coerce(right) for right in rights)

    @classmethod
    def from_str(cls, value: str) -> AclRights:
        """Parse a rights string such as ``"lrs"``.

        Only lowercase ASCII letters and digits are accepted.
        """
        if not all(char in _VALID_RIGHT_CHARS for char in value):
            raise AclRightError()
        return cls(value)

    def __contains__(self, right: object) -> bool:
        if isinstance(right, AclRight):
            return right in self._data
        if isinstance(right, str) and len(right) == 1:
            return AclRight(right) in self._data
        return False

    def __iter__(self) -> Iterator[AclRight]:
        return iter(sorted(self._data, key=lambda right: right.char))

    def __len__(self) -> int:
        return len(self._data)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, AclRights):
            return self._data == other._data
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._data)

    def __str__(self) -> str:
        return "".join(sorted(right.char for right in self._data))

    def __repr__(self) -> str:
        return f"AclRights({str(self)!r})"


@dataclass(frozen=True)
class AclEntry:
    """An identifier and the rights it holds on a mailbox."""

    identifier: str
    rights: AclRights


@dataclass(frozen=True)
class Acl:
    """The ACL response: every identifier's rights on one mailbox."""

    mailbox: str
    acls: list[AclEntry] = field(default_factory=list)


@dataclass(frozen=True)
class ListRights:
    """The LISTRIGHTS response for one identifier on one mailbox."""

    mailbox: str
    identifier: str
    required: AclRights
    optional: AclRights


@dataclass(frozen=True)
class MyRights:
    """The MYRIGHTS response: the current user's rights on a mailbox."""

    mailbox: str
    rights: AclRights