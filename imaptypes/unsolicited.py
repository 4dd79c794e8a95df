"""Responses the server may send at any time, unrelated to the current command.

RFC 3501 section 7 requires clients to accept any response at any time. Only
the responses that servers are known or likely to send unilaterally (during
normal operation or while idling) are represented here. ``Recent``,
``Exists`` and ``Expunge`` refer to the currently selected mailbox.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any, Union

from imaptypes.fetch import AttributeValue
from imaptypes.flag import Flag, flags_from_strs


@dataclass(frozen=True)
class Bye:
    """An unsolicited ``BYE``: the server is closing the connection."""

    code: Any = None
    information: str | None = None


@dataclass(frozen=True)
class Exists:
    """An ``EXISTS`` response giving the number of messages in the mailbox."""

    count: int


@dataclass(frozen=True)
class Expunge:
    """An ``EXPUNGE`` response for a message sequence number.

    Later sequence numbers are immediately decremented by one.
    """

    seq: int


@dataclass(frozen=True)
class FetchUpdate:
    """A ``FETCH`` response sent unilaterally, for example on flag changes."""

    id: int
    attributes: tuple[AttributeValue, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "attributes", tuple(self.attributes))


@dataclass(frozen=True)
class FlagsUpdate:
    """A ``FLAGS`` response listing the flags applicable in the mailbox."""

    flags: tuple[Flag, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "flags", tuple(self.flags))

    @classmethod
    def from_strs(cls, values: Iterable[object]) -> FlagsUpdate:
        """Build from flags as sent on the wire, such as ``\\Seen``."""
        return cls(tuple(flags_from_strs(values)))


@dataclass(frozen=True)
class Metadata:
    """A ``METADATA`` response (RFC 5464) naming changed annotations."""

    mailbox: str
    metadata_entries: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "metadata_entries", tuple(self.metadata_entries))


@dataclass(frozen=True)
class Ok:
    """An unsolicited ``OK`` with an optional response code."""

    code: Any = None
    information: str | None = None


@dataclass(frozen=True)
class Recent:
    """A ``RECENT`` response: how many messages carry the ``\\Recent`` flag."""

    count: int


@dataclass(frozen=True)
class Status:
    """A ``STATUS`` response for a mailbox."""

    mailbox: str
    attributes: tuple[Any, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "attributes", tuple(self.attributes))


@dataclass(frozen=True)
class Vanished:
    """A ``VANISHED`` response (RFC 7162) listing expunged UIDs.

    ``uids`` holds inclusive ``(first, last)`` ranges. ``earlier`` is set
    when the response carried the ``EARLIER`` tag.
    """

    earlier: bool
    uids: tuple[tuple[int, int], ...] = ()

    def __post_init__(self) -> None:
        ranges = tuple((first, last) for first, last in self.uids)
        object.__setattr__(self, "uids", ranges)

    def uid_values(self) -> Iterator[int]:
        """Yield every UID covered by the ranges, in order."""
        for first, last in self.uids:
            yield from range(first, last + 1)


UnsolicitedResponse = Union[
    Bye,
    Exists,
    Expunge,
    FetchUpdate,
    FlagsUpdate,
    Metadata,
    Ok,
    Recent,
    Status,
    Vanished,
]