"""FETCH responses and the attributes they carry (RFC 3501 section 7.4.2)."""

from __future__ import annotations

import enum
import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any

from imaptypes.flag import Flag, flags_from_strs

_MONTHS = {
    name: number
    for number, name in enumerate(
        ("jan", "feb", "mar", "apr", "may", "jun",
         "jul", "aug", "sep", "oct", "nov", "dec"),
        start=1,
    )
}

_DATE_TIME = re.compile(
    r"\s*(\d{1,2})-([A-Za-z]{3})-(\d{4}) +"
    r"(\d{1,2}):(\d{2}):(\d{2}) +([+-])(\d{2})(\d{2})"
)


def _parse_date_time(text: str) -> datetime | None:
    """Parse an RFC 3501 ``date-time`` such as ``17-Jul-1996 02:44:25 -0700``."""
    match = _DATE_TIME.fullmatch(text)
    if match is None:
        return None
    day, month, year, hour, minute, second, sign, off_h, off_m = match.groups()
    month_number = _MONTHS.get(month.lower())
    if month_number is None:
        return None
    offset = timedelta(hours=int(off_h), minutes=int(off_m))
    if sign == "-":
        offset = -offset
    try:
        return datetime(
            int(year), month_number, int(day),
            int(hour), int(minute), int(second),
            tzinfo=timezone(offset),
        )
    except ValueError:
        return None


class MessageSection(enum.Enum):
    """A textual part specifier of a BODY section."""

    HEADER = "HEADER"
    MIME = "MIME"
    TEXT = "TEXT"


@dataclass(frozen=True)
class SectionPath:
    """The section of a ``BODY[<section>]`` fetch item.

    ``part`` is the list of part numbers (empty for the whole message) and
    ``section`` the optional textual specifier.
    """

    part: tuple[int, ...] = ()
    section: MessageSection | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "part", tuple(self.part))

    @classmethod
    def full(cls, section: MessageSection) -> SectionPath:
        """A specifier that applies to the whole message."""
        return cls((), section)

    def __str__(self) -> str:
        pieces = [str(number) for number in self.part]
        if self.section is not None:
            pieces.append(self.section.value)
        return ".".join(pieces)


class AttributeKind(enum.Enum):
    """Kinds of data item found in a FETCH response."""

    FLAGS = "FLAGS"
    UID = "UID"
    RFC822_SIZE = "RFC822.SIZE"
    MOD_SEQ = "MODSEQ"
    BODY_SECTION = "BODY[]"
    RFC822 = "RFC822"
    RFC822_HEADER = "RFC822.HEADER"
    RFC822_TEXT = "RFC822.TEXT"
    ENVELOPE = "ENVELOPE"
    INTERNAL_DATE = "INTERNALDATE"
    BODY_STRUCTURE = "BODYSTRUCTURE"
    GMAIL_LABELS = "X-GM-LABELS"


@dataclass(frozen=True)
class AttributeValue:
    """One data item of a FETCH response.

    ``value`` holds the item's payload. For ``BODY_SECTION`` items,
    ``section`` is the requested section (None for the whole message) and
    ``index`` the origin octet of a partial fetch.
    """

    kind: AttributeKind
    value: Any = None
    section: SectionPath | None = None
    index: int | None = None

    @classmethod
    def flags(cls, values: Iterable[str]) -> AttributeValue:
        return cls(AttributeKind.FLAGS, tuple(values))

    @classmethod
    def uid(cls, uid: int) -> AttributeValue:
        return cls(AttributeKind.UID, uid)

    @classmethod
    def rfc822_size(cls, size: int) -> AttributeValue:
        return cls(AttributeKind.RFC822_SIZE, size)

    @classmethod
    def mod_seq(cls, mod_seq: int) -> AttributeValue:
        return cls(AttributeKind.MOD_SEQ, mod_seq)

    @classmethod
    def body_section(
        cls,
        section: SectionPath | None,
        data: bytes | None,
        index: int | None = None,
    ) -> AttributeValue:
        return cls(AttributeKind.BODY_SECTION, data, section, index)

    @classmethod
    def rfc822(cls, data: bytes | None) -> AttributeValue:
        return cls(AttributeKind.RFC822, data)

    @classmethod
    def rfc822_header(cls, data: bytes | None) -> AttributeValue:
        return cls(AttributeKind.RFC822_HEADER, data)

    @classmethod
    def rfc822_text(cls, data: bytes | None) -> AttributeValue:
        return cls(AttributeKind.RFC822_TEXT, data)

    @classmethod
    def envelope(cls, envelope: Any) -> AttributeValue:
        return cls(AttributeKind.ENVELOPE, envelope)

    @classmethod
    def internal_date(cls, text: str) -> AttributeValue:
        return cls(AttributeKind.INTERNAL_DATE, text)

    @classmethod
    def body_structure(cls, structure: Any) -> AttributeValue:
        return cls(AttributeKind.BODY_STRUCTURE, structure)

    @classmethod
    def gmail_labels(cls, labels: Iterable[str]) -> AttributeValue:
        return cls(AttributeKind.GMAIL_LABELS, tuple(labels))


_FULL_HEADER = SectionPath.full(MessageSection.HEADER)
_FULL_TEXT = SectionPath.full(MessageSection.TEXT)


@dataclass
class Fetch:
    """Data about one message from a FETCH or STORE response."""

    message: int
    uid: int | None = None
    size: int | None = None
    attributes: tuple[AttributeValue, ...] = ()
    flags: list[Flag] = field(default_factory=list)

    @classmethod
    def from_attributes(
        cls, message: int, attributes: Iterable[AttributeValue]
    ) -> Fetch:
        """Build a fetch, pulling flags, UID and size out of the attributes."""
        fetch = cls(message, attributes=tuple(attributes))
        for attr in fetch.attributes:
            if attr.kind is AttributeKind.FLAGS:
                fetch.flags.extend(flags_from_strs(attr.value))
            elif attr.kind is AttributeKind.UID:
                fetch.uid = attr.value
            elif attr.kind is AttributeKind.RFC822_SIZE:
                fetch.size = attr.value
        return fetch

    def _first(self, *kinds: AttributeKind) -> AttributeValue | None:
        return next((a for a in self.attributes if a.kind in kinds), None)

    def _data(self, section: SectionPath | None, fallback: AttributeKind) -> bytes | None:
        for attr in self.attributes:
            if attr.value is None:
                continue
            if attr.kind is AttributeKind.BODY_SECTION and attr.section == section:
                return attr.value
            if attr.kind is fallback:
                return attr.value
        return None

    def mod_seq(self) -> int | None:
        """The mod sequence, sent with CONDSTORE or QRESYNC."""
        attr = self._first(AttributeKind.MOD_SEQ)
        return None if attr is None else attr.value

    def header(self) -> bytes | None:
        """The message header from ``BODY[HEADER]`` or ``RFC822.HEADER``."""
        return self._data(_FULL_HEADER, AttributeKind.RFC822_HEADER)

    def body(self) -> bytes | None:
        """The whole message from ``BODY[]`` or ``RFC822``."""
        return self._data(None, AttributeKind.RFC822)

    def text(self) -> bytes | None:
        """The message text from ``BODY[TEXT]`` or ``RFC822.TEXT``."""
        return self._data(_FULL_TEXT, AttributeKind.RFC822_TEXT)

    def envelope(self) -> Any:
        """The ENVELOPE, if it was fetched."""
        attr = self._first(AttributeKind.ENVELOPE)
        return None if attr is None else attr.value

    def section(self, path: SectionPath) -> bytes | None:
        """The bytes of ``BODY[<path>]``, if fetched."""
        for attr in self.attributes:
            if (
                attr.kind is AttributeKind.BODY_SECTION
                and attr.section is not None
                and attr.value is not None
                and attr.section == path
            ):
                return attr.value
        return None

    def internal_date(self) -> datetime | None:
        """The INTERNALDATE as an aware datetime, or None if absent or invalid."""
        attr = self._first(AttributeKind.INTERNAL_DATE)
        if attr is None:
            return None
        return _parse_date_time(attr.value)

    def bodystructure(self) -> Any:
        """The BODYSTRUCTURE, if it was fetched."""
        attr = self._first(AttributeKind.BODY_STRUCTURE)
        return None if attr is None else attr.value

    def gmail_labels(self) -> tuple[str, ...] | None:
        """The Gmail ``X-GM-LABELS``, if they were fetched."""
        attr = self._first(AttributeKind.GMAIL_LABELS)
        return None if attr is None else tuple(attr.value)


class Fetches:
    """An ordered collection of :class:`Fetch` responses."""

    __slots__ = ("_fetches",)

    def __init__(self, fetches: Iterable[Fetch] = ()) -> None:
        self._fetches = tuple(fetches)

    def __iter__(self) -> Iterator[Fetch]:
        return iter(self._fetches)

    def __len__(self) -> int:
        return len(self._fetches)

    def __getitem__(self, index: int) -> Fetch:
        return self._fetches[index]

    def get(self, index: int) -> Fetch | None:
        """Return the fetch at ``index``, or None if there is none."""
        if 0 <= index < len(self._fetches):
            return self._fetches[index]
        return None

    def __repr__(self) -> str:
        return f"Fetches({list(self._fetches)!r})"