"""Server capabilities as reported by the CAPABILITY response (RFC 3501 7.2.1)."""

from __future__ import annotations

import enum
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

IMAP4REV1_CAPABILITY = "IMAP4rev1"
AUTH_CAPABILITY_PREFIX = "AUTH="


class CapabilityKind(enum.Enum):
    """The three shapes a capability can take."""

    IMAP4REV1 = "imap4rev1"
    AUTH = "auth"
    ATOM = "atom"


@dataclass(frozen=True)
class Capability:
    """A single server capability.

    ``value`` holds the mechanism for ``AUTH=`` capabilities and the atom
    itself for any other extension; it is None for ``IMAP4rev1``.
    """

    kind: CapabilityKind
    value: str | None = None

    @classmethod
    def imap4rev1(cls) -> Capability:
        """The ``IMAP4rev1`` capability every server must announce."""
        return cls(CapabilityKind.IMAP4REV1)

    @classmethod
    def auth(cls, mechanism: str) -> Capability:
        """An ``AUTH=<mechanism>`` capability."""
        return cls(CapabilityKind.AUTH, mechanism)

    @classmethod
    def atom(cls, name: str) -> Capability:
        """Any other capability atom."""
        return cls(CapabilityKind.ATOM, name)

    def __str__(self) -> str:
        if self.kind is CapabilityKind.IMAP4REV1:
            return IMAP4REV1_CAPABILITY
        if self.kind is CapabilityKind.AUTH:
            return f"{AUTH_CAPABILITY_PREFIX}{self.value}"
        return str(self.value)


class Capabilities:
    """The set of capabilities a server supports."""

    __slots__ = ("_caps",)

    def __init__(self, capabilities: Iterable[Capability] = ()) -> None:
        self._caps = frozenset(capabilities)

    def has(self, cap: Capability) -> bool:
        """Return True if the server has the given capability."""
        return cap in self._caps

    def has_str(self, cap: str) -> bool:
        """Return True if the server has the capability written as ``cap``.

        ``IMAP4rev1`` and the ``AUTH=`` prefix are matched without regard to
        case; the mechanism name and other atoms are matched exactly.
        """
        if cap.lower() == IMAP4REV1_CAPABILITY.lower():
            return self.has(Capability.imap4rev1())
        prefix_len = len(AUTH_CAPABILITY_PREFIX)
        if len(cap) > prefix_len:
            prefix, mechanism = cap[:prefix_len], cap[prefix_len:]
            if prefix.upper() == AUTH_CAPABILITY_PREFIX:
                return self.has(Capability.auth(mechanism))
        return self.has(Capability.atom(cap))

    def __contains__(self, cap: object) -> bool:
        if isinstance(cap, Capability):
            return self.has(cap)
        if isinstance(cap, str):
            return self.has_str(cap)
        return False

    def __iter__(self) -> Iterator[Capability]:
        return iter(self._caps)

    def __len__(self) -> int:
        return len(self._caps)

    def __repr__(self) -> str:
        names = sorted(str(cap) for cap in self._caps)
        return f"Capabilities({names!r})"