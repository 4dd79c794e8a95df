"""Messages removed by EXPUNGE, as sequence numbers or vanished UID ranges."""

from __future__ import annotations

import enum
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

Uid = int
"""A message's unique identifier (RFC 3501 section 2.3.1.1)."""

Seq = int
"""A message's sequence number within its mailbox (RFC 3501 section 2.3.1.2)."""


class DeletedKind(enum.Enum):
    """Which kind of response reported the deletion."""

    EXPUNGED = "expunged"
    VANISHED = "vanished"


@dataclass(frozen=True)
class Deleted:
    """Messages expunged from a mailbox.

    For ``EXPUNGED`` the messages are sequence numbers; for ``VANISHED`` they
    are inclusive ``(first, last)`` UID ranges. ``mod_seq`` is set when the
    QRESYNC extension is enabled.
    """

    kind: DeletedKind
    messages: tuple
    mod_seq: int | None = None

    @classmethod
    def from_expunged(cls, seqs: Iterable[Seq], mod_seq: int | None = None) -> Deleted:
        """Build from sequence numbers of one or more EXPUNGE responses."""
        return cls(DeletedKind.EXPUNGED, tuple(seqs), mod_seq)

    @classmethod
    def from_vanished(
        cls, ranges: Iterable[tuple[Uid, Uid]], mod_seq: int | None = None
    ) -> Deleted:
        """Build from the inclusive UID ranges of a VANISHED response."""
        return cls(
            DeletedKind.VANISHED,
            tuple((first, last) for first, last in ranges),
            mod_seq,
        )

    def seqs(self) -> Iterator[Seq]:
        """Yield sequence numbers; yields nothing for a VANISHED response."""
        if self.kind is DeletedKind.EXPUNGED:
            yield from self.messages

    def uids(self) -> Iterator[Uid]:
        """Yield every UID in the vanished ranges; nothing for EXPUNGE."""
        if self.kind is DeletedKind.VANISHED:
            for first, last in self.messages:
                yield from range(first, last + 1)

    def is_empty(self) -> bool:
        """Return True if no messages or ranges were reported."""
        return not self.messages

    def __iter__(self) -> Iterator[int]:
        if self.kind is DeletedKind.EXPUNGED:
            return self.seqs()
        return self.uids()