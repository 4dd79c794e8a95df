"""Mailbox meta-information as returned by SELECT, EXAMINE and STATUS."""

from __future__ import annotations

from dataclasses import dataclass, field

from imaptypes.flag import Flag
from imaptypes.utils import iter_join


@dataclass
class Mailbox:
    """State of a mailbox reported by the server."""

    flags: list[Flag] = field(default_factory=list)
    exists: int = 0
    recent: int = 0
    unseen: int | None = None
    permanent_flags: list[Flag] = field(default_factory=list)
    uid_next: int | None = None
    uid_validity: int | None = None
    highest_mod_seq: int | None = None
    is_read_only: bool = False

    def __str__(self) -> str:
        flags = "[" + iter_join(self.flags, ", ") + "]"
        permanent = "[" + iter_join(self.permanent_flags, ", ") + "]"
        return (
            f"flags: {flags}, exists: {self.exists}, recent: {self.recent}, "
            f"unseen: {self.unseen}, permanent_flags: {permanent}, "
            f"uid_next: {self.uid_next}, uid_validity: {self.uid_validity}, "
            f"highest_mod_seq: {self.highest_mod_seq}, "
            f"is_read_only: {self.is_read_only}"
        )