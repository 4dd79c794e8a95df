"""Meta-information returned by APPEND when UIDPLUS is available."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Appended:
    """UID information about appended messages.

    ``uids`` holds single UIDs or inclusive ``(first, last)`` ranges, as sent
    in an APPENDUID response code. Both fields are None when the server does
    not support UIDPLUS.
    """

    uid_validity: int | None = None
    uids: list[int | tuple[int, int]] | None = None