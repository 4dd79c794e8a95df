"""Small string helpers shared by the type modules."""

from __future__ import annotations

from collections.abc import Iterable


def iter_join(items: Iterable[object], delim: str) -> str:
    """Join the string forms of ``items`` with ``delim`` between them."""
    return delim.join(str(item) for item in items)