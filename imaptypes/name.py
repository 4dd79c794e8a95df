"""Mailbox names returned by LIST and LSUB."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Name:
    """A name that matches a LIST or LSUB command.

    ``attributes`` are the name attributes as sent (for example
    ``\\Noselect``). ``delimiter`` is the hierarchy delimiter, or None for a
    flat name.
    """

    name: str
    delimiter: str | None = None
    attributes: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "attributes", tuple(self.attributes))


class Names:
    """An ordered collection of :class:`Name` responses."""

    __slots__ = ("_names",)

    def __init__(self, names: Iterable[Name] = ()) -> None:
        self._names = tuple(names)

    def __iter__(self) -> Iterator[Name]:
        return iter(self._names)

    def __len__(self) -> int:
        return len(self._names)

    def __getitem__(self, index: int) -> Name:
        return self._names[index]

    def get(self, index: int) -> Name | None:
        """Return the name at ``index``, or None if there is none."""
        if 0 <= index < len(self._names):
            return self._names[index]
        return None

    def __repr__(self) -> str:
        return f"Names({list(self._names)!r})"