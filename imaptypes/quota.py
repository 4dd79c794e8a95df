"""Quota resources, limits and responses (RFC 2087)."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import ClassVar


class InvalidResponseError(ValueError):
    """Raised when server responses do not have the expected shape."""


@dataclass(frozen=True)
class QuotaResourceName:
    """A quota resource type: ``STORAGE``, ``MESSAGE`` or any other atom."""

    value: str

    STORAGE: ClassVar[QuotaResourceName]
    MESSAGE: ClassVar[QuotaResourceName]

    @classmethod
    def parse(cls, value: str | QuotaResourceName) -> QuotaResourceName:
        """Return the resource name for ``value``."""
        if isinstance(value, QuotaResourceName):
            return value
        return cls(str(value))

    @property
    def is_atom(self) -> bool:
        """True for resource types other than STORAGE and MESSAGE."""
        return self.value not in ("STORAGE", "MESSAGE")

    def __str__(self) -> str:
        return self.value


QuotaResourceName.STORAGE = QuotaResourceName("STORAGE")
QuotaResourceName.MESSAGE = QuotaResourceName("MESSAGE")


@dataclass
class QuotaResourceLimit:
    """A resource limit to set with SETQUOTA."""

    name: QuotaResourceName
    amount: int

    def __init__(self, name: str | QuotaResourceName, amount: int) -> None:
        if amount < 0:
            raise ValueError("a quota amount cannot be negative")
        self.name = QuotaResourceName.parse(name)
        self.amount = amount

    def __str__(self) -> str:
        return f"{self.name} {self.amount}"


@dataclass(frozen=True)
class QuotaResource:
    """Usage and limit of one resource within a quota root."""

    name: QuotaResourceName
    usage: int
    limit: int


@dataclass(frozen=True)
class Quota:
    """A QUOTA response: the resources of one quota root."""

    root_name: str
    resources: list[QuotaResource] = field(default_factory=list)


@dataclass(frozen=True)
class QuotaRoot:
    """A QUOTAROOT response: the quota roots of a mailbox."""

    mailbox_name: str
    quota_root_names: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class QuotaRootResponse:
    """The answer to GETQUOTAROOT: one quota root and its quotas."""

    quota_root: QuotaRoot
    quotas: list[Quota] = field(default_factory=list)

    @classmethod
    def from_parts(
        cls, quota_roots: Iterable[QuotaRoot], quotas: Iterable[Quota]
    ) -> QuotaRootResponse:
        """Combine parsed responses; exactly one QUOTAROOT is required."""
        roots = list(quota_roots)
        if len(roots) != 1:
            raise InvalidResponseError(
                f"expected exactly one QUOTAROOT response, got {len(roots)}"
            )
        return cls(roots[0], list(quotas))

    @property
    def mailbox_name(self) -> str:
        """The mailbox the quota roots belong to."""
        return self.quota_root.mailbox_name

    def quota_root_names(self) -> Iterator[str]:
        """Yield the names of the mailbox's quota roots."""
        return iter(self.quota_root.quota_root_names)