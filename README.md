# imaptypes

Plain Python values for the data an IMAP server sends back: message flags,
mailbox status, fetch results, expunge notices, ACLs, quotas, capabilities,
mailbox names and unsolicited responses. A client builds already-parsed
server data into these types and then works with them through ordinary
Python iteration, membership tests and attributes.

## Installation

```
pip install imaptypes
```

## Modules

- `imaptypes.flag`: `Flag` and `flags_from_strs`. System flags (`\Seen`,
  `\Answered`, `\Flagged`, `\Deleted`, `\Draft`, `\Recent`, `\*`) are
  available as `Flag.SEEN`, `Flag.ANSWERED`, `Flag.FLAGGED`, `Flag.DELETED`,
  `Flag.DRAFT`, `Flag.RECENT` and `Flag.MAY_CREATE`; `Flag.is_system()`
  tells them apart from custom keywords.
- `imaptypes.mailbox`: `Mailbox`, the metadata returned by `SELECT`,
  `EXAMINE` and `STATUS`, with defaults for every field.
- `imaptypes.appended`: `Appended`, the UIDPLUS data returned by `APPEND`.
- `imaptypes.deleted`: `Deleted`, the result of `EXPUNGE`, holding either
  sequence numbers (`from_expunged`) or inclusive `VANISHED` UID ranges
  (`from_vanished`). Iterating yields whichever it holds; `seqs()` and
  `uids()` yield only their own kind.
- `imaptypes.acls`: `AclRight`, `AclRights`, `AclRightError`,
  `AclModifyMode`, `Acl`, `AclEntry`, `ListRights`, `MyRights` (RFC 4314).
- `imaptypes.quota`: `QuotaResourceName`, `QuotaResourceLimit`,
  `QuotaResource`, `Quota`, `QuotaRoot`, `QuotaRootResponse` and
  `InvalidResponseError` (RFC 2087).
- `imaptypes.capabilities`: `Capability` and `Capabilities`.
- `imaptypes.name`: `Name` and `Names` for `LIST` and `LSUB` results.
- `imaptypes.fetch`: `Fetch`, `Fetches`, `AttributeValue`, `SectionPath`,
  `MessageSection`.
- `imaptypes.unsolicited`: `Bye`, `Exists`, `Expunge`, `FetchUpdate`,
  `FlagsUpdate`, `Metadata`, `Ok`, `Recent`, `Status`, `Vanished`, and the
  `UnsolicitedResponse` union of them.
- `imaptypes.utils`: `iter_join`, which joins the string forms of items.

## Examples

Flags:

```python
from imaptypes.flag import Flag, flags_from_strs

flags = list(flags_from_strs(["\\Seen", "$Important"]))
assert flags[0] == Flag.SEEN
assert flags[0].is_system()
assert not flags[1].is_system()
assert str(flags[1]) == "$Important"
```

Expunge results:

```python
from imaptypes.deleted import Deleted

deleted = Deleted.from_vanished([(1, 1), (3, 5)], None)
assert list(deleted) == [1, 3, 4, 5]
assert list(deleted.seqs()) == []
```

Access rights:

```python
from imaptypes.acls import AclRight, AclRights

rights = AclRights.from_str("lrs")
assert "l" in rights
assert AclRight.from_char("r") in rights
assert str(rights) == "lrs"
```

A rights string with anything other than lowercase ASCII letters and digits,
such as `"l_"`, raises `AclRightError`.

Quotas:

```python
from imaptypes.quota import QuotaResourceLimit, QuotaResourceName

limit = QuotaResourceLimit("STORAGE", 1000)
assert limit.name == QuotaResourceName.STORAGE
assert str(limit) == "STORAGE 1000"
```

`QuotaRootResponse.from_parts` raises `InvalidResponseError` unless it is
given exactly one `QuotaRoot`.

Capabilities:

```python
from imaptypes.capabilities import Capabilities, Capability

caps = Capabilities([Capability.imap4rev1(), Capability.auth("PLAIN")])
assert caps.has_str("imap4rev1")
assert caps.has_str("AUTH=PLAIN")
assert len(caps) == 2
```

Fetch results:

```python
from imaptypes.fetch import AttributeValue, Fetch
from imaptypes.flag import Flag

fetch = Fetch.from_attributes(
    1,
    [
        AttributeValue.uid(42),
        AttributeValue.flags(["\\Seen"]),
        AttributeValue.body_section(None, b"Subject: hi\r\n\r\nbody"),
        AttributeValue.internal_date("17-Jul-1996 02:44:25 -0700"),
    ],
)
assert fetch.uid == 42
assert fetch.flags == [Flag.SEEN]
assert fetch.body() == b"Subject: hi\r\n\r\nbody"
assert fetch.internal_date().year == 1996
```

`Fetch.internal_date()` returns None when the date is missing or does not
match the RFC 3501 `date-time` form.

## What the package does not do

There is no client here: no connection handling, no TLS, no login, no
commands and no parser for the IMAP wire format. The types hold values that
have already been parsed, so turning a server's raw response lines into
`Fetch`, `Names`, `Capabilities` or the unsolicited response classes is left
to the code that uses this package.

## Running the tests

```
pip install -e .[test]
pytest
```