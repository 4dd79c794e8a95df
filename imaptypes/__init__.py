"""Typed values for IMAP server responses: flags, mailboxes, fetches, ACLs, quotas and more."""

__version__ = "3.0.0a15"