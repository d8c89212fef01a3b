"""Identifier generation for ledger records."""

import uuid


def new_identifier() -> str:
    """Return a random 128-bit identifier as 32 hex characters."""
    return uuid.uuid4().hex


__all__ = ["new_identifier"]
