"""Exceptions raised by the Keyspace analyzers."""

from __future__ import annotations


class DomainError(ValueError):
    """A candidate has no classifiable characters to build a search space from."""
