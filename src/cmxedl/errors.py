"""Errors raised while building EDL records."""

from __future__ import annotations


class EDLError(Exception):
    """Base class for cmxedl errors."""


class MalformedInputError(EDLError, ValueError):
    """Raised when text does not have the shape of the line it should be."""


class InvalidConstructionSourceError(EDLError, TypeError):
    """Raised when a record is built from something that is neither text nor a record."""
