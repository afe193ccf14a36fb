# -*- coding: utf-8 -*-
# Wingmac/mac/errors.py

"""
Project: Wingmac
Date: 10/16/2026

Purpose
-------
Typed exceptions for the MAC pipeline with compact, context-aware messages, so callers
can surface a user-facing message and abort without a partial result.

Main Tasks
----------
    1. Define MACError(message, context) with a compact context suffix in __str__.
    2. Provide typed subclasses: InsufficientPointsError, ZeroSpanError, ZeroAreaError,
       InputError.

Notes
-----
- Context is optional; long values are truncated for readability.
- All errors are recoverable at the caller boundary; nothing here is fatal.
"""

__all__ = [
    "MACError",
    "InsufficientPointsError",
    "ZeroSpanError",
    "ZeroAreaError",
    "InputError",
]


def _format_context(ctx):
    """Return a compact ' | key1=val1, key2=val2' string or '' if no context."""
    if not ctx:
        return ""
    parts = []
    for k in sorted(ctx.keys()):
        sv = repr(ctx[k])
        if len(sv) > 120:
            sv = sv[:117] + "..."
        parts.append("{}={}".format(k, sv))
    return " | " + ", ".join(parts)


class MACError(Exception):
    """
    Base class for all MAC computation errors.

    Parameters
    ----------
    message : str
        Human-readable error.
    context : dict, optional
        Extra fields to append in the string form (e.g., {"edge": "leading", "n": 1}).
    """
    def __init__(self, message, context=None):
        self.context = dict(context) if context else None
        super().__init__(message)

    def __str__(self):
        return super().__str__() + _format_context(self.context)


class InsufficientPointsError(MACError):
    """An edge curve flattened to fewer than 2 samples."""


class ZeroSpanError(MACError):
    """Leading and trailing edges do not overlap in span."""


class ZeroAreaError(MACError):
    """The overlapping geometry integrates to zero area."""


class InputError(MACError):
    """
    Invalid caller input detected before any geometry is processed:
      - missing leading/trailing edge or symmetry line
      - non-positive or non-finite wingspan
      - zero-length symmetry line
      - malformed config overrides
    """
