"""Exceptions raised by the profiler."""

from __future__ import annotations


class UnmeasuredReadError(RuntimeError):
    """Elapsed time was read before both start and stop marks were recorded."""
