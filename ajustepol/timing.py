"""Timing and naming helpers used around the curve-fitting stages."""

import time

__all__ = ["timestamp", "marker_name", "is_pow2"]


def timestamp():
    """Return a monotonic clock reading in milliseconds."""
    return time.monotonic_ns() * 1.0e-6


def marker_name(base_name, n):
    """Return ``'<base_name>_<n>'``, with ``n`` shown as an unsigned 32-bit value."""
    return f"{base_name}_{n & 0xFFFFFFFF}"


def is_pow2(n):
    """Tell whether the positive integer ``n`` is a power of two."""
    if n <= 0:
        raise ValueError(f"n must be positive, got {n}")
    return not (n & (n - 1))