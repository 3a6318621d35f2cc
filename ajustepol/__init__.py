"""Least-squares polynomial fitting, timing helpers and input generation."""

__version__ = "1.0.0"
__all__ = ["timing", "fit_basic", "fit_fast", "generator"]