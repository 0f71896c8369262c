"""Utilities module."""

from . import logs  # noqa: F401
