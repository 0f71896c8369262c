"""Configuration module."""

from .config import load_config  # noqa: F401
