"""Typed HTTP header fields that decode from and encode to raw values."""

__version__ = "0.3.5"