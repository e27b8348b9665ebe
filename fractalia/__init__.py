"""Escape-time fractals, iterated function systems and the Koch snowflake, rendered to images."""

__version__ = "0.1.0"