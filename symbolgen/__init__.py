"""Stable numeric identifiers and generated symbol tables for traded coins."""

__version__ = "1.0.0"
