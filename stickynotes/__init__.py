"""Sticky notes stored in SQLite, with window geometry for editors and a call debouncer."""

__version__ = "0.1.0"