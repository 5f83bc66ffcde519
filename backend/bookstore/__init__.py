"""Bookstore Application Package: REST API over the books table.

Invariants:
    - Package root contains no executable code (no import side-effects)
"""
