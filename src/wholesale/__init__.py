"""Wholesale accounts and account transactions backend."""

__version__ = "2.0.0"
