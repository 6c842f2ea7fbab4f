"""Reconcile and validate locale translation files against the English reference."""

__version__ = "0.1.0"
