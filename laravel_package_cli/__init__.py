"""Scaffold Laravel packages from a fixed set of templates."""

__version__ = "0.1.0"
