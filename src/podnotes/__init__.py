"""Podnotes - a personal library of structured podcast notes."""

__version__ = "0.1.0"
