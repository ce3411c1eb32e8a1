"""Pylint plugin enforcing initialization calls on factory-built components."""

__version__ = "0.1.0"
