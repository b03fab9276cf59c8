"""Numerical helpers, physical properties and small utilities for simulation codes."""

__version__ = "0.1.0"