# This project was developed with assistance from AI tools.
"""Loan offer recommendation service."""

__version__ = "0.1.0"
