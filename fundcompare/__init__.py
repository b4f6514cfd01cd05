"""Project and compare the growth of two investment funds."""

__version__ = "0.1.0"
