"""Daily puzzle solutions for 2024 (days 1-21, 23 and 25) with grid and geometry helpers."""

__version__ = "0.1.0"