"""Solutions to daily programming puzzles, grouped by year."""

__version__ = "0.1.0"