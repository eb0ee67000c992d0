"""Solvers for the twenty-five puzzles of a December 2024 advent calendar, one module per day."""

__version__ = "0.1.0"