"""Clover Hunt: find-the-target board puzzle with a randomized layout engine."""

__version__ = "0.1.0"
