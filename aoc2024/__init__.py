"""Advent of Code 2024 puzzle solutions for days 1 to 11, with a command line runner."""

__version__ = "0.1.0"