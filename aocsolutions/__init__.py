"""Advent of Code puzzle solutions, one module per day, with shared input helpers."""

__version__ = "0.1.0"