"""Advent of Code 2024 solutions with a command-line runner, timer and benchmark table writer."""

__version__ = "0.1.0"