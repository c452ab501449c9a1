"""Solvers for Advent of Code puzzles from 2023 and 2024, with a shared text parser."""

__version__ = "0.1.0"