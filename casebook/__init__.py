"""Encryption primitives and algorithmic contest solvers."""

__version__ = "0.1.0"