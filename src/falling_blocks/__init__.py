"""Falling Blocks: a single-player falling-block puzzle engine."""

__version__ = "0.1.0"
