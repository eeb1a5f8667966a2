"""Pygame client for Falling Blocks."""
