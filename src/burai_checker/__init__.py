"""Burai (self-overlapping) slider detection for rhythm-game beatmaps."""

__version__ = "0.1.0"
