"""Isometric wireframes of height maps drawn onto in-memory RGBA images, with XPM42 reading."""

__version__ = "0.1.0"