"""Pushin' Boxes: a box-pushing puzzle game with a level editor."""

__version__ = "0.14.0"