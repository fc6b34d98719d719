"""Flapper: a single-screen flappy arcade game."""

__version__ = "0.1.0"
