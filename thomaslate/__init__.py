"""A two-character split-screen platform game with window-free game rules."""

__version__ = "0.1.0"