"""Render Homebrew formulas for release binaries."""

__version__ = "0.1.0"
