"""Presentation layer: frame builders and the curses event loop."""
