"""Keyboard-driven terminal tracker for squats, push-ups and friends."""

__version__ = "0.1.0"
