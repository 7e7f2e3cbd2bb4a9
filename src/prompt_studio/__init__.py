"""Prompt Studio: scene prompt analysis and optimization."""

__version__ = "0.1.0"
