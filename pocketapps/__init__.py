"""Handheld-style apps: Snake rules, a serial console and virtual-pet mini-games."""

__version__ = "0.1.0"