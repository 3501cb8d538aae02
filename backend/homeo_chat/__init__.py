"""Homeopath chat backend: proxies chat turns to a completion API and records them."""

__version__ = "1.0.0"
