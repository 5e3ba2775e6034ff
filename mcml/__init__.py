"""Launcher building blocks: logging, core setup, stop events, configuration, download bookkeeping and skin rendering."""

__version__ = "0.1.0"