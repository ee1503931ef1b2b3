"""Hotseat — a two-player, same-device chess rules engine with a Qt front end."""

__version__ = "0.1.0"
