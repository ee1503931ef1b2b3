"""Presentation layer (PyQt6): renders the game and forwards clicks."""
