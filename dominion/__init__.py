"""Dominion card game engine: rules, card effects, text views, a scripted game and a console."""

__version__ = "0.1.0"