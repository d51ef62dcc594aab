"""A text-based dungeon crawler: a monk, goblins, upgrades and a treasure room."""

__version__ = "0.1.0"