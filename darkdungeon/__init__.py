"""A turn-based dungeon crawler with heroes, accessories, stress and save files."""

__version__ = "0.1.0"