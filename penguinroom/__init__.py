"""Game model for a penguin chat room: players, penguin sprites, clothing, paper dolls, items, localization and HUD state."""

__version__ = "0.1.0"