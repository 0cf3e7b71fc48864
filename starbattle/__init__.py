"""A two-player terminal starship fleet battle game: ships, grids, players and the console game loop."""

__version__ = "1.0.0"