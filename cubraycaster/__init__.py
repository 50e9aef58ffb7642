"""Grid-based raycasting engine for .cub scene files, with a pygame window and minimap."""

__version__ = "0.1.0"