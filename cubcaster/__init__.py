"""Grid-based first-person raycaster: .cub scene loading, validation, rendering and a pygame game loop."""

__version__ = "0.1.0"