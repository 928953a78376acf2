"""Software raycasting renderer: textures, pixel buffers, walls, sprites, input, HUD and minimap."""

__version__ = "0.1.0"

__all__ = [
    "animated_texture",
    "draw_column",
    "errorwindow",
    "gameui",
    "helpers",
    "input",
    "minimap",
    "perspective",
    "pixels",
    "ray_gen",
    "raycaster",
    "sampler",
]