"""Practical tools for simple 2D game design on top of pygame.

Window and frame loop, game objects, images, text, animation, input,
audio, colours, logging and asset caching.
"""

__version__ = "0.1.0"

__all__ = [
    "animation",
    "asset_store",
    "audio",
    "clock",
    "color",
    "config",
    "context",
    "debug_message",
    "drawable",
    "game_object",
    "image",
    "inputs",
    "keycode",
    "load_text_file",
    "logger",
    "missing_texture",
    "renderer",
    "text",
    "transform",
]