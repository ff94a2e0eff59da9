"""The built-in placeholder image shown when a texture cannot be loaded."""

from __future__ import annotations

import io
import logging
import os
import string

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from .logger import LOGGER_NAME  # noqa: E402

_log = logging.getLogger(LOGGER_NAME)

_ALPHABET = string.ascii_uppercase + string.ascii_lowercase + string.digits + "+/"
_DECODE_TABLE = {ch: value for value, ch in enumerate(_ALPHABET)}

# A transparent PNG, kept inline so it is always available.
MISSING_TEXTURE = (
    "iVBORw0KGgoAAAANSUhEUgAAAQAAAAEABAMAAACuXLVVAAAAIGNIUk0AAHomAACAhAAA+"
    "gAAAIDoAAB1MAAA6mAAADqYAAAXcJy6UTwAAAAhUExURf8A3P8A3uEAwh4AGgAAAP8A3+"
    "IAwx0AGcoArjUALv///"
    "xhkxvUAAAABYktHRApo0PRWAAAAB3RJTUUH5wwZEiAsl4pL0QAAAQlJREFUeNrt2rENAjEMBVC"
    "vcGzArRA2IBIbsAESA9CwACuwLrVDnfiK5/"
    "YX9xRdY+tH5DldeprreW7eAwAAAAAAAAAAAAAAAACgHLDlub9yfnvMzXvseZ7flub9mZu3aGs/"
    "OOZ79LVPPubbCJj90415AAAAAAAAAAAAAAAAABwOsH45LV/"
    "Pyw8U5SeaWPvTHfBKBgAAAAAAAAAAAAAAAFC+nJav5+"
    "UHir72yfUHAAAAAAAAAAAAAAAAAPQH9Af0BwAAAAAAAAAAAAAAAAD0B/"
    "QH9AcAAAAAAAAAAAAAAAAA9Af0B/"
    "QHAAAAAAAAAAAAAAAAAPQH9Af0BwAAAAAAAAAAAAAAAAAA/gA/"
    "YLVKK0nwuR8AAAAldEVYdGRhdGU6Y3JlYXRlADIwMjMtMTItMjVUMTg6MzI6MzcrMDA6MDCbYQ"
    "aeAAAAJXRFWHRkYXRlOm1vZGlmeQAyMDIzLTEyLTI1VDE4OjMyOjM3KzAwOjAw6jy+"
    "IgAAACh0RVh0ZGF0ZTp0aW1lc3RhbXAAMjAyMy0xMi0yNVQxODozMjo0NCswMDowMIYEjHkAAA"
    "AASUVORK5CYII="
)


def decode_base64_length(text: str) -> int:
    """Number of bytes ``text`` decodes to, judged from its length and padding."""
    whole = (len(text) // 4) * 3
    if text[-2:-1] == "=":
        return whole - 2
    if text[-1:] == "=":
        return whole - 1
    return whole


def decode_base64(text: str) -> bytes:
    """Decode ``text`` up to its first non-alphabet character.

    The result always has :func:`decode_base64_length` bytes, zero-filled
    past whatever was decoded.
    """
    length = decode_base64_length(text)
    out = bytearray()
    value = 0
    bits = -8
    for ch in text:
        digit = _DECODE_TABLE.get(ch)
        if digit is None:
            break
        value = ((value << 6) + digit) & 0xFFFFFFFF
        bits += 6
        if bits >= 0:
            out.append((value >> bits) & 0xFF)
            bits -= 8
    out.extend(bytes(max(0, length - len(out))))
    return bytes(out[:length])


def missing_texture_bytes() -> bytes:
    """The placeholder image as PNG file bytes."""
    return decode_base64(MISSING_TEXTURE)


def missing_texture_surface() -> pygame.Surface:
    """Load the placeholder image into a surface."""
    try:
        return pygame.image.load(io.BytesIO(missing_texture_bytes()), "missing.png")
    except pygame.error:
        _log.error("base64ToSurface")
        raise