"""Shared constant tables."""

from .palette import (
    DEFAULT_MOOD,
    DEFAULT_MOODS,
    FALLBACK_COLOR,
    FONT_FAMILIES,
    FONT_SIZES,
    JOURNAL_COLORS,
    resolve_color,
)

__all__ = [
    "DEFAULT_MOOD",
    "DEFAULT_MOODS",
    "FALLBACK_COLOR",
    "FONT_FAMILIES",
    "FONT_SIZES",
    "JOURNAL_COLORS",
    "resolve_color",
]
