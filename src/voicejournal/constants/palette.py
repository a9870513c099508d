"""
Mood symbols and the fixed color palette shared by entries, the editor and the streak card.
"""

# Moods offered by the mood picker. Users may add any other emoji.
DEFAULT_MOODS = ["😊", "🤩", "🥰", "😐", "😢", "😠", "🤔", "😎"]

DEFAULT_MOOD = DEFAULT_MOODS[0]

# Color tags an entry can carry, with their RGB components (0-1 floats).
JOURNAL_COLORS = {
    "vibrantPurple": (0.4, 0.2, 0.8),
    "vibrantOrange": (1.0, 0.5, 0.2),
    "vibrantGold": (1.0, 0.75, 0.0),
    "vibrantTeal": (0.1, 0.6, 0.55),
}

FALLBACK_COLOR = "gray"

# Font sizes the editor toolbar can apply to a span.
FONT_SIZES = [12, 14, 16, 18, 20, 22, 24, 28, 32, 36, 42, 48]

FONT_FAMILIES = ["System", "Times New Roman", "Helvetica", "Courier"]


def resolve_color(name: str | None) -> str:
    """Return ``name`` when it is a palette color, otherwise the fallback."""
    if name in JOURNAL_COLORS:
        return name
    return FALLBACK_COLOR

