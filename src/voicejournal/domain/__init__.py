"""Domain types and repository contracts."""

from .document import RichDocument, StyleSpan

__all__ = ["RichDocument", "StyleSpan"]
