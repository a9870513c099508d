"""Structured rich-text document stored in ``JournalEntry.content``.

A document is plain text plus a list of styled ranges. Ranges are kept in the
order they were applied; a later span wins where two spans set the same key.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Union

from ..constants.palette import FONT_FAMILIES, FONT_SIZES
from ..errors import InvalidDocumentError

StyleValue = Union[str, int, bool]

PREVIEW_LENGTH = 150
TITLE_LENGTH = 40
DEFAULT_TITLE = "Journal Entry"


@dataclass(frozen=True)
class StyleSpan:
    """A style applied to ``text[start:start + length]``."""

    start: int
    length: int
    style: dict[str, StyleValue] = field(default_factory=dict)

    @property
    def end(self) -> int:
        return self.start + self.length

    def to_dict(self) -> dict[str, Any]:
        return {"start": self.start, "length": self.length, "style": dict(self.style)}


@dataclass(frozen=True)
class RichDocument:
    """Plain text with attribute spans."""

    text: str = ""
    spans: tuple[StyleSpan, ...] = ()

    def __post_init__(self):
        if not isinstance(self.text, str):
            raise InvalidDocumentError("Document text must be a string")
        object.__setattr__(self, "spans", tuple(self.spans))
        for span in self.spans:
            _validate_span(span, len(self.text))

    @classmethod
    def plain(cls, text: str) -> "RichDocument":
        return cls(text=text)

    @property
    def plain_text(self) -> str:
        return self.text

    @property
    def is_empty(self) -> bool:
        return not self.text.strip()

    def preview(self, limit: int = PREVIEW_LENGTH) -> str:
        """First ``limit`` characters of the plain text."""
        return self.text[:limit]

    def smart_title(self) -> str:
        """Title derived from the first non-blank line, or a generic default."""
        for line in self.text.splitlines():
            if line.strip():
                return line[:TITLE_LENGTH]
        return DEFAULT_TITLE

    def apply_style(self, start: int, length: int, **style: StyleValue) -> "RichDocument":
        """Return a copy with one more span covering ``[start, start + length)``."""
        span = StyleSpan(start=start, length=length, style=dict(style))
        return RichDocument(text=self.text, spans=self.spans + (span,))

    def style_at(self, index: int) -> dict[str, StyleValue]:
        """Effective style of the character at ``index``."""
        if not 0 <= index < len(self.text):
            raise InvalidDocumentError(f"Index {index} outside document of length {len(self.text)}")
        merged: dict[str, StyleValue] = {}
        for span in self.spans:
            if span.start <= index < span.end:
                merged.update(span.style)
        return merged

    def to_dict(self) -> dict[str, Any]:
        return {"text": self.text, "spans": [span.to_dict() for span in self.spans]}

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False)

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> "RichDocument":
        text = payload.get("text", "")
        raw_spans = payload.get("spans") or []
        if not isinstance(raw_spans, list):
            raise InvalidDocumentError("Document spans must be a list")
        spans = []
        for raw in raw_spans:
            if not isinstance(raw, dict):
                raise InvalidDocumentError(f"Malformed span: {raw!r}")
            try:
                spans.append(
                    StyleSpan(
                        start=int(raw["start"]),
                        length=int(raw["length"]),
                        style=dict(raw.get("style") or {}),
                    )
                )
            except (KeyError, TypeError, ValueError) as exc:
                raise InvalidDocumentError(f"Malformed span: {raw!r}") from exc
        return cls(text=text, spans=tuple(spans))

    @classmethod
    def from_json(cls, payload: str) -> "RichDocument":
        """Decode stored content.

        Content that is not a JSON document object is treated as legacy plain
        text so old rows still render.
        """
        try:
            data = json.loads(payload)
        except (TypeError, ValueError):
            return cls.plain(payload or "")
        if not isinstance(data, dict) or "text" not in data:
            return cls.plain(payload)
        return cls.from_dict(data)


def _validate_span(span: StyleSpan, text_length: int) -> None:
    if span.start < 0 or span.length <= 0:
        raise InvalidDocumentError(f"Span must have start >= 0 and positive length: {span}")
    if span.end > text_length:
        raise InvalidDocumentError(
            f"Span {span.start}:{span.end} exceeds document length {text_length}"
        )
    size = span.style.get("size")
    if size is not None and size not in FONT_SIZES:
        raise InvalidDocumentError(f"Unsupported font size {size}")
    font = span.style.get("font")
    if font is not None and font not in FONT_FAMILIES:
        raise InvalidDocumentError(f"Unsupported font {font!r}")


__all__ = ["RichDocument", "StyleSpan"]
