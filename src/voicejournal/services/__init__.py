"""Service module exports.

``journal`` depends on the repositories and is imported directly as
``voicejournal.services.journal``.
"""

from . import calendar_index, streaks

__all__ = ["calendar_index", "streaks"]
