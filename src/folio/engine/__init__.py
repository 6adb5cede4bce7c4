"""Folio resolution engine.

Pure, total resolvers used by the document assembler:
- themes: theme id -> Palette, typography id -> font stack
- animations: animation ids -> one EntranceAnimation, stagger delays, keyframes
- ordering: section ids -> canonical display order
- binding: section id + content -> template data with per-field defaults
"""

from folio.engine.animations import (
    EntranceAnimation,
    keyframes_for,
    resolve_entrance_animation,
    stagger_delay,
)
from folio.engine.binding import bind_content
from folio.engine.ordering import order_sections
from folio.engine.themes import Palette, resolve_theme, resolve_typography

__all__ = [
    "EntranceAnimation",
    "Palette",
    "bind_content",
    "keyframes_for",
    "order_sections",
    "resolve_entrance_animation",
    "resolve_theme",
    "resolve_typography",
    "stagger_delay",
]
