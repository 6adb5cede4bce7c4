"""Theme registry.

Maps a theme id to a fixed four-role palette. Resolution is total: any id
outside ThemeId resolves to the minimal palette.
"""

import logging
from dataclasses import dataclass

from folio.models.portfolio import ThemeId, TypographyId

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Palette:
    """Theme colors.

    Attributes:
        background: Page and section background (color or CSS gradient)
        text: Primary text color
        accent: Accent color for headings, buttons and links
        secondary: Muted color for captions and borders
    """

    background: str
    text: str
    accent: str
    secondary: str

    @property
    def surface(self) -> str:
        """Card background that contrasts with the page background."""
        return "#f8f9fa" if self.background == "#ffffff" else "#2a2a2a"

    @property
    def footer_background(self) -> str:
        """Footer background."""
        return "#f8f9fa" if self.background == "#ffffff" else "#1a1a1a"


_GRADIENT = "linear-gradient(135deg, #667eea 0%, #764ba2 100%)"

THEMES: dict[ThemeId, Palette] = {
    ThemeId.MINIMAL: Palette("#ffffff", "#333333", "#007bff", "#6c757d"),
    ThemeId.DARK: Palette("#1a1a1a", "#ffffff", "#ffd700", "#888888"),
    ThemeId.PROFESSIONAL: Palette("#f8f9fa", "#2c3e50", "#3498db", "#7f8c8d"),
    ThemeId.CREATIVE: Palette(_GRADIENT, "#ffffff", "#ffffff", "#e0e0e0"),
    ThemeId.MODERN_GRADIENT: Palette(_GRADIENT, "#ffffff", "#ffffff", "#e0e0e0"),
    ThemeId.RETRO: Palette("#2c3e50", "#ecf0f1", "#e74c3c", "#95a5a6"),
    ThemeId.PLAYFUL: Palette("#ff9ff3", "#2c3e50", "#ff6b6b", "#4ecdc4"),
}

DEFAULT_THEME = ThemeId.MINIMAL

FONT_STACKS: dict[TypographyId, str] = {
    TypographyId.SANS: "Inter, system-ui, -apple-system, sans-serif",
    TypographyId.SERIF: "Georgia, 'Times New Roman', serif",
    TypographyId.MONO: "'JetBrains Mono', Menlo, monospace",
}

DEFAULT_TYPOGRAPHY = TypographyId.SANS

_missing_themes = set(ThemeId) - set(THEMES)
if _missing_themes:
    raise RuntimeError(f"Themes without a palette: {sorted(t.value for t in _missing_themes)}")


def resolve_theme(theme_id: str) -> Palette:
    """Resolve a theme id to its palette.

    Args:
        theme_id: Theme id, possibly unknown

    Returns:
        The theme's palette, or the minimal palette for unknown ids
    """
    try:
        return THEMES[ThemeId(theme_id)]
    except ValueError:
        logger.debug("Unknown theme %r, using %s", theme_id, DEFAULT_THEME.value)
        return THEMES[DEFAULT_THEME]


def resolve_typography(font_id: str) -> str:
    """Resolve a typography id to a CSS font-family stack.

    Unknown ids resolve to the sans-serif stack.
    """
    try:
        return FONT_STACKS[TypographyId(font_id)]
    except ValueError:
        logger.debug("Unknown typography %r, using %s", font_id, DEFAULT_TYPOGRAPHY.value)
        return FONT_STACKS[DEFAULT_TYPOGRAPHY]
