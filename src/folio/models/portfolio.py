"""Portfolio configuration entities.

This module contains the configuration the editing UI hands to the engine:
- ThemeId, SectionId, AnimationId, TypographyId: closed id enumerations
- AnimationCategory: entrance / hover / transition / micro
- PortfolioConfig: one complete portfolio configuration
- FeedbackEvent: one user interaction appended to the feedback log

Ids inside a PortfolioConfig are kept as plain strings. Values outside the
enumerations are legal (e.g. a file written by an older version) and are
resolved by the engine's defaulting rules, never rejected here.
"""

import copy
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any

from folio.exceptions import ConfigValidationError
from folio.models.content import ContentBundle, default_content


class ThemeId(str, Enum):
    """Available theme ids."""

    MINIMAL = "minimal"
    DARK = "dark"
    PROFESSIONAL = "professional"
    CREATIVE = "creative"
    MODERN_GRADIENT = "modern-gradient"
    RETRO = "retro"
    PLAYFUL = "playful"


class SectionId(str, Enum):
    """Available section ids, declared in canonical display order."""

    NAVBAR = "navbar"
    HERO = "hero"
    ABOUT = "about"
    SKILLS = "skills"
    EXPERIENCE = "experience"
    EDUCATION = "education"
    PROJECTS = "projects"
    TESTIMONIALS = "testimonials"
    AWARDS = "awards"
    BLOG = "blog"
    GALLERY = "gallery"
    CONTACT = "contact"
    FOOTER = "footer"

    @property
    def display_name(self) -> str:
        """Human-readable section name."""
        return SECTION_INFO[self][0]

    @property
    def description(self) -> str:
        """Short description of what the section shows."""
        return SECTION_INFO[self][1]


class AnimationCategory(Enum):
    """Category of an animation id.

    Only ENTRANCE affects the statically rendered document.
    """

    ENTRANCE = "entrance"
    HOVER = "hover"
    TRANSITION = "transition"
    MICRO = "micro"


class AnimationId(str, Enum):
    """Available animation ids across all four categories."""

    # Section entrances
    FADE_IN = "fade-in"
    SLIDE_UP = "slide-up"
    SLIDE_LEFT = "slide-left"
    SLIDE_RIGHT = "slide-right"
    ZOOM_IN = "zoom-in"
    ROTATE_IN = "rotate-in"
    BOUNCE_IN = "bounce-in"
    # Hover effects
    SCALE_UP = "scale-up"
    SCALE_DOWN = "scale-down"
    GLOW = "glow"
    SHADOW_POP = "shadow-pop"
    TILT = "tilt"
    PARALLAX = "parallax"
    # Transitions
    SMOOTH_FADE = "smooth-fade"
    SLIDE_TRANSITION = "slide-transition"
    CARD_FLIP = "card-flip"
    STAGGERED_REVEAL = "staggered-reveal"
    # Micro-interactions
    BUTTON_RIPPLE = "button-ripple"
    ICON_BOUNCE = "icon-bounce"
    TYPEWRITER = "typewriter"
    PROGRESS_BAR = "progress-bar"

    @property
    def category(self) -> AnimationCategory:
        """Category this animation belongs to."""
        return ANIMATION_CATEGORIES[self]


class TypographyId(str, Enum):
    """Available typography ids."""

    SANS = "font-sans"
    SERIF = "font-serif"
    MONO = "font-mono"


SECTION_INFO: dict[SectionId, tuple[str, str]] = {
    SectionId.NAVBAR: ("Navigation Bar", "Logo + navigation links"),
    SectionId.HERO: ("Hero Section", "Big banner with name, tagline, CTA"),
    SectionId.ABOUT: ("About Me", "Profile image + bio"),
    SectionId.SKILLS: ("Skills", "List or grid with icons/badges"),
    SectionId.EXPERIENCE: ("Experience", "Work history timeline or cards"),
    SectionId.EDUCATION: ("Education", "Timeline or simple list"),
    SectionId.PROJECTS: ("Projects", "Cards, carousel, or timeline"),
    SectionId.TESTIMONIALS: ("Testimonials", "Client quotes"),
    SectionId.AWARDS: ("Awards & Certifications", "Badges or certificates list"),
    SectionId.BLOG: ("Blog/Articles", "Latest posts"),
    SectionId.GALLERY: ("Gallery", "Image grid or slider"),
    SectionId.CONTACT: ("Contact", "Form, email, or links"),
    SectionId.FOOTER: ("Footer", "Social icons, copyright"),
}

ANIMATION_CATEGORIES: dict[AnimationId, AnimationCategory] = {
    AnimationId.FADE_IN: AnimationCategory.ENTRANCE,
    AnimationId.SLIDE_UP: AnimationCategory.ENTRANCE,
    AnimationId.SLIDE_LEFT: AnimationCategory.ENTRANCE,
    AnimationId.SLIDE_RIGHT: AnimationCategory.ENTRANCE,
    AnimationId.ZOOM_IN: AnimationCategory.ENTRANCE,
    AnimationId.ROTATE_IN: AnimationCategory.ENTRANCE,
    AnimationId.BOUNCE_IN: AnimationCategory.ENTRANCE,
    AnimationId.SCALE_UP: AnimationCategory.HOVER,
    AnimationId.SCALE_DOWN: AnimationCategory.HOVER,
    AnimationId.GLOW: AnimationCategory.HOVER,
    AnimationId.SHADOW_POP: AnimationCategory.HOVER,
    AnimationId.TILT: AnimationCategory.HOVER,
    AnimationId.PARALLAX: AnimationCategory.HOVER,
    AnimationId.SMOOTH_FADE: AnimationCategory.TRANSITION,
    AnimationId.SLIDE_TRANSITION: AnimationCategory.TRANSITION,
    AnimationId.CARD_FLIP: AnimationCategory.TRANSITION,
    AnimationId.STAGGERED_REVEAL: AnimationCategory.TRANSITION,
    AnimationId.BUTTON_RIPPLE: AnimationCategory.MICRO,
    AnimationId.ICON_BOUNCE: AnimationCategory.MICRO,
    AnimationId.TYPEWRITER: AnimationCategory.MICRO,
    AnimationId.PROGRESS_BAR: AnimationCategory.MICRO,
}


# JSON keys read by PortfolioConfig.from_dict
_CONFIG_KEYS = frozenset(
    {
        "theme",
        "colorPalette",
        "layout",
        "components",
        "animations",
        "typography",
        "published",
        "content",
    }
)


def _is_str_list(value: Any) -> bool:
    return isinstance(value, list) and all(isinstance(item, str) for item in value)


@dataclass
class PortfolioConfig:
    """One complete portfolio configuration.

    Treated as immutable by the engine: use with_overrides() to derive a
    new configuration instead of assigning to fields.

    Attributes:
        theme: Theme id (unknown ids fall back to the default palette)
        components: Section ids in any order, duplicates allowed
        animations: Animation ids in any order
        typography: Typography id
        content: Editable content, None for built-in content
        color_palette: Palette tokens kept for the editing UI
        layout: Layout hint kept for the editing UI
        published: Whether the portfolio has been published
        extra: Top-level keys this model does not know, written back unchanged
    """

    theme: str = ThemeId.MINIMAL.value
    components: list[str] = field(default_factory=list)
    animations: list[str] = field(default_factory=list)
    typography: str = TypographyId.SANS.value
    content: ContentBundle | None = None
    color_palette: list[str] = field(default_factory=list)
    layout: str = "single"
    published: bool = False
    extra: dict[str, Any] = field(default_factory=dict, repr=False)

    @classmethod
    def from_dict(cls, data: Any) -> "PortfolioConfig":
        """Create a configuration from decoded JSON, validating its shape.

        Only the shape is checked. Unknown theme, section, animation and
        typography ids are accepted as-is.

        Args:
            data: Decoded JSON value

        Returns:
            PortfolioConfig instance

        Raises:
            ConfigValidationError: Listing every shape problem found
        """
        if not isinstance(data, dict):
            raise ConfigValidationError(["configuration must be a JSON object"])

        problems: list[str] = []
        values: dict[str, Any] = {}

        for key in ("theme", "typography", "layout"):
            if key in data:
                if isinstance(data[key], str):
                    values[key] = data[key]
                else:
                    problems.append(f"{key} must be a string")

        for key, attr in (
            ("components", "components"),
            ("animations", "animations"),
            ("colorPalette", "color_palette"),
        ):
            if key in data:
                if _is_str_list(data[key]):
                    values[attr] = list(data[key])
                else:
                    problems.append(f"{key} must be a list of strings")

        if "published" in data:
            if isinstance(data["published"], bool):
                values["published"] = data["published"]
            else:
                problems.append("published must be a boolean")

        if data.get("content") is not None:
            values["content"] = ContentBundle.parse(data["content"], "content", problems)

        if problems:
            raise ConfigValidationError(problems)

        values["extra"] = {
            key: copy.deepcopy(value) for key, value in data.items() if key not in _CONFIG_KEYS
        }

        return cls(**values)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        result: dict[str, Any] = {
            "theme": self.theme,
            "colorPalette": list(self.color_palette),
            "layout": self.layout,
            "components": list(self.components),
            "animations": list(self.animations),
            "typography": self.typography,
            "published": self.published,
        }
        if self.content is not None:
            result["content"] = self.content.to_dict()
        for key, value in self.extra.items():
            result.setdefault(key, copy.deepcopy(value))
        return result

    def with_overrides(self, **changes: Any) -> "PortfolioConfig":
        """Return a new configuration with the given fields replaced."""
        return replace(self, **changes)


def default_config() -> PortfolioConfig:
    """Return a fresh default configuration (with built-in content)."""
    return PortfolioConfig(
        theme=ThemeId.MINIMAL.value,
        color_palette=["bg-gray-900", "text-white", "accent-blue-500"],
        layout="single",
        components=[
            "navbar",
            "hero",
            "about",
            "skills",
            "projects",
            "experience",
            "contact",
            "footer",
        ],
        animations=["fade-in", "slide-up"],
        typography=TypographyId.SANS.value,
        published=False,
        content=default_content(),
    )


DEFAULT_CONFIG = default_config()


@dataclass
class FeedbackEvent:
    """One user interaction recorded in the feedback log.

    Attributes:
        event: Event name (e.g. "keep_theme", "like", "publish")
        timestamp: ISO-8601 timestamp, stamped on append when missing
        session_id: Editing session identifier
        details: Free-form context used by the contextual reward rules
    """

    event: str
    timestamp: str | None = None
    session_id: str | None = None
    details: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Any) -> "FeedbackEvent":
        """Create an event from decoded JSON.

        Raises:
            ConfigValidationError: If the event name or details are malformed
        """
        if not isinstance(data, dict):
            raise ConfigValidationError(["feedback event must be a JSON object"])

        problems: list[str] = []
        if not isinstance(data.get("event"), str) or not data.get("event"):
            problems.append("event must be a non-empty string")
        details = data.get("details") or {}
        if not isinstance(details, dict):
            problems.append("details must be an object")
        if problems:
            raise ConfigValidationError(problems)

        return cls(
            event=data["event"],
            timestamp=data.get("timestamp"),
            session_id=data.get("sessionId"),
            details=dict(details),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        result: dict[str, Any] = {"timestamp": self.timestamp, "event": self.event}
        if self.session_id is not None:
            result["sessionId"] = self.session_id
        if self.details:
            result["details"] = self.details
        return result
