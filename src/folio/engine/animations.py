"""Entrance animation resolution.

A render has exactly one active entrance animation. It is the visual class
bound to the first id in the configuration's animation list that has an
entrance mapping. Hover ids that double as entrance stand-ins (e.g. "tilt")
map onto the smaller set of entrance visuals.

Staggering is independent: when "staggered-reveal" is present each section
gets an incremental animation delay.
"""

import logging
from dataclasses import dataclass

from folio.models.portfolio import AnimationId

logger = logging.getLogger(__name__)

# Animation id -> entrance visual class, checked in configuration order
ENTRANCE_CLASSES: dict[AnimationId, str] = {
    AnimationId.FADE_IN: "fade-in",
    AnimationId.SLIDE_UP: "slide-up",
    AnimationId.SLIDE_LEFT: "slide-left",
    AnimationId.SLIDE_RIGHT: "slide-right",
    AnimationId.ZOOM_IN: "zoom-in",
    AnimationId.ROTATE_IN: "rotate-in",
    AnimationId.BOUNCE_IN: "bounce-in",
    # Hover stand-ins
    AnimationId.SCALE_UP: "zoom-in",
    AnimationId.SCALE_DOWN: "fade-in",
    AnimationId.GLOW: "fade-in",
    AnimationId.SHADOW_POP: "zoom-in",
    AnimationId.TILT: "rotate-in",
    AnimationId.PARALLAX: "slide-up",
}

STAGGER_ID = AnimationId.STAGGERED_REVEAL

DEFAULT_STAGGER_STEP = 0.1
DEFAULT_STAGGER_CAP = 0.8

KEYFRAMES: dict[str, str] = {
    "fade-in": """.fade-in {
  animation: fadeIn 0.8s ease-in-out;
}
@keyframes fadeIn {
  from { opacity: 0; transform: translateY(20px); }
  to { opacity: 1; transform: translateY(0); }
}""",
    "slide-up": """.slide-up {
  animation: slideUp 0.6s ease-out;
}
@keyframes slideUp {
  from { transform: translateY(30px); opacity: 0; }
  to { transform: translateY(0); opacity: 1; }
}""",
    "slide-left": """.slide-left {
  animation: slideLeft 0.6s ease-out;
}
@keyframes slideLeft {
  from { transform: translateX(30px); opacity: 0; }
  to { transform: translateX(0); opacity: 1; }
}""",
    "slide-right": """.slide-right {
  animation: slideRight 0.6s ease-out;
}
@keyframes slideRight {
  from { transform: translateX(-30px); opacity: 0; }
  to { transform: translateX(0); opacity: 1; }
}""",
    "zoom-in": """.zoom-in {
  animation: zoomIn 0.6s ease-out;
}
@keyframes zoomIn {
  from { transform: scale(0.8); opacity: 0; }
  to { transform: scale(1); opacity: 1; }
}""",
    "rotate-in": """.rotate-in {
  animation: rotateIn 0.8s ease-out;
}
@keyframes rotateIn {
  from { transform: rotate(-10deg) scale(0.8); opacity: 0; }
  to { transform: rotate(0deg) scale(1); opacity: 1; }
}""",
    "bounce-in": """.bounce-in {
  animation: bounceIn 0.8s cubic-bezier(0.68, -0.55, 0.265, 1.55);
}
@keyframes bounceIn {
  from { transform: scale(0.3); opacity: 0; }
  50% { transform: scale(1.05); opacity: 0.8; }
  70% { transform: scale(0.9); opacity: 0.9; }
  to { transform: scale(1); opacity: 1; }
}""",
}


@dataclass(frozen=True)
class EntranceAnimation:
    """The single active entrance animation of a render.

    Attributes:
        css_class: Visual class applied to every section ("" for none)
        stagger: Whether sections get incremental animation delays
    """

    css_class: str = ""
    stagger: bool = False

    @property
    def keyframes(self) -> str:
        """CSS rule and keyframe block for the active class."""
        return keyframes_for(self.css_class)


def _entrance_class(animation_id: str) -> str | None:
    try:
        return ENTRANCE_CLASSES.get(AnimationId(animation_id))
    except ValueError:
        return None


def resolve_entrance_animation(animations: list[str]) -> EntranceAnimation:
    """Resolve the configuration's animation list to one entrance animation.

    The list is scanned in its own order and the first id with an entrance
    mapping wins. Unknown ids are skipped.

    Args:
        animations: Animation ids from the configuration

    Returns:
        EntranceAnimation with the winning class and the stagger flag
    """
    css_class = ""
    for animation_id in animations:
        mapped = _entrance_class(animation_id)
        if mapped is not None:
            css_class = mapped
            break

    stagger = STAGGER_ID.value in animations
    logger.debug("Entrance animation %r (stagger=%s)", css_class, stagger)
    return EntranceAnimation(css_class=css_class, stagger=stagger)


def stagger_delay(
    index: int,
    step: float = DEFAULT_STAGGER_STEP,
    cap: float = DEFAULT_STAGGER_CAP,
) -> str:
    """Inline style declaration delaying the section at index.

    Args:
        index: Position of the section in display order
        step: Delay added per position, in seconds
        cap: Maximum delay, in seconds

    Returns:
        CSS declaration such as "animation-delay: 0.3s;"
    """
    seconds = round(min(index * step, cap), 3)
    return f"animation-delay: {seconds:g}s;"


def keyframes_for(css_class: str) -> str:
    """Return the CSS rule and keyframe block for an entrance class.

    Returns an empty string for "" or classes without keyframes.
    """
    return KEYFRAMES.get(css_class, "")
