"""Unit tests for entrance animation resolution."""

import pytest

from folio.engine.animations import (
    ENTRANCE_CLASSES,
    KEYFRAMES,
    EntranceAnimation,
    keyframes_for,
    resolve_entrance_animation,
    stagger_delay,
)
from folio.models import AnimationCategory, AnimationId


class TestResolveEntranceAnimation:
    """Tests for resolve_entrance_animation()."""

    def test_first_listed_id_wins(self) -> None:
        """Test that list order, not a fixed precedence, picks the class."""
        assert resolve_entrance_animation(["slide-up", "fade-in"]).css_class == "slide-up"
        assert resolve_entrance_animation(["fade-in", "slide-up"]).css_class == "fade-in"

    def test_empty_list_has_no_animation(self) -> None:
        """Test that no animation ids resolve to no class."""
        animation = resolve_entrance_animation([])

        assert animation == EntranceAnimation(css_class="", stagger=False)
        assert animation.keyframes == ""

    @pytest.mark.parametrize(
        ("animation_id", "css_class"),
        [
            ("scale-up", "zoom-in"),
            ("scale-down", "fade-in"),
            ("glow", "fade-in"),
            ("shadow-pop", "zoom-in"),
            ("tilt", "rotate-in"),
            ("parallax", "slide-up"),
        ],
    )
    def test_hover_stand_ins(self, animation_id: str, css_class: str) -> None:
        """Test that hover ids map onto entrance visuals."""
        assert resolve_entrance_animation([animation_id]).css_class == css_class

    def test_unmapped_and_unknown_ids_are_skipped(self) -> None:
        """Test that ids without an entrance mapping do not stop the scan."""
        animation = resolve_entrance_animation(["typewriter", "wobble", "bounce-in"])

        assert animation.css_class == "bounce-in"

    def test_stagger_flag(self) -> None:
        """Test that staggered-reveal enables staggering anywhere in the list."""
        animation = resolve_entrance_animation(["zoom-in", "staggered-reveal"])

        assert animation.css_class == "zoom-in"
        assert animation.stagger is True

    def test_stagger_alone_has_no_class(self) -> None:
        """Test that staggering without an entrance id keeps the class empty."""
        animation = resolve_entrance_animation(["staggered-reveal"])

        assert animation.css_class == ""
        assert animation.stagger is True

    def test_input_not_modified(self) -> None:
        """Test that the animation list is left untouched."""
        animations = ["tilt", "fade-in"]
        resolve_entrance_animation(animations)

        assert animations == ["tilt", "fade-in"]


class TestStaggerDelay:
    """Tests for stagger_delay()."""

    @pytest.mark.parametrize(
        ("index", "expected"),
        [
            (0, "animation-delay: 0s;"),
            (1, "animation-delay: 0.1s;"),
            (3, "animation-delay: 0.3s;"),
            (7, "animation-delay: 0.7s;"),
            (8, "animation-delay: 0.8s;"),
            (20, "animation-delay: 0.8s;"),
        ],
    )
    def test_default_step_and_cap(self, index: int, expected: str) -> None:
        """Test the 0.1s step capped at 0.8s."""
        assert stagger_delay(index) == expected

    def test_custom_step_and_cap(self) -> None:
        """Test a custom step and cap."""
        assert stagger_delay(2, step=0.25, cap=2.0) == "animation-delay: 0.5s;"
        assert stagger_delay(10, step=0.25, cap=2.0) == "animation-delay: 2s;"


class TestKeyframes:
    """Tests for keyframe lookup."""

    def test_every_entrance_class_has_keyframes(self) -> None:
        """Test that each mapped class has a keyframe block."""
        for css_class in set(ENTRANCE_CLASSES.values()):
            assert f".{css_class} {{" in KEYFRAMES[css_class]
            assert "@keyframes" in KEYFRAMES[css_class]

    def test_every_entrance_id_is_mapped(self) -> None:
        """Test that all entrance-category ids have a visual class."""
        entrance_ids = {a for a in AnimationId if a.category == AnimationCategory.ENTRANCE}

        assert entrance_ids <= set(ENTRANCE_CLASSES)

    def test_keyframes_for_known_class(self) -> None:
        """Test the zoom-in keyframes."""
        css = keyframes_for("zoom-in")

        assert "animation: zoomIn 0.6s ease-out;" in css
        assert "@keyframes zoomIn" in css

    def test_keyframes_for_unknown_class(self) -> None:
        """Test that unknown or empty classes have no keyframes."""
        assert keyframes_for("") == ""
        assert keyframes_for("wobble") == ""
