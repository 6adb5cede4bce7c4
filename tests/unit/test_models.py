"""Unit tests for data models."""

from typing import Any

import pytest

from folio.exceptions import ConfigValidationError
from folio.models import (
    DEFAULT_CONFIG,
    DEFAULT_CONTENT,
    AnimationCategory,
    AnimationId,
    ContentBundle,
    FeedbackEvent,
    PortfolioConfig,
    SectionId,
    default_config,
    default_content,
)
from tests.fixtures import load_portfolio


class TestEnumerations:
    """Tests for id enumerations."""

    def test_section_declaration_order(self) -> None:
        """Test that sections are declared in display order."""
        assert [s.value for s in SectionId][:3] == ["navbar", "hero", "about"]
        assert list(SectionId)[-1] == SectionId.FOOTER

    def test_section_display_info(self) -> None:
        """Test section display names and descriptions."""
        assert SectionId.NAVBAR.display_name == "Navigation Bar"
        assert SectionId.FOOTER.description == "Social icons, copyright"

    def test_animation_categories(self) -> None:
        """Test that every animation id has a category."""
        assert AnimationId.FADE_IN.category == AnimationCategory.ENTRANCE
        assert AnimationId.TILT.category == AnimationCategory.HOVER
        assert AnimationId.STAGGERED_REVEAL.category == AnimationCategory.TRANSITION
        assert AnimationId.TYPEWRITER.category == AnimationCategory.MICRO
        assert all(a.category in AnimationCategory for a in AnimationId)


class TestPortfolioConfig:
    """Tests for PortfolioConfig."""

    def test_from_dict(self) -> None:
        """Test parsing a complete configuration."""
        config = PortfolioConfig.from_dict(load_portfolio("dark_contact"))

        assert config.theme == "dark"
        assert config.components == ["contact", "hero"]
        assert config.animations == ["slide-up", "fade-in"]
        assert config.typography == "font-serif"
        assert config.color_palette[2] == "accent-yellow-400"
        assert config.content is None

    def test_unknown_ids_are_accepted(self) -> None:
        """Test that ids outside the enumerations are kept as-is."""
        config = PortfolioConfig.from_dict(
            {"theme": "neon", "components": ["timeline"], "animations": ["wobble"]}
        )

        assert config.theme == "neon"
        assert config.components == ["timeline"]

    def test_missing_fields_default(self) -> None:
        """Test that an empty object is a valid configuration."""
        config = PortfolioConfig.from_dict({})

        assert config.theme == "minimal"
        assert config.components == []
        assert config.typography == "font-sans"

    def test_shape_problems_are_collected(self) -> None:
        """Test that every shape problem is reported at once."""
        with pytest.raises(ConfigValidationError) as exc_info:
            PortfolioConfig.from_dict(load_portfolio("invalid_shape"))

        problems = exc_info.value.problems
        assert "theme must be a string" in problems
        assert "components must be a list of strings" in problems
        assert "animations must be a list of strings" in problems
        assert "published must be a boolean" in problems
        assert len(problems) == 4

    def test_non_object_rejected(self) -> None:
        """Test that a non-object configuration is rejected."""
        with pytest.raises(ConfigValidationError, match="must be a JSON object"):
            PortfolioConfig.from_dict(["hero"])

    def test_validation_error_is_value_error(self) -> None:
        """Test that shape errors can be handled as ValueError."""
        with pytest.raises(ValueError):
            PortfolioConfig.from_dict({"layout": 3})

    def test_content_problems_have_locations(self) -> None:
        """Test that nested content problems name their location."""
        with pytest.raises(ConfigValidationError) as exc_info:
            PortfolioConfig.from_dict(
                {"content": {"personalInfo": "Ada", "skills": {"name": "Python"}}}
            )

        assert "content.personalInfo must be an object" in exc_info.value.problems
        assert "content.skills must be a list" in exc_info.value.problems

    def test_to_dict_uses_camel_case(self) -> None:
        """Test serialized keys."""
        data = default_config().to_dict()

        assert data["colorPalette"] == ["bg-gray-900", "text-white", "accent-blue-500"]
        assert data["content"]["personalInfo"]["name"] == "John Doe"
        assert data["content"]["blog"][0]["readTime"] == "8 min read"

    def test_serialized_form_parses_back(self) -> None:
        """Test that the default configuration survives serialization."""
        assert PortfolioConfig.from_dict(DEFAULT_CONFIG.to_dict()) == DEFAULT_CONFIG

    def test_with_overrides(self) -> None:
        """Test deriving a configuration without touching the original."""
        config = default_config()
        dark = config.with_overrides(theme="dark")

        assert dark.theme == "dark"
        assert config.theme == "minimal"
        assert dark.components == config.components

    def test_default_config(self) -> None:
        """Test the built-in default configuration."""
        config = default_config()

        assert config.components[0] == "navbar"
        assert config.animations == ["fade-in", "slide-up"]
        assert config.published is False
        assert config.content is not None


class TestContentBundle:
    """Tests for ContentBundle."""

    def test_accepts_snake_case_keys(self) -> None:
        """Test that snake_case input keys are accepted."""
        bundle = ContentBundle.from_dict(
            {"personal_info": {"name": "Ada", "profile_image": "/ada.png"}}
        )

        assert bundle.personal_info is not None
        assert bundle.personal_info.name == "Ada"
        assert bundle.personal_info.profile_image == "/ada.png"

    def test_absent_fields_are_none(self, ada_content: ContentBundle) -> None:
        """Test that unspecified fields stay unresolved."""
        assert ada_content.personal_info is not None
        assert ada_content.personal_info.tagline is None
        assert ada_content.projects is None

    def test_rejects_nested_objects_as_leaves(self) -> None:
        """Test that leaf values must be scalars or string lists."""
        with pytest.raises(ConfigValidationError, match=r"content.projects\[0\].title"):
            ContentBundle.from_dict({"projects": [{"title": {"en": "Engine"}}]})

    def test_editor_fields_are_modelled(self, editor_export_data: dict[str, Any]) -> None:
        """Test that ids, images, icons and logos are read into fields."""
        bundle = ContentBundle.from_dict(editor_export_data["content"])

        assert bundle.projects is not None
        assert bundle.projects[0].id == "1"
        assert bundle.projects[0].image == "/project1.jpg"
        assert bundle.skills is not None
        assert bundle.skills[0].icon == "terminal"
        assert bundle.experience is not None
        assert bundle.experience[0].logo == "/navy.svg"
        assert bundle.testimonials is not None
        assert bundle.testimonials[0].image == "/colleague.jpg"

    def test_unmodelled_keys_round_trip(self, editor_export_data: dict[str, Any]) -> None:
        """Test that keys without a field are kept and serialized again."""
        config = PortfolioConfig.from_dict(editor_export_data)

        assert config.extra == {"lastEditedBy": "editor-v2"}
        assert config.content is not None
        assert "customSections" in config.content.extra
        assert config.content.projects is not None
        assert config.content.projects[0].extra == {"badge": {"label": "Historic", "tone": "gold"}}
        assert config.to_dict() == editor_export_data

    def test_default_content_is_fresh(self) -> None:
        """Test that default_content() returns an independent copy."""
        content = default_content()

        assert content == DEFAULT_CONTENT
        assert content is not DEFAULT_CONTENT
        assert content.skills is not None
        content.skills.clear()
        assert len(DEFAULT_CONTENT.skills or []) == 9


class TestFeedbackEvent:
    """Tests for FeedbackEvent."""

    def test_from_dict(self) -> None:
        """Test parsing an event with session and details."""
        event = FeedbackEvent.from_dict(
            {"event": "like", "sessionId": "abc", "details": {"theme": "dark"}}
        )

        assert event.event == "like"
        assert event.session_id == "abc"
        assert event.details == {"theme": "dark"}
        assert event.timestamp is None

    def test_to_dict(self) -> None:
        """Test serialized keys."""
        event = FeedbackEvent(event="publish", timestamp="2024-01-01T00:00:00+00:00", session_id="s1")

        assert event.to_dict() == {
            "timestamp": "2024-01-01T00:00:00+00:00",
            "event": "publish",
            "sessionId": "s1",
        }

    @pytest.mark.parametrize(
        "data",
        [{"event": ""}, {"event": 5}, {}, {"event": "like", "details": ["x"]}, "like"],
    )
    def test_invalid_events(self, data: object) -> None:
        """Test that malformed events are rejected."""
        with pytest.raises(ConfigValidationError):
            FeedbackEvent.from_dict(data)
