"""Unit tests for the section template registry."""

import re

import pytest

from folio.engine.binding import bind_content
from folio.engine.themes import Palette, resolve_theme
from folio.models import ContentBundle, SectionId
from folio.templates.sections import (
    SECTION_RENDERERS,
    check_registry,
    render_placeholder,
    render_section,
)


@pytest.fixture
def palette() -> Palette:
    """Return the minimal palette."""
    return resolve_theme("minimal")


def _render(section: str, palette: Palette, content: ContentBundle | None = None) -> str:
    return render_section(section, palette, "fade-in", "", bind_content(section, content))


class TestRegistry:
    """Tests for registry completeness."""

    def test_every_section_has_a_renderer(self) -> None:
        """Test that the registry covers every section id."""
        assert set(SECTION_RENDERERS) == set(SectionId)
        check_registry()

    def test_incomplete_registry_fails(self) -> None:
        """Test that a missing renderer is reported."""
        incomplete = {k: v for k, v in SECTION_RENDERERS.items() if k != SectionId.BLOG}

        with pytest.raises(RuntimeError, match="blog"):
            check_registry(incomplete)

    @pytest.mark.parametrize("section", [s.value for s in SectionId])
    def test_every_section_renders(self, section: str, palette: Palette) -> None:
        """Test that each fragment renders with built-in content."""
        html = _render(section, palette)

        assert f'data-section="{section}"' in html
        assert 'class="fade-in"' in html

    def test_missing_data_binds_builtin_content(self, palette: Palette) -> None:
        """Test that omitting data renders the built-in content."""
        assert render_section("hero", palette) == render_section(
            "hero", palette, "", "", bind_content("hero")
        )

    @pytest.mark.parametrize("section", [s.value for s in SectionId])
    def test_empty_data_binds_builtin_content(self, section: str, palette: Palette) -> None:
        """Test that an empty data mapping renders like omitted data."""
        assert render_section(section, palette, "", "", {}) == render_section(section, palette)

    def test_partial_data_keeps_caller_values(self, palette: Palette) -> None:
        """Test that supplied keys win and missing keys are filled in."""
        html = render_section("contact", palette, "", "", {"title": "Say Hello"})

        assert "Say Hello" in html
        assert "mailto:john.doe@example.com" in html


class TestPlaceholder:
    """Tests for unknown sections."""

    def test_unknown_section_renders_placeholder(self, palette: Palette) -> None:
        """Test the placeholder heading and text."""
        html = render_section("timeline", palette, "", "", {})

        assert "<h2" in html
        assert ">Timeline</h2>" in html
        assert "This timeline section will be implemented soon." in html
        assert 'id="timeline"' in html

    def test_placeholder_is_escaped(self, palette: Palette) -> None:
        """Test that a hostile section id cannot inject markup."""
        html = render_placeholder("<b>x</b>", palette)

        assert "<b>" not in html
        assert "&lt;b&gt;x&lt;/b&gt;" in html


class TestSectionContent:
    """Tests for bound content in fragments."""

    def test_hero_shows_partial_content(self, palette: Palette) -> None:
        """Test a name-only record with defaulted tagline."""
        content = ContentBundle.from_dict({"personalInfo": {"name": "Ada"}})
        html = _render("hero", palette, content)

        assert ">Ada</h1>" in html
        assert "Full Stack Developer &amp; UI/UX Designer" in html

    def test_user_text_is_escaped(self, palette: Palette) -> None:
        """Test that content cannot inject markup."""
        content = ContentBundle.from_dict({"personalInfo": {"name": "<script>alert(1)</script>"}})
        html = _render("navbar", palette, content)

        assert "<script>" not in html
        assert "&lt;script&gt;" in html

    def test_profile_image_cannot_break_out_of_css(self, palette: Palette) -> None:
        """Test that the profile image stays inside its url() string."""
        content = ContentBundle.from_dict({"personalInfo": {"profileImage": "x'); color: red"}})
        html = _render("hero", palette, content)

        assert "url('x\\27 \\29 \\3b \\20 color:\\20 red')" in html
        assert "color: red" not in html

    def test_empty_links_are_hidden(self, palette: Palette) -> None:
        """Test that empty social links are not rendered."""
        content = ContentBundle.from_dict({"socialLinks": {"github": ""}})
        html = _render("hero", palette, content)

        assert ">GH</a>" not in html
        assert ">LI</a>" in html

    def test_footer_skips_empty_defaults(self, palette: Palette) -> None:
        """Test that the built-in empty links are hidden in the footer."""
        html = _render("footer", palette)

        assert ">GitHub</a>" in html
        assert "Instagram" not in html
        assert "John Doe" in html

    def test_navbar_links(self, palette: Palette) -> None:
        """Test the navigation links."""
        html = _render("navbar", palette)

        assert re.findall(r'href="(#\w+)"', html) == ["#hero", "#about", "#projects", "#contact"]

    def test_contact_heading_is_escaped(self, palette: Palette) -> None:
        """Test the contact heading."""
        html = _render("contact", palette)

        assert "Let&#39;s Work Together" in html
        assert "mailto:john.doe@example.com" in html


class TestIndexDrivenLayout:
    """Tests for layouts derived from item positions."""

    def test_experience_alternates(self, palette: Palette) -> None:
        """Test that timeline items alternate sides."""
        html = _render("experience", palette)

        sides = re.findall(r"timeline-(left|right)", html)
        assert sides == ["left", "right", "left"]

    def test_projects_numbered(self, palette: Palette) -> None:
        """Test project labels and featured badges."""
        html = _render("projects", palette)

        assert "Project 1" in html
        assert "Project 3" in html
        assert "Project 4" not in html
        assert html.count('class="featured-badge"') == 2

    def test_testimonial_stars_clamped(self, palette: Palette) -> None:
        """Test that ratings above five show five stars."""
        content = ContentBundle.from_dict(
            {"testimonials": [{"text": "Great", "author": "Ada", "rating": 9}]}
        )
        html = _render("testimonials", palette, content)

        assert "★★★★★" in html
        assert "★★★★★★" not in html

    def test_gallery_spans(self, palette: Palette) -> None:
        """Test the first gallery tiles' spans."""
        html = _render("gallery", palette)

        tiles = re.findall(r'<figure class="gallery-item[^"]*" style="([^"]*)"', html)
        assert len(tiles) == 3
        assert tiles[0].strip().endswith("grid-row: span 2;")
        assert tiles[1].strip().endswith("grid-column: span 2;")
        assert "span" not in tiles[2]

    def test_skills_grouped(self, palette: Palette) -> None:
        """Test category order in the skills section."""
        html = _render("skills", palette)

        headings = re.findall(r'font-weight: 600;">(\w+)</h3>', html)
        assert headings == ["Frontend", "Backend", "DevOps"]

    def test_empty_project_list(self, palette: Palette) -> None:
        """Test that an empty list renders no cards."""
        html = _render("projects", palette, ContentBundle(projects=[]))

        assert "project-card" not in html
        assert "Featured Projects" in html
