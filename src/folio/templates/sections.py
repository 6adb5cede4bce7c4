"""Section template registry.

One pure render function per known section id, each backed by a Jinja2
fragment in folio/templates/fragments/. Unknown ids render a placeholder
fragment instead of failing.
"""

import logging
from collections.abc import Callable
from typing import Any

from jinja2 import TemplateError

from folio.engine.binding import bind_content
from folio.engine.themes import Palette
from folio.exceptions import TemplateRenderError
from folio.models.portfolio import SectionId
from folio.templates.environment import get_environment

logger = logging.getLogger(__name__)

RenderFn = Callable[[Palette, str, str, dict[str, Any]], str]

PLACEHOLDER_TEMPLATE = "fragments/placeholder.html.j2"


def _render_fragment(template_name: str, **context: Any) -> str:
    """Render a packaged fragment template.

    Raises:
        TemplateRenderError: If the template is missing or fails to render
    """
    try:
        template = get_environment().get_template(template_name)
        return template.render(**context)
    except TemplateError as e:
        logger.error("Failed to render template %s: %s", template_name, e)
        raise TemplateRenderError(template_name, str(e)) from e


def _fragment_renderer(section: SectionId) -> RenderFn:
    template_name = f"fragments/{section.value}.html.j2"

    def render(
        palette: Palette,
        animation_class: str,
        animation_delay: str,
        data: dict[str, Any],
    ) -> str:
        return _render_fragment(
            template_name,
            palette=palette,
            animation_class=animation_class,
            animation_delay=animation_delay,
            **data,
        )

    render.__name__ = f"render_{section.value}"
    render.__doc__ = f"Render the {section.display_name} section."
    return render


render_navbar = _fragment_renderer(SectionId.NAVBAR)
render_hero = _fragment_renderer(SectionId.HERO)
render_about = _fragment_renderer(SectionId.ABOUT)
render_skills = _fragment_renderer(SectionId.SKILLS)
render_experience = _fragment_renderer(SectionId.EXPERIENCE)
render_education = _fragment_renderer(SectionId.EDUCATION)
render_projects = _fragment_renderer(SectionId.PROJECTS)
render_testimonials = _fragment_renderer(SectionId.TESTIMONIALS)
render_awards = _fragment_renderer(SectionId.AWARDS)
render_blog = _fragment_renderer(SectionId.BLOG)
render_gallery = _fragment_renderer(SectionId.GALLERY)
render_contact = _fragment_renderer(SectionId.CONTACT)
render_footer = _fragment_renderer(SectionId.FOOTER)

SECTION_RENDERERS: dict[SectionId, RenderFn] = {
    SectionId.NAVBAR: render_navbar,
    SectionId.HERO: render_hero,
    SectionId.ABOUT: render_about,
    SectionId.SKILLS: render_skills,
    SectionId.EXPERIENCE: render_experience,
    SectionId.EDUCATION: render_education,
    SectionId.PROJECTS: render_projects,
    SectionId.TESTIMONIALS: render_testimonials,
    SectionId.AWARDS: render_awards,
    SectionId.BLOG: render_blog,
    SectionId.GALLERY: render_gallery,
    SectionId.CONTACT: render_contact,
    SectionId.FOOTER: render_footer,
}


def check_registry(renderers: dict[SectionId, RenderFn] | None = None) -> None:
    """Verify every section id has a renderer.

    Args:
        renderers: Registry to check (defaults to SECTION_RENDERERS)

    Raises:
        RuntimeError: If any SectionId member is missing
    """
    registry = SECTION_RENDERERS if renderers is None else renderers
    missing = [section.value for section in SectionId if section not in registry]
    if missing:
        raise RuntimeError(f"No renderer registered for sections: {', '.join(missing)}")


def render_placeholder(
    section_id: str,
    palette: Palette,
    animation_class: str = "",
    animation_delay: str = "",
) -> str:
    """Render the stand-in fragment for a section without a template."""
    return _render_fragment(
        PLACEHOLDER_TEMPLATE,
        section_id=section_id,
        palette=palette,
        animation_class=animation_class,
        animation_delay=animation_delay,
    )


def render_section(
    section_id: str,
    palette: Palette,
    animation_class: str = "",
    animation_delay: str = "",
    data: dict[str, Any] | None = None,
) -> str:
    """Render one section fragment.

    Args:
        section_id: Section id, possibly unknown
        palette: Resolved theme palette
        animation_class: Active entrance class ("" for none)
        animation_delay: Inline delay declaration ("" without stagger)
        data: Bound content from bind_content(); keys it lacks fall back to
            the built-in content

    Returns:
        HTML fragment for the section
    """
    try:
        section = SectionId(section_id)
    except ValueError:
        logger.debug("No template for section %r, rendering placeholder", section_id)
        return render_placeholder(section_id, palette, animation_class, animation_delay)

    bound = bind_content(section.value)
    if data:
        bound.update(data)
    return SECTION_RENDERERS[section](palette, animation_class, animation_delay, bound)


check_registry()
