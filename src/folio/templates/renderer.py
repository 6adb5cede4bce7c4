"""Document assembler.

Turns one PortfolioConfig into a complete standalone HTML document using
Jinja2 templates. All output is deterministic: the same configuration and
settings always produce byte-identical documents.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from jinja2 import TemplateError

from folio.config import RenderSettings
from folio.engine.animations import resolve_entrance_animation, stagger_delay
from folio.engine.binding import bind_content
from folio.engine.ordering import order_sections
from folio.engine.themes import resolve_theme, resolve_typography
from folio.exceptions import TemplateRenderError
from folio.models.portfolio import PortfolioConfig
from folio.templates.environment import get_environment
from folio.templates.sections import render_section

logger = logging.getLogger(__name__)

DOCUMENT_TEMPLATE = "document.html.j2"
CODE_VIEW_TEMPLATE = "code_view.html.j2"


@dataclass(frozen=True)
class RenderedDocument:
    """Result of one render.

    Attributes:
        visual: Complete HTML document
        source: The same document with angle brackets escaped, for display
        sections: Section ids in the order they were rendered
    """

    visual: str
    source: str
    sections: list[str] = field(default_factory=list)


def escape_source(html: str) -> str:
    """Escape angle brackets so markup displays as text.

    Examples:
        >>> escape_source("<p>Hi</p>")
        '&lt;p&gt;Hi&lt;/p&gt;'
    """
    return html.replace("<", "&lt;").replace(">", "&gt;")


def _render_template(template_name: str, context: dict[str, Any]) -> str:
    try:
        template = get_environment().get_template(template_name)
        return template.render(**context)
    except TemplateError as e:
        logger.error("Failed to render template %s: %s", template_name, e)
        raise TemplateRenderError(template_name, str(e)) from e


class DocumentAssembler:
    """Assembles portfolio configurations into HTML documents.

    Usage:
        assembler = DocumentAssembler(settings)
        document = assembler.assemble(config)
        html = document.visual
    """

    def __init__(self, settings: RenderSettings | None = None) -> None:
        """Initialize the assembler.

        Args:
            settings: Render settings (defaults apply when None)
        """
        self.settings = settings or RenderSettings()

    def assemble(self, config: PortfolioConfig) -> RenderedDocument:
        """Render a configuration to a complete document.

        Unknown theme, section, animation and typography ids never fail the
        render; they resolve to defaults or placeholders.

        Args:
            config: Portfolio configuration (not modified)

        Returns:
            RenderedDocument with visual and escaped source forms

        Raises:
            TemplateRenderError: If a packaged template is missing or broken
        """
        palette = resolve_theme(config.theme)
        ordered = order_sections(config.components)
        entrance = resolve_entrance_animation(config.animations)

        fragments: list[str] = []
        for index, section_id in enumerate(ordered):
            delay = ""
            if entrance.stagger:
                delay = stagger_delay(index, self.settings.stagger_step, self.settings.stagger_cap)
            data = bind_content(section_id, config.content)
            fragments.append(
                render_section(section_id, palette, entrance.css_class, delay, data)
            )

        visual = _render_template(
            DOCUMENT_TEMPLATE,
            {
                "title": self.settings.title,
                "palette": palette,
                "font_stack": resolve_typography(config.typography),
                "keyframes": entrance.keyframes,
                "sections": fragments,
            },
        )
        logger.info("Rendered portfolio (%d characters, %d sections)", len(visual), len(ordered))

        return RenderedDocument(visual=visual, source=escape_source(visual), sections=ordered)

    def render_to_file(
        self,
        config: PortfolioConfig,
        output_path: Path,
        source_path: Path | None = None,
        code_view: bool = False,
    ) -> Path:
        """Render a configuration and write it to disk.

        Args:
            config: Portfolio configuration
            output_path: Path to write the document to
            source_path: Optional path for the escaped source listing
            code_view: Write the code view page instead of the visual document

        Returns:
            Path to written document
        """
        document = self.assemble(config)
        content = render_code_view(document) if code_view else document.visual

        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(content, encoding="utf-8")
        logger.info("Wrote portfolio to %s", output_path)

        if source_path is not None:
            source_path.parent.mkdir(parents=True, exist_ok=True)
            source_path.write_text(document.source, encoding="utf-8")
            logger.info("Wrote escaped source to %s", source_path)

        return output_path

    def preview(self, config: PortfolioConfig, max_lines: int = 50) -> str:
        """Generate a preview of the rendered document.

        Args:
            config: Portfolio configuration
            max_lines: Maximum lines to include in preview

        Returns:
            Preview string with truncation indicator
        """
        full_content = self.assemble(config).visual
        lines = full_content.split("\n")

        if len(lines) <= max_lines:
            return full_content

        preview_lines = lines[:max_lines]
        preview_lines.append(f"\n... [{len(lines) - max_lines} more lines] ...")

        return "\n".join(preview_lines)


def render_code_view(document: RenderedDocument) -> str:
    """Wrap a document's escaped source in the dark monospace code view page."""
    return _render_template(CODE_VIEW_TEMPLATE, {"source": document.source})


def assemble(config: PortfolioConfig) -> RenderedDocument:
    """Render a configuration with default settings."""
    return DocumentAssembler().assemble(config)


def assemble_from_dict(data: Any, settings: RenderSettings | None = None) -> RenderedDocument:
    """Validate decoded JSON and render it.

    Raises:
        ConfigValidationError: Before any rendering, if the shape is wrong
    """
    config = PortfolioConfig.from_dict(data)
    return DocumentAssembler(settings).assemble(config)
