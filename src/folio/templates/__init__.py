"""Folio template rendering.

Jinja2 fragment templates per section, wrapped in one document template.
Output is deterministic: identical configurations render identical HTML.
"""

from folio.templates.renderer import (
    DocumentAssembler,
    RenderedDocument,
    assemble,
    assemble_from_dict,
    escape_source,
    render_code_view,
)
from folio.templates.sections import SECTION_RENDERERS, render_section

__all__ = [
    "SECTION_RENDERERS",
    "DocumentAssembler",
    "RenderedDocument",
    "assemble",
    "assemble_from_dict",
    "escape_source",
    "render_code_view",
    "render_section",
]
