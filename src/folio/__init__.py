"""Folio - Portfolio page preview and render engine.

Folio turns a declarative portfolio configuration (theme, sections,
animations, typography and content) into a complete themed HTML page.

Core principles:
- Determinism: the same configuration always renders byte-identical output
- Total resolution: unknown themes, sections and animations fall back to
  documented defaults instead of failing
- Deep defaulting: partial content never drops user-provided fields
- Shape validation: malformed configurations are rejected before rendering
"""

__version__ = "0.1.0"
__author__ = "Folio Contributors"
