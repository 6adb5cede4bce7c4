"""Shared Jinja2 environment for document and section templates."""

from functools import lru_cache

from jinja2 import Environment, PackageLoader, StrictUndefined, select_autoescape

from folio.renderers.filters import FILTERS, TESTS


@lru_cache(maxsize=1)
def get_environment() -> Environment:
    """Return the package template environment.

    Created once and only read afterwards, so it is safe to share between
    concurrent renders. Templates ending in .html.j2 are autoescaped.
    """
    env = Environment(
        loader=PackageLoader("folio", "templates"),
        autoescape=select_autoescape(["html", "xml", "html.j2"]),
        undefined=StrictUndefined,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )
    env.filters.update(FILTERS)
    env.tests.update(TESTS)
    return env
