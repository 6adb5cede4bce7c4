"""Canonical section ordering."""

from folio.models.portfolio import SectionId

CANONICAL_ORDER: list[str] = [section.value for section in SectionId]

_PRIORITY: dict[str, int] = {section_id: index for index, section_id in enumerate(CANONICAL_ORDER)}


def section_priority(section_id: str) -> int:
    """Return the display priority of a section id (unknown ids sort last)."""
    return _PRIORITY.get(section_id, len(CANONICAL_ORDER))


def order_sections(ids: list[str]) -> list[str]:
    """Sort section ids into canonical display order.

    The sort is stable: unknown ids keep their relative order at the end and
    duplicates are kept as separate entries. The input list is not modified.

    Examples:
        >>> order_sections(["contact", "hero", "navbar"])
        ['navbar', 'hero', 'contact']
        >>> order_sections(["totally-unknown", "hero"])
        ['hero', 'totally-unknown']
    """
    return sorted(ids, key=section_priority)
