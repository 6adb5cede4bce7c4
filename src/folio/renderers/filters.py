"""Jinja2 filters used by the section templates.

Filters are pure and tolerant: content is free-form user input, so a
malformed value (a rating of "five", a level of None) degrades to a safe
display value instead of failing the render.
"""

import re
from typing import Any

_WORD_RE = re.compile(r"[A-Za-z0-9]+")

# Characters left as-is inside a quoted CSS string (URL-safe, no quotes or parens)
_CSS_STRING_SAFE = frozenset(
    "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789-_./:?#&=%~+,@!"
)

MAX_RATING = 5


def initials(name: Any, limit: int = 2) -> str:
    """Return up to `limit` upper-case initials of a name.

    Examples:
        >>> initials("Ada Lovelace")
        'AL'
        >>> initials("")
        ''
    """
    words = _WORD_RE.findall(str(name or ""))
    return "".join(word[0].upper() for word in words[:limit])


def section_heading(section_id: Any) -> str:
    """Upper-case the first letter of a section id for display.

    Examples:
        >>> section_heading("timeline")
        'Timeline'
    """
    text = str(section_id)
    return text[:1].upper() + text[1:]


def star_count(rating: Any) -> int:
    """Clamp a rating to a whole number of stars between 0 and 5."""
    try:
        value = int(rating)
    except (TypeError, ValueError):
        return 0
    return max(0, min(MAX_RATING, value))


def percent(level: Any) -> int:
    """Clamp a skill level to a 0..100 percentage."""
    try:
        value = int(float(level))
    except (TypeError, ValueError):
        return 0
    return max(0, min(100, value))


def group_by_category(skills: list[Any]) -> list[tuple[str, list[Any]]]:
    """Group skills by category, keeping first-appearance order.

    Args:
        skills: Bound Skill records

    Returns:
        List of (category, skills) pairs
    """
    groups: dict[str, list[Any]] = {}
    for skill in skills:
        groups.setdefault(str(skill.category), []).append(skill)
    return list(groups.items())


def gallery_span(index: int) -> str:
    """Grid span declarations for the gallery tile at a zero-based index.

    The pattern repeats every nine tiles: tiles 0, 4 and 8 span two rows,
    tiles 1 and 6 span two columns.
    """
    position = index % 9
    if position in (0, 4, 8):
        return "grid-row: span 2;"
    if position in (1, 6):
        return "grid-column: span 2;"
    return ""


def css_string(value: Any) -> str:
    """Escape a value for use inside a quoted CSS string such as url('...').

    Every character outside a URL-safe set becomes a CSS hex escape, so a
    value cannot close the string or the url() and add declarations.

    Examples:
        >>> css_string("/avatar.jpg")
        '/avatar.jpg'
        >>> css_string("a'); color: red")
        'a\\27 \\29 \\3b \\20 color:\\20 red'
    """
    if value is None:
        return ""
    return "".join(
        char if char in _CSS_STRING_SAFE else f"\\{ord(char):x} " for char in str(value)
    )


def is_present(value: Any) -> bool:
    """Check whether a bound value should be displayed.

    Args:
        value: Bound content value.

    Returns:
        False for None, empty strings and whitespace-only strings.
    """
    if value is None:
        return False
    if isinstance(value, str):
        return bool(value.strip())
    return True


FILTERS = {
    "initials": initials,
    "section_heading": section_heading,
    "star_count": star_count,
    "percent": percent,
    "group_by_category": group_by_category,
    "gallery_span": gallery_span,
    "css_string": css_string,
}

TESTS = {
    "present": is_present,
}
