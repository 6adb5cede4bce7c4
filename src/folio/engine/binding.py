"""Content binding with per-field defaulting.

Each section declares the content fields it reads. Binding resolves every
leaf independently: a user value wins whenever it is not None, otherwise the
built-in default for that leaf is used. A partial record (a name without a
tagline) therefore keeps the name and only defaults the tagline; the record
is never replaced as a whole.

List fields are taken from the user when provided (an empty list stays
empty); each provided item is completed from a per-item fallback record.
"""

from typing import Any, TypeVar

from folio.models.content import (
    DEFAULT_CONTENT,
    ITEM_DEFAULTS,
    LIST_FIELDS,
    RECORD_FIELDS,
    ContentBundle,
    ContentRecord,
)
from folio.models.portfolio import SectionId

R = TypeVar("R", bound=ContentRecord)

# Content fields read by each section template
SECTION_FIELDS: dict[SectionId, tuple[str, ...]] = {
    SectionId.NAVBAR: ("personal_info",),
    SectionId.HERO: ("personal_info", "social_links", "contact"),
    SectionId.ABOUT: ("personal_info", "skills"),
    SectionId.SKILLS: ("skills",),
    SectionId.EXPERIENCE: ("experience",),
    SectionId.EDUCATION: ("education",),
    SectionId.PROJECTS: ("projects",),
    SectionId.TESTIMONIALS: ("testimonials",),
    SectionId.AWARDS: ("awards",),
    SectionId.BLOG: ("blog",),
    SectionId.GALLERY: ("gallery",),
    SectionId.CONTACT: ("contact", "social_links"),
    SectionId.FOOTER: ("personal_info", "social_links"),
}

# Section-only built-ins that have no counterpart in the content bundle
SECTION_DEFAULTS: dict[SectionId, dict[str, Any]] = {
    SectionId.NAVBAR: {
        "links": [("#hero", "Home"), ("#about", "About"), ("#projects", "Work"), ("#contact", "Contact")],
    },
    SectionId.HERO: {},
    SectionId.ABOUT: {
        "title": "About Me",
        "stats": [("5+", "Years"), ("50+", "Projects"), ("25+", "Clients")],
    },
    SectionId.SKILLS: {"title": "Technical Skills"},
    SectionId.EXPERIENCE: {"title": "Work Experience"},
    SectionId.EDUCATION: {"title": "Education"},
    SectionId.PROJECTS: {"title": "Featured Projects"},
    SectionId.TESTIMONIALS: {"title": "What Clients Say"},
    SectionId.AWARDS: {"title": "Awards & Recognition"},
    SectionId.BLOG: {"title": "Latest Blog Posts"},
    SectionId.GALLERY: {"title": "Project Gallery"},
    SectionId.CONTACT: {
        "title": "Let's Work Together",
        "subtitle": (
            "Have a project in mind? I'd love to hear about it. "
            "Let's discuss how we can bring your ideas to life."
        ),
    },
    SectionId.FOOTER: {"tagline": "Built with care using modern web technologies"},
}


def _copy_value(value: Any) -> Any:
    return list(value) if isinstance(value, list) else value


def merge_record(user: R | None, default: R) -> R:
    """Merge a user record over a default record, leaf by leaf.

    Args:
        user: User-provided record, or None
        default: Fully populated fallback record of the same type

    Returns:
        New record where every None leaf of user is taken from default
    """
    values: dict[str, Any] = {}
    for record_field in default.content_fields():
        value = getattr(user, record_field.name) if user is not None else None
        if value is None:
            value = getattr(default, record_field.name)
        values[record_field.name] = _copy_value(value)
    extra = {**default.extra, **(user.extra if user is not None else {})}
    return type(default)(**values, extra=extra)


def bind_field(name: str, content: ContentBundle | None) -> Any:
    """Resolve one content bundle field against the built-in content.

    Args:
        name: Bundle attribute name (e.g. "personal_info", "projects")
        content: User content bundle, or None

    Returns:
        A merged record for record fields, a list of merged items for list fields
    """
    if name not in RECORD_FIELDS and name not in LIST_FIELDS:
        raise KeyError(f"Unknown content field: {name}")

    user_value = getattr(content, name) if content is not None else None
    default_value = getattr(DEFAULT_CONTENT, name)

    if name in RECORD_FIELDS:
        return merge_record(user_value, default_value)

    if user_value is None:
        return [merge_record(None, item) for item in default_value]
    fallback = ITEM_DEFAULTS[LIST_FIELDS[name]]
    return [merge_record(item, fallback) for item in user_value]


def bind_content(section: str, content: ContentBundle | None = None) -> dict[str, Any]:
    """Bind the data a section's template needs.

    Args:
        section: Section id, possibly unknown
        content: User content bundle, or None for built-in content

    Returns:
        Mapping of field name to bound value; empty for unknown sections
    """
    try:
        section_id = SectionId(section)
    except ValueError:
        return {}

    data: dict[str, Any] = dict(SECTION_DEFAULTS[section_id])
    for name in SECTION_FIELDS[section_id]:
        data[name] = bind_field(name, content)
    return data
