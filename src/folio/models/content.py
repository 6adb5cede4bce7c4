"""Portfolio content entities.

This module contains the user-editable content bound into section templates:
- PersonalInfo, SocialLinks, ContactInfo: single records
- Skill, Project, Experience, Education, Testimonial, Award, BlogPost,
  GalleryItem: list items
- ContentBundle: the whole editable bundle
- DEFAULT_CONTENT: the built-in bundle used for every missing field

Every field of every record is optional. ``None`` means "not provided" and is
resolved field by field against the built-in defaults at bind time.
JSON keys are camelCase (``personalInfo``, ``readTime``); snake_case keys are
accepted on input as well.
Keys without a matching field are carried in ``extra`` and serialized again.
"""

import copy
from dataclasses import Field, dataclass, field, fields
from typing import Any, TypeVar

from folio.exceptions import ConfigValidationError

R = TypeVar("R", bound="ContentRecord")

_SCALAR_TYPES = (str, int, float, bool)


def to_camel(name: str) -> str:
    """Convert a snake_case attribute name to its camelCase JSON key."""
    head, *rest = name.split("_")
    return head + "".join(part.title() for part in rest)


def _check_leaf(value: Any, location: str, problems: list[str]) -> bool:
    """Check that a leaf value is JSON-scalar or a list of strings."""
    if value is None or isinstance(value, _SCALAR_TYPES):
        return True
    if isinstance(value, list) and all(isinstance(item, str) for item in value):
        return True
    problems.append(f"{location} must be a string, number, boolean or list of strings")
    return False


@dataclass
class ContentRecord:
    """Base class for content records whose every field is optional.

    Keys without a matching field (a custom badge added by another editor)
    are kept in ``extra`` and written back by to_dict(), so a load/save
    cycle never drops data.
    """

    extra: dict[str, Any] = field(default_factory=dict, repr=False, kw_only=True)

    @classmethod
    def content_fields(cls) -> tuple[Field[Any], ...]:
        """Return the modelled fields (everything except ``extra``)."""
        return tuple(f for f in fields(cls) if f.name != "extra")

    @classmethod
    def parse(cls: type[R], data: Any, location: str, problems: list[str]) -> R | None:
        """Parse a JSON object into a record, collecting shape problems.

        Args:
            data: Decoded JSON value
            location: Dotted path used in problem messages
            problems: List that shape problems are appended to

        Returns:
            Parsed record, or None if data is not an object
        """
        if not isinstance(data, dict):
            problems.append(f"{location} must be an object")
            return None

        values: dict[str, Any] = {}
        consumed: set[str] = set()
        for record_field in cls.content_fields():
            key = to_camel(record_field.name)
            consumed.update((key, record_field.name))
            if key not in data and record_field.name in data:
                key = record_field.name
            if key not in data:
                continue
            value = data[key]
            if _check_leaf(value, f"{location}.{key}", problems):
                values[record_field.name] = list(value) if isinstance(value, list) else value

        extra = {key: copy.deepcopy(value) for key, value in data.items() if key not in consumed}
        return cls(**values, extra=extra)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization (absent fields omitted)."""
        result: dict[str, Any] = {}
        for record_field in self.content_fields():
            value = getattr(self, record_field.name)
            if value is not None:
                result[to_camel(record_field.name)] = (
                    list(value) if isinstance(value, list) else value
                )
        for key, value in self.extra.items():
            result.setdefault(key, copy.deepcopy(value))
        return result


@dataclass
class PersonalInfo(ContentRecord):
    name: str | None = None
    tagline: str | None = None
    description: str | None = None
    email: str | None = None
    phone: str | None = None
    location: str | None = None
    website: str | None = None
    profile_image: str | None = None
    resume_url: str | None = None


@dataclass
class SocialLinks(ContentRecord):
    github: str | None = None
    linkedin: str | None = None
    twitter: str | None = None
    instagram: str | None = None
    dribbble: str | None = None
    behance: str | None = None
    email: str | None = None


@dataclass
class Skill(ContentRecord):
    name: str | None = None
    level: int | None = None
    category: str | None = None
    icon: str | None = None
    color: str | None = None


@dataclass
class Project(ContentRecord):
    id: str | None = None
    title: str | None = None
    description: str | None = None
    image: str | None = None
    technologies: list[str] | None = None
    live_url: str | None = None
    github_url: str | None = None
    category: str | None = None
    featured: bool | None = None
    date: str | None = None
    status: str | None = None


@dataclass
class Experience(ContentRecord):
    id: str | None = None
    title: str | None = None
    company: str | None = None
    period: str | None = None
    description: str | None = None
    logo: str | None = None
    current: bool | None = None


@dataclass
class Education(ContentRecord):
    id: str | None = None
    degree: str | None = None
    institution: str | None = None
    period: str | None = None
    description: str | None = None
    gpa: str | None = None


@dataclass
class Testimonial(ContentRecord):
    id: str | None = None
    text: str | None = None
    author: str | None = None
    role: str | None = None
    company: str | None = None
    rating: int | None = None
    image: str | None = None


@dataclass
class Award(ContentRecord):
    id: str | None = None
    title: str | None = None
    organization: str | None = None
    year: str | None = None
    description: str | None = None
    image: str | None = None


@dataclass
class BlogPost(ContentRecord):
    id: str | None = None
    title: str | None = None
    excerpt: str | None = None
    date: str | None = None
    read_time: str | None = None
    category: str | None = None
    image: str | None = None
    url: str | None = None


@dataclass
class GalleryItem(ContentRecord):
    id: str | None = None
    title: str | None = None
    description: str | None = None
    image: str | None = None
    category: str | None = None
    tags: list[str] | None = None


@dataclass
class ContactInfo(ContentRecord):
    email: str | None = None
    phone: str | None = None
    location: str | None = None
    availability: str | None = None
    preferred_contact: str | None = None


# Bundle attribute -> record type, for single-record fields
RECORD_FIELDS: dict[str, type[ContentRecord]] = {
    "personal_info": PersonalInfo,
    "social_links": SocialLinks,
    "contact": ContactInfo,
}

# Bundle attribute -> item type, for list fields
LIST_FIELDS: dict[str, type[ContentRecord]] = {
    "skills": Skill,
    "projects": Project,
    "experience": Experience,
    "education": Education,
    "testimonials": Testimonial,
    "awards": Award,
    "blog": BlogPost,
    "gallery": GalleryItem,
}


@dataclass
class ContentBundle:
    """User-editable portfolio content.

    Attributes left as None are "not provided" and resolve to the built-in
    defaults when a section is rendered. Bundles are replaced as a whole by
    the editing UI and never mutated during a render.
    Top-level keys this model does not know (``customSections``) are kept
    in ``extra`` and written back unchanged.
    """

    personal_info: PersonalInfo | None = None
    social_links: SocialLinks | None = None
    skills: list[Skill] | None = None
    projects: list[Project] | None = None
    experience: list[Experience] | None = None
    education: list[Education] | None = None
    testimonials: list[Testimonial] | None = None
    awards: list[Award] | None = None
    blog: list[BlogPost] | None = None
    gallery: list[GalleryItem] | None = None
    contact: ContactInfo | None = None
    extra: dict[str, Any] = field(default_factory=dict, repr=False)

    @classmethod
    def parse(cls, data: Any, location: str, problems: list[str]) -> "ContentBundle | None":
        """Parse a JSON object into a bundle, collecting shape problems."""
        if not isinstance(data, dict):
            problems.append(f"{location} must be an object")
            return None

        values: dict[str, Any] = {}
        consumed = {to_camel(name) for name in RECORD_FIELDS}
        consumed.update(RECORD_FIELDS, LIST_FIELDS)
        for name, record_type in RECORD_FIELDS.items():
            key = to_camel(name) if to_camel(name) in data else name
            if data.get(key) is not None:
                values[name] = record_type.parse(data[key], f"{location}.{key}", problems)

        for name, item_type in LIST_FIELDS.items():
            raw = data.get(name)
            if raw is None:
                continue
            if not isinstance(raw, list):
                problems.append(f"{location}.{name} must be a list")
                continue
            items = [
                item_type.parse(item, f"{location}.{name}[{index}]", problems)
                for index, item in enumerate(raw)
            ]
            values[name] = [item for item in items if item is not None]

        values["extra"] = {
            key: copy.deepcopy(value) for key, value in data.items() if key not in consumed
        }
        return cls(**values)

    @classmethod
    def from_dict(cls, data: Any) -> "ContentBundle":
        """Create a bundle from decoded JSON.

        Raises:
            ConfigValidationError: If the data does not match the bundle shape
        """
        problems: list[str] = []
        bundle = cls.parse(data, "content", problems)
        if problems or bundle is None:
            raise ConfigValidationError(problems)
        return bundle

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        result: dict[str, Any] = {}
        for name in RECORD_FIELDS:
            record = getattr(self, name)
            if record is not None:
                result[to_camel(name)] = record.to_dict()
        for name in LIST_FIELDS:
            items = getattr(self, name)
            if items is not None:
                result[name] = [item.to_dict() for item in items]
        for key, value in self.extra.items():
            result.setdefault(key, copy.deepcopy(value))
        return result


# Fallback for list items that omit fields (e.g. a project without a date)
ITEM_DEFAULTS: dict[type[ContentRecord], ContentRecord] = {
    Skill: Skill(name="Skill", level=0, category="General", color="#6c757d"),
    Project: Project(
        title="Untitled Project",
        description="",
        technologies=[],
        live_url="#",
        github_url="#",
        category="General",
        featured=False,
        date="",
        status="completed",
    ),
    Experience: Experience(title="Role", company="", period="", description="", current=False),
    Education: Education(degree="Degree", institution="", period="", description="", gpa=""),
    Testimonial: Testimonial(text="", author="Anonymous", role="", company="", rating=5),
    Award: Award(title="Award", organization="", year="", description=""),
    BlogPost: BlogPost(title="Untitled Post", excerpt="", date="", read_time="", category="", url="#"),
    GalleryItem: GalleryItem(title="Untitled", description="", image="", category="", tags=[]),
}


DEFAULT_CONTENT = ContentBundle(
    personal_info=PersonalInfo(
        name="John Doe",
        tagline="Full Stack Developer & UI/UX Designer",
        description=(
            "I'm a passionate full-stack developer with over 5 years of experience "
            "creating digital solutions that make a difference. I specialize in modern "
            "web technologies and love turning complex problems into simple, beautiful designs."
        ),
        email="john.doe@example.com",
        phone="+1 (555) 123-4567",
        location="San Francisco, CA",
        website="https://johndoe.dev",
        profile_image="/placeholder-avatar.jpg",
        resume_url="/resume.pdf",
    ),
    social_links=SocialLinks(
        github="https://github.com/johndoe",
        linkedin="https://linkedin.com/in/johndoe",
        twitter="https://twitter.com/johndoe",
        instagram="",
        dribbble="",
        behance="",
        email="john.doe@example.com",
    ),
    skills=[
        Skill(name="React/Next.js", level=90, category="Frontend", color="#61dafb"),
        Skill(name="TypeScript", level=85, category="Frontend", color="#3178c6"),
        Skill(name="CSS/Tailwind", level=88, category="Frontend", color="#06b6d4"),
        Skill(name="Node.js", level=85, category="Backend", color="#339933"),
        Skill(name="Python/Django", level=80, category="Backend", color="#3776ab"),
        Skill(name="PostgreSQL", level=75, category="Backend", color="#336791"),
        Skill(name="AWS/Azure", level=70, category="DevOps", color="#ff9900"),
        Skill(name="Docker", level=75, category="DevOps", color="#2496ed"),
        Skill(name="CI/CD", level=72, category="DevOps", color="#4285f4"),
    ],
    projects=[
        Project(
            id="1",
            title="E-Commerce Platform",
            description=(
                "Full-stack web application with React, Node.js, and MongoDB. Features "
                "include user authentication, payment processing, and admin dashboard."
            ),
            image="/project1.jpg",
            technologies=["React", "Node.js", "MongoDB", "Stripe"],
            live_url="https://ecommerce-demo.com",
            github_url="https://github.com/johndoe/ecommerce",
            category="Web App",
            featured=True,
            date="2024",
            status="completed",
        ),
        Project(
            id="2",
            title="Mobile Task Manager",
            description=(
                "Cross-platform mobile app built with React Native. Real-time "
                "synchronization and offline capabilities."
            ),
            image="/project2.jpg",
            technologies=["React Native", "Firebase", "Redux"],
            live_url="https://taskmanager-app.com",
            github_url="https://github.com/johndoe/taskmanager",
            category="Mobile",
            featured=True,
            date="2024",
            status="completed",
        ),
        Project(
            id="3",
            title="Data Dashboard",
            description=(
                "Interactive dashboard for business analytics with real-time data "
                "visualization and reporting features."
            ),
            image="/project3.jpg",
            technologies=["Vue.js", "D3.js", "Python", "PostgreSQL"],
            live_url="https://dashboard-demo.com",
            github_url="https://github.com/johndoe/dashboard",
            category="Web App",
            featured=False,
            date="2023",
            status="completed",
        ),
    ],
    experience=[
        Experience(
            id="1",
            title="Senior Full Stack Developer",
            company="Tech Innovations Inc.",
            period="2022 - Present",
            description=(
                "Led development of scalable web applications, mentored junior "
                "developers, and implemented CI/CD pipelines."
            ),
            current=True,
        ),
        Experience(
            id="2",
            title="Frontend Developer",
            company="Digital Solutions Ltd.",
            period="2020 - 2022",
            description=(
                "Built responsive user interfaces, collaborated with design teams, "
                "and optimized application performance."
            ),
            current=False,
        ),
        Experience(
            id="3",
            title="Junior Developer",
            company="StartupXYZ",
            period="2019 - 2020",
            description=(
                "Developed features for MVP products, learned modern frameworks, "
                "and contributed to code reviews."
            ),
            current=False,
        ),
    ],
    education=[
        Education(
            id="1",
            degree="Bachelor of Computer Science",
            institution="University of Technology",
            period="2016 - 2020",
            description=(
                "Specialized in Software Engineering and Data Structures. "
                "Graduated Magna Cum Laude."
            ),
            gpa="3.8",
        ),
        Education(
            id="2",
            degree="Full Stack Web Development Bootcamp",
            institution="Code Academy Pro",
            period="2019",
            description="Intensive 6-month program covering modern web technologies and best practices.",
            gpa="",
        ),
    ],
    testimonials=[
        Testimonial(
            id="1",
            text=(
                "John delivered exceptional work on our e-commerce platform. His attention "
                "to detail and technical expertise made the project a huge success."
            ),
            author="Sarah Johnson",
            role="CEO",
            company="TechCorp",
            rating=5,
        ),
        Testimonial(
            id="2",
            text=(
                "Working with John was a pleasure. He understood our requirements "
                "perfectly and delivered beyond our expectations."
            ),
            author="Mike Chen",
            role="Product Manager",
            company="InnovateLab",
            rating=5,
        ),
        Testimonial(
            id="3",
            text="Professional, reliable, and skilled. John helped us transform our digital presence completely.",
            author="Emily Davis",
            role="Founder",
            company="StartupXYZ",
            rating=5,
        ),
    ],
    awards=[
        Award(
            id="1",
            title="Best Web Application",
            organization="Tech Awards 2023",
            year="2023",
            description="Recognized for innovative e-commerce platform design",
        ),
        Award(
            id="2",
            title="Developer of the Year",
            organization="Local Tech Community",
            year="2022",
            description="Outstanding contribution to open source projects",
        ),
        Award(
            id="3",
            title="Innovation Award",
            organization="Startup Pitch Competition",
            year="2021",
            description="First place for mobile app concept and execution",
        ),
    ],
    blog=[
        BlogPost(
            id="1",
            title="Building Scalable React Applications",
            excerpt=(
                "Learn best practices for structuring large React applications with "
                "proper state management and component architecture."
            ),
            date="Dec 15, 2024",
            read_time="8 min read",
            category="React",
            url="/blog/scalable-react-apps",
        ),
        BlogPost(
            id="2",
            title="The Future of Web Development",
            excerpt=(
                "Exploring upcoming trends in web development including AI integration, "
                "serverless computing, and modern frameworks."
            ),
            date="Dec 10, 2024",
            read_time="6 min read",
            category="Technology",
            url="/blog/future-web-dev",
        ),
        BlogPost(
            id="3",
            title="Optimizing Database Performance",
            excerpt=(
                "Practical tips and techniques for improving database query performance "
                "and scaling your data layer effectively."
            ),
            date="Dec 5, 2024",
            read_time="10 min read",
            category="Backend",
            url="/blog/database-optimization",
        ),
    ],
    gallery=[
        GalleryItem(
            id="1",
            title="Project Screenshot 1",
            description="Dashboard interface design",
            image="/gallery1.jpg",
            category="UI Design",
            tags=["dashboard", "interface", "design"],
        ),
        GalleryItem(
            id="2",
            title="Mobile App Design",
            description="Clean mobile interface",
            image="/gallery2.jpg",
            category="Mobile",
            tags=["mobile", "app", "ui"],
        ),
        GalleryItem(
            id="3",
            title="Website Mockup",
            description="Modern website layout",
            image="/gallery3.jpg",
            category="Web Design",
            tags=["website", "layout", "modern"],
        ),
    ],
    contact=ContactInfo(
        email="john.doe@example.com",
        phone="+1 (555) 123-4567",
        location="San Francisco, CA",
        availability="Available for new projects",
        preferred_contact="email",
    ),
)


def default_content() -> ContentBundle:
    """Return a fresh copy of the built-in content bundle."""
    return ContentBundle.from_dict(DEFAULT_CONTENT.to_dict())
