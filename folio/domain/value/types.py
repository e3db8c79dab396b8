"""Domain value objects for Folio.

Value objects are immutable and defined by their values, not identity.
"""

import re
from enum import Enum

from pydantic import field_validator

from folio.domain.value.common import RootValueObject


class ContentKind(str, Enum):
    """Kind of published content.

    All kinds share the same structure; the kind only selects the public
    section the entry is listed under.
    """

    ARTICLE = "article"
    RESEARCH = "research"
    PROJECT = "project"
    WEBSITE = "website"

    @property
    def section(self) -> "ContentSection":
        """Public URL section for this kind."""
        return _KIND_TO_SECTION[self]


class ContentSection(str, Enum):
    """URL path segment for each content kind (``/articles``, ``/research``...)."""

    ARTICLES = "articles"
    RESEARCH = "research"
    PROJECTS = "projects"
    WEBSITES = "websites"

    @property
    def kind(self) -> ContentKind:
        return _SECTION_TO_KIND[self]


_KIND_TO_SECTION = {
    ContentKind.ARTICLE: ContentSection.ARTICLES,
    ContentKind.RESEARCH: ContentSection.RESEARCH,
    ContentKind.PROJECT: ContentSection.PROJECTS,
    ContentKind.WEBSITE: ContentSection.WEBSITES,
}
_SECTION_TO_KIND = {section: kind for kind, section in _KIND_TO_SECTION.items()}


class PublicationStatus(str, Enum):
    """Publication state derived from ``published_at``."""

    DRAFT = "draft"  # No publish timestamp
    SCHEDULED = "scheduled"  # Publish timestamp in the future
    LIVE = "live"  # Publish timestamp at or before now


class Slug(RootValueObject[str]):
    """URL-safe slug, unique within a content kind.

    Must be lowercase, alphanumeric with hyphens, 1-100 characters.
    Examples: 'hello-world', 'diffusion-models-2025'
    """

    @field_validator("root")
    @classmethod
    def validate_slug_format(cls, v: str) -> str:
        """Validate slug format."""
        if len(v) < 1 or len(v) > 100:
            raise ValueError("Slug must be 1-100 characters")
        if not re.match(r"^[a-z0-9]+(?:-[a-z0-9]+)*$", v):
            raise ValueError(
                "Slug must be lowercase alphanumeric with hyphens, "
                "no leading/trailing hyphens or consecutive hyphens"
            )
        return v
