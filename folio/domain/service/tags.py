"""Tag parsing and filtering.

Tags are stored as one raw comma-separated field per entry. Reading them back
trims and de-duplicates, while listing filters match the raw field as a
case-insensitive substring, so a filter of "art" also matches "smart".
"""

from typing import Iterable, Optional


def parse_tags(raw: Optional[str]) -> list[str]:
    """Split a raw tag field into trimmed, non-empty, unique tags.

    First occurrence wins; order is preserved.
    """
    if not raw:
        return []

    tags: list[str] = []
    for token in raw.split(","):
        tag = token.strip()
        if tag and tag not in tags:
            tags.append(tag)
    return tags


def collect_tags(raw_fields: Iterable[Optional[str]]) -> list[str]:
    """Union of the tags of several entries, sorted."""
    found: set[str] = set()
    for raw in raw_fields:
        found.update(parse_tags(raw))
    return sorted(found)


def first_tag(raw: Optional[str]) -> Optional[str]:
    """First tag of an entry, used to look up related entries."""
    tags = parse_tags(raw)
    return tags[0] if tags else None


def matches_tag_filter(
    raw: Optional[str], tag: Optional[str], case_sensitive: bool = False
) -> bool:
    """Substring match of ``tag`` against the raw tag field.

    An empty filter matches everything; an entry with no tags matches nothing.
    """
    if not tag:
        return True
    if not raw:
        return False
    if case_sensitive:
        return tag in raw
    return tag.lower() in raw.lower()
