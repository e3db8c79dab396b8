"""Publish date normalization and content visibility.

The functions in this module are pure: callers pass "now" explicitly. The
``VisibilityService`` binds them to the configured clock and settings.

Visibility rules:
- detail views use the strict rule ``published_at <= now``
- public listings use a tolerance window ``published_at <= now + 5 min``

The two rules disagree for entries published less than five minutes in the
future; both are kept as they are observed in production.
"""

from datetime import datetime, timedelta, timezone, tzinfo

import logfire

from folio.config import PublishingSettings
from folio.domain.error import InvalidTimestamp
from folio.domain.model import Entry
from folio.domain.value import PublicationStatus
from folio.util.clock import Clock

from .base import Service

LIST_TOLERANCE = timedelta(minutes=5)
NEAR_NOW_WINDOW = timedelta(seconds=60)


def is_visible(published_at: datetime | None, now: datetime) -> bool:
    """Strict visibility: published and not in the future."""
    return published_at is not None and published_at <= now


def listing_cutoff(now: datetime, tolerance: timedelta = LIST_TOLERANCE) -> datetime:
    """Latest ``published_at`` a public listing still includes."""
    return now + tolerance


def is_listed(
    published_at: datetime | None,
    now: datetime,
    tolerance: timedelta = LIST_TOLERANCE,
) -> bool:
    """Listing visibility: published no later than ``now + tolerance``."""
    return published_at is not None and published_at <= listing_cutoff(now, tolerance)


def publication_status(published_at: datetime | None, now: datetime) -> PublicationStatus:
    """Classify an entry as draft, scheduled or live (strict rule)."""
    if published_at is None:
        return PublicationStatus.DRAFT
    if is_visible(published_at, now):
        return PublicationStatus.LIVE
    return PublicationStatus.SCHEDULED


def parse_publish_timestamp(
    value: str | datetime, tz: tzinfo = timezone.utc
) -> datetime:
    """Parse a submitted publish date into an absolute instant.

    Offset-less values (such as ``2025-03-01T09:30`` from a datetime-local
    input) are interpreted in ``tz``.

    Args:
        value: ISO-8601 string or datetime
        tz: Time zone for offset-less values

    Returns:
        Timezone-aware datetime

    Raises:
        InvalidTimestamp: If the value cannot be parsed
    """
    if isinstance(value, datetime):
        parsed = value
    else:
        text = value.strip()
        # fromisoformat only accepts a trailing "Z" from Python 3.11 on
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            raise InvalidTimestamp(value)

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=tz)
    return parsed


def resolve_publish_timestamp(
    submitted: str | datetime | None,
    now: datetime,
    tz: tzinfo = timezone.utc,
    near_now: timedelta = NEAR_NOW_WINDOW,
) -> datetime | None:
    """Decide which ``published_at`` to persist for a submitted value.

    - nothing submitted (None or blank) -> None (draft)
    - past, or within ``near_now`` of now -> now (publish immediately)
    - further in the future -> the submitted instant (scheduled)

    Collapsing near-now values to ``now`` keeps a "publish now" submission
    from landing a few seconds in the future and showing up as scheduled.

    Raises:
        InvalidTimestamp: If the submitted value cannot be parsed
    """
    if submitted is None:
        return None
    if isinstance(submitted, str) and not submitted.strip():
        return None

    publish_at = parse_publish_timestamp(submitted, tz)
    if publish_at <= now or abs(publish_at - now) < near_now:
        return now
    return publish_at


class VisibilityService(Service):
    """Applies the visibility rules using the injected clock and settings."""

    def __init__(self, clock: Clock, settings: PublishingSettings) -> None:
        """Initialize visibility service.

        Args:
            clock: Source of the current instant
            settings: Publishing settings
        """
        self.clock = clock
        self.settings = settings

    def now(self) -> datetime:
        return self.clock.now()

    def is_visible(self, entry: Entry) -> bool:
        return is_visible(entry.published_at, self.clock.now())

    def is_listed(self, entry: Entry) -> bool:
        return is_listed(
            entry.published_at, self.clock.now(), self.settings.list_tolerance
        )

    def listing_cutoff(self) -> datetime:
        return listing_cutoff(self.clock.now(), self.settings.list_tolerance)

    def status(self, entry: Entry) -> PublicationStatus:
        return publication_status(entry.published_at, self.clock.now())

    def resolve_publish_timestamp(
        self, submitted: str | datetime | None
    ) -> datetime | None:
        """Resolve a submitted publish date against the current clock.

        Args:
            submitted: Raw value from the admin form (None for draft)

        Returns:
            Timestamp to persist, or None for a draft

        Raises:
            InvalidTimestamp: If the submitted value cannot be parsed
        """
        now = self.clock.now()
        with logfire.span(
            "visibility_service.resolve_publish_timestamp",
            submitted=str(submitted) if submitted is not None else None,
        ):
            resolved = resolve_publish_timestamp(
                submitted,
                now,
                tz=self.settings.tzinfo,
                near_now=self.settings.near_now_window,
            )
            logfire.debug(
                "Publish timestamp resolved",
                resolved=resolved.isoformat() if resolved else None,
                immediate=resolved == now,
            )
            return resolved
