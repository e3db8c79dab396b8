"""SQLAlchemy table definitions for Folio.

These table definitions are used with SQLAlchemy Core.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    CheckConstraint,
    Column,
    Index,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# ENTRIES TABLE (articles, research, projects, websites)
# ============================================================================
entries_table = Table(
    "entries",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("kind", String(20), nullable=False),
    Column("title", String(300), nullable=False),
    Column("slug", String(100), nullable=False),
    Column("description", Text, nullable=True),
    Column("content", Text, nullable=True),
    Column("image_url", Text, nullable=True),
    Column("video_url", Text, nullable=True),
    Column("tags", Text, nullable=True),  # Raw comma-separated field
    Column("published_at", TIMESTAMP(timezone=True), nullable=True),  # NULL = draft
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint(
        "kind IN ('article', 'research', 'project', 'website')",
        name="check_entry_kind",
    ),
    UniqueConstraint("kind", "slug", name="uq_entries_kind_slug"),
)

Index(
    "idx_entries_kind_published_at",
    entries_table.c.kind,
    entries_table.c.published_at.desc(),
)
Index("idx_entries_kind_created_at", entries_table.c.kind, entries_table.c.created_at.desc())
