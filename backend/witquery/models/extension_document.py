"""Extension Document ORM — one JSON document per (collection, document_id).

Invariants:
    - (collection, document_id) is unique
    - etag starts at 1 and increments on every write
    - body holds the document without its "__etag" key

Design Decisions:
    - JSON column for body: documents are schemaless key/value payloads
"""

from datetime import datetime, timezone

from sqlalchemy import String, Integer, DateTime, JSON, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from witquery.db.base import Base


class ExtensionDocument(Base):
    """A stored document in a named collection."""
    __tablename__ = "extension_documents"
    __table_args__ = (
        UniqueConstraint(
            "collection", "document_id", name="uq_extension_documents_key",
        ),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    collection: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    document_id: Mapped[str] = mapped_column(String(200), nullable=False)
    etag: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    body: Mapped[dict] = mapped_column(JSON, nullable=False, default=dict)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )
