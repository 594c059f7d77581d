"""SQL Document Store — DocumentStore protocol backed by the extension_documents table.

Invariants:
    - read_document returns a copy of default_value when the key is absent
    - Returned documents always carry "id" and "__etag"
    - add_or_update_document with an "__etag" must match the stored etag (else ConcurrencyError)
    - Without "__etag" the write is last-write-wins
    - Database failures surface as DatabaseError (a DocumentStoreError)

Design Decisions:
    - `cache` accepted for protocol compatibility; every call reads the database
"""

import copy
import logging
import uuid

from sqlalchemy import select

from witquery.core.checklist import ETAG_KEY
from witquery.core.errors import ConcurrencyError, ErrorContext
from witquery.infrastructure.database import DatabaseSessionManager
from witquery.models.extension_document import ExtensionDocument

logger = logging.getLogger(__name__)


class SqlDocumentStore:
    """Key/value document collections stored as JSON rows."""

    def __init__(self, db: DatabaseSessionManager):
        self.db = db

    async def read_document(
        self, collection_name: str, key: str, default_value: dict, cache: bool,
    ) -> dict:
        async with self.db.session() as session:
            row = await self._get_row(session, collection_name, key)
        if row is None:
            logger.debug(
                f"Document {collection_name}/{key} not found, using default",
                extra={"collection": collection_name},
            )
            return copy.deepcopy(default_value)
        return _to_document(row)

    async def add_or_update_document(
        self, collection_name: str, document: dict, cache: bool,
    ) -> dict:
        body = {k: v for k, v in document.items() if k != ETAG_KEY}
        key = str(body.get("id") or uuid.uuid4())
        body["id"] = key
        expected_etag = document.get(ETAG_KEY)

        async with self.db.session() as session:
            row = await self._get_row(session, collection_name, key)
            if row is None:
                row = ExtensionDocument(
                    collection=collection_name, document_id=key,
                    etag=1, body=body,
                )
                session.add(row)
            else:
                if expected_etag is not None and expected_etag != row.etag:
                    raise ConcurrencyError(
                        f"Document {collection_name}/{key} was modified "
                        f"(etag {expected_etag} != {row.etag})",
                        ErrorContext(collection=collection_name),
                    )
                row.etag += 1
                row.body = body
            await session.commit()
            await session.refresh(row)
            logger.info(
                f"Stored document {collection_name}/{key} (etag {row.etag})",
                extra={"collection": collection_name},
            )
            return _to_document(row)

    async def _get_row(
        self, session, collection_name: str, key: str,
    ) -> ExtensionDocument | None:
        result = await session.execute(
            select(ExtensionDocument)
            .where(ExtensionDocument.collection == collection_name)
            .where(ExtensionDocument.document_id == key)
        )
        return result.scalar_one_or_none()


def _to_document(row: ExtensionDocument) -> dict:
    document = copy.deepcopy(row.body)
    document["id"] = row.document_id
    document[ETAG_KEY] = row.etag
    return document
