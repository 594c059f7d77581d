"""Route Dependencies — wires protocol implementations into request handlers.

Invariants:
    - Routes depend on protocols (DocumentStore, FormValueProvider), never on concrete clients
    - The form service HTTP client lives for one request and is always closed

Design Decisions:
    - FastAPI Depends over module globals: tests swap implementations with dependency_overrides
"""

from typing import AsyncGenerator

import httpx
from fastapi import Depends

from witquery.config import Settings, get_settings
from witquery.core.repository_protocols import DocumentStore, FormValueProvider
from witquery.infrastructure.database import DatabaseSessionManager, get_db_manager
from witquery.infrastructure.document_store import SqlDocumentStore
from witquery.infrastructure.form_service_client import (
    HttpFormValueProvider, create_form_service_http_client,
)


def get_document_store(
    db: DatabaseSessionManager = Depends(get_db_manager),
) -> DocumentStore:
    return SqlDocumentStore(db)


async def get_form_service_client(
    settings: Settings = Depends(get_settings),
) -> AsyncGenerator[httpx.AsyncClient, None]:
    async with create_form_service_http_client(
        settings.form_service_url,
        settings.form_service_token,
        settings.form_service_timeout_seconds,
    ) as client:
        yield client


def get_form_value_provider(
    work_item_id: int,
    client: httpx.AsyncClient = Depends(get_form_service_client),
) -> FormValueProvider:
    return HttpFormValueProvider(client, work_item_id)
