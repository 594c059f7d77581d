"""Work Item Form Service Client — FormValueProvider over the work item REST API.

Invariants:
    - One provider instance is bound to one active work item id
    - get_field_values returns only requested fields; missing ones map to None
    - Every httpx failure (transport, timeout, non-2xx) becomes FormServiceError
    - No retries; the timeout comes from settings

Design Decisions:
    - httpx.AsyncClient injected so tests can pass a MockTransport
    - Personal access token sent as basic auth with an empty user name
"""

import logging
from typing import Any, Sequence

import httpx

from witquery.core.errors import ErrorContext, FormServiceError

logger = logging.getLogger(__name__)

API_VERSION = "7.1"


def create_form_service_http_client(
    base_url: str, token: str | None = None, timeout_seconds: float = 30.0,
) -> httpx.AsyncClient:
    auth = httpx.BasicAuth("", token) if token else None
    return httpx.AsyncClient(
        base_url=base_url, auth=auth, timeout=timeout_seconds,
    )


class HttpFormValueProvider:
    """Reads the active work item's field values from the REST API."""

    def __init__(self, client: httpx.AsyncClient, work_item_id: int):
        self.client = client
        self.work_item_id = work_item_id

    async def get_field_values(
        self, field_ids: Sequence[str], include_defaults: bool,
    ) -> dict[str, Any]:
        if not field_ids:
            return {}
        payload = await self._get_work_item(list(field_ids), "get_field_values")
        fields = payload.get("fields") or {}
        return {f: fields.get(f) for f in field_ids}

    async def get_id(self) -> int:
        payload = await self._get_work_item(["System.Id"], "get_id")
        try:
            return int(payload["id"])
        except (KeyError, TypeError, ValueError):
            raise FormServiceError(
                "response has no work item id", "get_id", self._context(),
            )

    async def _get_work_item(self, field_ids: list[str], operation: str) -> dict:
        params = {"fields": ",".join(field_ids), "api-version": API_VERSION}
        try:
            response = await self.client.get(
                f"/_apis/wit/workitems/{self.work_item_id}", params=params,
            )
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as e:
            logger.error(
                f"Form service returned {e.response.status_code} for {operation}",
                extra={"work_item_id": self.work_item_id, "error_code": "FORM_SERVICE_ERROR"},
            )
            raise FormServiceError(
                f"HTTP {e.response.status_code}", operation, self._context(),
            )
        except httpx.HTTPError as e:
            logger.error(
                f"Form service request failed for {operation}: {e}",
                extra={"work_item_id": self.work_item_id, "error_code": "FORM_SERVICE_ERROR"},
            )
            raise FormServiceError(
                type(e).__name__, operation, self._context(),
            )
        except ValueError:
            raise FormServiceError(
                "response is not JSON", operation, self._context(),
            )

    def _context(self) -> ErrorContext:
        return ErrorContext(work_item_id=self.work_item_id)
