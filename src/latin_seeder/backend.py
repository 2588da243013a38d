"""PocketBase access for the seeders.

All seeders share one lazily created, admin-authenticated client. The
``Backend`` wrapper turns field criteria into PocketBase filter expressions
and maps "not found" responses to ``None`` so seeders can branch on
existence without catching SDK errors themselves.
"""

import json
from typing import Any

from pocketbase import PocketBase
from pocketbase.utils import ClientResponseError

from .config import BackendSettings, load_settings
from .errors import BackendAuthError
from .log import log_success, log_warn

# Page size for full-list reads
LIST_BATCH = 200


def filter_literal(value: Any) -> str:
    """Render a Python value as a PocketBase filter literal."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    # JSON string escaping matches the filter syntax for quotes and backslashes
    return json.dumps(str(value), ensure_ascii=False)


def build_filter(**criteria: Any) -> str:
    """Build an AND filter from field=value criteria.

    >>> build_filter(resourceId="module_M01")
    'resourceId="module_M01"'
    >>> build_filter(lessonNumber=3, isTemplateQuestion=True)
    'lessonNumber=3 && isTemplateQuestion=true'
    """
    return " && ".join(f"{field}={filter_literal(value)}" for field, value in criteria.items())


class Backend:
    """Record operations on a PocketBase instance."""

    def __init__(self, client: PocketBase):
        self.client = client

    def find_first(self, collection: str, **criteria: Any) -> Any | None:
        """Return the first record matching all criteria, or None."""
        try:
            return self.client.collection(collection).get_first_list_item(build_filter(**criteria))
        except ClientResponseError as e:
            if e.status == 404:
                return None
            raise

    def find_by_resource_id(self, collection: str, resource_id: str) -> Any | None:
        return self.find_first(collection, resourceId=resource_id)

    def list_all(self, collection: str, **criteria: Any) -> list[Any]:
        query_params = {"filter": build_filter(**criteria)} if criteria else {}
        return self.client.collection(collection).get_full_list(
            batch=LIST_BATCH, query_params=query_params
        )

    def count(self, collection: str) -> int:
        return self.client.collection(collection).get_list(1, 1).total_items

    def create(self, collection: str, data: dict[str, Any]) -> Any:
        return self.client.collection(collection).create(data)

    def update(self, collection: str, record_id: str, data: dict[str, Any]) -> Any:
        return self.client.collection(collection).update(record_id, data)

    def delete(self, collection: str, record_id: str) -> None:
        self.client.collection(collection).delete(record_id)


def connect(settings: BackendSettings) -> Backend:
    """Create a client for the configured backend and authenticate as admin.

    Without admin credentials the client is returned unauthenticated and a
    warning is printed, since collection rules usually reject anonymous writes.

    Raises:
        BackendAuthError: If the credentials are rejected or the backend
            cannot be reached.
    """
    client = PocketBase(settings.url)

    if not settings.has_credentials:
        log_warn("Admin credentials not provided. Set PB_ADMIN_EMAIL and PB_ADMIN_PASSWORD.")
        log_warn("Without admin auth, writes to PocketBase are likely to be rejected.")
        return Backend(client)

    try:
        client.admins.auth_with_password(settings.admin_email, settings.admin_password)
    except ClientResponseError as e:
        raise BackendAuthError(
            f"PocketBase admin authentication failed at {settings.url}: {e}"
        ) from e

    log_success(f"Authenticated with PocketBase admin account at {settings.url}")
    return Backend(client)


_backend: Backend | None = None


def get_backend(settings: BackendSettings | None = None) -> Backend:
    """Return the shared backend, connecting on first use."""
    global _backend
    if _backend is None:
        _backend = connect(settings or load_settings())
    return _backend


def reset_backend() -> None:
    """Drop the shared backend so the next get_backend() reconnects."""
    global _backend
    _backend = None
