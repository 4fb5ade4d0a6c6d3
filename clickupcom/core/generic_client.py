"""Client scaffold for a generic REST API on a configurable base URL."""

from __future__ import annotations

from typing import Any, Optional

from clickupcom.core.api_client import APIResponse, BaseAPIClient, envelope
from clickupcom.core.config import BASE_URL

DEFAULT_BASE_URL = "https://api.example.com"


class GenericAPIClient(BaseAPIClient):
    """Credential optional: Bearer auth when a key is stored, none otherwise."""

    SERVICE_NAME = "API"
    AUTH_REQUIRED = False
    AUTH_SCHEME = "Bearer"

    collection = "/items"

    @property
    def base_url(self) -> str:
        return self.store.get(BASE_URL) or DEFAULT_BASE_URL

    def list_items(self, params: Optional[dict[str, Any]] = None) -> APIResponse:
        return self._request("GET", self.collection, params=params).map(envelope("data"))

    def create_item(self, params: dict[str, Any]) -> APIResponse:
        return self._request("POST", self.collection, json=params)
