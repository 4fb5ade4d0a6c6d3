"""API clients for the ClickUp REST API."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional

import httpx

from clickupcom.core.config import API_KEY, ConfigStore
from clickupcom.core.errors import (
    STATUS_ERRORS,
    APIError,
    ClickUpCLIError,
    ConnectivityError,
    UnconfiguredError,
)
from clickupcom.core.models import (
    FolderCreate,
    ListCreate,
    SpaceCreate,
    TaskCreate,
    TaskQuery,
    TaskUpdate,
    TimeEntryQuery,
    TimerStart,
)

logger = logging.getLogger(__name__)

CLICKUP_BASE_URL = "https://api.clickup.com/api/v2"

# Body fields checked, in order, for a server-side error message
ERROR_MESSAGE_FIELDS = ("err", "ECODE")


@dataclass
class APIResponse:
    """Outcome of one API call: either data or a classified error."""
    success: bool
    data: Any = None
    error: Optional[ClickUpCLIError] = None
    status_code: int = 0

    @classmethod
    def failure(cls, error: ClickUpCLIError, status_code: int = 0) -> "APIResponse":
        return cls(success=False, error=error, status_code=status_code)

    @property
    def message(self) -> str:
        """Error text for display (empty on success)."""
        return str(self.error) if self.error is not None else ""

    def map(self, fn: Callable[[Any], Any]) -> "APIResponse":
        """Transform the payload of a successful response."""
        if not self.success:
            return self
        return APIResponse(success=True, data=fn(self.data), status_code=self.status_code)

    def unwrap(self) -> Any:
        """Return the payload or raise the classified error."""
        if self.error is not None:
            raise self.error
        return self.data


def envelope(field: str) -> Callable[[Any], list]:
    """Unwrap a list payload, falling back to an empty list."""
    def extract(data: Any) -> list:
        if not isinstance(data, dict):
            return []
        return data.get(field) or []
    return extract


def field_of(field: str) -> Callable[[Any], Any]:
    """Unwrap a single payload field, ``None`` when absent."""
    def extract(data: Any) -> Any:
        return data.get(field) if isinstance(data, dict) else None
    return extract


def extract_error_message(response: httpx.Response) -> str:
    """Best-effort error text from a failed response body."""
    try:
        body = response.json()
    except ValueError:
        return response.text

    if isinstance(body, dict):
        for key in ERROR_MESSAGE_FIELDS:
            if body.get(key):
                return str(body[key])
    return json.dumps(body, separators=(",", ":"))


class BaseAPIClient:
    """Single-request HTTP client with uniform error translation.

    Subclasses decide the auth policy through two class attributes:
    ``AUTH_REQUIRED`` (fail fast without a key, before any network I/O)
    and ``AUTH_SCHEME`` (``None`` sends the key verbatim, otherwise
    ``"<scheme> <key>"``).
    """

    SERVICE_NAME = "API"
    AUTH_REQUIRED = True
    AUTH_SCHEME: Optional[str] = None

    def __init__(self, store: ConfigStore, transport: Optional[httpx.BaseTransport] = None):
        self.store = store
        self.transport = transport
        self._client: Optional[httpx.Client] = None

    @property
    def base_url(self) -> str:
        raise NotImplementedError

    @property
    def client(self) -> httpx.Client:
        """Lazy-initialize the HTTP client."""
        if self._client is None:
            self._client = httpx.Client(transport=self.transport)
        return self._client

    def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            self._client.close()
            self._client = None

    def __enter__(self):
        return self

    def __exit__(self, *args) -> None:
        self.close()

    def _headers(self, api_key: Optional[str]) -> dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if api_key:
            headers["Authorization"] = f"{self.AUTH_SCHEME} {api_key}" if self.AUTH_SCHEME else api_key
        return headers

    def _request(
        self,
        method: str,
        endpoint: str,
        json: Optional[dict] = None,
        params: Optional[dict] = None,
        auth_required: Optional[bool] = None,
    ) -> APIResponse:
        """Make one HTTP request to the API.

        Args:
            method: HTTP method (GET, POST, etc.)
            endpoint: API endpoint path, ids already embedded
            json: JSON body, only sent when given
            params: Query parameters; ``None`` values are dropped
            auth_required: Override the client's auth policy for this call
        """
        # Resolved per call so `config set` applies to the next command
        api_key = self.store.get(API_KEY)
        required = self.AUTH_REQUIRED if auth_required is None else auth_required
        if required and not api_key:
            return APIResponse.failure(UnconfiguredError())

        url = f"{self.base_url.rstrip('/')}{endpoint}"
        kwargs: dict[str, Any] = {"headers": self._headers(api_key)}
        if params:
            kwargs["params"] = {k: v for k, v in params.items() if v is not None}
        if json is not None:
            kwargs["json"] = json

        try:
            response = self.client.request(method, url, **kwargs)
        except httpx.UnsupportedProtocol:
            # Raised while routing a malformed URL, not by the network
            raise
        except httpx.TransportError as e:
            logger.debug("%s %s failed: %s", method, endpoint, e)
            return APIResponse.failure(ConnectivityError(self.SERVICE_NAME))

        logger.debug("%s %s -> %s", method, endpoint, response.status_code)

        if not response.is_success:
            error_class = STATUS_ERRORS.get(response.status_code)
            error = error_class() if error_class else APIError(response.status_code, extract_error_message(response))
            return APIResponse.failure(error, status_code=response.status_code)

        if not response.content:
            data = None
        else:
            try:
                data = response.json()
            except ValueError:
                data = {"raw": response.text}

        return APIResponse(success=True, data=data, status_code=response.status_code)


class ClickUpClient(BaseAPIClient):
    """Client for the ClickUp v2 API. Requires an API key on every call."""

    SERVICE_NAME = "ClickUp API"
    AUTH_REQUIRED = True
    AUTH_SCHEME = None

    @property
    def base_url(self) -> str:
        return CLICKUP_BASE_URL

    # Teams
    def get_teams(self) -> APIResponse:
        """List the teams (workspaces) the key can see."""
        return self._request("GET", "/team").map(envelope("teams"))

    # Spaces
    def list_spaces(self, team_id: str) -> APIResponse:
        return self._request("GET", f"/team/{team_id}/space").map(envelope("spaces"))

    def get_space(self, space_id: str) -> APIResponse:
        return self._request("GET", f"/space/{space_id}")

    def create_space(self, team_id: str, space: SpaceCreate) -> APIResponse:
        return self._request("POST", f"/team/{team_id}/space", json=space.to_wire())

    # Folders
    def list_folders(self, space_id: str) -> APIResponse:
        return self._request("GET", f"/space/{space_id}/folder").map(envelope("folders"))

    def create_folder(self, space_id: str, folder: FolderCreate) -> APIResponse:
        return self._request("POST", f"/space/{space_id}/folder", json=folder.to_wire())

    # Lists
    def list_lists(self, folder_id: str) -> APIResponse:
        return self._request("GET", f"/folder/{folder_id}/list").map(envelope("lists"))

    def list_folderless_lists(self, space_id: str) -> APIResponse:
        """Lists that live directly in a space."""
        return self._request("GET", f"/space/{space_id}/list").map(envelope("lists"))

    def create_list(self, folder_id: str, task_list: ListCreate) -> APIResponse:
        return self._request("POST", f"/folder/{folder_id}/list", json=task_list.to_wire())

    # Tasks
    def list_tasks(self, list_id: str, query: Optional[TaskQuery] = None) -> APIResponse:
        params = query.to_wire() if query else None
        return self._request("GET", f"/list/{list_id}/task", params=params).map(envelope("tasks"))

    def get_task(self, task_id: str) -> APIResponse:
        return self._request("GET", f"/task/{task_id}")

    def create_task(self, list_id: str, task: TaskCreate) -> APIResponse:
        return self._request("POST", f"/list/{list_id}/task", json=task.to_wire())

    def update_task(self, task_id: str, updates: TaskUpdate) -> APIResponse:
        return self._request("PUT", f"/task/{task_id}", json=updates.to_wire())

    def delete_task(self, task_id: str) -> APIResponse:
        return self._request("DELETE", f"/task/{task_id}")

    # Time tracking
    def get_time_entries(self, team_id: str, query: Optional[TimeEntryQuery] = None) -> APIResponse:
        params = query.to_wire() if query else None
        return self._request("GET", f"/team/{team_id}/time_entries", params=params).map(envelope("data"))

    def start_timer(self, team_id: str, timer: TimerStart) -> APIResponse:
        return self._request(
            "POST", f"/team/{team_id}/time_entries/start", json=timer.to_wire()
        ).map(field_of("data"))

    def stop_timer(self, team_id: str) -> APIResponse:
        """Stop whatever timer the server considers running for the team."""
        return self._request("POST", f"/team/{team_id}/time_entries/stop").map(field_of("data"))
