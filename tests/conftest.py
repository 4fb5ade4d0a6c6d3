"""Pytest configuration and shared fixtures."""

import json
import shutil
import tempfile
from pathlib import Path

import httpx
import pytest

from clickupcom.core.api_client import ClickUpClient
from clickupcom.core.config import API_KEY, ConfigStore
from clickupcom.core.generic_client import GenericAPIClient

TEST_API_KEY = "pk_12345_SECRETKEYVALUE"


class FakeAPI:
    """Mock transport that records every request and replays one canned reply."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.payload = None
        self.content = None
        self.error = None
        self.transport = httpx.MockTransport(self.handle)

    def reply(self, payload=None, status_code=200, content=None):
        """Set the response for subsequent requests."""
        self.payload = payload
        self.status_code = status_code
        self.content = content

    def fail_with(self, error_class):
        """Make subsequent requests raise a transport error."""
        self.error = error_class

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error("simulated failure", request=request)
        if self.content is not None:
            return httpx.Response(self.status_code, content=self.content)
        return httpx.Response(self.status_code, json=self.payload)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_body(self):
        return json.loads(self.last.content)


@pytest.fixture
def temp_directory():
    """
    Create a temporary directory for tests that need filesystem access.
    Automatically cleaned up after test completes.
    """
    dir_path = tempfile.mkdtemp()
    yield Path(dir_path)
    shutil.rmtree(dir_path, ignore_errors=True)


@pytest.fixture
def empty_store(temp_directory):
    """Config store with nothing set."""
    return ConfigStore(temp_directory / "config.json").load()


@pytest.fixture
def store(empty_store):
    """Config store with an API key."""
    empty_store.set(API_KEY, TEST_API_KEY)
    return empty_store


@pytest.fixture
def fake_api():
    """Recording mock transport, replying 200 with an empty body by default."""
    return FakeAPI()


@pytest.fixture
def client(store, fake_api):
    """ClickUp client wired to the fake transport."""
    with ClickUpClient(store, transport=fake_api.transport) as api:
        yield api


@pytest.fixture
def generic_client(store, fake_api):
    """Generic API client wired to the fake transport."""
    with GenericAPIClient(store, transport=fake_api.transport) as api:
        yield api


@pytest.fixture
def sample_tasks():
    """Task records as returned by GET /list/{id}/task."""
    return [
        {
            "id": "t1",
            "name": "A",
            "status": {"status": "open"},
            "priority": None,
            "due_date": "1700000000000",
        },
        {
            "id": "86a1b2c3d4e5",
            "name": "Write release notes",
            "status": {"status": "in progress"},
            "priority": {"priority": "high"},
            "due_date": None,
        },
    ]


@pytest.fixture
def api_key():
    """The key stored by the ``store`` fixture."""
    return TEST_API_KEY
