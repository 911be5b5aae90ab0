"""Shared test fixtures and sample data."""

import copy

import httpx
import pytest
import pytest_asyncio

from gistkit.config import Settings
from gistkit.services.gist_client import GistClient
from gistkit.services.request_factory import create_http_client

SAMPLE_OWNER_DATA = {
    "login": "octocat",
    "id": 583231,
    "node_id": "MDQ6VXNlcjU4MzIzMQ==",
    "avatar_url": "https://avatars.githubusercontent.com/u/583231?v=4",
    "url": "https://api.github.com/users/octocat",
    "html_url": "https://github.com/octocat",
    "type": "User",
    "site_admin": False,
}

# Sample test data matching GitHub API response for octocat
SAMPLE_GIST_DATA = {
    "id": "6cad326836d38bd3a7ae",
    "node_id": "MDQ6R2lzdDZjYWQzMjY4MzZkMzhiZDNhN2Fl",
    "url": "https://api.github.com/gists/6cad326836d38bd3a7ae",
    "html_url": "https://gist.github.com/octocat/6cad326836d38bd3a7ae",
    "description": "Hello world!",
    "public": True,
    "created_at": "2014-10-01T16:19:34Z",
    "updated_at": "2025-12-23T23:51:45Z",
    "comments": 291,
    "comments_enabled": True,
    "truncated": False,
    "files": {
        "hello_world.rb": {
            "filename": "hello_world.rb",
            "type": "application/x-ruby",
            "language": "Ruby",
            "raw_url": "https://gist.githubusercontent.com/octocat/6cad326836d38bd3a7ae/raw/hello_world.rb",
            "size": 175,
            "truncated": False,
            "content": "class HelloWorld\n  def initialize(name)\n    @name = name.capitalize\n  end\nend\n",
            "encoding": "utf-8",
        },
        "hello_world.py": {
            "filename": "hello_world.py",
            "type": "application/x-python",
            "language": "Python",
            "raw_url": "https://gist.githubusercontent.com/octocat/6cad326836d38bd3a7ae/raw/hello_world.py",
            "size": 42,
        },
    },
    "owner": SAMPLE_OWNER_DATA,
}

SAMPLE_COMMIT_DATA = {
    "url": "https://api.github.com/gists/6cad326836d38bd3a7ae/57a7f021a713b1c5a6a199b54cc514735d2d462f",
    "version": "57a7f021a713b1c5a6a199b54cc514735d2d462f",
    "user": SAMPLE_OWNER_DATA,
    "change_status": {"deletions": 0, "additions": 180, "total": 180},
    "committed_at": "2010-04-14T02:15:15Z",
}


class RecordingTransport:
    """httpx.MockTransport handler that records every request it receives."""

    def __init__(self, handler=None):
        self.requests: list[httpx.Request] = []
        self._handler = handler or (lambda request: httpx.Response(200, json={}))

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._handler(request)


@pytest.fixture
def json_response():
    """Build a transport handler answering with a fixed JSON body."""

    def _respond(data, status_code: int = 200):
        return lambda request: httpx.Response(status_code, json=data)

    return _respond


@pytest.fixture
def settings():
    """Test settings, never picking up a token from the environment."""
    return Settings(
        github_api_base_url="https://api.github.com",
        github_api_timeout=5.0,
        github_token=None,
    )


@pytest.fixture
def sample_gist_data():
    """Sample gist data for testing."""
    return copy.deepcopy(SAMPLE_GIST_DATA)


@pytest.fixture
def sample_commit_data():
    return copy.deepcopy(SAMPLE_COMMIT_DATA)


@pytest_asyncio.fixture
async def make_client(settings):
    """
    Factory for GistClient instances backed by a recording transport.

    Usage: client, recorder = make_client(handler, access_token="tok")
    """
    clients = []

    def _make(handler=None, access_token=None):
        recorder = RecordingTransport(handler)
        http_client = create_http_client(
            access_token,
            settings,
            transport=httpx.MockTransport(recorder),
        )
        client = GistClient(access_token, settings=settings, http_client=http_client)
        clients.append(client)
        return client, recorder

    yield _make

    for client in clients:
        await client.aclose()
