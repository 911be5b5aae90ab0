"""Typed async client for the GitHub Gists API."""

from gistkit.config import Settings, get_settings
from gistkit.exceptions import (
    AccessTokenRequiredError,
    GistClientError,
    GistMappingError,
    GitHubAPIError,
    GitHubNotFoundError,
    GitHubRateLimitError,
)
from gistkit.models.schemas import (
    CreateGistRequest,
    Gist,
    GistChangeStatus,
    GistCommit,
    GistFile,
    GistFileContent,
    GistFileUpdate,
    GistUser,
    UpdateGistRequest,
)
from gistkit.services.gist_client import GistClient
from gistkit.services.request_factory import create_http_client

__version__ = "1.0.0"

__all__ = [
    "AccessTokenRequiredError",
    "CreateGistRequest",
    "Gist",
    "GistChangeStatus",
    "GistClient",
    "GistClientError",
    "GistCommit",
    "GistFile",
    "GistFileContent",
    "GistFileUpdate",
    "GistMappingError",
    "GistUser",
    "GitHubAPIError",
    "GitHubNotFoundError",
    "GitHubRateLimitError",
    "Settings",
    "UpdateGistRequest",
    "create_http_client",
    "get_settings",
]
