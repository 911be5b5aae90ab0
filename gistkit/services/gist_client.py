"""Async GitHub Gists API client using httpx."""

import logging
from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any

import httpx

from gistkit.config import Settings, get_settings
from gistkit.exceptions import (
    AccessTokenRequiredError,
    GitHubAPIError,
    GitHubNotFoundError,
    GitHubRateLimitError,
)
from gistkit.models.schemas import (
    CreateGistRequest,
    Gist,
    GistCommit,
    GistFile,
    GistFileContent,
    GistFileUpdate,
    UpdateGistRequest,
)
from gistkit.services.mapping import (
    parse_gist,
    parse_gist_commits,
    parse_gists,
)
from gistkit.services.request_factory import create_http_client

logger = logging.getLogger(__name__)

Since = str | datetime


def format_since(since: Since) -> str:
    """Format a since filter as YYYY-MM-DDTHH:MM:SSZ. Naive datetimes are taken as UTC."""
    if isinstance(since, str):
        return since
    if since.tzinfo is None:
        since = since.replace(tzinfo=timezone.utc)
    return since.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


def build_params(
    since: Since | None = None,
    page: int | None = None,
    per_page: int | None = None,
) -> dict[str, Any]:
    """Query parameters for list endpoints, leaving out the ones not given."""
    params: dict[str, Any] = {}
    if since is not None:
        params["since"] = format_since(since)
    if page is not None:
        params["page"] = page
    if per_page is not None:
        params["per_page"] = per_page
    return params


class GistClient:
    """
    Async client for GitHub Gists API.

    One HTTP client is created per GistClient and reused for every call.
    Pass http_client to supply your own (for example one built with
    create_http_client(transport=httpx.MockTransport(...)) in tests).

    Example:
        async with GistClient("github_pat_...") as client:
            gist = await client.create_gist(
                {"hello.txt": {"content": "Hello World!"}},
                description="Example Gist",
                public=True,
            )
    """

    def __init__(
        self,
        access_token: str | None = None,
        *,
        settings: Settings | None = None,
        http_client: httpx.AsyncClient | None = None,
    ):
        settings = settings or get_settings()
        self._access_token = access_token if access_token is not None else settings.github_token
        self._client = http_client or create_http_client(self._access_token, settings)

    async def __aenter__(self) -> "GistClient":
        return self

    async def __aexit__(self, *args) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()

    @property
    def has_access_token(self) -> bool:
        return bool(self._access_token)

    def _require_access_token(self, operation: str) -> None:
        if not self.has_access_token:
            raise AccessTokenRequiredError(operation)

    async def _request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json: dict[str, Any] | None = None,
        authenticated: bool = True,
    ) -> httpx.Response:
        """
        Send one request and check its status.

        With authenticated=False the Authorization header is stripped, so
        the token never reaches hosts outside the API.

        Raises:
            GitHubNotFoundError: On 404
            GitHubRateLimitError: If rate limit exceeded
            GitHubAPIError: For other API and transport errors
        """
        logger.debug("%s %s params=%s", method, path, params or {})
        try:
            if authenticated:
                response = await self._client.request(method, path, params=params, json=json)
            else:
                request = self._client.build_request(method, path, params=params, json=json)
                request.headers.pop("Authorization", None)
                response = await self._client.send(request)
        except httpx.TimeoutException as e:
            raise GitHubAPIError(
                status_code=504,
                message="GitHub API request timed out",
            ) from e
        except httpx.RequestError as e:
            raise GitHubAPIError(
                status_code=502,
                message=f"Failed to connect to GitHub API: {str(e)}",
            ) from e

        if response.is_success:
            return response

        logger.warning("%s %s failed with status %s", method, path, response.status_code)

        if response.status_code == 404:
            raise GitHubNotFoundError(path, response.text)

        if response.status_code in (403, 429):
            if response.headers.get("X-RateLimit-Remaining") == "0":
                raise GitHubRateLimitError(
                    status_code=response.status_code,
                    reset_time=response.headers.get("X-RateLimit-Reset"),
                )

        raise GitHubAPIError(
            status_code=response.status_code,
            message=response.text,
        )

    # create

    async def create_gist(
        self,
        files: Mapping[str, GistFileContent | dict[str, str]],
        description: str | None = None,
        public: bool | None = None,
    ) -> Gist:
        """
        Create a gist with one or more files.

        Args:
            files: Filename to content, e.g. {"test.txt": {"content": "Hello World!"}}
            description: Description of the gist
            public: Whether the gist is public

        Returns:
            The created gist
        """
        self._require_access_token("create_gist")
        body = CreateGistRequest(
            description=description,
            public=public,
            files=dict(files),
        ).to_body()

        response = await self._request("POST", "/gists", json=body)
        return parse_gist(response.json())

    # delete

    async def delete_gist(self, gist_id: str) -> None:
        """Delete a gist. The token needs the "Gists" (write) permission."""
        self._require_access_token("delete_gist")
        await self._request("DELETE", f"/gists/{gist_id}")

    # update

    async def update_gist(
        self,
        gist_id: str,
        description: str | None = None,
        files: Mapping[str, GistFileUpdate | dict[str, str | None] | None] | None = None,
    ) -> Gist:
        """
        Update a gist's description, and update, rename or delete its files.

        Files not named in files are left as they are. Map a filename to
        None to delete that file, or give it a new "filename" to rename it.

        Args:
            gist_id: The unique identifier of the gist
            description: New description
            files: Changes keyed by the current filename

        Returns:
            The updated gist

        Raises:
            ValidationError: If neither description nor files is given
        """
        self._require_access_token("update_gist")
        body = UpdateGistRequest(
            description=description,
            files=dict(files) if files is not None else None,
        ).to_body()

        response = await self._request("PATCH", f"/gists/{gist_id}", json=body)
        return parse_gist(response.json())

    # get

    async def list_gists(
        self,
        since: Since | None = None,
        page: int | None = None,
        per_page: int | None = None,
    ) -> list[Gist]:
        """
        List the authenticated user's gists.

        Called anonymously, this returns all public gists instead.

        Args:
            since: Only gists updated after this time (ISO 8601)
            page: Page number (1-indexed)
            per_page: Number of results per page (max 100)

        Returns:
            List of Gist objects
        """
        response = await self._request(
            "GET", "/gists", params=build_params(since, page, per_page)
        )
        return parse_gists(response.json())

    async def get_gist(self, gist_id: str) -> Gist:
        """Get a single gist, including file contents."""
        response = await self._request("GET", f"/gists/{gist_id}")
        return parse_gist(response.json())

    async def list_user_gists(
        self,
        username: str,
        since: Since | None = None,
        page: int | None = None,
        per_page: int | None = None,
    ) -> list[Gist]:
        """
        List public gists for a GitHub user.

        Args:
            username: GitHub username
            since: Only gists updated after this time (ISO 8601)
            page: Page number (1-indexed)
            per_page: Number of results per page (max 100)

        Returns:
            List of Gist objects
        """
        response = await self._request(
            "GET",
            f"/users/{username}/gists",
            params=build_params(since, page, per_page),
        )
        return parse_gists(response.json())

    async def get_gist_revision(self, gist_id: str, sha: str) -> Gist:
        """Get the gist as it was at revision sha."""
        response = await self._request("GET", f"/gists/{gist_id}/{sha}")
        return parse_gist(response.json())

    async def list_public_gists(
        self,
        since: Since | None = None,
        page: int | None = None,
        per_page: int | None = None,
    ) -> list[Gist]:
        """List public gists, most recently updated first."""
        response = await self._request(
            "GET", "/gists/public", params=build_params(since, page, per_page)
        )
        return parse_gists(response.json())

    async def list_starred_gists(
        self,
        since: Since | None = None,
        page: int | None = None,
        per_page: int | None = None,
    ) -> list[Gist]:
        """List the authenticated user's starred gists."""
        self._require_access_token("list_starred_gists")
        response = await self._request(
            "GET", "/gists/starred", params=build_params(since, page, per_page)
        )
        return parse_gists(response.json())

    async def list_gist_forks(
        self,
        gist_id: str,
        page: int | None = None,
        per_page: int | None = None,
    ) -> list[Gist]:
        response = await self._request(
            "GET",
            f"/gists/{gist_id}/forks",
            params=build_params(page=page, per_page=per_page),
        )
        return parse_gists(response.json())

    async def list_gist_commits(
        self,
        gist_id: str,
        page: int | None = None,
        per_page: int | None = None,
    ) -> list[GistCommit]:
        response = await self._request(
            "GET",
            f"/gists/{gist_id}/commits",
            params=build_params(page=page, per_page=per_page),
        )
        return parse_gist_commits(response.json())

    # star / fork

    async def is_gist_starred(self, gist_id: str) -> bool:
        """
        Check if the authenticated user starred a gist.

        GitHub answers 204 when starred and 404 when not. Any other error
        is raised.
        """
        self._require_access_token("is_gist_starred")
        try:
            await self._request("GET", f"/gists/{gist_id}/star")
        except GitHubNotFoundError:
            return False
        return True

    async def star_gist(self, gist_id: str) -> None:
        self._require_access_token("star_gist")
        await self._request("PUT", f"/gists/{gist_id}/star")

    async def unstar_gist(self, gist_id: str) -> None:
        self._require_access_token("unstar_gist")
        await self._request("DELETE", f"/gists/{gist_id}/star")

    async def fork_gist(self, gist_id: str) -> Gist:
        """Fork a gist into the authenticated user's account and return the fork."""
        self._require_access_token("fork_gist")
        response = await self._request("POST", f"/gists/{gist_id}/forks")
        return parse_gist(response.json())

    # files

    async def get_file_content(self, gist_file: GistFile) -> str:
        """
        Fetch the full text of a gist file from its raw URL.

        Useful when the inline content was truncated by the API. Sent
        without the access token; raw URLs of secret gists need none.
        """
        if gist_file.raw_url is None:
            raise ValueError(f"Gist file '{gist_file.filename}' has no raw_url")
        response = await self._request("GET", str(gist_file.raw_url), authenticated=False)
        return response.text
