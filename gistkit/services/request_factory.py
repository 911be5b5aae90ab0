"""Builds the httpx client shared by every gist request."""

import httpx

from gistkit.config import Settings, get_settings


def build_headers(access_token: str | None, settings: Settings) -> dict[str, str]:
    """Headers sent with every request, plus a bearer token when given."""
    headers = {
        "Accept": "application/vnd.github+json",
        "X-GitHub-Api-Version": settings.github_api_version,
    }
    if access_token:
        headers["Authorization"] = f"Bearer {access_token}"
    return headers


def create_http_client(
    access_token: str | None = None,
    settings: Settings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """
    Create an async HTTP client bound to the GitHub API.

    No connection is opened here; the client is reusable across requests
    and must be closed by the caller.

    Args:
        access_token: Fine-grained personal access token
        settings: Client settings, defaults to get_settings()
        transport: Optional transport, e.g. httpx.MockTransport in tests

    Returns:
        Configured httpx.AsyncClient
    """
    settings = settings or get_settings()
    return httpx.AsyncClient(
        base_url=settings.github_api_base_url,
        headers=build_headers(access_token, settings),
        timeout=settings.github_api_timeout,
        transport=transport,
    )
