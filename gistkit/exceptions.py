"""Exceptions raised by the gist client."""


class GistClientError(Exception):
    """Base class for all gistkit errors."""


class AccessTokenRequiredError(GistClientError):
    """Raised when an operation needs an access token and none was given."""

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(
            f"Access token is required for '{operation}', please provide it."
        )


class GitHubAPIError(GistClientError):
    """Raised when GitHub API returns an error."""

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        self.message = message
        super().__init__(f"GitHub API error ({status_code}): {message}")


class GitHubNotFoundError(GitHubAPIError):
    """Raised when the requested gist, revision or user doesn't exist."""

    def __init__(self, path: str, message: str = ""):
        self.path = path
        super().__init__(status_code=404, message=message or f"{path} not found")


class GitHubRateLimitError(GitHubAPIError):
    """Raised when GitHub API rate limit is exceeded."""

    def __init__(self, status_code: int = 403, reset_time: str | None = None):
        self.reset_time = reset_time
        super().__init__(status_code=status_code, message="GitHub API rate limit exceeded")


class GistMappingError(GistClientError):
    """Raised when a response body doesn't have the expected shape."""

    def __init__(self, entity: str, detail: str):
        self.entity = entity
        self.detail = detail
        super().__init__(f"Unexpected {entity} payload: {detail}")
