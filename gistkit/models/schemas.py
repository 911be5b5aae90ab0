"""Pydantic models for gist records and request options."""

from datetime import datetime
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, HttpUrl, model_validator


class GistModel(BaseModel):
    """Base for records mapped from GitHub API responses."""

    model_config = ConfigDict(frozen=True, extra="ignore")


class GistFile(GistModel):
    """Represents a single file within a gist."""

    filename: str | None = None
    type: str | None = None
    raw_url: HttpUrl | None = None
    size: int | None = None
    language: str | None = None
    encoding: Literal["base64", "utf-8"] | None = None
    content: str | None = None
    truncated: bool | None = None


class GistUser(GistModel):
    """Owner of a gist or author of a gist commit."""

    id: int
    node_id: str
    login: str
    name: str | None = None
    email: str | None = None
    url: HttpUrl
    type: str
    site_admin: bool

    @property
    def display_name(self) -> str:
        return self.name or self.login


class GistChangeStatus(GistModel):
    """Line statistics of a single gist revision."""

    total: int | None = None
    additions: int | None = None
    deletions: int | None = None


class GistCommit(GistModel):
    """A revision in a gist's history."""

    version: str
    url: HttpUrl
    user: GistUser | None = None
    change_status: GistChangeStatus = Field(default_factory=GistChangeStatus)
    committed_at: datetime


class Gist(GistModel):
    """Represents a GitHub Gist."""

    id: str
    node_id: str
    url: HttpUrl | None = None
    html_url: HttpUrl | None = None
    description: str | None = None
    public: bool
    created_at: datetime
    updated_at: datetime
    files: tuple[GistFile, ...]
    owner: GistUser | None = None
    comments: int
    comments_enabled: bool | None = None
    truncated: bool = False


class GistFileContent(BaseModel):
    """Content of a file in a new gist."""

    model_config = ConfigDict(extra="forbid")

    content: str


class GistFileUpdate(BaseModel):
    """Change to one file of an existing gist: new content, a rename, or both."""

    model_config = ConfigDict(extra="forbid")

    content: str | None = None
    filename: str | None = None

    @model_validator(mode="after")
    def check_not_empty(self) -> "GistFileUpdate":
        if self.content is None and self.filename is None:
            raise ValueError("file update needs 'content' or 'filename'")
        return self


class CreateGistRequest(BaseModel):
    """Body of POST /gists."""

    description: str | None = None
    public: bool | None = None
    files: dict[str, GistFileContent] = Field(min_length=1)

    def to_body(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True)


class UpdateGistRequest(BaseModel):
    """
    Body of PATCH /gists/{gist_id}.

    A file mapped to None is deleted from the gist. Files not listed are
    left unchanged.
    """

    description: str | None = None
    files: dict[str, GistFileUpdate | None] | None = None

    @model_validator(mode="after")
    def check_has_changes(self) -> "UpdateGistRequest":
        if self.description is None and not self.files:
            raise ValueError("update needs 'description' or at least one file")
        return self

    def to_body(self) -> dict[str, Any]:
        body: dict[str, Any] = {}
        if self.description is not None:
            body["description"] = self.description
        if self.files:
            body["files"] = {
                name: update.model_dump(exclude_none=True) if update is not None else None
                for name, update in self.files.items()
            }
        return body
