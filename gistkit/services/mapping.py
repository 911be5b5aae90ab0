"""Mapping of raw GitHub API payloads into gist records."""

from typing import Any

from pydantic import ValidationError

from gistkit.exceptions import GistMappingError
from gistkit.models.schemas import (
    Gist,
    GistChangeStatus,
    GistCommit,
    GistFile,
    GistUser,
)


def _expect_dict(entity: str, data: Any) -> dict[str, Any]:
    if not isinstance(data, dict):
        raise GistMappingError(entity, f"expected an object, got {type(data).__name__}")
    return data


def _expect_list(entity: str, data: Any) -> list[Any]:
    if not isinstance(data, list):
        raise GistMappingError(entity, f"expected an array, got {type(data).__name__}")
    return data


def parse_gist_file(filename: str, data: Any) -> GistFile:
    """Parse one entry of a gist's files map; the map key is the filename."""
    data = _expect_dict("gist file", data)
    try:
        return GistFile.model_validate({**data, "filename": filename})
    except ValidationError as e:
        raise GistMappingError("gist file", str(e)) from e


def parse_gist_files(data: Any) -> tuple[GistFile, ...]:
    """Parse a gist's files map into a tuple ordered like the map."""
    data = _expect_dict("gist files", data)
    return tuple(parse_gist_file(filename, file_data) for filename, file_data in data.items())


def parse_gist_user(data: Any) -> GistUser | None:
    """Parse an owner or committer object. Missing users map to None."""
    if data is None:
        return None
    data = _expect_dict("gist user", data)
    try:
        return GistUser.model_validate(data)
    except ValidationError as e:
        raise GistMappingError("gist user", str(e)) from e


def parse_gist(data: Any) -> Gist:
    """Parse raw API response into Gist model."""
    data = _expect_dict("gist", data)
    if "files" not in data:
        raise GistMappingError("gist", "missing 'files'")

    fields = {
        **data,
        "files": parse_gist_files(data["files"]),
        "owner": parse_gist_user(data.get("owner")),
    }
    try:
        return Gist.model_validate(fields)
    except ValidationError as e:
        raise GistMappingError("gist", str(e)) from e


def parse_gists(data: Any) -> list[Gist]:
    return [parse_gist(gist_data) for gist_data in _expect_list("gist list", data)]


def parse_gist_commit(data: Any) -> GistCommit:
    """Parse one entry of a gist's commit history."""
    data = _expect_dict("gist commit", data)
    change_status = data.get("change_status") or {}

    try:
        fields = {
            **data,
            "user": parse_gist_user(data.get("user")),
            "change_status": GistChangeStatus.model_validate(change_status),
        }
        return GistCommit.model_validate(fields)
    except ValidationError as e:
        raise GistMappingError("gist commit", str(e)) from e


def parse_gist_commits(data: Any) -> list[GistCommit]:
    return [parse_gist_commit(commit_data) for commit_data in _expect_list("gist commit list", data)]
