"""Data models for the alfresco_uploader library."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from alfresco_uploader.config import (
    API_PATH,
    DEFAULT_MAX_CONCURRENCY,
    DEFAULT_SIDECAR_NAME,
    DEFAULT_TIMEOUT,
)


@dataclass(frozen=True)
class RunConfig:
    """Connection and path parameters for a single run."""

    source: str
    target: str
    root_node_id: str
    api_key: str = ""
    remote_user: str = ""
    cookies: str = ""
    ignore_file_name: str = DEFAULT_SIDECAR_NAME
    print_folder_ids: bool = False
    max_concurrency: int = DEFAULT_MAX_CONCURRENCY
    timeout: float = DEFAULT_TIMEOUT

    @property
    def api_base_url(self) -> str:
        """Base URL of the public Alfresco REST API on the target host."""
        return f"{self.target.rstrip('/')}{API_PATH}"

    @property
    def children_url(self) -> str:
        """URL of the children collection of the root node."""
        return f"{self.api_base_url}/nodes/{self.root_node_id}/children"


@dataclass
class PathClassification:
    """Enumerated paths split into folders, uploadable files and sidecars."""

    folder_paths: list[str] = field(default_factory=list)
    file_paths: list[str] = field(default_factory=list)
    metadata_file_paths: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class FileMetadata:
    """Title and caption for one file, as listed in a sidecar."""

    file: str
    title: str | None = None
    caption: str | None = None

    @property
    def description(self) -> str | None:
        return self.caption


@dataclass(frozen=True)
class SidecarMetadata:
    """Parsed contents of a sidecar metadata file."""

    files: tuple[FileMetadata, ...] = ()

    @classmethod
    def from_dict(cls, data: Any) -> SidecarMetadata:
        """Build from decoded JSON, skipping anything that is not a file entry."""
        if not isinstance(data, dict):
            return cls()
        entries = data.get("files")
        if not isinstance(entries, list):
            return cls()

        files = []
        for entry in entries:
            if not isinstance(entry, dict) or not isinstance(entry.get("file"), str):
                continue
            files.append(
                FileMetadata(
                    file=entry["file"],
                    title=_optional_str(entry.get("title")),
                    caption=_optional_str(entry.get("caption")),
                )
            )
        return cls(files=tuple(files))

    def lookup(self, file_name: str) -> FileMetadata | None:
        """Return the entry for file_name, or None if the sidecar does not list it."""
        for entry in self.files:
            if entry.file == file_name:
                return entry
        return None


@dataclass(frozen=True)
class UploadResult:
    """Result of an upload operation."""

    success: bool
    file_path: str
    file_name: str
    relative_path: str
    node_id: str | None = None
    error: str | None = None


@dataclass
class UploadSummary:
    """Outcomes of a batch of uploads, in order of completion."""

    succeeded: list[UploadResult] = field(default_factory=list)
    failed: list[UploadResult] = field(default_factory=list)

    def add(self, result: UploadResult) -> None:
        if result.success:
            self.succeeded.append(result)
        else:
            self.failed.append(result)

    @property
    def success_count(self) -> int:
        return len(self.succeeded)

    @property
    def fail_count(self) -> int:
        return len(self.failed)

    @property
    def total(self) -> int:
        return self.success_count + self.fail_count


@dataclass(frozen=True)
class FolderInfo:
    """A folder directly under the root node in Alfresco."""

    id: str
    name: str


def _optional_str(value: Any) -> str | None:
    # Empty strings are treated as absent so they are never sent.
    if value is None or value == "":
        return None
    return str(value)
