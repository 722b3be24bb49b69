"""AlfrescoClient for uploading files to an Alfresco content repository."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from alfresco_uploader.config import CONTENT_NODE_TYPE, FOLDER_FILTER
from alfresco_uploader.exceptions import FolderError
from alfresco_uploader.models import FileMetadata, FolderInfo, RunConfig, UploadResult
from alfresco_uploader.paths import base_name

logger = logging.getLogger(__name__)

LIST_PAGE_SIZE = 100


class AlfrescoClient:
    """Async client for the Alfresco public REST API.

    Every request carries the API key, remote user and cookie headers taken
    from the RunConfig it was created with.

    Example:
        async with AlfrescoClient(config) as client:
            result = await client.upload("./docs/a/report.pdf", "a")
            folders = await client.list_folders()
    """

    def __init__(
        self,
        config: RunConfig,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            config: Connection parameters for this run
            transport: Optional transport, mainly for tests
        """
        self._config = config
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> AlfrescoClient:
        """Enter context manager."""
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: Any,
    ) -> None:
        """Exit context manager."""
        await self.close()

    @property
    def config(self) -> RunConfig:
        return self._config

    def _get_client(self) -> httpx.AsyncClient:
        """Get the underlying HTTP client, creating it on first use."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self._config.timeout,
                transport=self._transport,
            )
        return self._client

    def _headers(self) -> dict[str, str]:
        return {
            "X-API-KEY": self._config.api_key,
            "OAM-REMOTE-USER": self._config.remote_user,
            "cookie": self._config.cookies,
        }

    @staticmethod
    def _form_fields(relative_path: str, metadata: FileMetadata | None) -> dict[str, str]:
        fields = {"nodeType": CONTENT_NODE_TYPE, "relativePath": relative_path}
        if metadata is not None:
            if metadata.title:
                fields["cm:title"] = metadata.title
            if metadata.description:
                fields["cm:description"] = metadata.description
        return fields

    async def upload(
        self,
        file_path: str,
        relative_path: str,
        metadata: FileMetadata | None = None,
    ) -> UploadResult:
        """Upload a file as a child of the root node.

        Args:
            file_path: Local path of the file
            relative_path: Folder path under the root node, created by the server
            metadata: Optional sidecar entry supplying title and description

        Returns:
            UploadResult with success status and details
        """
        client = self._get_client()
        file_name = base_name(file_path)
        data = self._form_fields(relative_path, metadata)

        try:
            with open(file_path, "rb") as f:
                response = await client.post(
                    self._config.children_url,
                    data=data,
                    files={"filedata": (file_name, f)},
                    headers=self._headers(),
                )
            response.raise_for_status()
        except (httpx.HTTPError, httpx.InvalidURL, OSError, UnicodeEncodeError) as e:
            error_msg = f"Upload failed: {e}"
            logger.warning(f"{file_path}: {error_msg}")
            return UploadResult(
                success=False,
                file_path=file_path,
                file_name=file_name,
                relative_path=relative_path,
                error=error_msg,
            )

        node_id = _entry_of(response).get("id")
        logger.info(f"Successfully uploaded {file_name} to /{relative_path}")
        return UploadResult(
            success=True,
            file_path=file_path,
            file_name=file_name,
            relative_path=relative_path,
            node_id=node_id,
        )

    async def list_folders(self) -> list[FolderInfo]:
        """List the folders directly under the root node.

        Returns:
            List of FolderInfo objects, following pagination to the end

        Raises:
            FolderError: If listing fails
        """
        client = self._get_client()
        folders: list[FolderInfo] = []
        skip_count = 0

        try:
            while True:
                response = await client.get(
                    self._config.children_url,
                    params={
                        "where": FOLDER_FILTER,
                        "skipCount": skip_count,
                        "maxItems": LIST_PAGE_SIZE,
                    },
                    headers=self._headers(),
                )
                response.raise_for_status()
                listing = response.json()["list"]
                entries = listing.get("entries", [])
                for item in entries:
                    entry = item["entry"]
                    folders.append(FolderInfo(id=entry["id"], name=entry["name"]))

                pagination = listing.get("pagination", {})
                if not pagination.get("hasMoreItems") or not entries:
                    break
                skip_count += len(entries)
        except (
            httpx.HTTPError,
            httpx.InvalidURL,
            ValueError,
            KeyError,
            TypeError,
            AttributeError,
        ) as e:
            raise FolderError(f"Failed to list folders: {e}") from e

        logger.debug(f"Listed {len(folders)} folders under {self._config.root_node_id}")
        return folders

    async def close(self) -> None:
        """Close the client and clean up resources."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None


def _entry_of(response: httpx.Response) -> dict[str, Any]:
    # The created node is returned as {"entry": {...}}; other bodies are tolerated.
    try:
        body = response.json()
    except ValueError:
        return {}
    if isinstance(body, dict) and isinstance(body.get("entry"), dict):
        return body["entry"]
    return {}
