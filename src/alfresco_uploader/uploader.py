"""Concurrent upload of a batch of files."""

from __future__ import annotations

import asyncio
import logging
from typing import Callable

from alfresco_uploader.client import AlfrescoClient
from alfresco_uploader.config import DEFAULT_MAX_CONCURRENCY
from alfresco_uploader.exceptions import MetadataError
from alfresco_uploader.metadata import SidecarIndex
from alfresco_uploader.models import UploadResult, UploadSummary
from alfresco_uploader.paths import base_name, relative_path

logger = logging.getLogger(__name__)

ResultCallback = Callable[[UploadResult], None]


async def upload_one(
    client: AlfrescoClient,
    file_path: str,
    sidecars: SidecarIndex,
) -> UploadResult:
    """Resolve the sidecar entry of file_path and upload it.

    A sidecar that cannot be parsed fails this file only.
    """
    remote_dir = relative_path(file_path)
    try:
        metadata = sidecars.lookup(file_path)
    except MetadataError as e:
        logger.warning(f"{file_path}: {e}")
        return UploadResult(
            success=False,
            file_path=file_path,
            file_name=base_name(file_path),
            relative_path=remote_dir,
            error=str(e),
        )
    return await client.upload(file_path, remote_dir, metadata)


async def upload_files(
    client: AlfrescoClient,
    file_paths: list[str],
    sidecars: SidecarIndex,
    *,
    max_concurrency: int = DEFAULT_MAX_CONCURRENCY,
    on_result: ResultCallback | None = None,
) -> UploadSummary:
    """Upload every file, at most max_concurrency at a time.

    All uploads are scheduled together; on_result is called as each one
    settles, so its call order is the order of completion.

    Args:
        client: Client to upload with
        file_paths: Uploadable files from classification
        sidecars: Sidecar index built from the metadata files
        max_concurrency: Upper bound on requests in flight
        on_result: Optional callback invoked with every result

    Returns:
        UploadSummary holding one result per file
    """
    if max_concurrency < 1:
        raise ValueError("max_concurrency must be at least 1")

    semaphore = asyncio.Semaphore(max_concurrency)
    summary = UploadSummary()

    async def run(file_path: str) -> None:
        async with semaphore:
            result = await upload_one(client, file_path, sidecars)
        summary.add(result)
        if on_result is not None:
            on_result(result)

    logger.info(f"Uploading {len(file_paths)} files with up to {max_concurrency} in flight")
    await asyncio.gather(*(run(path) for path in file_paths))
    return summary
