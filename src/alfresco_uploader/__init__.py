"""Alfresco Uploader - upload a local directory tree to an Alfresco repository.

Example usage:
    import asyncio

    from alfresco_uploader import (
        AlfrescoClient,
        RunConfig,
        SidecarIndex,
        classify_paths,
        list_paths,
        upload_files,
    )

    config = RunConfig(
        source="./photos",
        target="https://alfresco.example.com",
        root_node_id="8f2d4c1e-0000-0000-0000-000000000000",
        api_key="key",
        remote_user="jdoe",
    )
    paths = classify_paths(list_paths(config.source), config.ignore_file_name)
    sidecars = SidecarIndex(paths.metadata_file_paths, config.ignore_file_name)

    async def run():
        async with AlfrescoClient(config) as client:
            summary = await upload_files(client, paths.file_paths, sidecars)
            print(f"{summary.success_count}/{summary.total} uploaded")

    asyncio.run(run())
"""

from alfresco_uploader.client import AlfrescoClient
from alfresco_uploader.exceptions import (
    AlfrescoUploaderError,
    FolderError,
    MetadataError,
)
from alfresco_uploader.metadata import SidecarIndex, load_sidecar
from alfresco_uploader.models import (
    FileMetadata,
    FolderInfo,
    PathClassification,
    RunConfig,
    SidecarMetadata,
    UploadResult,
    UploadSummary,
)
from alfresco_uploader.paths import classify_paths, display_path, list_paths, relative_path
from alfresco_uploader.uploader import upload_files

__version__ = "0.1.0"

__all__ = [
    # Client and pipeline
    "AlfrescoClient",
    "upload_files",
    "list_paths",
    "classify_paths",
    "display_path",
    "relative_path",
    "SidecarIndex",
    "load_sidecar",
    # Models
    "RunConfig",
    "PathClassification",
    "FileMetadata",
    "SidecarMetadata",
    "UploadResult",
    "UploadSummary",
    "FolderInfo",
    # Exceptions
    "AlfrescoUploaderError",
    "FolderError",
    "MetadataError",
]
