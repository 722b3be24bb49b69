"""Exception hierarchy for the alfresco_uploader library."""

from __future__ import annotations


class AlfrescoUploaderError(Exception):
    """Base exception for all alfresco_uploader errors."""

    pass


class FolderError(AlfrescoUploaderError):
    """Raised when listing folders under the root node fails."""

    pass


class MetadataError(AlfrescoUploaderError):
    """Raised when a sidecar metadata file is missing or cannot be parsed.

    The sidecar_path attribute holds the file that could not be read.
    """

    def __init__(self, message: str, sidecar_path: str) -> None:
        super().__init__(message)
        self.sidecar_path = sidecar_path
