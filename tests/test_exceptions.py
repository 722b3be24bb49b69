"""Tests for the exception hierarchy."""

from __future__ import annotations

import alfresco_uploader
from alfresco_uploader import AlfrescoUploaderError, FolderError, MetadataError


class TestExceptions:
    """Tests for the exported errors."""

    def test_errors_share_a_base(self) -> None:
        """Test that every library error can be caught as AlfrescoUploaderError."""
        assert issubclass(FolderError, AlfrescoUploaderError)
        assert issubclass(MetadataError, AlfrescoUploaderError)

    def test_exported_errors(self) -> None:
        """Test that exactly the raised errors are exported."""
        exported = {
            name for name in alfresco_uploader.__all__ if name.endswith("Error")
        }

        assert exported == {"AlfrescoUploaderError", "FolderError", "MetadataError"}

    def test_metadata_error_keeps_sidecar_path(self) -> None:
        """Test that MetadataError records the sidecar it is about."""
        error = MetadataError("Invalid JSON", "./a/b/metadata.json")

        assert error.sidecar_path == "./a/b/metadata.json"
        assert str(error) == "Invalid JSON"
