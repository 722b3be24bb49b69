"""Sidecar metadata lookup.

A sidecar is a JSON file sitting next to the content files of a directory:

    {"files": [{"file": "doc.txt", "title": "T", "caption": "C"}]}

The caption of an entry is sent to Alfresco as the node description.
"""

from __future__ import annotations

import json
import logging

from alfresco_uploader.config import DEFAULT_SIDECAR_NAME
from alfresco_uploader.exceptions import MetadataError
from alfresco_uploader.models import FileMetadata, SidecarMetadata
from alfresco_uploader.paths import base_name, containing_dir

logger = logging.getLogger(__name__)


def load_sidecar(sidecar_path: str) -> SidecarMetadata:
    """Read and parse a sidecar file.

    Raises:
        MetadataError: If the file cannot be read or is not valid JSON
    """
    try:
        with open(sidecar_path, encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise MetadataError(f"Cannot read sidecar {sidecar_path}: {e}", sidecar_path) from e
    except ValueError as e:
        # JSONDecodeError, or UnicodeDecodeError for a file that is not UTF-8
        raise MetadataError(f"Invalid JSON in sidecar {sidecar_path}: {e}", sidecar_path) from e
    return SidecarMetadata.from_dict(data)


class SidecarIndex:
    """Finds the sidecar entry for a file by the directory it lives in.

    Only directories that had a sidecar during classification are consulted.
    Sidecars are parsed on first use and then cached.
    """

    def __init__(
        self,
        metadata_file_paths: list[str],
        sidecar_name: str = DEFAULT_SIDECAR_NAME,
    ) -> None:
        self._sidecar_name = sidecar_name
        self._dirs = {containing_dir(p) for p in metadata_file_paths}
        self._cache: dict[str, SidecarMetadata] = {}

    def has_sidecar(self, directory: str) -> bool:
        return directory in self._dirs

    def sidecar_for(self, directory: str) -> SidecarMetadata | None:
        if directory not in self._dirs:
            return None
        if directory not in self._cache:
            self._cache[directory] = load_sidecar(f"{directory}/{self._sidecar_name}")
        return self._cache[directory]

    def lookup(self, file_path: str) -> FileMetadata | None:
        """Return the sidecar entry for file_path, or None if there is none.

        Raises:
            MetadataError: If the directory's sidecar cannot be parsed
        """
        sidecar = self.sidecar_for(containing_dir(file_path))
        if sidecar is None:
            return None
        entry = sidecar.lookup(base_name(file_path))
        if entry is None:
            logger.debug(f"No sidecar entry for {file_path}")
        return entry
