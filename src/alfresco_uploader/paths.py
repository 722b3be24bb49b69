"""Enumeration and classification of local paths."""

from __future__ import annotations

import glob
import logging
import os
import stat

from alfresco_uploader.config import DEFAULT_SIDECAR_NAME, LOCAL_PREFIX_SEGMENTS
from alfresco_uploader.models import PathClassification

logger = logging.getLogger(__name__)


def list_paths(source: str) -> list[str]:
    """List every entry under source, at any depth.

    Paths keep the source prefix as given and always use "/" as separator.
    Order is whatever the directory walk produces.
    """
    pattern = os.path.join(source, "**", "*")
    paths = [p.replace(os.sep, "/") for p in glob.glob(pattern, recursive=True)]
    logger.debug(f"Found {len(paths)} entries under {source}")
    return paths


def display_path(path: str) -> str:
    """Return path without its leading local prefix segments."""
    return "/".join(path.split("/")[LOCAL_PREFIX_SEGMENTS:])


def relative_path(path: str) -> str:
    """Return the remote folder path of a file.

    This is the local path with the leading prefix segments and the file
    name removed, e.g. "./photos/2024/a.jpg" -> "2024".
    """
    return "/".join(path.split("/")[LOCAL_PREFIX_SEGMENTS:-1])


def base_name(path: str) -> str:
    return path.rsplit("/", 1)[-1]


def containing_dir(path: str) -> str:
    """Return path minus its last segment."""
    head, _, _ = path.rpartition("/")
    return head


def classify_paths(
    paths: list[str], ignore_file_name: str = DEFAULT_SIDECAR_NAME
) -> PathClassification:
    """Split paths into folders, uploadable files and sidecar metadata files.

    Symlinks are not followed. Entries that are neither a directory nor a
    regular file are dropped. A failing lstat propagates as OSError.
    """
    result = PathClassification()
    for path in paths:
        mode = os.lstat(path).st_mode
        if stat.S_ISDIR(mode):
            result.folder_paths.append(path)
        elif stat.S_ISREG(mode):
            if base_name(path) == ignore_file_name:
                result.metadata_file_paths.append(path)
            else:
                result.file_paths.append(path)
        else:
            logger.debug(f"Skipping {path}: not a directory or regular file")

    logger.debug(
        f"Classified {len(result.folder_paths)} folders, {len(result.file_paths)} files, "
        f"{len(result.metadata_file_paths)} metadata files"
    )
    return result
