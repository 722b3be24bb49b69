"""Pytest fixtures for alfresco_uploader tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from helpers import AlfrescoStub

from alfresco_uploader import RunConfig


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test from tmp_path so sources can be given as "./a"."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def source_tree(workdir: Path) -> str:
    """Create a small source tree and return its relative source path.

    ./a/top.txt
    ./a/b/doc.txt
    ./a/b/other.txt
    ./a/b/metadata.json   (lists doc.txt only)
    ./a/c/d/deep.bin
    """
    root = workdir / "a"
    (root / "b").mkdir(parents=True)
    (root / "c" / "d").mkdir(parents=True)
    (root / "top.txt").write_text("top")
    (root / "b" / "doc.txt").write_text("document body")
    (root / "b" / "other.txt").write_text("other body")
    (root / "b" / "metadata.json").write_text(
        json.dumps({"files": [{"file": "doc.txt", "title": "T", "caption": "C"}]})
    )
    (root / "c" / "d" / "deep.bin").write_bytes(b"\x00\x01\x02")
    return "./a"


@pytest.fixture
def run_config(source_tree: str) -> RunConfig:
    """Create a RunConfig pointing at the source tree."""
    return RunConfig(
        source=source_tree,
        target="https://alfresco.test/",
        root_node_id="root-1",
        api_key="test-key",
        remote_user="jdoe",
        cookies="session=abc",
    )


@pytest.fixture
def stub() -> AlfrescoStub:
    """Create an Alfresco server stub."""
    return AlfrescoStub()
