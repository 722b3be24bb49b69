"""Tests for environment configuration."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from alfresco_uploader.config import env_var, load_env


class TestEnvVar:
    """Tests for env_var."""

    def test_names_are_prefixed_and_upper_case(self) -> None:
        """Test the variable name derived from an option name."""
        assert env_var("source") == "ALFRESCO_SOURCE"
        assert env_var("root_node_id") == "ALFRESCO_ROOT_NODE_ID"


class TestLoadEnv:
    """Tests for load_env."""

    def test_reads_env_file_from_working_directory(
        self, workdir: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test that a .env file in the directory the command runs from is loaded."""
        (workdir / ".env").write_text("ALFRESCO_SOURCE=./a\n")
        # Registered with monkeypatch so the loaded value is removed afterwards
        monkeypatch.setenv("ALFRESCO_SOURCE", "unset")
        monkeypatch.delenv("ALFRESCO_SOURCE")

        assert load_env()
        assert os.environ["ALFRESCO_SOURCE"] == "./a"

    def test_environment_wins_over_env_file(
        self, workdir: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test that variables already set are not overridden."""
        (workdir / ".env").write_text("ALFRESCO_TARGET=https://file.test\n")
        monkeypatch.setenv("ALFRESCO_TARGET", "https://shell.test")

        load_env()

        assert os.environ["ALFRESCO_TARGET"] == "https://shell.test"
