"""Configuration defaults and environment loading.

Values from the environment (or a .env file in the working directory) only
pre-fill the interactive prompts; nothing is written back.
"""

from __future__ import annotations

from dotenv import find_dotenv, load_dotenv

DEFAULT_SIDECAR_NAME = "metadata.json"
DEFAULT_MAX_CONCURRENCY = 8
DEFAULT_TIMEOUT = 30.0

API_PATH = "/alfresco/api/-default-/public/alfresco/versions/1"
CONTENT_NODE_TYPE = "cm:content"
FOLDER_FILTER = "(isFolder=true)"

# Number of leading path segments that are not part of the remote path
LOCAL_PREFIX_SEGMENTS = 2

ENV_PREFIX = "ALFRESCO"


def load_env() -> bool:
    """Load a .env file from the working directory, if there is one."""
    return load_dotenv(find_dotenv(usecwd=True))


def env_var(name: str) -> str:
    """Environment variable consulted for the option called name."""
    return f"{ENV_PREFIX}_{name.upper()}"
