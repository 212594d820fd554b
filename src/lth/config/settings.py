"""
Runtime settings loaded from the environment (and a local .env file).
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from ..vcs import DEFAULT_COMMIT_MESSAGE


def _load_dotenv() -> None:
    cwd_env = Path.cwd() / ".env"
    if cwd_env.exists():
        load_dotenv(dotenv_path=cwd_env, override=True)


_load_dotenv()


class Settings(BaseModel):
    """
    Tunables for a scaffold run.

    Attributes:
        log_level: Logging level name; the --log-level flag is used when unset.
        commit_message: Message of the single commit created by git init.
        tree_command: Directory listing utility shown after a successful run.
        show_tree: Whether to invoke the listing utility at all.
        http_timeout: Seconds before a download is abandoned (None: no timeout).
    """
    log_level: Optional[str] = Field(default=None, alias="LTH_LOG_LEVEL")
    commit_message: str = Field(default=DEFAULT_COMMIT_MESSAGE, alias="LTH_COMMIT_MESSAGE")
    tree_command: str = Field(default="tree", alias="LTH_TREE_COMMAND")
    show_tree: bool = Field(default=True, alias="LTH_SHOW_TREE")
    http_timeout: Optional[float] = Field(default=None, alias="LTH_HTTP_TIMEOUT", gt=0)

    model_config = {
        "populate_by_name": True,
    }


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Load settings from environment/.env exactly once.
    """
    values = {
        field.alias: os.environ[field.alias]
        for field in Settings.model_fields.values()
        if field.alias in os.environ and os.environ[field.alias] != ""
    }
    return Settings(**values)
