from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field

DEFAULT_BYTE_LIMIT = 5 * 1024 * 1024
DEFAULT_DEDUPE_SEARCH_LIMIT = 1000
DEFAULT_PREVIEW_LENGTH = 100


def default_storage_path() -> Path:
    data_home = os.getenv("XDG_DATA_HOME")
    base = Path(data_home) if data_home else Path.home() / ".local" / "share"
    return base / "clipdir"


class HistoryConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    storage_path: Path = Field(default_factory=default_storage_path)
    byte_limit: int = Field(default=DEFAULT_BYTE_LIMIT, ge=0)
    dedupe_search_limit: int = Field(default=DEFAULT_DEDUPE_SEARCH_LIMIT, ge=0)
    preview_length: int = Field(default=DEFAULT_PREVIEW_LENGTH, ge=0)

    @classmethod
    def from_env(cls, *, env_path: Optional[Path] = None) -> "HistoryConfig":
        """Build a config from ``CLIPDIR_*`` variables, after loading ``.env``.

        Variables already present in the environment win over the file.
        Raises ``pydantic.ValidationError`` (a ``ValueError``) on bad values.
        """
        if env_path is not None:
            load_dotenv(dotenv_path=env_path)
        else:
            load_dotenv()

        values = {}
        storage_path = os.getenv("CLIPDIR_STORAGE_PATH")
        if storage_path:
            values["storage_path"] = storage_path
        for field_name, env_name in (
            ("byte_limit", "CLIPDIR_BYTE_LIMIT"),
            ("dedupe_search_limit", "CLIPDIR_DEDUPE_SEARCH_LIMIT"),
            ("preview_length", "CLIPDIR_PREVIEW_LENGTH"),
        ):
            raw = os.getenv(env_name)
            if raw:
                values[field_name] = raw.strip()

        return cls.model_validate(values)
