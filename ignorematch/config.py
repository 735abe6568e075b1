"""Runtime settings read from the environment."""

from __future__ import annotations

import os

from pydantic import BaseModel


def _split_names(value: str) -> list[str]:
    return [name.strip() for name in value.split(",") if name.strip()]


class Settings(BaseModel):
    ignore_files: list[str] = _split_names(os.getenv("IGNOREMATCH_FILES", ".gitignore,.ignore"))
    log_level: str = os.getenv("IGNOREMATCH_LOG_LEVEL", "WARNING")
    encoding: str = os.getenv("IGNOREMATCH_ENCODING", "utf-8")


settings = Settings()
