from __future__ import annotations

from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    # --- cluster ---
    contact_points: list[str] = ["127.0.0.1"]
    port: int = 9042
    keyspace: str = "go"

    # --- tables ---
    histogram_keyspace: str = "go"
    histogram_table: str = "stats"
    count_keyspace: str = "dse_perf"
    count_table: str = "user_io"

    # --- external tools ---
    nodetool_dir: str = "/Downloads/dse/bin"
    df_command: str = "df"
    df_flag: str = "-h"
    root_mount: str = "/"
    tool_timeout: float | None = None  # seconds; unset waits forever

    # --- logging ---
    log_level: LogLevel = "WARNING"

    model_config = {"env_file": ".env", "env_prefix": "PROBE_"}

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().upper()
        return value
