from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SelectorkitConfig:
    log_level: str = "WARNING"
    json_indent: int | None = None  # None prints compact JSON
