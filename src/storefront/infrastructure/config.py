"""Runtime settings, read from the environment.

Every value has a default so the CLI works out of the box; data lands
in ``./data`` relative to the working directory.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

DEFAULT_STAFF_PASSWORD = "888888"
DEFAULT_SYNC_CHANNEL = "storefront_sync"


@dataclass(frozen=True)
class Settings:

    data_dir: Path
    staff_password: str = DEFAULT_STAFF_PASSWORD
    sync_channel: str = DEFAULT_SYNC_CHANNEL
    log_level: str = "INFO"

    @property
    def upload_dir(self) -> Path:
        return self.data_dir / "uploads"

    @property
    def log_dir(self) -> Path:
        return self.data_dir / "logs"

    @staticmethod
    def from_env(data_dir: Path | None = None) -> Settings:
        env = os.environ
        return Settings(
            data_dir=data_dir or Path(env.get("STOREFRONT_DATA_DIR", "data")),
            staff_password=env.get("STOREFRONT_STAFF_PASSWORD", DEFAULT_STAFF_PASSWORD),
            sync_channel=env.get("STOREFRONT_SYNC_CHANNEL", DEFAULT_SYNC_CHANNEL),
            log_level=env.get("STOREFRONT_LOG_LEVEL", "INFO").upper(),
        )
