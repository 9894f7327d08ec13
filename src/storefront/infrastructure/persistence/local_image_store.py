"""Filesystem-backed ImageStore.

Files land in the upload directory under a unique
``<ms-timestamp>-<random>.<ext>`` name and are served as
``/uploads/<name>``.
"""

from __future__ import annotations

import secrets
import time
from pathlib import Path, PurePosixPath

from storefront.domain.exceptions import UploadError
from storefront.domain.repository.image_store import ImageStore

URL_PREFIX = "/uploads/"


class LocalImageStore(ImageStore):

    def __init__(self, upload_dir: Path) -> None:
        self._upload_dir = upload_dir

    def upload(self, data: bytes, filename: str) -> str:
        suffix = PurePosixPath(filename).suffix.lower()
        name = f"{time.time_ns() // 1_000_000}-{secrets.randbelow(10**9)}{suffix}"
        try:
            self._upload_dir.mkdir(parents=True, exist_ok=True)
            (self._upload_dir / name).write_bytes(data)
        except OSError as exc:
            raise UploadError(f"Failed to store {filename}: {exc.strerror}") from exc
        return URL_PREFIX + name

    def owns(self, path: str) -> bool:
        return path.startswith(URL_PREFIX)

    def remove(self, path: str) -> None:
        target = self.resolve(path)
        if not target.exists():
            return
        try:
            target.unlink()
        except OSError as exc:
            raise UploadError(f"Failed to remove {path}: {exc.strerror}") from exc

    def resolve(self, path: str) -> Path:
        """Filesystem location of a served ``/uploads/`` path."""
        return self._upload_dir / PurePosixPath(path[len(URL_PREFIX):]).name
