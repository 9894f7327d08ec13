"""Application service: Upload Image use case."""

from __future__ import annotations

import logging
from pathlib import Path

from storefront.domain.exceptions import UploadError
from storefront.domain.repository.image_store import ImageStore

logger = logging.getLogger(__name__)


class UploadImageHandler:

    def __init__(self, image_store: ImageStore) -> None:
        self._image_store = image_store

    def handle(self, source: Path) -> str:
        """Store the file at ``source`` and return its served path.

        Nothing else is committed; attaching the path to a product is a
        separate save.
        """
        try:
            data = source.read_bytes()
        except OSError as exc:
            raise UploadError(f"Cannot read {source}: {exc.strerror}") from exc
        if not data:
            raise UploadError(f"{source} is empty")

        path = self._image_store.upload(data, source.name)
        logger.info("Uploaded %s as %s (%d bytes)", source.name, path, len(data))
        return path
