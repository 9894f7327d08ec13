"""Abstract storage for uploaded product images."""

from __future__ import annotations

from abc import ABC, abstractmethod


class ImageStore(ABC):

    @abstractmethod
    def upload(self, data: bytes, filename: str) -> str:
        """Store the image and return the path it is served under.

        Raises UploadError on any failure.
        """

    @abstractmethod
    def owns(self, path: str) -> bool:
        """True if ``path`` was produced by this store's ``upload``."""

    @abstractmethod
    def remove(self, path: str) -> None:
        """Delete a stored image."""
