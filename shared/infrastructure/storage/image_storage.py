"""
Image storage port.
"""
import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Sequence

from shared.domain.exceptions import error_message

logger = logging.getLogger(__name__)


class StorageError(Exception):
    """Raised when the object storage rejects or fails an operation."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ImageStorage(ABC):
    """Abstract storage for public image files."""

    @abstractmethod
    def upload(self, file_obj, folder: str = "", prefix: str = "") -> str:
        """Upload a single image and return its public URL."""
        pass

    @abstractmethod
    def upload_many(self, files: Sequence[Any], folder: str = "", prefix: str = "") -> List[str]:
        """Upload a batch of images and return their URLs in input order."""
        pass

    @abstractmethod
    def delete(self, url: str) -> bool:
        """Delete the image behind a public URL."""
        pass

    @abstractmethod
    def delete_many(self, urls: Sequence[str]) -> Dict[str, Any]:
        """Delete a batch of images. Returns success/failed counts and deleted paths."""
        pass

    def replace(
        self,
        old_url: Optional[str],
        new_file,
        folder: str = "",
        prefix: str = "",
        default_url: Optional[str] = None,
    ) -> str:
        """
        Upload a new image and delete the old one.

        The old image is only removed after the upload succeeded, and never
        when it is the shared default image. Failing to delete it is not an error.
        """
        new_url = self.upload(new_file, folder=folder, prefix=prefix)
        if old_url and old_url != default_url:
            try:
                self.delete(old_url)
            except Exception as e:
                logger.warning(f"Could not delete replaced image {old_url}: {error_message(e)}")
        return new_url
