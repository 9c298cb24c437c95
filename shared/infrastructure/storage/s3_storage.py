"""
S3 storage implementation.
"""
import logging
import random
import re
import string
import time
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Dict, List, Optional, Sequence
from urllib.parse import urlparse

import boto3
from botocore.exceptions import BotoCoreError, ClientError
from django.conf import settings

from .image_storage import ImageStorage, StorageError

logger = logging.getLogger(__name__)


def generate_file_name(original_name: str, prefix: str = "") -> str:
    """Build a unique object name that keeps a sanitized copy of the original name."""
    timestamp = int(time.time() * 1000)
    random_part = ''.join(random.choices(string.ascii_lowercase + string.digits, k=6))
    clean_name = re.sub(r'[^a-zA-Z0-9.-]', '_', original_name or 'upload')
    if prefix:
        return f"{prefix}_{timestamp}_{random_part}_{clean_name}"
    return f"{timestamp}_{random_part}_{clean_name}"


class S3ImageStorage(ImageStorage):
    """S3 storage wrapper for public images."""

    def __init__(self, client=None, bucket: Optional[str] = None):
        self.client = client or boto3.client(
            's3',
            endpoint_url=settings.AWS_S3_ENDPOINT_URL,
            aws_access_key_id=settings.AWS_ACCESS_KEY_ID,
            aws_secret_access_key=settings.AWS_SECRET_ACCESS_KEY,
            region_name=settings.AWS_S3_REGION_NAME,
        )
        self.bucket = bucket or settings.AWS_STORAGE_BUCKET_NAME

    def upload(self, file_obj, folder: str = "", prefix: str = "") -> str:
        """Upload a file to S3 and return the URL."""
        try:
            url = self._put(file_obj, folder, prefix)
        except (BotoCoreError, ClientError) as e:
            logger.error(f"Error uploading image {getattr(file_obj, 'name', '')}: {e}")
            raise StorageError(f"Error uploading image: {e}") from e
        logger.info(f"Image uploaded: {url}")
        return url

    def upload_many(self, files: Sequence[Any], folder: str = "", prefix: str = "") -> List[str]:
        """Upload files in parallel. Any failed upload fails the whole batch."""
        if not files:
            return []
        logger.debug(f"Uploading {len(files)} images to '{folder}' with prefix '{prefix}'")
        try:
            with ThreadPoolExecutor(max_workers=len(files)) as executor:
                urls = list(executor.map(lambda f: self._put(f, folder, prefix), files))
        except (BotoCoreError, ClientError) as e:
            logger.error(f"Error uploading {len(files)} images: {e}")
            raise StorageError(f"Error uploading images: {e}") from e
        logger.info(f"Uploaded {len(urls)} images")
        return urls

    def delete(self, url: str) -> bool:
        """Delete a file from S3."""
        if not url:
            raise StorageError("Error deleting image: No image URL provided")
        key = self.extract_key(url)
        try:
            self.client.delete_object(Bucket=self.bucket, Key=key)
        except (BotoCoreError, ClientError) as e:
            logger.error(f"Error deleting image {url}: {e}")
            raise StorageError(f"Error deleting image: {e}") from e
        logger.info(f"Image deleted: {key}")
        return True

    def delete_many(self, urls: Sequence[str]) -> Dict[str, Any]:
        """Delete several files with a single batch request."""
        keys = [self.extract_key(url) for url in urls or [] if url]
        if not keys:
            raise StorageError("Error deleting multiple images: No image URLs provided")
        try:
            response = self.client.delete_objects(
                Bucket=self.bucket,
                Delete={'Objects': [{'Key': key} for key in keys], 'Quiet': False},
            )
        except (BotoCoreError, ClientError) as e:
            logger.error(f"Error deleting {len(keys)} images: {e}")
            raise StorageError(f"Error deleting multiple images: {e}") from e

        deleted_paths = [item['Key'] for item in response.get('Deleted', [])]
        result = {
            'success': len(deleted_paths),
            'failed': len(keys) - len(deleted_paths),
            'deleted_paths': deleted_paths,
        }
        logger.info(f"Deleted {result['success']} of {len(keys)} images")
        return result

    def get_url(self, key: str) -> str:
        """Get the URL for a file."""
        return f"{settings.AWS_S3_ENDPOINT_URL}/{self.bucket}/{key}"

    def extract_key(self, url: str) -> str:
        """Recover the object key from a public URL."""
        base = self.get_url('')
        if url.startswith(base):
            return url[len(base):]
        path = urlparse(url).path.lstrip('/')
        bucket_prefix = f"{self.bucket}/"
        if path.startswith(bucket_prefix):
            return path[len(bucket_prefix):]
        return path

    def check_bucket(self) -> None:
        """Make sure the bucket exists and is reachable with the configured credentials."""
        try:
            self.client.head_bucket(Bucket=self.bucket)
        except (BotoCoreError, ClientError) as e:
            logger.error(f"Bucket {self.bucket} is not reachable: {e}")
            raise StorageError(f"Bucket {self.bucket} is not reachable: {e}") from e

    def _put(self, file_obj, folder: str, prefix: str) -> str:
        filename = generate_file_name(getattr(file_obj, 'name', ''), prefix)
        key = f"{folder}/{filename}" if folder else filename

        extra_args = {}
        content_type = getattr(file_obj, 'content_type', None)
        if content_type:
            extra_args['ContentType'] = content_type

        self.client.upload_fileobj(
            file_obj,
            self.bucket,
            key,
            ExtraArgs=extra_args,
        )
        return self.get_url(key)
