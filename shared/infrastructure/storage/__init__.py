# Object storage
from .image_storage import ImageStorage, StorageError
from .s3_storage import S3ImageStorage

__all__ = ['ImageStorage', 'StorageError', 'S3ImageStorage']
