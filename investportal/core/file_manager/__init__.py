"""File manager module."""

from .base import FileManagerBase, unique_handle
from .local import FileManagerLocal
from .s3 import FileManagerS3


def create_file_manager(config) -> FileManagerBase:
    """Build the file manager selected by the application config."""
    if config.get('USE_S3'):
        return FileManagerS3(config['S3_BUCKET_URL'], config['UPLOAD_URL_PREFIX'])
    return FileManagerLocal(config['UPLOAD_ROOT'], config['UPLOAD_URL_PREFIX'])
