"""Manages uploaded files. This particular module uses the AWS S3 to store files."""

import requests
from werkzeug.datastructures import FileStorage

from investportal.core.attachments import measure
from investportal.core.errors import BlobDeleteFailure, BlobWriteFailure
from .base import FileManagerBase

TIMEOUT = 30


class FileManagerS3(FileManagerBase):
    """Implementation of file manager using Amazon S3."""
    def __init__(self, base_path='http://investportal.s3.amazonaws.com', public_prefix='/uploads'):
        super().__init__(base_path.rstrip('/'), public_prefix)

    def _url(self, reference: str) -> str:
        namespace, handle = self.split(reference)
        return f'{self.base_path}/{namespace}/{handle}'

    def store(self, file: FileStorage, handle: str, namespace: str) -> int:
        """Upload the given file with the handle to the namespace directory
        of the AWS S3 bucket."""
        size = measure(file)
        try:
            response = requests.post(self.base_path,
                                     data={'key': f'{namespace}/{handle}'},
                                     files={'file': file.stream},
                                     timeout=TIMEOUT)
            response.raise_for_status()
        except requests.exceptions.RequestException as err:
            raise BlobWriteFailure(f'Could not upload "{handle}".') from err
        return size

    def exists(self, reference: str) -> bool:
        """Check whether the object is present in the bucket."""
        if not self.owns(reference):
            return False
        response = requests.head(self._url(reference), timeout=TIMEOUT)
        return response.status_code == 200

    def delete(self, reference: str):
        """Delete the object with a given reference from the AWS S3 bucket."""
        try:
            response = requests.delete(self._url(reference), timeout=TIMEOUT)
            if response.status_code == 404:
                return
            response.raise_for_status()
        except requests.exceptions.RequestException as err:
            raise BlobDeleteFailure(f'Could not delete "{reference}".') from err
