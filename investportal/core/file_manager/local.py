"""Manages uploaded files. This particular module uses local file system to store files."""

import os
from typing import Iterable, Iterator

from werkzeug.datastructures import FileStorage

from investportal.core.errors import BlobDeleteFailure, BlobWriteFailure
from .base import FileManagerBase


class FileManagerLocal(FileManagerBase):
    """Implementation of the file manager using local file system."""
    def __init__(self, base_path='./uploads', public_prefix='/uploads'):
        super().__init__(base_path, public_prefix)
        if not os.path.exists(base_path):
            os.makedirs(base_path)

    def _join_base(self, *paths: str) -> str:
        """Helper function to join path to base and normalize it according to OS."""
        return os.path.normpath(os.path.join(self.base_path, *paths))

    def _locate(self, reference: str) -> str:
        """Return the path on disk for the given reference."""
        return self._join_base(*self.split(reference))

    def prepare(self, namespaces: Iterable[str]):
        """Create the directory of every namespace."""
        for namespace in namespaces:
            os.makedirs(self._join_base(namespace), exist_ok=True)

    def list(self, namespace: str) -> Iterator[str]:
        """Yield the references of the files in the namespace directory."""
        directory = self._join_base(namespace)
        if not os.path.isdir(directory):
            return
        for entry in sorted(os.listdir(directory)):
            if os.path.isfile(os.path.join(directory, entry)):
                yield self.reference(entry, namespace)

    def store(self, file: FileStorage, handle: str, namespace: str) -> int:
        """Write the given file with the handle into the namespace directory."""
        filename = self._join_base(namespace, handle)
        file.stream.seek(0)
        try:
            file.save(filename)
        except OSError as err:
            if os.path.exists(filename):
                os.remove(filename)
            raise BlobWriteFailure(f'Could not store "{handle}".') from err
        return os.path.getsize(filename)

    def exists(self, reference: str) -> bool:
        """Check whether the referenced file is on disk."""
        return self.owns(reference) and os.path.isfile(self._locate(reference))

    def delete(self, reference: str):
        """Delete the file with a given reference, if it is still there."""
        filename = self._locate(reference)
        try:
            os.remove(filename)
        except FileNotFoundError:
            return
        except OSError as err:
            raise BlobDeleteFailure(f'Could not delete "{reference}".') from err
