"""Provides a base interface for the file management modules to implement"""

import os
import random
import time
from abc import ABC, abstractmethod
from pathlib import PurePosixPath
from typing import Iterable, Iterator

from werkzeug.datastructures import FileStorage
from werkzeug.utils import secure_filename

from investportal.core.attachments import AttachmentRef, get_extension


def unique_handle(suggested_name: str) -> str:
    """Generate a file name from the suggested one that is practically unique.

    The stem is kept, and a millisecond timestamp with a random integer is appended."""
    stem, extension = os.path.splitext(secure_filename(suggested_name))
    suffix = f'{int(time.time() * 1000)}-{random.randint(0, 10**9)}'
    return f'{stem or "file"}-{suffix}{extension.lower()}'


class FileManagerBase(ABC):
    """Base abstract class as an interface for file managers.

    Stored files are addressed by references of the form
    `<public prefix>/<namespace>/<handle>`, which is also how they are served."""

    def __init__(self, base_path: str, public_prefix: str = '/uploads'):
        self.base_path = base_path
        self.public_prefix = '/' + public_prefix.strip('/')

    def reference(self, handle: str, namespace: str) -> str:
        """Build the public reference of a stored file."""
        return f'{self.public_prefix}/{namespace}/{handle}'

    def owns(self, reference: str) -> bool:
        """Check whether the reference points into this storage."""
        if not reference or not reference.startswith(self.public_prefix + '/'):
            return False
        parts = PurePosixPath(reference[len(self.public_prefix):]).parts
        return len(parts) == 3 and '..' not in parts

    def split(self, reference: str):
        """Return the (namespace, handle) pair of an owned reference."""
        if not self.owns(reference):
            raise ValueError(f'"{reference}" is not stored here.')
        _root, namespace, handle = PurePosixPath(reference[len(self.public_prefix):]).parts
        return namespace, handle

    def save(self, file: FileStorage, suggested_name: str, namespace: str) -> AttachmentRef:
        """Store the file under a fresh name in the namespace and return its reference."""
        handle = unique_handle(suggested_name)
        size = self.store(file, handle, namespace)
        return AttachmentRef(self.reference(handle, namespace), size, get_extension(handle))

    def prepare(self, namespaces: Iterable[str]):
        """Make sure the given namespaces can be written to."""

    def list(self, namespace: str) -> Iterator[str]:
        """Yield the references of every file stored in the namespace."""
        raise NotImplementedError(f'{type(self).__name__} cannot list its files.')

    @abstractmethod
    def store(self, file: FileStorage, handle: str, namespace: str) -> int:
        """Store the given file with the given name under the given namespace.
        Return the number of bytes written."""

    @abstractmethod
    def exists(self, reference: str) -> bool:
        """Check whether the file with the given reference is stored."""

    @abstractmethod
    def delete(self, reference: str):
        """Delete the file with the given reference. Deleting a missing file does nothing."""
