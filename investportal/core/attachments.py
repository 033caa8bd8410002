"""Describes which record fields hold uploaded files and what they accept.

A record field may hold a single file reference, an ordered list of them,
or a list of objects each keeping one reference under a fixed key
(e.g. the photo of every industry leader)."""

import mimetypes
import os
import re
from typing import Iterator, List, Mapping, NamedTuple, Optional, Sequence

from PIL import Image
from werkzeug.datastructures import FileStorage

from .errors import FileTooLarge, UnsupportedFileType, ValidationFailure


MB = 1024 * 1024

IMAGE_TYPES = ('jpeg', 'jpg', 'png', 'gif', 'webp')
DOCUMENT_TYPES = ('pdf', 'doc', 'docx')

MIMETYPES = {
    'jpeg': 'image/jpeg',
    'jpg': 'image/jpeg',
    'png': 'image/png',
    'gif': 'image/gif',
    'webp': 'image/webp',
    'pdf': 'application/pdf',
    'doc': 'application/msword',
    'docx': 'application/vnd.openxmlformats-officedocument.wordprocessingml.document',
    'txt': 'text/plain',
}

# Every storage namespace is prepared once when the application starts.
CATEGORIES = (
    'companies',
    'startups',
    'districts',
    'industries',
    'members',
    'policies',
    'popups',
    'gallery',
)

EXTERNAL_URL = re.compile(r'^https?://.+', re.IGNORECASE)


class AttachmentRef(NamedTuple):
    """A file saved to storage on behalf of a record field."""
    path: str
    size: int
    extension: str


def get_mimetype(file: FileStorage) -> Optional[str]:
    """Return a MIME type of an uploaded file."""
    if file.mimetype and file.mimetype != 'application/octet-stream':
        return file.mimetype

    return mimetypes.guess_type(file.filename or '')[0]


def get_extension(filename: Optional[str]) -> str:
    """Return the lowercase extension of a file name, without the dot."""
    return os.path.splitext(filename or '')[1].lstrip('.').lower()


def measure(file: FileStorage) -> int:
    """Return the size of an uploaded file in bytes, leaving the stream rewound."""
    stream = file.stream
    stream.seek(0, os.SEEK_END)
    size = stream.tell()
    stream.seek(0)
    return size


def is_external(reference: str) -> bool:
    """Check whether the reference is an absolute HTTP(S) URL."""
    return bool(EXTERNAL_URL.match(reference))


class AttachmentField:
    """A record field that stores references to uploaded files."""

    def __init__(self, name: str, accepts: Sequence[str] = IMAGE_TYPES, max_size: int = 5 * MB,
                 many: bool = False, item_key: Optional[str] = None,
                 max_count: Optional[int] = None, size_field: Optional[str] = None):
        if many and item_key is not None:
            raise ValueError('A field with an item key is already a list.')
        unknown = set(accepts) - set(MIMETYPES)
        if unknown:
            raise ValueError(f'Unknown file types: {", ".join(sorted(unknown))}')

        self.name = name
        self.accepts = tuple(accepts)
        self.max_size = max_size
        self.many = many
        self.item_key = item_key
        self.size_field = size_field
        if max_count is None:
            max_count = 10 if self.is_list else 1
        self.max_count = max_count

    def __repr__(self):
        return f'<AttachmentField {self.name}>'

    @property
    def is_list(self) -> bool:
        """Whether the field holds several references."""
        return self.many or self.item_key is not None

    @property
    def images_only(self) -> bool:
        """Whether every accepted type is an image."""
        return all(MIMETYPES[ext].startswith('image/') for ext in self.accepts)

    def references(self, value) -> List[str]:
        """List the references held in a value of this field."""
        if not value:
            return []
        if self.item_key is not None:
            return [item[self.item_key] for item in value
                    if isinstance(item, Mapping) and item.get(self.item_key)]
        if self.many:
            return [reference for reference in value if reference]
        return [value]

    def cleared(self, value):
        """Return the value of this field with every reference removed."""
        if self.item_key is not None:
            return [dict(item, **{self.item_key: None}) for item in value or ()]
        if self.many:
            return []
        return None

    def attach(self, value, paths: Sequence[str]):
        """Return the value of this field once the given paths are stored in it.

        List fields get the paths appended, nested fields get path `i`
        placed into item `i`, and single fields are replaced."""
        if self.item_key is not None:
            items = [dict(item) for item in value or ()]
            for item, path in zip(items, paths):
                item[self.item_key] = path
            return items
        if self.many:
            return list(value or ()) + list(paths)
        return paths[-1]

    def check_count(self, files: Sequence[FileStorage], value=None):
        """Ensure the number of uploads fits the field (and its items, if nested)."""
        if len(files) > self.max_count:
            raise ValidationFailure(
                f'At most {self.max_count} file(s) can be uploaded for "{self.name}".'
            )
        if self.item_key is not None and len(files) > len(value or ()):
            raise ValidationFailure(
                f'"{self.name}" has fewer entries than the files uploaded for it.'
            )

    def check(self, file: FileStorage) -> int:
        """Ensure the file is acceptable for this field and return its size."""
        extension = get_extension(file.filename)
        mimetype = get_mimetype(file)
        allowed_mimetypes = {MIMETYPES[ext] for ext in self.accepts}
        if extension not in self.accepts or mimetype not in allowed_mimetypes:
            raise UnsupportedFileType(
                f'Only {", ".join(self.accepts)} files are allowed for "{self.name}".'
            )

        size = measure(file)
        if size > self.max_size:
            raise FileTooLarge(
                f'Files for "{self.name}" cannot exceed {self.max_size // MB}MB.'
            )

        if self.images_only:
            try:
                with Image.open(file.stream) as image:
                    image.verify()
            except (OSError, SyntaxError, ValueError):
                raise UnsupportedFileType(f'The file for "{self.name}" is not a valid image.')
            finally:
                file.stream.seek(0)

        return size


class Attachments:
    """The attachment fields of one record type and the category they are stored under."""

    def __init__(self, category: Optional[str] = None, *fields: AttachmentField):
        if fields and category not in CATEGORIES:
            raise ValueError(f'Unknown attachment category: {category}')
        self.category = category
        self.fields = {field.name: field for field in fields}

    def __iter__(self) -> Iterator[AttachmentField]:
        return iter(self.fields.values())

    def __contains__(self, name) -> bool:
        return name in self.fields

    def __getitem__(self, name) -> AttachmentField:
        return self.fields[name]

    def references(self, record) -> List[str]:
        """List every reference an existing record holds."""
        return [reference
                for field in self
                for reference in field.references(getattr(record, field.name, None))]

    def references_in(self, data: Mapping) -> List[str]:
        """List every reference present in submitted (not yet persisted) data."""
        return [reference
                for field in self if field.name in data
                for reference in field.references(data[field.name])]
