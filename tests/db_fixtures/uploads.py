'''Fixtures producing uploaded files the way a multipart request delivers them.'''

from io import BytesIO

import pytest
from faker import Faker
from PIL import Image
from werkzeug.datastructures import FileStorage

MB = 1024 * 1024


def image_bytes(image_format: str = 'PNG', size=(16, 16), color='teal') -> bytes:
    '''Render a small solid image.'''
    buffer = BytesIO()
    Image.new('RGB', size, color).save(buffer, format=image_format)
    return buffer.getvalue()


def upload(content: bytes, filename: str, content_type: str) -> FileStorage:
    '''Wrap raw bytes into an uploaded file.'''
    return FileStorage(stream=BytesIO(content), filename=filename, content_type=content_type)


@pytest.fixture
def make_image(faker: Faker):
    '''Return a factory of uploaded images.

    `padding` appends that many bytes to the image data, to hit size limits.'''
    def factory(extension: str = 'png', padding: int = 0, filename: str = None) -> FileStorage:
        image_format, content_type = {
            'png': ('PNG', 'image/png'),
            'jpg': ('JPEG', 'image/jpeg'),
            'jpeg': ('JPEG', 'image/jpeg'),
            'gif': ('GIF', 'image/gif'),
        }[extension]
        content = image_bytes(image_format) + b'\0' * padding
        return upload(content, filename or f'{faker.word()}.{extension}', content_type)
    return factory


@pytest.fixture
def make_document(faker: Faker):
    '''Return a factory of uploaded documents.'''
    def factory(extension: str = 'pdf', size: int = 1024, filename: str = None) -> FileStorage:
        content_type = {
            'pdf': 'application/pdf',
            'doc': 'application/msword',
            'docx': 'application/vnd.openxmlformats-officedocument.wordprocessingml.document',
            'txt': 'text/plain',
        }[extension]
        content = b'%PDF-1.4\n' + faker.binary(length=size)
        return upload(content, filename or f'{faker.word()}.{extension}', content_type)
    return factory
