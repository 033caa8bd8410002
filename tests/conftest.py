'''Fixtures defined for all tests.'''

import os
import shutil
import tempfile
from typing import Generator

from flask import Flask
import pytest

from investportal.app import create_app
from investportal.core.attachments import CATEGORIES
from investportal.extensions import db


@pytest.fixture(scope='session')
def upload_root() -> Generator[str, None, None]:
    '''Create a directory to keep the uploaded files of the test session.'''
    path = tempfile.mkdtemp(prefix='investportal-test-')
    yield path
    shutil.rmtree(path, ignore_errors=True)


@pytest.fixture(scope='session')
def app(upload_root: str) -> Generator[Flask, None, None]:
    '''Create a Flask app with the test configuration.'''
    old_value = os.getenv('UPLOAD_ROOT')
    os.environ['UPLOAD_ROOT'] = upload_root
    os.environ.setdefault('DATABASE_URL', 'sqlite://')

    app = create_app(config='config/test.py')
    with app.app_context():
        yield app

    if old_value is None:
        del os.environ['UPLOAD_ROOT']
    else:
        os.environ['UPLOAD_ROOT'] = old_value


@pytest.fixture(autouse=True)
def clean_slate(app: Flask, upload_root: str):
    '''Empty every table and upload directory after each test.'''
    yield

    db.session.rollback()
    for table in reversed(db.metadata.sorted_tables):
        db.session.execute(table.delete())
    db.session.commit()
    db.session.remove()

    for category in CATEGORIES:
        directory = os.path.join(upload_root, category)
        for entry in os.listdir(directory):
            os.remove(os.path.join(directory, entry))


@pytest.fixture
def stored_files(upload_root: str):
    '''Return a function listing the files stored under a category.'''
    def list_files(category: str):
        return sorted(os.listdir(os.path.join(upload_root, category)))
    return list_files
