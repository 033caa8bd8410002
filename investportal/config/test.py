"""Application configuration for the test suite.

Runs against an in-memory SQLite database unless DATABASE_URL says otherwise."""

import os
import tempfile

os.environ.setdefault('DATABASE_URL', 'sqlite://')

from investportal.config.common import *  # pylint: disable=wrong-import-position


TESTING = True
USE_MIGRATIONS = False
UPLOAD_ROOT = os.environ.get('UPLOAD_ROOT') or tempfile.mkdtemp(prefix='investportal-')
LOG_FILE = os.path.join(tempfile.gettempdir(), 'investportal-test.log')
