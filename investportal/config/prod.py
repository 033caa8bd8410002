"""Application configuration for production."""

import os

from investportal.config.common import *


UPLOAD_ROOT = os.environ.get('UPLOAD_ROOT', '/var/lib/investportal/uploads')
