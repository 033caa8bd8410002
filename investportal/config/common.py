"""The base application configuration."""

import os


SQLALCHEMY_DATABASE_URI = os.environ['DATABASE_URL']
SQLALCHEMY_TRACK_MODIFICATIONS = False
MAX_CONTENT_LENGTH = 64 * 1024 * 1024

UPLOAD_ROOT = os.getenv('UPLOAD_ROOT', './uploads')
UPLOAD_URL_PREFIX = '/uploads'

USE_S3 = os.getenv('USE_S3', '').lower() in ('1', 'true', 'yes')
S3_BUCKET_URL = os.getenv('S3_BUCKET_URL', 'http://investportal.s3.amazonaws.com')

USE_MIGRATIONS = True
LOG_FILE = os.getenv('LOG_FILE', './investportal.log')
