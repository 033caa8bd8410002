"""Application configuration for local development."""

from investportal.config.common import *


USE_MIGRATIONS = False
LOG_FILE = './investportal-dev.log'
