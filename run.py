"""The entry point of the `flask` command line.

Run management commands with `flask --app run prune-uploads`."""

import os

from investportal.app import create_app


if os.environ.get('FLASK_ENV') == 'development':
    config = 'config/dev.py'
else:
    config = 'config/prod.py'
app = create_app(config)
