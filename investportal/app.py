"""Flask application factory."""

import time
from importlib import import_module
import logging
import logging.config

from flask import Flask
from flask_migrate import Migrate, upgrade
import psycopg2
import sqlalchemy.exc

from investportal.cli import prune_uploads
from investportal.extensions import db, ma, file_manager

log = logging.getLogger(__name__)


def create_app(config='config/prod.py'):
    """Create Flask application with given configuration"""
    app = Flask(__name__, static_folder=None)
    app.config.from_pyfile(config)

    # Import DB models. Flask-SQLAlchemy doesn't do this automatically.
    with app.app_context():
        import_module('investportal.models')

    # Initialize extensions/add-ons/plugins.
    db.init_app(app)
    Migrate(app, db)
    for _ in range(3):
        try:
            with app.app_context():
                with db.engine.connect():
                    pass
            break
        except (RuntimeError, psycopg2.OperationalError, sqlalchemy.exc.OperationalError) as err:
            log.exception(f'Couldn\'t connect to DB. Error: {err.with_traceback(None)}. retrying..')
            time.sleep(5)
    else:
        raise Exception('Database unreachable')

    with app.app_context():
        if app.config['USE_MIGRATIONS']:
            upgrade()
        else:
            db.create_all()

    logging.config.dictConfig({
        'version': 1,
        'formatters': {
            'default': {
                'datefmt': '%d/%m %H:%M:%S',
                'format': '[%(asctime)s] [%(levelname)8s] %(message)s (%(name)s:%(lineno)s)',
            }
        },
        'handlers': {
            'stderr': {
                'class': 'logging.StreamHandler',
                'formatter': 'default',
                'level': 'DEBUG',
            },
            'logfile': {
                'class': 'logging.handlers.TimedRotatingFileHandler',
                'filename': app.config['LOG_FILE'],
                'formatter': 'default',
                'when': 'W0',  # will start a new file each Monday
                'backupCount': 5,
                'level': 'ERROR',
            }
        },
        'loggers': {
            'werkzeug': {
                'handlers': ['stderr'],
                'propagate': False,
            }
        },
        'root': {
            'level': 'DEBUG',
            'handlers': ['stderr', 'logfile']
        },
        'disable_existing_loggers': False,
    })

    ma.init_app(app)
    # Prepares the directory of every attachment category, once per process.
    file_manager.init_app(app)

    app.cli.add_command(prune_uploads)
    return app


def bootstrap_debug():
    '''Create a development-configured application and push its context.
       Helpful for trying the record managers in the REPL.

       Launch IPython and run the following lines:
       ```python
       from investportal.app import bootstrap_debug
       bootstrap_debug()
       from investportal.records import *
       ```
    '''
    app = create_app('config/dev.py')
    app.app_context().push()
