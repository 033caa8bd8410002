"""Module-level extension instances shared by models, managers and the app.

Models and record managers import them from here; create_app() binds them
to an application through init_app().
"""

from flask_marshmallow import Marshmallow
from flask_sqlalchemy import SQLAlchemy
from werkzeug.datastructures import FileStorage

from investportal.core.attachments import CATEGORIES, AttachmentRef
from investportal.core.file_manager import FileManagerBase, create_file_manager


class FileManager:
    """Holds the storage backend configured for the application.

    Initialization prepares the namespace of every attachment category once,
    so that nothing else has to create upload directories."""
    def __init__(self, app=None):
        self.backend = None

        if app is not None:
            self.init_app(app)

    def init_app(self, app):
        self.backend = create_file_manager(app.config)
        self.backend.prepare(CATEGORIES)
        app.extensions['file_manager'] = self.backend

    def _require_backend(self) -> FileManagerBase:
        if self.backend is None:
            raise RuntimeError('The file manager has not been initialized.')
        return self.backend

    def save(self, file: FileStorage, suggested_name: str, namespace: str) -> AttachmentRef:
        return self._require_backend().save(file, suggested_name, namespace)

    def delete(self, reference: str):
        self._require_backend().delete(reference)

    def exists(self, reference: str) -> bool:
        return self._require_backend().exists(reference)

    def owns(self, reference: str) -> bool:
        return self._require_backend().owns(reference)

    def list(self, namespace: str):
        return self._require_backend().list(namespace)


db = SQLAlchemy()

ma = Marshmallow()

file_manager = FileManager()
