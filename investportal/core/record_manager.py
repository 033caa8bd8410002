"""Keeps uploaded files and the records that reference them in step.

Files are written before the record write that references them, and removed
only after the record write or deletion that stops referencing them. If the
process dies in between, the worst outcome is a stored file nobody
references; a record never points at a file that has already been removed.

Files saved during an operation whose record write fails are removed before
the error is raised. Failures to remove files are logged and otherwise ignored.
"""

import logging
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Union

from werkzeug.datastructures import FileStorage

from investportal.extensions import file_manager
from .attachments import AttachmentField, AttachmentRef, get_extension, is_external
from .errors import BlobDeleteFailure, NotFound, ValidationFailure
from .record_store import RecordStore

log = logging.getLogger(__name__)

Uploads = Mapping[str, Union[FileStorage, Sequence[FileStorage]]]


def is_blank(value) -> bool:
    """Check whether a submitted value should count as missing."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, tuple, dict)):
        return not value
    return False


class RecordManager:
    """Create, update and delete the records of a model along with their attachments.

    The model lists its attachment fields in `__attachments__` and the fields
    that have to be submitted on creation in `__required__`."""

    def __init__(self, model, schema=None, store=None, files=None):
        if store is None:
            if schema is None:
                raise ValueError('Either a schema or a record store is required.')
            store = RecordStore(model, schema)

        self.model = model
        self.attachments = model.__attachments__
        self.required = tuple(getattr(model, '__required__', ()))
        self.store = store
        self.files = files if files is not None else file_manager

    def __repr__(self):
        return f'<RecordManager {self.model.__name__}>'

    @property
    def name(self) -> str:
        return self.model.__name__

    # Reading

    def get(self, record_id):
        """Return the record with the given ID or raise NotFound."""
        record = self.store.find_by_id(record_id)
        if record is None:
            raise NotFound(f'{self.name} {record_id} not found.')
        return record

    def find(self, search: Optional[str] = None, **equals) -> list:
        """List the records matching the given values and search string."""
        return self.store.find(search=search, **equals)

    # Writing

    def create(self, data: Mapping, uploads: Optional[Uploads] = None):
        """Save the uploaded files, then insert a record referencing them."""
        data = dict(data)
        uploads = self._collect(uploads)

        missing = [name for name in self.required
                   if is_blank(data.get(name)) and name not in uploads]
        if missing:
            raise ValidationFailure({name: ['Missing data for required field.']
                                     for name in missing})

        self._check_references(data)
        self._check_uploads(uploads, data)

        saved = []
        try:
            stored = self._save_uploads(uploads, saved)
            data.update(self._attach(stored, data, None))
            record = self.store.create(data)
        except Exception:
            self._roll_back(saved)
            raise

        log.info(f'Created {self.name} {record.id} with {len(saved)} file(s)')
        return record

    def update(self, record_id, data: Mapping, uploads: Optional[Uploads] = None,
               clears: Iterable[str] = ()):
        """Save the uploaded files, update the record, then remove the files it no longer holds.

        `clears` names attachment fields to empty even though nothing
        was uploaded for them. List fields get new uploads appended,
        unless `data` carries a full replacement list for them.

        New files are merged into the record as the store holds it at
        write time, so an update that finished in the meantime is built
        upon rather than undone. Two updates of the same record are not
        serialized otherwise: the last write wins."""
        uploads = self._collect(uploads)
        clears = set(clears)
        unknown = clears - set(self.attachments.fields)
        if unknown:
            raise ValidationFailure(f'Cannot clear {", ".join(sorted(unknown))}: not file fields.')

        record = self.get(record_id)
        data = dict(data)
        self._check_references(data, owned=self._owned(self.attachments.references(record)))
        self._check_uploads(uploads, data, record)

        saved = []
        stored = {}
        previous = set()

        def merge(latest):
            """Compute the file fields from the record right before it is written."""
            previous.update(self._owned(self.attachments.references(latest)))
            self._check_references(data, owned=previous)
            values = {}
            for name in clears - set(uploads):
                field = self.attachments[name]
                values[name] = field.cleared(self._current(field, data, latest))
            for name, references in stored.items():
                field = self.attachments[name]
                field.check_count(references, self._current(field, data, latest))
            values.update(self._attach(stored, data, latest))
            return values

        try:
            stored.update(self._save_uploads(uploads, saved))
            updated = self.store.update(record_id, data, merge)
            if updated is None:
                raise NotFound(f'{self.name} {record_id} not found.')
        except Exception:
            self._roll_back(saved)
            raise

        released = previous - set(self.attachments.references(updated))
        self._discard(released)
        log.info(f'Updated {self.name} {record_id}: '
                 f'{len(saved)} file(s) saved, {len(released)} released')
        return updated

    def delete(self, record_id):
        """Delete the record, then every file it referenced."""
        record = self.get(record_id)
        owned = self._owned(self.attachments.references(record))

        if not self.store.delete(record_id):
            raise NotFound(f'{self.name} {record_id} not found.')

        self._discard(owned)
        log.info(f'Deleted {self.name} {record_id} and {len(owned)} file(s)')

    # Helpers

    def _owned(self, references: Iterable[str]) -> List[str]:
        """Keep the references that point into the file storage."""
        return [reference for reference in references if self.files.owns(reference)]

    def _collect(self, uploads: Optional[Uploads]) -> Dict[str, List[FileStorage]]:
        """Normalize the uploads into lists of non-empty files per field."""
        collected = {}
        for name, files in (uploads or {}).items():
            if name not in self.attachments:
                raise ValidationFailure(f'"{name}" does not accept files.')
            if isinstance(files, FileStorage):
                files = [files]
            files = [file for file in files if file]
            if files:
                collected[name] = files
        return collected

    @staticmethod
    def _current(field: AttachmentField, data: Mapping, record):
        """Return the value a field is about to be based on."""
        if field.name in data:
            return data[field.name]
        return getattr(record, field.name, None) if record is not None else None

    def _check_references(self, data: Mapping, owned: Iterable[str] = ()):
        """Ensure submitted references are external URLs or files the record already holds."""
        for name in self.attachments.fields:
            field = self.attachments[name]
            if field.item_key is not None and name in data and data[name] is not None \
                    and not isinstance(data[name], list):
                raise ValidationFailure(f'"{name}" must be a list of objects.')

        owned = set(owned)
        for reference in self.attachments.references_in(data):
            if not isinstance(reference, str):
                raise ValidationFailure('File references must be strings.')
            if self.files.owns(reference):
                if reference not in owned:
                    raise ValidationFailure(f'"{reference}" does not belong to this {self.name}.')
            elif not is_external(reference):
                raise ValidationFailure(
                    f'"{reference}" is neither an uploaded file nor an HTTP(S) URL.'
                )

    def _check_uploads(self, uploads: Mapping[str, List[FileStorage]], data: Mapping,
                       record=None):
        """Run every upload through the filter of its field before anything is written."""
        for name, files in uploads.items():
            field = self.attachments[name]
            field.check_count(files, self._current(field, data, record))
            for file in files:
                field.check(file)

    def _save_uploads(self, uploads: Mapping[str, List[FileStorage]],
                      saved: List[str]) -> Dict[str, List[AttachmentRef]]:
        """Store the uploads and return their references per field.

        Every stored reference is appended to `saved` as soon as it exists,
        so the caller can remove them if anything fails later."""
        stored = {}
        for name, files in uploads.items():
            field = self.attachments[name]
            stored[name] = []
            for file in files:
                reference = self.files.save(file,
                                            f'{field.name}.{get_extension(file.filename)}',
                                            self.attachments.category)
                saved.append(reference.path)
                stored[name].append(reference)
        return stored

    def _attach(self, stored: Mapping[str, List[AttachmentRef]], data: Mapping,
                record) -> dict:
        """Return the values of the fields that receive the stored files."""
        values = {}
        for name, references in stored.items():
            field = self.attachments[name]
            values[name] = field.attach(self._current(field, data, record),
                                        [reference.path for reference in references])
            if field.size_field is not None:
                values[field.size_field] = references[-1].size
        return values

    def _roll_back(self, saved: List[str]):
        if saved:
            log.exception(f'{self.name} was not written, removing {len(saved)} new file(s)')
        self._discard(saved)

    def _discard(self, references: Iterable[str]):
        """Remove files on a best-effort basis. A file that stays behind is only logged."""
        for reference in references:
            try:
                self.files.delete(reference)
            except BlobDeleteFailure as err:
                log.warning(f'{err.message} The file is left orphaned.')
