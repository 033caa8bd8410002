"""Turns a submitted multipart form into the arguments of a record manager."""

from typing import Dict, List, Mapping, NamedTuple, Optional, Tuple

from marshmallow import ValidationError
from werkzeug.datastructures import FileStorage, MultiDict

from investportal.schemas.fields import decode_json_fields
from .errors import ValidationFailure


class Submission(NamedTuple):
    """The parts of a form submission, ready to be handed to a record manager."""
    fields: dict
    uploads: Dict[str, List[FileStorage]]
    clears: Tuple[str, ...]


def _values(data: Mapping) -> dict:
    """Flatten a form, keeping lists only for keys that were sent several times."""
    if isinstance(data, MultiDict):
        flat = {}
        for key, values in data.lists():
            flat[key] = values if len(values) > 1 else values[0]
        return flat
    return dict(data)


def read_submission(schema, form: Mapping, files: Optional[Mapping] = None) -> Submission:
    """Split a form into record fields, uploads and the attachment fields to clear.

    Values the schema expects as JSON strings are decoded, and an attachment
    field submitted empty without an upload means the caller wants it cleared."""
    attachments = schema.Meta.model.__attachments__
    try:
        fields = decode_json_fields(_values(form), getattr(schema, 'json_fields', ()))
    except ValidationError as err:
        raise ValidationFailure(err.messages) from err

    uploads = {}
    if files is not None:
        for name in files.keys():
            sent = files.getlist(name) if isinstance(files, MultiDict) else files[name]
            if isinstance(sent, FileStorage):
                sent = [sent]
            sent = [file for file in sent if file]
            if sent:
                uploads[name] = sent

    clears = []
    for field in attachments:
        value = fields.get(field.name, ...)
        if value is None or (isinstance(value, str) and not value.strip()):
            del fields[field.name]
            if field.name not in uploads:
                clears.append(field.name)

    return Submission(fields, uploads, tuple(clears))
