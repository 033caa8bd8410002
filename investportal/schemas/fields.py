"""Fields, validators and hooks shared by the record schemas."""

import json
from datetime import date
from typing import Iterable, Mapping

from marshmallow import ValidationError, fields, pre_load, validate

from investportal.core.timezone import CLOCK_TIME


HEX_COLOR = validate.Regexp(r'^#[0-9A-Fa-f]{6}$',
                            error='Colors must be hex codes, e.g. #ffffff.')

CLOCK = validate.Regexp(CLOCK_TIME, error='Times must be in the HH:MM format.')


def iso_date(value):
    """Ensure the string is a date in the YYYY-MM-DD format."""
    try:
        date.fromisoformat(value)
    except (TypeError, ValueError):
        raise ValidationError('Dates must be in the YYYY-MM-DD format.')


def decode_json_fields(data, names: Iterable[str]):
    """Decode the given values of submitted data that came as JSON strings.

    Multipart forms cannot carry nested objects, so they are sent encoded."""
    if not isinstance(data, Mapping):
        return data

    decoded = dict(data)
    for name in names:
        value = decoded.get(name)
        if not isinstance(value, str):
            continue
        if not value.strip():
            decoded[name] = None
            continue
        try:
            decoded[name] = json.loads(value)
        except ValueError:
            raise ValidationError('Not a valid JSON value.', field_name=name)
    return decoded


class OptionalUrl(fields.Url):
    """An HTTP(S) URL that may be left blank."""

    def __init__(self, **kwargs):
        kwargs.setdefault('allow_none', True)
        kwargs.setdefault('schemes', {'http', 'https'})
        super().__init__(**kwargs)

    def deserialize(self, value, attr=None, data=None, **kwargs):
        if isinstance(value, str) and not value.strip():
            value = None
        return super().deserialize(value, attr, data, **kwargs)


class FormDecoding:
    """Lets a schema accept the fields listed in `json_fields` as JSON strings."""
    json_fields = ()

    @pre_load
    def decode_json_strings(self, data, **_kwargs):
        return decode_json_fields(data, self.json_fields)
