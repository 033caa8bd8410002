"""Schema for the ContactForm model."""

import re

from marshmallow import EXCLUDE, pre_load, validate

from investportal.extensions import ma
from investportal.models import ContactForm


MARKUP_CHARACTERS = re.compile(r'[<>"\']')
NOT_PHONE_CHARACTERS = re.compile(r'[^\d+\-\s()]')


# pylint: disable=missing-docstring

class ContactFormSchema(ma.SQLAlchemyAutoSchema):
    class Meta:
        model = ContactForm
        load_instance = True
        ordered = True
        unknown = EXCLUDE
        dump_only = ('id', 'created_at')

    full_name = ma.Str(required=True, validate=validate.Length(min=1, max=128))
    email = ma.Email(required=True)
    phone = ma.Str(allow_none=True, validate=validate.Length(max=32))
    message = ma.Str(required=True,
                     validate=validate.Length(min=10),
                     error_messages={'validator_failed': 'The message is too short.'})

    @pre_load
    def sanitize(self, data, **_kwargs):
        """Strip markup characters from the text and normalize the contacts."""
        data = dict(data)
        for key in ('full_name', 'message'):
            if isinstance(data.get(key), str):
                data[key] = MARKUP_CHARACTERS.sub('', data[key]).strip()
        if isinstance(data.get('email'), str):
            data['email'] = data['email'].strip().lower()
        if isinstance(data.get('phone'), str):
            data['phone'] = NOT_PHONE_CHARACTERS.sub('', data['phone']).strip()
        return data
