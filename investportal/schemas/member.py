"""Schema for the Member model."""

from marshmallow import EXCLUDE, post_load, validate

from investportal.extensions import ma
from investportal.models import Member
from .fields import FormDecoding, OptionalUrl


# pylint: disable=missing-docstring

class SocialSchema(ma.Schema):
    class Meta:
        ordered = True
        unknown = EXCLUDE

    email = ma.Email(allow_none=True)
    linkedin = OptionalUrl()

    @post_load
    def lowercase_email(self, data, **_kwargs):
        if data.get('email'):
            data['email'] = data['email'].strip().lower()
        return data


class MemberSchema(FormDecoding, ma.SQLAlchemyAutoSchema):
    class Meta:
        model = Member
        load_instance = True
        ordered = True
        unknown = EXCLUDE
        dump_only = ('id', 'created_at', 'updated_at')

    json_fields = ('social',)

    full_name = ma.Str(required=True, validate=validate.Length(min=1, max=128))
    social = ma.Nested(SocialSchema)
    profile_image = ma.Str(allow_none=True)
