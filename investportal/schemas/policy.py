"""Schema for the Policy model."""

from marshmallow import EXCLUDE, validate
from marshmallow_enum import EnumField

from investportal.extensions import ma
from investportal.models import Policy, PolicyCategory, PolicyStatus
from .fields import FormDecoding


# pylint: disable=missing-docstring

class PolicySchema(FormDecoding, ma.SQLAlchemyAutoSchema):
    class Meta:
        model = Policy
        load_instance = True
        ordered = True
        unknown = EXCLUDE
        dump_only = ('id', 'created_at', 'updated_at')

    json_fields = ('tags',)

    title = ma.Str(required=True, validate=validate.Length(min=1, max=256))
    category = EnumField(PolicyCategory, by_value=True, required=True)
    status = EnumField(PolicyStatus, by_value=True)
    tags = ma.List(ma.Str())
    file_size = ma.Int(required=True, validate=validate.Range(min=0))
    file_url = ma.Str(required=True)
