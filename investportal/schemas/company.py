"""Schema for the Company model."""

from marshmallow import EXCLUDE, validate

from investportal.extensions import ma
from investportal.models import Company
from .fields import OptionalUrl


# pylint: disable=missing-docstring

class CompanySchema(ma.SQLAlchemyAutoSchema):
    class Meta:
        model = Company
        load_instance = True
        ordered = True
        unknown = EXCLUDE
        dump_only = ('id', 'created_at', 'updated_at')

    company_name = ma.Str(required=True, validate=validate.Length(min=1, max=256))
    director_ceo = ma.Str(required=True, validate=validate.Length(min=1, max=128))
    email = ma.Email(required=True)
    website = OptionalUrl()
    logo = ma.Str(allow_none=True)
    banner = ma.Str(allow_none=True)
