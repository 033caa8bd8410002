"""Schema for the District model."""

from marshmallow import EXCLUDE, validate
from marshmallow_enum import EnumField

from investportal.core.reference_data import STATES
from investportal.extensions import ma
from investportal.models import District, RailConnectivity
from .fields import FormDecoding, OptionalUrl


# pylint: disable=missing-docstring

class PresenceSchema(ma.Schema):
    class Meta:
        ordered = True

    presence = ma.Bool(load_default=False)
    details = ma.Str(load_default='')


class FacilitySchema(ma.Schema):
    class Meta:
        ordered = True

    available = ma.Bool(load_default=False)
    details = ma.Str(load_default='')


class DistrictSchema(FormDecoding, ma.SQLAlchemyAutoSchema):
    class Meta:
        model = District
        load_instance = True
        ordered = True
        unknown = EXCLUDE
        dump_only = ('id', 'created_at', 'updated_at')

    json_fields = ('primary_languages', 'major_industries', 'midc_sez_presence',
                   'airport_availability', 'awards_photos')

    district_name = ma.Str(required=True, validate=validate.Length(min=1, max=128))
    state = ma.Str(allow_none=True, validate=validate.OneOf(STATES))
    population = ma.Int(allow_none=True, validate=validate.Range(min=0))
    area_size = ma.Float(allow_none=True, validate=validate.Range(min=0))
    literacy_rate = ma.Float(allow_none=True, validate=validate.Range(min=0, max=100))
    contact_email = ma.Email(allow_none=True)
    website_url = OptionalUrl()
    primary_languages = ma.List(ma.Str())
    major_industries = ma.List(ma.Str())
    midc_sez_presence = ma.Nested(PresenceSchema)
    airport_availability = ma.Nested(FacilitySchema)
    rail_connectivity = EnumField(RailConnectivity, by_value=True)
    awards_photos = ma.List(ma.Str())
