"""Schema for the Announcement model."""

from marshmallow import EXCLUDE, validate
from marshmallow_enum import EnumField

from investportal.extensions import ma
from investportal.models import Announcement, AnimationSpeed
from .fields import HEX_COLOR, OptionalUrl


# pylint: disable=missing-docstring

class AnnouncementSchema(ma.SQLAlchemyAutoSchema):
    class Meta:
        model = Announcement
        load_instance = True
        ordered = True
        unknown = EXCLUDE
        dump_only = ('id', 'created_at', 'updated_at')

    title = ma.Str(required=True, validate=validate.Length(min=1, max=100))
    content = ma.Str(required=True, validate=validate.Length(min=1, max=500))
    url = OptionalUrl()
    background_color = ma.Str(validate=HEX_COLOR)
    text_color = ma.Str(validate=HEX_COLOR)
    animation_speed = EnumField(AnimationSpeed, by_value=True)
    order = ma.Int(validate=validate.Range(min=0))
