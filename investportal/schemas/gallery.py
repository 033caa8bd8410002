"""Schema for the GalleryItem model."""

from marshmallow import EXCLUDE, validate

from investportal.extensions import ma
from investportal.models import GalleryItem


# pylint: disable=missing-docstring

class GalleryItemSchema(ma.SQLAlchemyAutoSchema):
    class Meta:
        model = GalleryItem
        load_instance = True
        ordered = True
        unknown = EXCLUDE
        dump_only = ('id', 'created_at', 'updated_at')

    title = ma.Str(required=True, validate=validate.Length(min=1, max=100))
    description = ma.Str(allow_none=True, validate=validate.Length(max=500))
    image_url = ma.Str(required=True)
    alt_text = ma.Str(allow_none=True, validate=validate.Length(max=200))
    category = ma.Str(allow_none=True, validate=validate.Length(max=50))
    order = ma.Int(validate=validate.Range(min=0))
