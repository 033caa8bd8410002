"""Schemas for the Industry model and the sections of an industry page."""

from marshmallow import EXCLUDE, validate
from marshmallow_enum import EnumField

from investportal.extensions import ma
from investportal.models import Industry, IndustryStatus
from .fields import FormDecoding, OptionalUrl, iso_date


# pylint: disable=missing-docstring

class LeaderSchema(ma.Schema):
    class Meta:
        ordered = True
        unknown = EXCLUDE

    role = ma.Str(allow_none=True, validate=validate.OneOf(('Chair', 'Co-Chair')))
    name = ma.Str(allow_none=True)
    designation = ma.Str(allow_none=True)
    photo = ma.Str(allow_none=True)


class PressReleaseSchema(ma.Schema):
    class Meta:
        ordered = True
        unknown = EXCLUDE

    title = ma.Str(allow_none=True)
    news_article_link = OptionalUrl()
    pdf = ma.Str(allow_none=True)
    date = ma.Str(allow_none=True, validate=iso_date)


class MediaCoverageSchema(ma.Schema):
    class Meta:
        ordered = True
        unknown = EXCLUDE

    title = ma.Str(allow_none=True)
    image = ma.Str(allow_none=True)
    source_link = OptionalUrl()


class GovernmentPaperSchema(ma.Schema):
    class Meta:
        ordered = True
        unknown = EXCLUDE

    title = ma.Str(allow_none=True)
    pdf_or_document = ma.Str(allow_none=True)
    description = ma.Str(allow_none=True)


class IndustrySchema(FormDecoding, ma.SQLAlchemyAutoSchema):
    class Meta:
        model = Industry
        load_instance = True
        ordered = True
        unknown = EXCLUDE
        dump_only = ('id', 'created_at', 'updated_at')

    json_fields = ('leadership', 'press_releases', 'media_coverage',
                   'government_papers', 'gallery')

    name = ma.Str(required=True, validate=validate.Length(min=1, max=128))
    status = EnumField(IndustryStatus, by_value=True)
    leadership = ma.Nested(LeaderSchema, many=True)
    press_releases = ma.Nested(PressReleaseSchema, many=True)
    media_coverage = ma.Nested(MediaCoverageSchema, many=True)
    government_papers = ma.Nested(GovernmentPaperSchema, many=True)
    gallery = ma.List(ma.Str())
