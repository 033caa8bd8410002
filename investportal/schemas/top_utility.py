"""Schema for the TopUtilityConfig model."""

from datetime import timezone

from marshmallow import EXCLUDE, pre_load, validate

from investportal.extensions import ma
from investportal.models import TopUtilityConfig, SOCIAL_NETWORKS
from .fields import FormDecoding, OptionalUrl


# pylint: disable=missing-docstring

SocialLinksSchema = ma.Schema.from_dict(
    {network: OptionalUrl(load_default='') for network in SOCIAL_NETWORKS},
    name='SocialLinksSchema',
)


class TopUtilityConfigSchema(FormDecoding, ma.SQLAlchemyAutoSchema):
    class Meta:
        model = TopUtilityConfig
        load_instance = True
        ordered = True
        unknown = EXCLUDE
        dump_only = ('id', 'created_at', 'updated_at')

    json_fields = ('social_links',)

    countdown_title = ma.Str(validate=validate.Length(min=1, max=128))
    target_date = ma.AwareDateTime(default_timezone=timezone.utc)
    phone = ma.Str(validate=validate.Length(max=32))
    email = ma.Email()
    social_links = ma.Nested(SocialLinksSchema)

    @pre_load
    def normalize_email(self, data, **_kwargs):
        if isinstance(data, dict) and isinstance(data.get('email'), str):
            data = dict(data, email=data['email'].strip().lower())
        return data
