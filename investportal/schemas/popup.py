"""Schema for the Popup model."""

from datetime import timezone

from marshmallow import EXCLUDE, ValidationError, validate, validates_schema
from marshmallow_enum import EnumField

from investportal.extensions import ma
from investportal.models import Popup, BackgroundType
from .fields import CLOCK, HEX_COLOR, FormDecoding


# pylint: disable=missing-docstring

class CallToActionSchema(ma.Schema):
    class Meta:
        ordered = True
        unknown = EXCLUDE

    text = ma.Str(required=True, validate=validate.Length(min=1, max=50))
    url = ma.Url(required=True, schemes={'http', 'https'})
    primary = ma.Bool(load_default=False)


class DailyScheduleSchema(ma.Schema):
    class Meta:
        ordered = True
        unknown = EXCLUDE

    enabled = ma.Bool(load_default=False)
    start_time = ma.Str(allow_none=True, load_default=None)
    end_time = ma.Str(allow_none=True, load_default=None)

    @validates_schema
    def times_when_enabled(self, data, **_kwargs):
        """Ensure an enabled schedule has both of its times in the HH:MM format."""
        if not data.get('enabled'):
            return

        for key in ('start_time', 'end_time'):
            if data.get(key) is None:
                raise ValidationError('An enabled schedule needs a start and an end time.',
                                      field_name=key)
            CLOCK(data[key])


class PopupSchema(FormDecoding, ma.SQLAlchemyAutoSchema):
    class Meta:
        model = Popup
        load_instance = True
        ordered = True
        unknown = EXCLUDE
        dump_only = ('id', 'created_at', 'updated_at')

    json_fields = ('ctas', 'daily_schedule')

    title = ma.Str(required=True, validate=validate.Length(min=1, max=100))
    description = ma.Str(required=True, validate=validate.Length(min=1, max=500))
    ctas = ma.Nested(CallToActionSchema, many=True)
    priority = ma.Int(validate=validate.Range(min=0, max=100))
    background_type = EnumField(BackgroundType, by_value=True)
    background_color = ma.Str(validate=HEX_COLOR)
    background_image = ma.Str(allow_none=True)
    display_duration = ma.Int(validate=validate.Range(min=0, max=300))
    delay_seconds = ma.Int(validate=validate.Range(min=0, max=300))
    start_date = ma.AwareDateTime(required=True, default_timezone=timezone.utc)
    end_date = ma.AwareDateTime(required=True, default_timezone=timezone.utc)
    daily_schedule = ma.Nested(DailyScheduleSchema)

    @validates_schema
    def valid_date_range(self, data, **_kwargs):
        """Ensure that the end date is not before the start date."""
        if 'start_date' in data and 'end_date' in data:
            if data['end_date'] < data['start_date']:
                raise ValidationError('The end date must not precede the start date.',
                                      field_name='end_date')
