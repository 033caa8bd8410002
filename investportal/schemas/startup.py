"""Schema for the Startup model."""

from marshmallow import EXCLUDE, validate
from marshmallow_enum import EnumField

from investportal.extensions import ma
from investportal.models import Startup, StartupStage, TeamSize, FundingStage
from .fields import OptionalUrl


# pylint: disable=missing-docstring

class StartupSchema(ma.SQLAlchemyAutoSchema):
    class Meta:
        model = Startup
        load_instance = True
        ordered = True
        unknown = EXCLUDE
        dump_only = ('id', 'created_at', 'updated_at')

    startup_name = ma.Str(required=True, validate=validate.Length(min=1, max=256))
    email = ma.Email(required=True)
    website = OptionalUrl()
    stage = EnumField(StartupStage, by_value=True, required=True)
    team_size = EnumField(TeamSize, by_value=True, allow_none=True)
    funding_stage = EnumField(FundingStage, by_value=True, allow_none=True)
    founded_year = ma.Int(allow_none=True, validate=validate.Range(min=1800, max=2100))
    logo = ma.Str(required=True)
    pitch_deck = ma.Str(allow_none=True)
