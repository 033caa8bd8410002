"""The Startup model.

Also contains the StartupStage, TeamSize and FundingStage enums."""

from enum import Enum

from investportal.core.attachments import AttachmentField, Attachments
from investportal.core.timezone import tz_aware_now
from investportal.extensions import db


class StartupStage(Enum):
    """Represents how far along the startup is."""
    idea = 'Idea'
    prototype = 'Prototype'
    seed = 'Seed'
    series_a = 'Series A'
    series_b = 'Series B'
    series_c_plus = 'Series C+'


class TeamSize(Enum):
    """Represents the headcount bracket of the startup."""
    tiny = '1-5'
    small = '6-10'
    medium = '11-50'
    large = '51-200'
    huge = '200+'


class FundingStage(Enum):
    """Represents the funding the startup has or is looking for."""
    bootstrapped = 'Bootstrapped'
    pre_seed = 'Pre-seed'
    seed = 'Seed'
    series_a = 'Series A'
    series_b = 'Series B'
    series_c_plus = 'Series C+'
    not_seeking = 'Not seeking funding'


class Startup(db.Model):
    """Represents a startup registered on the portal."""
    __tablename__ = 'startups'
    __attachments__ = Attachments('startups',
                                  AttachmentField('logo'),
                                  AttachmentField('pitch_deck', accepts=('pdf',)))
    __required__ = ('startup_name', 'founder_name', 'description', 'industry',
                    'stage', 'email', 'phone', 'logo')
    __searchable__ = ('startup_name', 'description', 'industry', 'email', 'founder_name')
    __ordering__ = ('-created_at', '-id')

    id = db.Column(db.Integer, primary_key=True)
    startup_name = db.Column(db.String(256), nullable=False)
    founder_name = db.Column(db.String(128), nullable=False)
    description = db.Column(db.Text, nullable=False)
    industry = db.Column(db.String(128), nullable=False)
    stage = db.Column(db.Enum(StartupStage), nullable=False)
    email = db.Column(db.String(128), nullable=False)
    phone = db.Column(db.String(32), nullable=False)
    website = db.Column(db.String(512), nullable=True)
    logo = db.Column(db.String(512), nullable=False)
    pitch_deck = db.Column(db.String(512), nullable=True)
    founded_year = db.Column(db.Integer, nullable=True)
    team_size = db.Column(db.Enum(TeamSize), nullable=True)
    funding_stage = db.Column(db.Enum(FundingStage), nullable=True)
    is_verified = db.Column(db.Boolean, nullable=False, default=False)
    is_active = db.Column(db.Boolean, nullable=False, default=True)
    created_at = db.Column(db.DateTime(timezone=True), nullable=False, default=tz_aware_now)
    updated_at = db.Column(db.DateTime(timezone=True), nullable=False,
                           default=tz_aware_now, onupdate=tz_aware_now)
