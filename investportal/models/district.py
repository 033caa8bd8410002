"""The District model.

Also contains the RailConnectivity enum."""

from enum import Enum

from investportal.core.attachments import AttachmentField, Attachments
from investportal.core.timezone import tz_aware_now
from investportal.extensions import db


class RailConnectivity(Enum):
    """Represents the kind of railway service available in the district."""
    passenger = 'Passenger'
    freight = 'Freight'
    both = 'Both'
    none = 'None'


def no_presence():
    return {'presence': False, 'details': ''}


def no_facility():
    return {'available': False, 'details': ''}


class District(db.Model):
    """Represents a district profile with its infrastructure details."""
    __tablename__ = 'districts'
    __attachments__ = Attachments('districts',
                                  AttachmentField('awards_photos',
                                                  accepts=('jpeg', 'jpg', 'png'),
                                                  many=True))
    __required__ = ('district_name',)
    __searchable__ = ('district_name', 'state', 'headquarters')
    __ordering__ = ('district_name', 'id')

    id = db.Column(db.Integer, primary_key=True)
    district_name = db.Column(db.String(128), nullable=False)
    state = db.Column(db.String(128), nullable=True)
    population = db.Column(db.Integer, nullable=True)
    area_size = db.Column(db.Float, nullable=True)
    headquarters = db.Column(db.String(128), nullable=True)
    postal_code = db.Column(db.String(16), nullable=True)
    contact_email = db.Column(db.String(128), nullable=True)
    website_url = db.Column(db.String(512), nullable=True)
    contact_phone = db.Column(db.String(32), nullable=True)
    description = db.Column(db.Text, nullable=True)
    literacy_rate = db.Column(db.Float, nullable=True)
    primary_languages = db.Column(db.JSON, nullable=False, default=list)
    major_industries = db.Column(db.JSON, nullable=False, default=list)
    infrastructure = db.Column(db.Text, nullable=True)
    midc_sez_presence = db.Column(db.JSON, nullable=False, default=no_presence)
    rail_connectivity = db.Column(db.Enum(RailConnectivity), nullable=False,
                                  default=RailConnectivity.none)
    airport_availability = db.Column(db.JSON, nullable=False, default=no_facility)
    power_supply = db.Column(db.String(256), nullable=True)
    water_availability = db.Column(db.String(256), nullable=True)
    awards_photos = db.Column(db.JSON, nullable=False, default=list)
    created_at = db.Column(db.DateTime(timezone=True), nullable=False, default=tz_aware_now)
    updated_at = db.Column(db.DateTime(timezone=True), nullable=False,
                           default=tz_aware_now, onupdate=tz_aware_now)
