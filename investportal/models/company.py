"""The Company model."""

from investportal.core.attachments import AttachmentField, Attachments
from investportal.core.timezone import tz_aware_now
from investportal.extensions import db


class Company(db.Model):
    """Represents a company registered on the portal."""
    __tablename__ = 'companies'
    __attachments__ = Attachments('companies',
                                  AttachmentField('logo'),
                                  AttachmentField('banner'))
    __required__ = ('company_name', 'director_ceo', 'email', 'phone')
    __searchable__ = ('company_name', 'industry', 'email', 'phone', 'director_ceo')
    __ordering__ = ('-created_at', '-id')

    id = db.Column(db.Integer, primary_key=True)
    company_name = db.Column(db.String(256), nullable=False)
    director_ceo = db.Column(db.String(128), nullable=False)
    industry = db.Column(db.String(128), nullable=True)
    email = db.Column(db.String(128), nullable=False)
    phone = db.Column(db.String(32), nullable=False)
    website = db.Column(db.String(512), nullable=True)
    logo = db.Column(db.String(512), nullable=True)
    banner = db.Column(db.String(512), nullable=True)
    address = db.Column(db.String(512), nullable=True)
    city = db.Column(db.String(128), nullable=True)
    state = db.Column(db.String(128), nullable=True)
    country = db.Column(db.String(128), nullable=True)
    pincode = db.Column(db.String(16), nullable=True)
    is_verified = db.Column(db.Boolean, nullable=False, default=False)
    is_active = db.Column(db.Boolean, nullable=False, default=True)
    created_at = db.Column(db.DateTime(timezone=True), nullable=False, default=tz_aware_now)
    updated_at = db.Column(db.DateTime(timezone=True), nullable=False,
                           default=tz_aware_now, onupdate=tz_aware_now)
