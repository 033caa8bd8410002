"""The Member model."""

from investportal.core.attachments import AttachmentField, Attachments
from investportal.core.timezone import tz_aware_now
from investportal.extensions import db


class Member(db.Model):
    """Represents a member of the team shown on the portal."""
    __tablename__ = 'members'
    __attachments__ = Attachments('members',
                                  AttachmentField('profile_image',
                                                  accepts=('jpeg', 'jpg', 'png', 'gif')))
    __required__ = ('full_name',)
    __searchable__ = ('full_name', 'designation')
    __ordering__ = ('-priority', 'created_at', 'id')

    id = db.Column(db.Integer, primary_key=True)
    full_name = db.Column(db.String(128), nullable=False)
    designation = db.Column(db.String(128), nullable=True)
    department = db.Column(db.String(128), nullable=True, index=True)
    profile_image = db.Column(db.String(512), nullable=True)
    social = db.Column(db.JSON, nullable=False, default=dict)
    priority = db.Column(db.Integer, nullable=False, default=0)
    is_active = db.Column(db.Boolean, nullable=False, default=True)
    created_at = db.Column(db.DateTime(timezone=True), nullable=False, default=tz_aware_now)
    updated_at = db.Column(db.DateTime(timezone=True), nullable=False,
                           default=tz_aware_now, onupdate=tz_aware_now)
