"""The ContactForm model."""

from investportal.core.attachments import Attachments
from investportal.core.timezone import tz_aware_now
from investportal.extensions import db


class ContactForm(db.Model):
    """Represents a message sent through the contact form."""
    __tablename__ = 'contact_forms'
    __attachments__ = Attachments()
    __required__ = ('full_name', 'email', 'message')
    __searchable__ = ('full_name', 'email', 'message')
    __ordering__ = ('-created_at', '-id')

    id = db.Column(db.Integer, primary_key=True)
    full_name = db.Column(db.String(128), nullable=False)
    email = db.Column(db.String(128), nullable=False)
    phone = db.Column(db.String(32), nullable=True)
    message = db.Column(db.Text, nullable=False)
    created_at = db.Column(db.DateTime(timezone=True), nullable=False, default=tz_aware_now)
