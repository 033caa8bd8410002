"""The Policy model.

Also contains the PolicyCategory and PolicyStatus enums."""

from enum import Enum

from investportal.core.attachments import MB, AttachmentField, Attachments
from investportal.core.timezone import tz_aware_now
from investportal.extensions import db


class PolicyCategory(Enum):
    """Represents the kind of policy document."""
    government = 'Government Policy'
    company = 'Company Policy'
    event = 'Event Regulations'
    standards = 'Standards'


class PolicyStatus(Enum):
    """Represents the publication status of the policy."""
    draft = 'Draft'
    published = 'Published'


class Policy(db.Model):
    """Represents a policy document available for download."""
    __tablename__ = 'policies'
    __attachments__ = Attachments('policies',
                                  AttachmentField('file_url',
                                                  accepts=('pdf', 'doc', 'docx', 'txt'),
                                                  max_size=10 * MB,
                                                  size_field='file_size'))
    __required__ = ('title', 'category', 'description', 'file_url')
    __searchable__ = ('title', 'description')
    __ordering__ = ('-published_on', '-id')

    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(256), nullable=False)
    category = db.Column(db.Enum(PolicyCategory), nullable=False)
    description = db.Column(db.Text, nullable=False)
    tags = db.Column(db.JSON, nullable=False, default=list)
    published_on = db.Column(db.DateTime(timezone=True), nullable=False, default=tz_aware_now)
    file_size = db.Column(db.Integer, nullable=False)
    file_url = db.Column(db.String(512), nullable=False)
    status = db.Column(db.Enum(PolicyStatus), nullable=False, default=PolicyStatus.draft)
    created_at = db.Column(db.DateTime(timezone=True), nullable=False, default=tz_aware_now)
    updated_at = db.Column(db.DateTime(timezone=True), nullable=False,
                           default=tz_aware_now, onupdate=tz_aware_now)
