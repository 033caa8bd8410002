"""The Industry model.

Also contains the IndustryStatus enum.

An industry page keeps its leadership, press releases, media coverage and
government papers as lists of objects, each of which may carry an uploaded file."""

from enum import Enum

from investportal.core.attachments import (
    DOCUMENT_TYPES,
    MB,
    AttachmentField,
    Attachments,
)
from investportal.core.timezone import tz_aware_now
from investportal.extensions import db


class IndustryStatus(Enum):
    """Represents whether the industry page is shown."""
    active = 'active'
    inactive = 'inactive'


class Industry(db.Model):
    """Represents an industry promoted on the portal."""
    __tablename__ = 'industries'
    __attachments__ = Attachments(
        'industries',
        AttachmentField('logo', max_size=10 * MB),
        AttachmentField('cover_image', max_size=10 * MB),
        AttachmentField('gallery', max_size=10 * MB, many=True),
        AttachmentField('leadership', max_size=10 * MB, item_key='photo'),
        AttachmentField('media_coverage', max_size=10 * MB, item_key='image', max_count=20),
        AttachmentField('press_releases', accepts=DOCUMENT_TYPES, max_size=10 * MB,
                        item_key='pdf', max_count=20),
        AttachmentField('government_papers', accepts=DOCUMENT_TYPES, max_size=10 * MB,
                        item_key='pdf_or_document', max_count=20),
    )
    __required__ = ('name', 'description', 'overview')
    __searchable__ = ('name', 'description', 'overview')
    __ordering__ = ('-created_at', '-id')

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(128), nullable=False, unique=True)
    description = db.Column(db.Text, nullable=True)
    overview = db.Column(db.Text, nullable=True)
    investment_opportunities = db.Column(db.Text, nullable=True)
    infrastructure_requirements = db.Column(db.Text, nullable=True)
    government_incentives = db.Column(db.Text, nullable=True)
    growth_potential = db.Column(db.Text, nullable=True)
    leadership = db.Column(db.JSON, nullable=False, default=list)
    press_releases = db.Column(db.JSON, nullable=False, default=list)
    media_coverage = db.Column(db.JSON, nullable=False, default=list)
    government_papers = db.Column(db.JSON, nullable=False, default=list)
    logo = db.Column(db.String(512), nullable=True)
    cover_image = db.Column(db.String(512), nullable=True)
    gallery = db.Column(db.JSON, nullable=False, default=list)
    status = db.Column(db.Enum(IndustryStatus), nullable=False, default=IndustryStatus.active)
    created_at = db.Column(db.DateTime(timezone=True), nullable=False, default=tz_aware_now)
    updated_at = db.Column(db.DateTime(timezone=True), nullable=False,
                           default=tz_aware_now, onupdate=tz_aware_now)
