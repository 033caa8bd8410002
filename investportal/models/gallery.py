"""The GalleryItem model."""

from investportal.core.attachments import AttachmentField, Attachments
from investportal.core.timezone import tz_aware_now
from investportal.extensions import db


class GalleryItem(db.Model):
    """Represents an image in the public gallery."""
    __tablename__ = 'gallery'
    __attachments__ = Attachments('gallery',
                                  AttachmentField('image_url',
                                                  accepts=('jpeg', 'jpg', 'png', 'gif')))
    __required__ = ('title', 'image_url')
    __searchable__ = ('title', 'description', 'category')
    __ordering__ = ('order', '-created_at', '-id')

    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(100), nullable=False)
    description = db.Column(db.String(500), nullable=True)
    image_url = db.Column(db.String(512), nullable=False)
    alt_text = db.Column(db.String(200), nullable=True)
    category = db.Column(db.String(50), nullable=True)
    order = db.Column(db.Integer, nullable=False, default=0)
    is_active = db.Column(db.Boolean, nullable=False, default=True)
    created_at = db.Column(db.DateTime(timezone=True), nullable=False, default=tz_aware_now)
    updated_at = db.Column(db.DateTime(timezone=True), nullable=False,
                           default=tz_aware_now, onupdate=tz_aware_now)
