"""The Announcement model.

Also contains the AnimationSpeed enum."""

from enum import Enum
from typing import Iterable, Tuple

from investportal.core.attachments import Attachments
from investportal.core.errors import ValidationFailure
from investportal.core.timezone import tz_aware_now
from investportal.extensions import db


class AnimationSpeed(Enum):
    """Represents how fast the announcement scrolls by."""
    slow = 'slow'
    normal = 'normal'
    fast = 'fast'


class Announcement(db.Model):
    """Represents a line in the scrolling announcement bar."""
    __tablename__ = 'announcements'
    __attachments__ = Attachments()
    __required__ = ('title', 'content')
    __searchable__ = ('title', 'content')
    __ordering__ = ('order', '-created_at', '-id')

    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(100), nullable=False)
    content = db.Column(db.String(500), nullable=False)
    url = db.Column(db.String(512), nullable=True)
    background_color = db.Column(db.String(7), nullable=False, default='#ffffff')
    text_color = db.Column(db.String(7), nullable=False, default='#000000')
    animation_speed = db.Column(db.Enum(AnimationSpeed), nullable=False,
                                default=AnimationSpeed.normal)
    order = db.Column(db.Integer, nullable=False, default=0)
    is_active = db.Column(db.Boolean, nullable=False, default=True)
    created_at = db.Column(db.DateTime(timezone=True), nullable=False, default=tz_aware_now)
    updated_at = db.Column(db.DateTime(timezone=True), nullable=False,
                           default=tz_aware_now, onupdate=tz_aware_now)

    @classmethod
    def reorder(cls, pairs: Iterable[Tuple[int, int]]) -> int:
        """Set the display order of several announcements at once.

        Takes (ID, order) pairs and returns how many announcements were updated."""
        pairs = list(pairs)
        for announcement_id, order in pairs:
            if not isinstance(order, int) or isinstance(order, bool) or order < 0:
                raise ValidationFailure(f'Invalid order for announcement {announcement_id}.')

        updated = 0
        for announcement_id, order in pairs:
            updated += cls.query.filter_by(id=announcement_id).update(
                {'order': order, 'updated_at': tz_aware_now()}
            )
        db.session.commit()
        return updated
