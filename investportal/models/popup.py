"""The Popup model.

Also contains the BackgroundType enum."""

from datetime import datetime
from enum import Enum
from typing import List, Optional

from investportal.core.attachments import AttachmentField, Attachments
from investportal.core.timezone import parse_clock, tz_aware_now
from investportal.extensions import db


class BackgroundType(Enum):
    """Represents what fills the background of the popup."""
    color = 'color'
    image = 'image'


def unscheduled():
    return {'enabled': False, 'start_time': None, 'end_time': None}


class Popup(db.Model):
    """Represents a popup shown to the visitors of the portal within a date window."""
    __tablename__ = 'popups'
    __attachments__ = Attachments('popups',
                                  AttachmentField('background_image',
                                                  accepts=('jpg', 'jpeg', 'png', 'gif')))
    __required__ = ('title', 'description', 'start_date', 'end_date')
    __searchable__ = ('title', 'description')
    __ordering__ = ('-priority', '-created_at', '-id')

    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(100), nullable=False)
    description = db.Column(db.String(500), nullable=False)
    ctas = db.Column(db.JSON, nullable=False, default=list)
    priority = db.Column(db.Integer, nullable=False, default=0)
    background_type = db.Column(db.Enum(BackgroundType), nullable=False,
                                default=BackgroundType.color)
    background_color = db.Column(db.String(7), nullable=False, default='#ffffff')
    background_image = db.Column(db.String(512), nullable=True)
    display_duration = db.Column(db.Integer, nullable=False, default=0)
    closable = db.Column(db.Boolean, nullable=False, default=True)
    enabled = db.Column(db.Boolean, nullable=False, default=True)
    start_date = db.Column(db.DateTime(timezone=True), nullable=False)
    end_date = db.Column(db.DateTime(timezone=True), nullable=False)
    daily_schedule = db.Column(db.JSON, nullable=False, default=unscheduled)
    delay_seconds = db.Column(db.Integer, nullable=False, default=0)
    created_at = db.Column(db.DateTime(timezone=True), nullable=False, default=tz_aware_now)
    updated_at = db.Column(db.DateTime(timezone=True), nullable=False,
                           default=tz_aware_now, onupdate=tz_aware_now)

    def scheduled_at(self, moment: datetime) -> bool:
        """Check whether the daily schedule, if enabled, covers the time of day of the moment."""
        schedule = self.daily_schedule or {}
        if not schedule.get('enabled'):
            return True

        start = parse_clock(schedule.get('start_time'))
        end = parse_clock(schedule.get('end_time'))
        if start is None or end is None:
            return False
        current = moment.time().replace(second=0, microsecond=0)
        return start <= current <= end

    @classmethod
    def active(cls, now: Optional[datetime] = None) -> List['Popup']:
        """List the popups to show at the given moment, highest priority first."""
        if now is None:
            now = tz_aware_now()

        candidates = cls.query.filter(
            cls.enabled.is_(True),
            cls.start_date <= now,
            cls.end_date >= now,
        ).order_by(cls.priority.desc(), cls.created_at.desc(), cls.id.desc()).all()
        return [popup for popup in candidates if popup.scheduled_at(now)]
