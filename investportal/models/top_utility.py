"""The TopUtilityConfig model."""

from datetime import timedelta

from investportal.core.attachments import Attachments
from investportal.core.timezone import tz_aware_now
from investportal.extensions import db


SOCIAL_NETWORKS = ('facebook', 'twitter', 'linkedin', 'instagram', 'youtube')


def a_year_from_now():
    return tz_aware_now() + timedelta(days=365)


def no_social_links():
    return {network: '' for network in SOCIAL_NETWORKS}


class TopUtilityConfig(db.Model):
    """Represents the contents of the utility bar on top of every page:
    an event countdown, contact details and social links."""
    __tablename__ = 'top_utility_configs'
    __attachments__ = Attachments()
    __required__ = ()
    __ordering__ = ('-id',)

    id = db.Column(db.Integer, primary_key=True)
    countdown_title = db.Column(db.String(128), nullable=False, default='Event Countdown')
    target_date = db.Column(db.DateTime(timezone=True), nullable=False,
                            default=a_year_from_now)
    phone = db.Column(db.String(32), nullable=False, default='+91-1234567890')
    email = db.Column(db.String(128), nullable=False, default='info@example.com')
    social_links = db.Column(db.JSON, nullable=False, default=no_social_links)
    is_active = db.Column(db.Boolean, nullable=False, default=True)
    created_at = db.Column(db.DateTime(timezone=True), nullable=False, default=tz_aware_now)
    updated_at = db.Column(db.DateTime(timezone=True), nullable=False,
                           default=tz_aware_now, onupdate=tz_aware_now)

    @classmethod
    def current(cls) -> 'TopUtilityConfig':
        """Return the active configuration, creating the default one if there is none."""
        config = cls.query.filter_by(is_active=True).order_by(cls.id.desc()).first()
        if config is None:
            config = cls()
            db.session.add(config)
            db.session.commit()
        return config
