"""This module contains all the models for the database."""

from .announcement import Announcement, AnimationSpeed
from .company import Company
from .contact_form import ContactForm
from .district import District, RailConnectivity
from .gallery import GalleryItem
from .industry import Industry, IndustryStatus
from .member import Member
from .policy import Policy, PolicyCategory, PolicyStatus
from .popup import Popup, BackgroundType
from .startup import Startup, StartupStage, TeamSize, FundingStage
from .top_utility import TopUtilityConfig, SOCIAL_NETWORKS


__all__ = (
    'Announcement',
    'AnimationSpeed',
    'Company',
    'ContactForm',
    'District',
    'RailConnectivity',
    'GalleryItem',
    'Industry',
    'IndustryStatus',
    'Member',
    'Policy',
    'PolicyCategory',
    'PolicyStatus',
    'Popup',
    'BackgroundType',
    'Startup',
    'StartupStage',
    'TeamSize',
    'FundingStage',
    'TopUtilityConfig',
    'SOCIAL_NETWORKS',
)
