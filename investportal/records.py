"""Record managers for every collection of the portal."""

from investportal.core.record_manager import RecordManager
from investportal.models import (
    Announcement,
    Company,
    ContactForm,
    District,
    GalleryItem,
    Industry,
    Member,
    Policy,
    Popup,
    Startup,
    TopUtilityConfig,
)
from investportal.schemas import (
    AnnouncementSchema,
    CompanySchema,
    ContactFormSchema,
    DistrictSchema,
    GalleryItemSchema,
    IndustrySchema,
    MemberSchema,
    PolicySchema,
    PopupSchema,
    StartupSchema,
    TopUtilityConfigSchema,
)


companies = RecordManager(Company, CompanySchema)
startups = RecordManager(Startup, StartupSchema)
districts = RecordManager(District, DistrictSchema)
industries = RecordManager(Industry, IndustrySchema)
members = RecordManager(Member, MemberSchema)
policies = RecordManager(Policy, PolicySchema)
popups = RecordManager(Popup, PopupSchema)
gallery = RecordManager(GalleryItem, GalleryItemSchema)
announcements = RecordManager(Announcement, AnnouncementSchema)
contact_forms = RecordManager(ContactForm, ContactFormSchema)
top_utility = RecordManager(TopUtilityConfig, TopUtilityConfigSchema)

MANAGERS = {
    'companies': companies,
    'startups': startups,
    'districts': districts,
    'industries': industries,
    'members': members,
    'policies': policies,
    'popups': popups,
    'gallery': gallery,
    'announcements': announcements,
    'contact': contact_forms,
    'top-utility': top_utility,
}
