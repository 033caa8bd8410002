"""Static lists the portal offers to pick from."""

STATES = (
    'Andhra Pradesh',
    'Arunachal Pradesh',
    'Assam',
    'Bihar',
    'Chhattisgarh',
    'Goa',
    'Gujarat',
    'Haryana',
    'Himachal Pradesh',
    'Jharkhand',
    'Karnataka',
    'Kerala',
    'Madhya Pradesh',
    'Maharashtra',
    'Manipur',
    'Meghalaya',
    'Mizoram',
    'Nagaland',
    'Odisha',
    'Punjab',
    'Rajasthan',
    'Sikkim',
    'Tamil Nadu',
    'Telangana',
    'Tripura',
    'Uttar Pradesh',
    'Uttarakhand',
    'West Bengal',
    # Union territories
    'Delhi',
    'Jammu and Kashmir',
    'Ladakh',
    'Puducherry',
    'Chandigarh',
    'Dadra and Nagar Haveli and Daman and Diu',
    'Lakshadweep',
    'Andaman and Nicobar Islands',
)

INDUSTRY_CATEGORIES = {
    'Core & Traditional': (
        'Agriculture & Allied Industries',
        'Food Processing & Agro-based Industries',
        'Dairy & Animal Husbandry',
        'Bamboo & Forest-based Industries',
        'Minerals & Mining',
        'Energy & Renewable Energy',
        'Steel & Allied Industries / PEB',
        'Logistics & Warehousing',
    ),
    'Emerging & Strategic': (
        'IT & ITES',
        'Healthcare & Pharmaceuticals',
        'Automobile & EV Components',
        'Defence & Aerospace',
        'Plastics, Printing & Packaging',
        'Startups & Innovation',
    ),
    'Support & Allied': (
        'Textiles & Readymade Garments',
        'Furniture & Handicrafts',
        'Paper & Allied Industries',
        'Real Estate & Infrastructure',
        'Tourism & Hospitality',
        'Retail, Food & Beverage, Entertainment',
        'Education & Skill Development',
        'AgriTech & Smart Farming',
        'Bioenergy & Waste Management',
    ),
}


def industry_group(industry: str):
    """Return the category group an industry belongs to, or None."""
    for group, industries in INDUSTRY_CATEGORIES.items():
        if industry in industries:
            return group
    return None
