"""
Static reference data for profile similarity scoring.

- Industry adjacency: when two industries are not an exact match, related
  industries still receive partial credit (0.6 vs 1.0).
- Country → geographic region table and US state abbreviations used by the
  location parser.

All tables are read-only mappings built once at import time.

Usage:
    from warmpath.common.reference_data import are_industries_related

    are_industries_related("Software Development", "Information Technology")  # True
"""

from enum import Enum
from types import MappingProxyType
from typing import Mapping, Tuple


class GeographicRegion(str, Enum):
    """Geographic region classifications for location similarity."""

    NORTH_AMERICA = "North America"
    SOUTH_AMERICA = "South America"
    EUROPE = "Europe"
    ASIA = "Asia"
    AFRICA = "Africa"
    OCEANIA = "Oceania"
    MIDDLE_EAST = "Middle East"
    UNKNOWN = "Unknown"


# ===== INDUSTRY ADJACENCY =====

# Relationship criteria:
# - Shared skill requirements (e.g., Software Development <-> IT Services)
# - Common career transitions (e.g., Consulting <-> Investment Banking)
# - Overlapping professional networks
_INDUSTRY_RELATIONSHIPS = {
    # Technology & Software
    "Software Development": (
        "Information Technology",
        "Computer Software",
        "Internet",
        "SaaS",
        "Cloud Computing",
        "IT Services",
        "Telecommunications",
        "Computer Networking",
    ),

    "Information Technology": (
        "Software Development",
        "IT Services",
        "Computer Networking",
        "Cybersecurity",
        "Cloud Computing",
        "Telecommunications",
        "Computer Software",
    ),

    "Computer Software": (
        "Software Development",
        "Information Technology",
        "SaaS",
        "Internet",
        "Cloud Computing",
        "Gaming",
        "Mobile Applications",
    ),

    "SaaS": (
        "Software Development",
        "Computer Software",
        "Cloud Computing",
        "Internet",
        "Information Technology",
        "IT Services",
    ),

    "Cloud Computing": (
        "Software Development",
        "Information Technology",
        "SaaS",
        "Computer Software",
        "IT Services",
        "Data Infrastructure",
    ),

    "Cybersecurity": (
        "Information Technology",
        "IT Services",
        "Computer Networking",
        "Software Development",
        "Risk Management",
        "Consulting",
    ),

    "IT Services": (
        "Information Technology",
        "Software Development",
        "Consulting",
        "Business Consulting",
        "Cloud Computing",
        "Managed Services",
    ),

    # Data & Analytics
    "Data Science": (
        "Machine Learning",
        "Artificial Intelligence",
        "Analytics",
        "Big Data",
        "Research",
        "Statistics",
        "Software Development",
    ),

    "Machine Learning": (
        "Data Science",
        "Artificial Intelligence",
        "Research",
        "Software Development",
        "Robotics",
        "Computer Vision",
    ),

    "Artificial Intelligence": (
        "Machine Learning",
        "Data Science",
        "Research",
        "Robotics",
        "Computer Vision",
        "Natural Language Processing",
        "Software Development",
    ),

    "Analytics": (
        "Data Science",
        "Business Intelligence",
        "Consulting",
        "Market Research",
        "Statistics",
        "Big Data",
    ),

    "Big Data": (
        "Data Science",
        "Analytics",
        "Cloud Computing",
        "Software Development",
        "Data Infrastructure",
    ),

    # Finance & Banking
    "Investment Banking": (
        "Finance",
        "Private Equity",
        "Venture Capital",
        "Corporate Finance",
        "Consulting",
        "Hedge Funds",
        "Asset Management",
    ),

    "Finance": (
        "Investment Banking",
        "Accounting",
        "Financial Services",
        "Corporate Finance",
        "Private Equity",
        "Asset Management",
    ),

    "Accounting": (
        "Finance",
        "Consulting",
        "Audit",
        "Tax Services",
        "Financial Services",
        "Corporate Finance",
    ),

    "Financial Services": (
        "Finance",
        "Banking",
        "Investment Banking",
        "Insurance",
        "Asset Management",
        "Wealth Management",
    ),

    "Private Equity": (
        "Investment Banking",
        "Venture Capital",
        "Finance",
        "Corporate Finance",
        "Hedge Funds",
        "Asset Management",
    ),

    "Venture Capital": (
        "Private Equity",
        "Investment Banking",
        "Startups",
        "Technology",
        "Finance",
        "Angel Investing",
    ),

    # Consulting & Professional Services
    "Consulting": (
        "Management Consulting",
        "Business Consulting",
        "Strategy",
        "IT Services",
        "Accounting",
        "Investment Banking",
        "Advisory",
    ),

    "Management Consulting": (
        "Consulting",
        "Strategy",
        "Business Consulting",
        "Investment Banking",
        "Operations",
        "Organizational Development",
    ),

    "Business Consulting": (
        "Consulting",
        "Management Consulting",
        "Strategy",
        "IT Services",
        "Advisory",
        "Professional Services",
    ),

    "Strategy": (
        "Management Consulting",
        "Consulting",
        "Business Development",
        "Corporate Development",
        "Investment Banking",
    ),

    # Marketing & Advertising
    "Marketing": (
        "Digital Marketing",
        "Advertising",
        "Brand Management",
        "Public Relations",
        "Social Media",
        "Content Marketing",
        "Market Research",
    ),

    "Digital Marketing": (
        "Marketing",
        "Advertising",
        "Social Media",
        "SEO/SEM",
        "Content Marketing",
        "E-commerce",
        "Growth Marketing",
    ),

    "Advertising": (
        "Marketing",
        "Digital Marketing",
        "Brand Management",
        "Public Relations",
        "Media",
        "Creative Services",
    ),

    "Public Relations": (
        "Marketing",
        "Advertising",
        "Communications",
        "Media Relations",
        "Brand Management",
        "Corporate Communications",
    ),

    # Healthcare & Life Sciences
    "Healthcare": (
        "Pharmaceuticals",
        "Biotechnology",
        "Medical Devices",
        "Hospital & Health Care",
        "Health & Wellness",
        "Telemedicine",
    ),

    "Pharmaceuticals": (
        "Healthcare",
        "Biotechnology",
        "Life Sciences",
        "Medical Devices",
        "Research",
        "Clinical Research",
    ),

    "Biotechnology": (
        "Pharmaceuticals",
        "Healthcare",
        "Life Sciences",
        "Research",
        "Genomics",
        "Medical Devices",
    ),

    "Medical Devices": (
        "Healthcare",
        "Biotechnology",
        "Pharmaceuticals",
        "Manufacturing",
        "Engineering",
    ),

    # Education & Research
    "Education": (
        "Higher Education",
        "E-Learning",
        "EdTech",
        "Research",
        "Training & Development",
        "Academic",
    ),

    "Higher Education": (
        "Education",
        "Research",
        "Academic",
        "E-Learning",
        "EdTech",
    ),

    "EdTech": (
        "Education",
        "E-Learning",
        "Software Development",
        "SaaS",
        "Higher Education",
    ),

    "Research": (
        "Education",
        "Higher Education",
        "Data Science",
        "Biotechnology",
        "Pharmaceuticals",
        "Academic",
    ),

    # Manufacturing & Engineering
    "Manufacturing": (
        "Engineering",
        "Industrial Manufacturing",
        "Automotive",
        "Aerospace",
        "Supply Chain",
        "Operations",
    ),

    "Engineering": (
        "Manufacturing",
        "Mechanical Engineering",
        "Electrical Engineering",
        "Civil Engineering",
        "Aerospace",
        "Automotive",
    ),

    "Aerospace": (
        "Engineering",
        "Manufacturing",
        "Defense",
        "Aviation",
        "Mechanical Engineering",
    ),

    "Automotive": (
        "Engineering",
        "Manufacturing",
        "Transportation",
        "Supply Chain",
        "Electric Vehicles",
    ),

    # Retail & E-commerce
    "Retail": (
        "E-commerce",
        "Consumer Goods",
        "Fashion",
        "Wholesale",
        "Supply Chain",
        "Merchandising",
    ),

    "E-commerce": (
        "Retail",
        "Internet",
        "Digital Marketing",
        "Supply Chain",
        "Software Development",
        "Logistics",
    ),

    "Consumer Goods": (
        "Retail",
        "Manufacturing",
        "Brand Management",
        "Marketing",
        "Supply Chain",
        "CPG",
    ),

    # Real Estate & Construction
    "Real Estate": (
        "Construction",
        "Property Management",
        "Architecture",
        "Urban Planning",
        "Finance",
        "Investment",
    ),

    "Construction": (
        "Real Estate",
        "Engineering",
        "Architecture",
        "Civil Engineering",
        "Project Management",
        "Manufacturing",
    ),

    "Architecture": (
        "Construction",
        "Real Estate",
        "Urban Planning",
        "Engineering",
        "Design",
    ),

    # Media & Entertainment
    "Media": (
        "Entertainment",
        "Publishing",
        "Broadcasting",
        "Journalism",
        "Digital Media",
        "Content Production",
    ),

    "Entertainment": (
        "Media",
        "Film",
        "Music",
        "Gaming",
        "Broadcasting",
        "Content Production",
    ),

    "Gaming": (
        "Entertainment",
        "Software Development",
        "Computer Software",
        "Digital Media",
        "Esports",
    ),

    # Energy & Utilities
    "Energy": (
        "Oil & Gas",
        "Renewable Energy",
        "Utilities",
        "Sustainability",
        "Engineering",
        "Environmental Services",
    ),

    "Renewable Energy": (
        "Energy",
        "Sustainability",
        "Utilities",
        "Engineering",
        "Environmental Services",
        "Clean Tech",
    ),

    "Oil & Gas": (
        "Energy",
        "Utilities",
        "Engineering",
        "Petroleum",
        "Chemical",
    ),

    # Legal & Government
    "Legal": (
        "Law",
        "Corporate Law",
        "Intellectual Property",
        "Compliance",
        "Regulatory Affairs",
        "Government",
    ),

    "Government": (
        "Public Policy",
        "Legal",
        "Non-Profit",
        "Public Administration",
        "Defense",
    ),

    "Non-Profit": (
        "Government",
        "Social Impact",
        "Education",
        "Healthcare",
        "Philanthropy",
        "NGO",
    ),

    # Hospitality & Travel
    "Hospitality": (
        "Travel",
        "Tourism",
        "Hotels",
        "Restaurants",
        "Events",
        "Leisure",
    ),

    "Travel": (
        "Hospitality",
        "Tourism",
        "Transportation",
        "Aviation",
        "Leisure",
    ),

    # Transportation & Logistics
    "Transportation": (
        "Logistics",
        "Supply Chain",
        "Aviation",
        "Automotive",
        "Shipping",
        "Freight",
    ),

    "Logistics": (
        "Transportation",
        "Supply Chain",
        "E-commerce",
        "Retail",
        "Manufacturing",
        "Warehousing",
    ),

    "Supply Chain": (
        "Logistics",
        "Transportation",
        "Manufacturing",
        "Retail",
        "Operations",
        "Procurement",
    ),

    # Human Resources & Recruiting
    "Human Resources": (
        "Recruiting",
        "Talent Acquisition",
        "Training & Development",
        "Organizational Development",
        "Compensation & Benefits",
        "HR Tech",
    ),

    "Recruiting": (
        "Human Resources",
        "Talent Acquisition",
        "Staffing",
        "HR Tech",
        "Executive Search",
    ),

    # Sales & Business Development
    "Sales": (
        "Business Development",
        "Account Management",
        "SaaS",
        "Marketing",
        "Enterprise Sales",
        "Retail",
    ),

    "Business Development": (
        "Sales",
        "Strategy",
        "Corporate Development",
        "Partnerships",
        "Marketing",
        "Venture Capital",
    ),
}

INDUSTRY_RELATIONSHIPS: Mapping[str, Tuple[str, ...]] = MappingProxyType(_INDUSTRY_RELATIONSHIPS)

# Lowercased key -> canonical key, for case-insensitive normalization
_INDUSTRY_KEYS_LOWER: Mapping[str, str] = MappingProxyType(
    {key.lower(): key for key in _INDUSTRY_RELATIONSHIPS}
)


# ===== GEOGRAPHY =====

_COUNTRY_TO_REGION = {
    # North America
    "United States": GeographicRegion.NORTH_AMERICA,
    "USA": GeographicRegion.NORTH_AMERICA,
    "US": GeographicRegion.NORTH_AMERICA,
    "Canada": GeographicRegion.NORTH_AMERICA,
    "Mexico": GeographicRegion.NORTH_AMERICA,

    # South America
    "Brazil": GeographicRegion.SOUTH_AMERICA,
    "Argentina": GeographicRegion.SOUTH_AMERICA,
    "Chile": GeographicRegion.SOUTH_AMERICA,
    "Colombia": GeographicRegion.SOUTH_AMERICA,
    "Peru": GeographicRegion.SOUTH_AMERICA,
    "Venezuela": GeographicRegion.SOUTH_AMERICA,
    "Ecuador": GeographicRegion.SOUTH_AMERICA,
    "Bolivia": GeographicRegion.SOUTH_AMERICA,
    "Paraguay": GeographicRegion.SOUTH_AMERICA,
    "Uruguay": GeographicRegion.SOUTH_AMERICA,

    # Europe
    "United Kingdom": GeographicRegion.EUROPE,
    "UK": GeographicRegion.EUROPE,
    "England": GeographicRegion.EUROPE,
    "Scotland": GeographicRegion.EUROPE,
    "Wales": GeographicRegion.EUROPE,
    "Ireland": GeographicRegion.EUROPE,
    "France": GeographicRegion.EUROPE,
    "Germany": GeographicRegion.EUROPE,
    "Italy": GeographicRegion.EUROPE,
    "Spain": GeographicRegion.EUROPE,
    "Portugal": GeographicRegion.EUROPE,
    "Netherlands": GeographicRegion.EUROPE,
    "Belgium": GeographicRegion.EUROPE,
    "Switzerland": GeographicRegion.EUROPE,
    "Austria": GeographicRegion.EUROPE,
    "Sweden": GeographicRegion.EUROPE,
    "Norway": GeographicRegion.EUROPE,
    "Denmark": GeographicRegion.EUROPE,
    "Finland": GeographicRegion.EUROPE,
    "Poland": GeographicRegion.EUROPE,
    "Czech Republic": GeographicRegion.EUROPE,
    "Hungary": GeographicRegion.EUROPE,
    "Romania": GeographicRegion.EUROPE,
    "Greece": GeographicRegion.EUROPE,
    "Russia": GeographicRegion.EUROPE,

    # Asia
    "China": GeographicRegion.ASIA,
    "Japan": GeographicRegion.ASIA,
    "South Korea": GeographicRegion.ASIA,
    "India": GeographicRegion.ASIA,
    "Singapore": GeographicRegion.ASIA,
    "Hong Kong": GeographicRegion.ASIA,
    "Taiwan": GeographicRegion.ASIA,
    "Thailand": GeographicRegion.ASIA,
    "Vietnam": GeographicRegion.ASIA,
    "Malaysia": GeographicRegion.ASIA,
    "Indonesia": GeographicRegion.ASIA,
    "Philippines": GeographicRegion.ASIA,
    "Pakistan": GeographicRegion.ASIA,
    "Bangladesh": GeographicRegion.ASIA,

    # Middle East
    "Israel": GeographicRegion.MIDDLE_EAST,
    "Saudi Arabia": GeographicRegion.MIDDLE_EAST,
    "United Arab Emirates": GeographicRegion.MIDDLE_EAST,
    "UAE": GeographicRegion.MIDDLE_EAST,
    "Dubai": GeographicRegion.MIDDLE_EAST,
    "Qatar": GeographicRegion.MIDDLE_EAST,
    "Kuwait": GeographicRegion.MIDDLE_EAST,
    "Bahrain": GeographicRegion.MIDDLE_EAST,
    "Oman": GeographicRegion.MIDDLE_EAST,
    "Jordan": GeographicRegion.MIDDLE_EAST,
    "Lebanon": GeographicRegion.MIDDLE_EAST,
    "Turkey": GeographicRegion.MIDDLE_EAST,

    # Africa
    "South Africa": GeographicRegion.AFRICA,
    "Nigeria": GeographicRegion.AFRICA,
    "Kenya": GeographicRegion.AFRICA,
    "Egypt": GeographicRegion.AFRICA,
    "Morocco": GeographicRegion.AFRICA,
    "Ethiopia": GeographicRegion.AFRICA,
    "Ghana": GeographicRegion.AFRICA,

    # Oceania
    "Australia": GeographicRegion.OCEANIA,
    "New Zealand": GeographicRegion.OCEANIA,
}

COUNTRY_TO_REGION: Mapping[str, GeographicRegion] = MappingProxyType(_COUNTRY_TO_REGION)

_COUNTRIES_LOWER: Mapping[str, str] = MappingProxyType(
    {country.lower(): country for country in _COUNTRY_TO_REGION}
)

_US_STATE_ABBREVIATIONS = {
    "AL": "Alabama",
    "AK": "Alaska",
    "AZ": "Arizona",
    "AR": "Arkansas",
    "CA": "California",
    "CO": "Colorado",
    "CT": "Connecticut",
    "DE": "Delaware",
    "FL": "Florida",
    "GA": "Georgia",
    "HI": "Hawaii",
    "ID": "Idaho",
    "IL": "Illinois",
    "IN": "Indiana",
    "IA": "Iowa",
    "KS": "Kansas",
    "KY": "Kentucky",
    "LA": "Louisiana",
    "ME": "Maine",
    "MD": "Maryland",
    "MA": "Massachusetts",
    "MI": "Michigan",
    "MN": "Minnesota",
    "MS": "Mississippi",
    "MO": "Missouri",
    "MT": "Montana",
    "NE": "Nebraska",
    "NV": "Nevada",
    "NH": "New Hampshire",
    "NJ": "New Jersey",
    "NM": "New Mexico",
    "NY": "New York",
    "NC": "North Carolina",
    "ND": "North Dakota",
    "OH": "Ohio",
    "OK": "Oklahoma",
    "OR": "Oregon",
    "PA": "Pennsylvania",
    "RI": "Rhode Island",
    "SC": "South Carolina",
    "SD": "South Dakota",
    "TN": "Tennessee",
    "TX": "Texas",
    "UT": "Utah",
    "VT": "Vermont",
    "VA": "Virginia",
    "WA": "Washington",
    "WV": "West Virginia",
    "WI": "Wisconsin",
    "WY": "Wyoming",
    "DC": "District of Columbia",
}

US_STATE_ABBREVIATIONS: Mapping[str, str] = MappingProxyType(_US_STATE_ABBREVIATIONS)

_US_STATE_NAMES_LOWER: Mapping[str, str] = MappingProxyType(
    {name.lower(): abbrev for abbrev, name in _US_STATE_ABBREVIATIONS.items()}
)


# ===== LOOKUPS =====

def normalize_industry_name(industry: str) -> str:
    """
    Map an industry name onto its canonical key.

    Exact match first, then a case-insensitive scan; unknown names are
    returned trimmed.
    """
    trimmed = industry.strip()
    if trimmed in INDUSTRY_RELATIONSHIPS:
        return trimmed
    return _INDUSTRY_KEYS_LOWER.get(trimmed.lower(), trimmed)


def are_industries_related(industry1: str, industry2: str) -> bool:
    """
    Check if two industries are the same or adjacent.

    Both adjacency lists are consulted, so the relation holds even when only
    one side lists the other.
    """
    if not industry1 or not industry2:
        return False

    norm1 = normalize_industry_name(industry1)
    norm2 = normalize_industry_name(industry2)
    lower1 = norm1.lower()
    lower2 = norm2.lower()

    if lower1 == lower2:
        return True

    if any(related.lower() == lower2 for related in INDUSTRY_RELATIONSHIPS.get(norm1, ())):
        return True

    return any(related.lower() == lower1 for related in INDUSTRY_RELATIONSHIPS.get(norm2, ()))


def get_related_industries(industry: str) -> Tuple[str, ...]:
    """Get the adjacency list for an industry (empty when unknown)."""
    if not industry:
        return ()
    return INDUSTRY_RELATIONSHIPS.get(normalize_industry_name(industry), ())


def get_geographic_region(country: str) -> GeographicRegion:
    """
    Get geographic region for a country.

    Exact (trimmed) lookup first, then case-insensitive.
    """
    if not country:
        return GeographicRegion.UNKNOWN

    normalized = country.strip()
    if normalized in COUNTRY_TO_REGION:
        return COUNTRY_TO_REGION[normalized]

    canonical = _COUNTRIES_LOWER.get(normalized.lower())
    if canonical is not None:
        return COUNTRY_TO_REGION[canonical]
    return GeographicRegion.UNKNOWN


def lookup_state_abbreviation(state: str) -> str:
    """
    Resolve a US state abbreviation or full name to its abbreviation.

    Returns an empty string when the value is not a US state.
    """
    upper = state.strip().upper()
    if upper in US_STATE_ABBREVIATIONS:
        return upper
    return _US_STATE_NAMES_LOWER.get(state.strip().lower(), "")
