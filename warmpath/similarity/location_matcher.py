"""
Location matching.

Parses free-text locations into city / state / country / region and scores
geographic proximity with a ranked ladder:

- Same city → 1.0
- Same state/province → 0.7
- Same country → 0.4
- Same region (e.g., both in Europe) → 0.2
- Different regions → 0.0
"""

from typing import Optional, Tuple

from warmpath.common.reference_data import (
    COUNTRY_TO_REGION,
    US_STATE_ABBREVIATIONS,
    GeographicRegion,
    get_geographic_region,
    lookup_state_abbreviation,
)
from warmpath.common.types import Profile
from warmpath.similarity.types import (
    DEFAULT_SIMILARITY_CONFIG,
    UNKNOWN,
    LocationMatchLevel,
    ParsedLocation,
    SimilarityConfig,
)

UNITED_STATES = "United States"


def parse_location(location: Optional[str]) -> ParsedLocation:
    """
    Parse a location string into structured components.

    Supported formats:
    - "San Francisco, CA" → city + state (US)
    - "San Francisco, California" → city + state (US)
    - "London, UK" → city + country
    - "Austin, TX, United States" → city + state + country
    - "Germany" → country only
    - "Tokyo" → city only (country Unknown)

    Args:
        location: Free-text location string

    Returns:
        ParsedLocation with "Unknown" for every component that can't be derived
    """
    if not location or not location.strip():
        return ParsedLocation()

    parts = [part.strip() for part in location.split(",")]

    if len(parts) == 1:
        token = parts[0]
        # Country names are matched exactly; anything else is a city
        region = COUNTRY_TO_REGION.get(token)
        if region is not None:
            return ParsedLocation(country=token, region=region.value)
        return ParsedLocation(city=token)

    if len(parts) == 2:
        city, second = parts
        upper = second.upper()
        if upper in US_STATE_ABBREVIATIONS:
            return ParsedLocation(
                city=city or UNKNOWN,
                state=upper,
                country=UNITED_STATES,
                region=GeographicRegion.NORTH_AMERICA.value,
            )

        state = lookup_state_abbreviation(second)
        if state:
            return ParsedLocation(
                city=city or UNKNOWN,
                state=state,
                country=UNITED_STATES,
                region=GeographicRegion.NORTH_AMERICA.value,
            )

        return ParsedLocation(
            city=city or UNKNOWN,
            country=second or UNKNOWN,
            region=get_geographic_region(second).value,
        )

    city, state, country = parts[0], parts[1], parts[2]
    return ParsedLocation(
        city=city or UNKNOWN,
        state=state or UNKNOWN,
        country=country or UNKNOWN,
        region=get_geographic_region(country).value,
    )


def _known_equal(a: str, b: str, case_insensitive: bool = True) -> bool:
    if a == UNKNOWN or b == UNKNOWN:
        return False
    if case_insensitive:
        return a.lower() == b.lower()
    return a == b


def location_match_level(loc1: ParsedLocation, loc2: ParsedLocation) -> LocationMatchLevel:
    """First matching level of the ladder: city, state, country, region or none."""
    if _known_equal(loc1.city, loc2.city):
        return "city"
    if _known_equal(loc1.state, loc2.state, case_insensitive=False):
        return "state"
    if _known_equal(loc1.country, loc2.country):
        return "country"
    if _known_equal(loc1.region, loc2.region, case_insensitive=False):
        return "region"
    return "none"


def compare_locations(
    location1: Optional[str],
    location2: Optional[str],
    config: SimilarityConfig = DEFAULT_SIMILARITY_CONFIG,
) -> Tuple[float, LocationMatchLevel, ParsedLocation, ParsedLocation]:
    """
    Score two raw location strings.

    Returns:
        (score, match level, parsed location 1, parsed location 2)
    """
    loc1 = parse_location(location1)
    loc2 = parse_location(location2)

    if not location1 or not location2:
        return 0.0, "none", loc1, loc2

    thresholds = config.resolved_location_thresholds()

    # Literal equality short-circuits before parsing results are consulted
    if location1 == location2:
        return thresholds.same_city, "city", loc1, loc2

    level = location_match_level(loc1, loc2)
    score = {
        "city": thresholds.same_city,
        "state": thresholds.same_state,
        "country": thresholds.same_country,
        "region": thresholds.same_region,
        "none": thresholds.different_regions,
    }[level]
    return score, level, loc1, loc2


def calculate_location_similarity(
    p1: Profile,
    p2: Profile,
    config: SimilarityConfig = DEFAULT_SIMILARITY_CONFIG,
) -> float:
    """
    Calculate location similarity based on geographic proximity.

    Args:
        p1: First profile
        p2: Second profile
        config: Optional configuration (location threshold overrides)

    Returns:
        Location similarity score (0-1)
    """
    score, _, _, _ = compare_locations(p1.location, p2.location, config)
    return score
