"""
Unit tests for warmpath/similarity/location_matcher.py

Tests location parsing and the proximity ladder:
- Blank, single-token, two-part and three-part inputs
- city > state > country > region > none
- "Unknown" components never match
- Threshold overrides
"""

import pytest

from warmpath.similarity.location_matcher import (
    calculate_location_similarity,
    compare_locations,
    parse_location,
)
from warmpath.similarity.types import ParsedLocation, SimilarityConfig


class TestParseLocation:
    """Tests for parse_location."""

    @pytest.mark.parametrize("value", ["", "   ", None])
    def test_blank_input_is_all_unknown(self, value):
        assert parse_location(value) == ParsedLocation()

    def test_single_token_country(self):
        parsed = parse_location("Germany")
        assert parsed.country == "Germany"
        assert parsed.region == "Europe"
        assert parsed.city == "Unknown"

    def test_single_token_country_lookup_is_case_sensitive(self):
        parsed = parse_location("germany")
        assert parsed.city == "germany"
        assert parsed.country == "Unknown"

    def test_single_token_city(self):
        parsed = parse_location("Tokyo")
        assert parsed.city == "Tokyo"
        assert parsed.country == "Unknown"
        assert parsed.region == "Unknown"

    def test_city_and_state_abbreviation(self):
        parsed = parse_location("San Francisco, ca")
        assert parsed == ParsedLocation(
            city="San Francisco", state="CA", country="United States", region="North America"
        )

    def test_city_and_full_state_name(self):
        parsed = parse_location("Austin, texas")
        assert parsed.state == "TX"
        assert parsed.country == "United States"

    def test_city_and_country(self):
        parsed = parse_location("London, UK")
        assert parsed.city == "London"
        assert parsed.state == "Unknown"
        assert parsed.country == "UK"
        assert parsed.region == "Europe"

    def test_city_and_unknown_country(self):
        parsed = parse_location("Springfield, Narnia")
        assert parsed.country == "Narnia"
        assert parsed.region == "Unknown"

    def test_three_parts(self):
        parsed = parse_location("Toronto, Ontario, Canada")
        assert parsed == ParsedLocation(
            city="Toronto", state="Ontario", country="Canada", region="North America"
        )


class TestCompareLocations:
    """Tests for the proximity ladder."""

    def test_literal_equality_is_same_city(self):
        score, level, _, _ = compare_locations("Remote", "Remote")
        assert score == 1.0
        assert level == "city"

    def test_same_city_case_insensitive(self):
        score, level, _, _ = compare_locations("Austin, TX", "austin, Texas")
        assert score == 1.0
        assert level == "city"

    def test_same_state(self):
        score, level, _, _ = compare_locations("San Francisco, CA", "Los Angeles, CA")
        assert score == pytest.approx(0.7)
        assert level == "state"

    def test_same_country(self):
        score, level, _, _ = compare_locations("Austin, TX", "Boston, MA")
        assert score == pytest.approx(0.4)
        assert level == "country"

    def test_same_region(self):
        score, level, _, _ = compare_locations("Berlin, Germany", "Paris, France")
        assert score == pytest.approx(0.2)
        assert level == "region"

    def test_different_regions(self):
        score, level, _, _ = compare_locations("Berlin, Germany", "Austin, TX")
        assert score == 0.0
        assert level == "none"

    def test_unknown_components_never_match(self):
        score, level, _, _ = compare_locations("Tokyo", "Osaka")
        assert score == 0.0
        assert level == "none"

    def test_empty_location_scores_zero(self):
        score, level, _, _ = compare_locations("", "Austin, TX")
        assert score == 0.0
        assert level == "none"

    def test_threshold_override(self):
        config = SimilarityConfig(location_thresholds={"same_state": 0.9})
        score, _, _, _ = compare_locations("San Francisco, CA", "Los Angeles, CA", config)
        assert score == pytest.approx(0.9)

    def test_profile_wrapper(self, make_profile):
        p1 = make_profile("a", location="Paris, France")
        p2 = make_profile("b", location="Lyon, France")
        assert calculate_location_similarity(p1, p2) == pytest.approx(0.4)
