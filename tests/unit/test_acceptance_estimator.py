"""
Unit tests for warmpath/similarity/acceptance_estimator.py

Tests the piecewise-linear acceptance mapping:
- Band boundaries and interpolation
- Tier labels, including low vs very-low below 0.25
- Interval clamping and input clamping
- Hop-based mutual path rates
"""

import pytest

from warmpath.similarity.acceptance_estimator import (
    estimate_acceptance_rate,
    estimate_path_acceptance,
    mutual_connection_acceptance_rate,
)


class TestEstimateAcceptanceRate:
    """Tests for estimate_acceptance_rate."""

    @pytest.mark.parametrize("score,rate,quality", [
        (1.0, 0.45, "excellent"),
        (0.75, 0.40, "excellent"),
        (0.70, 0.375, "excellent"),
        (0.65, 0.35, "excellent"),
        (0.50, 0.25, "good"),
        (0.45, 0.22, "good"),
        (0.35, 0.185, "moderate"),
        (0.25, 0.15, "moderate"),
        (0.20, 0.144, "low"),
        (0.10, 0.132, "very-low"),
        (0.0, 0.12, "very-low"),
    ])
    def test_band_values(self, score, rate, quality):
        estimate = estimate_acceptance_rate(score)
        assert estimate.acceptance_rate == pytest.approx(rate)
        assert estimate.quality == quality

    def test_same_company_band_uses_two_thirds_slope(self):
        estimate = estimate_acceptance_rate(0.60)
        assert estimate.acceptance_rate == pytest.approx(0.25 + 0.10 * 0.667)
        assert estimate.comparable_to == "Same company (past employer)"

    def test_low_tier_boundary(self):
        assert estimate_acceptance_rate(0.15).quality == "low"
        assert estimate_acceptance_rate(0.149).quality == "very-low"

    def test_interval_is_symmetric(self):
        estimate = estimate_acceptance_rate(0.70)
        assert estimate.lower_bound == pytest.approx(0.375 - 0.04)
        assert estimate.upper_bound == pytest.approx(0.375 + 0.04)

    def test_input_is_clamped(self):
        high = estimate_acceptance_rate(1.7)
        low = estimate_acceptance_rate(-0.3)
        assert high.similarity_score == 1.0
        assert high.acceptance_rate == pytest.approx(0.45)
        assert low.similarity_score == 0.0
        assert low.acceptance_rate == pytest.approx(0.12)

    def test_labels_and_citations(self):
        excellent = estimate_acceptance_rate(0.8)
        cold = estimate_acceptance_rate(0.05)
        assert excellent.comparable_to == "Alumni connection + same industry"
        assert "Liben-Nowell" in excellent.research_basis
        assert cold.comparable_to == "Pure cold outreach"
        assert cold.research_basis == "General cold outreach studies"

    def test_monotonic_across_bands(self):
        scores = [i / 100 for i in range(101)]
        rates = [estimate_acceptance_rate(s).acceptance_rate for s in scores]
        assert all(b >= a - 1e-9 for a, b in zip(rates, rates[1:]))

    def test_deterministic(self):
        assert estimate_acceptance_rate(0.42) == estimate_acceptance_rate(0.42)

    def test_to_dict(self):
        data = estimate_acceptance_rate(0.5).to_dict()
        assert set(data) == {
            "similarity_score", "acceptance_rate", "lower_bound", "upper_bound",
            "quality", "comparable_to", "research_basis",
        }


class TestMutualConnectionAcceptanceRate:
    """Tests for hop-based path rates."""

    @pytest.mark.parametrize("hops,rate", [(1, 0.85), (2, 0.65), (3, 0.45), (4, 0.30), (5, 0.25), (9, 0.25)])
    def test_hop_table(self, hops, rate):
        assert mutual_connection_acceptance_rate(hops) == rate

    @pytest.mark.parametrize("hops,quality", [(1, "excellent"), (2, "excellent"), (3, "good"), (5, "moderate")])
    def test_path_estimate_brackets_hop_rate(self, hops, quality):
        estimate = estimate_path_acceptance(hops, 0.3)

        assert estimate.acceptance_rate == mutual_connection_acceptance_rate(hops)
        assert estimate.lower_bound <= estimate.acceptance_rate <= estimate.upper_bound
        assert estimate.similarity_score == 0.3
        assert estimate.quality == quality
