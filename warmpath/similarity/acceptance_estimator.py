"""
Acceptance Rate Estimation.

Maps similarity scores to research-backed acceptance rate estimates.

Research Benchmarks:
- Mutual connections: 45-55%
- Same school: 35-42%
- Same company (past): 28-35%
- Same industry: 22-28%
- Cold outreach: 12-18%
"""

from typing import List, Tuple

from warmpath.similarity.types import AcceptanceEstimate

# (lower bound, base rate, slope, interval half-width, tier, comparable to, research basis)
_BANDS: List[Tuple[float, float, float, float, str, str, str]] = [
    (0.75, 0.40, 0.2, 0.03, "excellent", "Alumni connection + same industry",
     "LinkedIn PYMK analysis + Liben-Nowell & Kleinberg (2007)"),
    (0.65, 0.35, 0.5, 0.04, "excellent", "Same school connection",
     "Liben-Nowell & Kleinberg (2007)"),
    (0.50, 0.25, 0.667, 0.04, "good", "Same company (past employer)",
     "LinkedIn outreach benchmarks 2025"),
    (0.45, 0.22, 0.6, 0.03, "good", "Same industry",
     "B2B outreach studies 2025"),
    (0.25, 0.15, 0.35, 0.02, "moderate", "Cold outreach with personalization",
     "LinkedIn cold outreach benchmarks 2025"),
]

# Acceptance rate by number of hops in a mutual-connection path
HOP_ACCEPTANCE_RATES = {1: 0.85, 2: 0.65, 3: 0.45, 4: 0.30}
LONG_PATH_ACCEPTANCE_RATE = 0.25


def estimate_acceptance_rate(similarity_score: float) -> AcceptanceEstimate:
    """
    Estimate acceptance rate based on similarity score.

    The score is clamped to [0, 1] and mapped piecewise-linearly:
    - 0.75-1.0 → 40-45% (alumni + same industry quality)
    - 0.65-0.75 → 35-40% (same school quality)
    - 0.50-0.65 → 25-35% (same company quality)
    - 0.45-0.50 → 22-25% (same industry quality)
    - 0.25-0.45 → 15-22% (cold with personalization)
    - <0.25 → 12-15% (pure cold)

    Args:
        similarity_score: Overall similarity score (0-1)

    Returns:
        AcceptanceEstimate with a confidence interval clamped to [0, 1]
    """
    score = min(max(similarity_score, 0.0), 1.0)

    for lower, base, slope, spread, quality, comparable_to, research_basis in _BANDS:
        if score >= lower:
            rate = base + (score - lower) * slope
            break
    else:
        rate = 0.12 + score * 0.12
        spread = 0.02
        quality = "low" if score >= 0.15 else "very-low"
        comparable_to = "Pure cold outreach"
        research_basis = "General cold outreach studies"

    return AcceptanceEstimate(
        similarity_score=score,
        acceptance_rate=rate,
        lower_bound=max(0.0, rate - spread),
        upper_bound=min(1.0, rate + spread),
        quality=quality,
        comparable_to=comparable_to,
        research_basis=research_basis,
    )


def mutual_connection_acceptance_rate(hop_count: int) -> float:
    """Acceptance rate for an introduction path with the given number of hops."""
    return HOP_ACCEPTANCE_RATES.get(hop_count, LONG_PATH_ACCEPTANCE_RATE)

PATH_RATE_SPREAD = 0.05


def estimate_path_acceptance(hop_count: int, success_probability: float) -> AcceptanceEstimate:
    """
    Estimate acceptance for a mutual-connection path.

    The rate comes from the hop table; the interval brackets that rate.
    """
    rate = mutual_connection_acceptance_rate(hop_count)
    if rate >= 0.6:
        quality = "excellent"
    elif rate >= 0.4:
        quality = "good"
    else:
        quality = "moderate"

    return AcceptanceEstimate(
        similarity_score=min(max(success_probability, 0.0), 1.0),
        acceptance_rate=rate,
        lower_bound=max(0.0, rate - PATH_RATE_SPREAD),
        upper_bound=min(1.0, rate + PATH_RATE_SPREAD),
        quality=quality,
        comparable_to=(
            "Existing 1st-degree connection" if hop_count <= 1
            else f"Introduction via {hop_count - 1}-intermediary path"
        ),
        research_basis="Mutual connection benchmarks (45-55%)",
    )
