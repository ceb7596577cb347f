"""
Profile Similarity Scorer.

Weighted composite of five sub-scores:
- Industry: 30%
- Skills: 25%
- Education: 20%
- Location: 15%
- Companies: 10%

Acceptance rate mapping (see acceptance_estimator):
- 0.65-1.0 similarity → 35-45% acceptance (same school quality)
- 0.45-0.65 similarity → 22-35% acceptance (cold personalized)
- 0.25-0.45 similarity → 15-22% acceptance (some commonalities)
- <0.25 similarity → 12-15% acceptance (pure cold)

Usage:
    from warmpath.similarity.scorer import calculate_profile_similarity

    similarity = calculate_profile_similarity(my_profile, target_profile)
    print(f"Similarity: {similarity.overall:.0%}")
"""

from datetime import datetime, timezone
from typing import List, Optional

from warmpath.common.types import Profile
from warmpath.similarity.location_matcher import compare_locations
from warmpath.similarity.matchers import (
    calculate_company_history_jaccard,
    calculate_education_overlap,
    calculate_industry_overlap,
    calculate_skill_jaccard_similarity,
    company_set,
    compare_name_sets,
    industry_matches,
    matching_fields,
    matching_schools,
    skill_set,
)
from warmpath.similarity.types import (
    DEFAULT_SIMILARITY_CONFIG,
    DetailedSimilarity,
    SimilarityBreakdown,
    SimilarityConfig,
    SimilarityDetails,
)

EMPTY_SIMILARITY = SimilarityBreakdown()


def calculate_profile_similarity(
    profile1: Optional[Profile],
    profile2: Optional[Profile],
    config: Optional[SimilarityConfig] = None,
) -> SimilarityBreakdown:
    """
    Calculate profile similarity using the weighted composite algorithm.

    Never raises for missing data: a dimension without signal on either side
    contributes 0.

    Args:
        profile1: First profile
        profile2: Second profile
        config: Optional configuration (weights, thresholds, case sensitivity)

    Returns:
        SimilarityBreakdown with the clamped composite in `overall`
    """
    if profile1 is None or profile2 is None:
        return EMPTY_SIMILARITY

    config = config or DEFAULT_SIMILARITY_CONFIG
    weights = config.resolved_weights()

    industry = calculate_industry_overlap(profile1, profile2, config)
    skills = calculate_skill_jaccard_similarity(profile1, profile2, config)
    education = calculate_education_overlap(profile1, profile2, config)
    location, _, _, _ = compare_locations(profile1.location, profile2.location, config)
    companies = calculate_company_history_jaccard(profile1, profile2, config)

    overall = (
        industry * weights.industry
        + skills * weights.skills
        + education * weights.education
        + location * weights.location
        + companies * weights.companies
    )

    return SimilarityBreakdown(
        industry=industry,
        skills=skills,
        education=education,
        location=location,
        companies=companies,
        overall=min(max(overall, 0.0), 1.0),
    )


def calculate_detailed_similarity(
    profile1: Profile,
    profile2: Profile,
    config: Optional[SimilarityConfig] = None,
) -> DetailedSimilarity:
    """
    Calculate profile similarity together with the metadata behind it.

    Useful for debugging and for building human-readable reasoning.
    """
    config = config or DEFAULT_SIMILARITY_CONFIG
    breakdown = calculate_profile_similarity(profile1, profile2, config)

    exact_industries, related_industries = industry_matches(profile1, profile2)
    _, match_level, loc1, loc2 = compare_locations(profile1.location, profile2.location, config)

    details = SimilarityDetails(
        calculated_at=datetime.now(timezone.utc),
        config=config,
        skills_compared=compare_name_sets(skill_set(profile1, config), skill_set(profile2, config)),
        companies_compared=compare_name_sets(
            company_set(profile1, config), company_set(profile2, config)
        ),
        matched_schools=tuple(matching_schools(profile1, profile2)),
        matched_fields=tuple(matching_fields(profile1, profile2)),
        exact_industries=tuple(exact_industries),
        related_industries=tuple(related_industries),
        location1=loc1,
        location2=loc2,
        location_match=match_level if breakdown.location > 0 else "none",
    )
    return DetailedSimilarity(breakdown=breakdown, details=details)


def top_similarities(breakdown: SimilarityBreakdown) -> str:
    """
    Name the strongest dimensions for display.

    Returns "industry and skills", "education", or "background" when no
    dimension scores above 0.5.
    """
    strong = sorted(
        ((name, score) for name, score in breakdown.dimensions().items() if score > 0.5),
        key=lambda item: item[1],
        reverse=True,
    )
    names = [name for name, _ in strong]

    if not names:
        return "background"
    if len(names) == 1:
        return names[0]
    return f"{names[0]} and {names[1]}"


def shared_signals(similarity: DetailedSimilarity) -> List[str]:
    """
    Human-readable signals behind a similarity score.

    Example:
        ["same industry", "same school", "same city", "shared skills"]
    """
    breakdown = similarity.breakdown
    details = similarity.details
    signals = []

    if details.exact_industries:
        signals.append("same industry")
    elif breakdown.industry > 0 and details.related_industries:
        signals.append("related industry")

    if details.matched_schools:
        signals.append("same school")
    elif breakdown.education > 0 and details.matched_fields:
        signals.append("same field of study")

    if details.location_match != "none":
        signals.append(f"same {details.location_match}")

    if breakdown.skills > 0:
        signals.append("shared skills")

    if breakdown.companies > 0:
        signals.append("shared employer")

    return signals
