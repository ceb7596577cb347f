"""
Per-dimension similarity matchers.

- Skills / companies: Jaccard index |A ∩ B| / |A ∪ B| over name sets
- Education: same school (1.0) > same field of study (0.5) > nothing
- Industry: exact tag match (1.0) > related via adjacency table (0.6) > nothing

Every matcher returns 0 when either side has no signal for its dimension.
"""

from typing import Iterable, List, Set, Tuple

from warmpath.common.reference_data import are_industries_related
from warmpath.common.types import Profile
from warmpath.similarity.types import DEFAULT_SIMILARITY_CONFIG, SetComparison, SimilarityConfig


def _name_set(names: Iterable[str], case_sensitive: bool) -> Set[str]:
    return {name if case_sensitive else name.lower() for name in names if name}


def jaccard_index(set1: Set[str], set2: Set[str]) -> float:
    """Jaccard index of two sets; 0 when either is empty."""
    if not set1 or not set2:
        return 0.0
    return len(set1 & set2) / len(set1 | set2)


def compare_name_sets(set1: Set[str], set2: Set[str]) -> SetComparison:
    return SetComparison(
        profile1_count=len(set1),
        profile2_count=len(set2),
        intersection_count=len(set1 & set2),
        union_count=len(set1 | set2),
    )


def skill_set(profile: Profile, config: SimilarityConfig = DEFAULT_SIMILARITY_CONFIG) -> Set[str]:
    return _name_set((skill.name for skill in profile.skills), config.case_sensitive_skills)


def company_set(profile: Profile, config: SimilarityConfig = DEFAULT_SIMILARITY_CONFIG) -> Set[str]:
    return _name_set(
        (entry.company for entry in profile.work_experience), config.case_sensitive_companies
    )


def calculate_skill_jaccard_similarity(
    p1: Profile,
    p2: Profile,
    config: SimilarityConfig = DEFAULT_SIMILARITY_CONFIG,
) -> float:
    """Skill overlap as a Jaccard index (case-insensitive unless configured)."""
    return jaccard_index(skill_set(p1, config), skill_set(p2, config))


def calculate_company_history_jaccard(
    p1: Profile,
    p2: Profile,
    config: SimilarityConfig = DEFAULT_SIMILARITY_CONFIG,
) -> float:
    """Shared-employer overlap as a Jaccard index."""
    return jaccard_index(company_set(p1, config), company_set(p2, config))


# ===== EDUCATION =====

def matching_schools(p1: Profile, p2: Profile) -> List[str]:
    """Schools of p1 that p2 also attended (case-insensitive)."""
    schools2 = {entry.school.lower() for entry in p2.education if entry.school}
    return [entry.school for entry in p1.education if entry.school and entry.school.lower() in schools2]


def matching_fields(p1: Profile, p2: Profile) -> List[str]:
    """Fields of study of p1 that p2 shares (case-insensitive)."""
    fields2 = {entry.field_of_study.lower() for entry in p2.education if entry.field_of_study}
    return [
        entry.field_of_study
        for entry in p1.education
        if entry.field_of_study and entry.field_of_study.lower() in fields2
    ]


def calculate_education_overlap(
    p1: Profile,
    p2: Profile,
    config: SimilarityConfig = DEFAULT_SIMILARITY_CONFIG,
) -> float:
    """
    Calculate education overlap score.

    Scoring:
    - Exact school match → 1.0 (alumni connection)
    - Different schools, same field → 0.5
    - No overlap → 0.0
    """
    if not p1.education or not p2.education:
        return 0.0

    thresholds = config.resolved_education_thresholds()

    if matching_schools(p1, p2):
        return thresholds.same_school
    if matching_fields(p1, p2):
        return thresholds.same_field
    return thresholds.no_overlap


# ===== INDUSTRY =====

def industry_tags(profile: Profile) -> List[str]:
    """Distinct industry tags from a work history, in first-seen order."""
    seen = set()
    tags = []
    for entry in profile.work_experience:
        if entry.industry and entry.industry not in seen:
            seen.add(entry.industry)
            tags.append(entry.industry)
    return tags


def industry_matches(p1: Profile, p2: Profile) -> Tuple[List[str], List[Tuple[str, str]]]:
    """
    Exact and related industry pairs between two profiles.

    Returns:
        (industries of p1 matched exactly, related (p1 industry, p2 industry) pairs)
    """
    industries1 = industry_tags(p1)
    industries2 = industry_tags(p2)
    lower2 = {industry.lower() for industry in industries2}

    exact = [industry for industry in industries1 if industry.lower() in lower2]
    related = [
        (i1, i2)
        for i1 in industries1
        for i2 in industries2
        if i1.lower() != i2.lower() and are_industries_related(i1, i2)
    ]
    return exact, related


def calculate_industry_overlap(
    p1: Profile,
    p2: Profile,
    config: SimilarityConfig = DEFAULT_SIMILARITY_CONFIG,
) -> float:
    """
    Calculate industry overlap score.

    Scoring:
    - Exact industry match → 1.0
    - Related industries (from adjacency table) → 0.6
    - No overlap → 0.0
    """
    if not industry_tags(p1) or not industry_tags(p2):
        return 0.0

    thresholds = config.resolved_industry_thresholds()
    exact, related = industry_matches(p1, p2)

    if exact:
        return thresholds.exact_match
    if related:
        return thresholds.related_industries
    return thresholds.no_overlap
