"""Profile similarity scoring and acceptance-rate estimation."""

from warmpath.similarity.acceptance_estimator import (
    estimate_acceptance_rate,
    estimate_path_acceptance,
    mutual_connection_acceptance_rate,
)
from warmpath.similarity.location_matcher import (
    calculate_location_similarity,
    parse_location,
)
from warmpath.similarity.matchers import (
    calculate_company_history_jaccard,
    calculate_education_overlap,
    calculate_industry_overlap,
    calculate_skill_jaccard_similarity,
)
from warmpath.similarity.scorer import (
    calculate_detailed_similarity,
    calculate_profile_similarity,
    shared_signals,
    top_similarities,
)
from warmpath.similarity.types import (
    AcceptanceEstimate,
    DetailedSimilarity,
    ParsedLocation,
    SimilarityBreakdown,
    SimilarityConfig,
    SimilarityWeights,
)

__all__ = [
    "AcceptanceEstimate",
    "DetailedSimilarity",
    "ParsedLocation",
    "SimilarityBreakdown",
    "SimilarityConfig",
    "SimilarityWeights",
    "calculate_company_history_jaccard",
    "calculate_detailed_similarity",
    "calculate_education_overlap",
    "calculate_industry_overlap",
    "calculate_location_similarity",
    "calculate_profile_similarity",
    "calculate_skill_jaccard_similarity",
    "estimate_acceptance_rate",
    "estimate_path_acceptance",
    "mutual_connection_acceptance_rate",
    "parse_location",
    "shared_signals",
    "top_similarities",
]
