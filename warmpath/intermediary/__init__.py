"""Intermediary candidate finder: sampling, scoring, ranking and caching."""

from warmpath.intermediary.cache import SimilarityCache
from warmpath.intermediary.sampler import ConnectionSample, sample_connections
from warmpath.intermediary.scorer import (
    BRIDGE_QUALITY,
    IntermediaryCandidate,
    find_best_intermediaries,
    rank_candidates,
    score_all_intermediaries,
    score_intermediary,
)

__all__ = [
    "BRIDGE_QUALITY",
    "ConnectionSample",
    "IntermediaryCandidate",
    "SimilarityCache",
    "find_best_intermediaries",
    "rank_candidates",
    "sample_connections",
    "score_all_intermediaries",
    "score_intermediary",
]
