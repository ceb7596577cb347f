"""
warmpath: recommend how to reach a person in a professional graph.

Public API:
    find_connection_strategy: best strategy for one target
    compare_strategies: recommended strategy plus viable alternatives
    batch_discover_connections: confident strategies for many targets
    calculate_profile_similarity: weighted five-dimension similarity
"""

from warmpath.common.types import EducationEntry, Profile, ProfileMetadata, Skill, WorkEntry
from warmpath.pathfinder import (
    ConnectionStrategy,
    ConnectionStrategyEngine,
    InMemoryGraph,
    StrategyThresholds,
    StrategyType,
    batch_discover_connections,
    compare_strategies,
    find_connection_strategy,
)
from warmpath.similarity import (
    SimilarityConfig,
    calculate_profile_similarity,
    estimate_acceptance_rate,
)
from warmpath.version import __version__

__all__ = [
    "ConnectionStrategy",
    "ConnectionStrategyEngine",
    "EducationEntry",
    "InMemoryGraph",
    "Profile",
    "ProfileMetadata",
    "SimilarityConfig",
    "Skill",
    "StrategyThresholds",
    "StrategyType",
    "WorkEntry",
    "__version__",
    "batch_discover_connections",
    "calculate_profile_similarity",
    "compare_strategies",
    "estimate_acceptance_rate",
    "find_connection_strategy",
]
