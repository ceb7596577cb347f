"""
Connection strategy types.

A lookup produces exactly one immutable ConnectionStrategy; comparison mode
produces several. Every strategy carries the AcceptanceEstimate it was
priced with so callers never have to recompute it.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Sequence, Tuple, Union

from warmpath.common.config import Config
from warmpath.common.types import Profile
from warmpath.intermediary.scorer import IntermediaryCandidate
from warmpath.similarity.types import AcceptanceEstimate, SimilarityBreakdown

PathNode = Union[Profile, str]


class StrategyType(str, Enum):
    """Strategy tags, in the order the engine tries them."""

    MUTUAL = "mutual"
    DIRECT_SIMILARITY = "direct-similarity"
    INTERMEDIARY = "intermediary"
    COLD_SIMILARITY = "cold-similarity"
    NONE = "none"


def node_name(node: PathNode) -> str:
    """Display name of a path node (profile or bare identifier)."""
    if isinstance(node, Profile):
        return node.name
    return str(node)


def _node_to_dict(node: PathNode) -> Any:
    if isinstance(node, Profile):
        return node.model_dump(mode="json")
    return node


@dataclass(frozen=True)
class StrategyThresholds:
    """
    Per-call snapshot of the strategy thresholds.

    Defaults come from Config so environment overrides apply; tests and
    callers can pass their own instance instead.
    """

    direct_high: float = 0.65
    cold_personalization: float = 0.45
    intermediary_good: float = 0.35
    batch_confidence_floor: float = 0.45

    @classmethod
    def from_config(cls) -> "StrategyThresholds":
        return cls(
            direct_high=Config.DIRECT_HIGH_THRESHOLD,
            cold_personalization=Config.COLD_PERSONALIZATION_THRESHOLD,
            intermediary_good=Config.INTERMEDIARY_GOOD_THRESHOLD,
            batch_confidence_floor=Config.BATCH_CONFIDENCE_FLOOR,
        )


@dataclass(frozen=True)
class PathSearchResult:
    """Normalized result of a graph accessor's path search."""

    path: Tuple[PathNode, ...]
    probability: float
    mutual_connections: Optional[int] = None


@dataclass(frozen=True)
class ConnectionPath:
    """A mutual-connection path from source to target."""

    nodes: Tuple[PathNode, ...]
    success_probability: float
    mutual_connections: int = 0

    @property
    def hop_count(self) -> int:
        return max(len(self.nodes) - 1, 0)

    @property
    def total_weight(self) -> float:
        return 1.0 - self.success_probability

    def to_dict(self) -> Dict[str, Any]:
        return {
            "nodes": [_node_to_dict(node) for node in self.nodes],
            "success_probability": self.success_probability,
            "mutual_connections": self.mutual_connections,
            "hop_count": self.hop_count,
            "total_weight": self.total_weight,
        }


@dataclass(frozen=True)
class ConnectionStrategy:
    """
    The recommended approach for reaching one target.

    Exactly one payload is set depending on the type:
    - MUTUAL: path
    - DIRECT_SIMILARITY / COLD_SIMILARITY: direct_similarity
    - INTERMEDIARY: intermediary
    - NONE: direct_similarity (for display), may be all-zero
    """

    type: StrategyType
    confidence: float
    estimated_acceptance_rate: float
    acceptance: AcceptanceEstimate
    reasoning: str
    next_steps: Tuple[str, ...] = field(default_factory=tuple)
    path: Optional[ConnectionPath] = None
    direct_similarity: Optional[SimilarityBreakdown] = None
    intermediary: Optional[IntermediaryCandidate] = None
    low_confidence: bool = False

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-serializable dictionary."""
        return {
            "type": self.type.value,
            "confidence": self.confidence,
            "estimated_acceptance_rate": self.estimated_acceptance_rate,
            "acceptance": self.acceptance.to_dict(),
            "reasoning": self.reasoning,
            "next_steps": list(self.next_steps),
            "path": self.path.to_dict() if self.path else None,
            "direct_similarity": self.direct_similarity.to_dict() if self.direct_similarity else None,
            "intermediary": self.intermediary.to_dict() if self.intermediary else None,
            "low_confidence": self.low_confidence,
        }


def strategies_by_confidence(strategies: Sequence[ConnectionStrategy]) -> list:
    """Sort strategies by confidence, highest first."""
    return sorted(strategies, key=lambda s: s.confidence, reverse=True)
