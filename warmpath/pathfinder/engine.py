"""
Connection Strategy Engine.

Multi-stage algorithm that tries strategies in order of preference:
1. Mutual connections (accessor path search)
2. Direct similarity (>= 0.65)
3. Intermediary matching (path strength >= 0.35)
4. Cold similarity (>= 0.45)
5. None (generic cold outreach)

The first stage that fires wins; exactly one strategy is returned per lookup.
Accessor calls are made sequentially and only when a stage needs them.

Usage:
    strategy = await find_connection_strategy(me, target, graph)
    print(strategy.type, strategy.estimated_acceptance_rate)
"""

import uuid
from dataclasses import dataclass, replace
from typing import Any, List, Optional, Tuple

from warmpath.common.config import Config
from warmpath.common.logger import PipelineLogger, get_logger
from warmpath.common.types import Profile
from warmpath.intermediary.cache import SimilarityCache
from warmpath.intermediary.scorer import IntermediaryCandidate, score_all_intermediaries
from warmpath.pathfinder.graph import (
    UNSUPPORTED,
    NodeLookup,
    call_optional,
    count_mutual_connections,
    find_node_id,
    get_connections,
    normalize_path_result,
)
from warmpath.pathfinder.strategies import (
    append_notes,
    build_cold_similarity_strategy,
    build_direct_similarity_strategy,
    build_intermediary_strategy,
    build_mutual_strategy,
    build_none_strategy,
)
from warmpath.pathfinder.types import ConnectionStrategy, StrategyThresholds
from warmpath.similarity.scorer import calculate_detailed_similarity
from warmpath.similarity.types import SimilarityConfig


@dataclass(frozen=True)
class NodePair:
    """Graph locations of the source and target of one lookup."""

    source: NodeLookup
    target: NodeLookup

    def notes(self, source: Profile, target: Profile) -> List[str]:
        """Reasoning notes for profiles missing from the graph."""
        notes = []
        if not self.source.found:
            notes.append(f"{source.name} was not found in the network graph")
        if not self.target.found:
            notes.append(f"{target.name} was not found in the network graph")
        return notes


class ConnectionStrategyEngine:
    """
    Selects the best strategy for reaching a target profile.

    The engine holds no per-lookup state, so one instance can serve many
    concurrent lookups (see batch_discover_connections).
    """

    def __init__(
        self,
        graph: Any,
        thresholds: Optional[StrategyThresholds] = None,
        similarity_config: Optional[SimilarityConfig] = None,
        cache: Optional[SimilarityCache] = None,
        max_connections: Optional[int] = None,
    ):
        """
        Initialize the engine.

        Args:
            graph: Graph accessor (see warmpath.pathfinder.graph)
            thresholds: Strategy thresholds (default: StrategyThresholds.from_config())
            similarity_config: Similarity weights / threshold overrides
            cache: Optional similarity cache shared across lookups
            max_connections: Connection sample size (default: Config.MAX_SAMPLED_CONNECTIONS)
        """
        self.graph = graph
        self.thresholds = thresholds or StrategyThresholds.from_config()
        self.similarity_config = similarity_config
        self.cache = cache
        if max_connections is None:
            max_connections = Config.MAX_SAMPLED_CONNECTIONS
        self.max_connections = max_connections

    def _logger(self, run_id: Optional[str]) -> PipelineLogger:
        return get_logger(__name__, run_id=run_id or uuid.uuid4().hex, layer="engine")

    async def resolve_nodes(self, source: Profile, target: Profile) -> NodePair:
        """Locate source and target in the graph."""
        return NodePair(
            source=await find_node_id(self.graph, source),
            target=await find_node_id(self.graph, target),
        )

    async def find_mutual_strategy(
        self,
        target: Profile,
        nodes: NodePair,
        log: Optional[PipelineLogger] = None,
    ) -> Optional[ConnectionStrategy]:
        """
        Stage 1: mutual-connection path via the accessor's path search.

        Returns None when either profile is missing, the accessor has no
        path search, or no path exists.
        """
        log = (log or self._logger(None)).with_layer("mutual")
        if not nodes.source.found or not nodes.target.found:
            log.debug("Skipping path search: profile not in graph")
            return None

        raw = await call_optional(
            self.graph, "bidirectional_search", nodes.source.node_id, nodes.target.node_id
        )
        if raw is UNSUPPORTED:
            log.debug("Graph accessor has no path search, skipping")
            return None

        result = normalize_path_result(raw)
        if result is None or len(result.path) < 2:
            log.debug("No mutual connection path found")
            return None

        if result.mutual_connections is None:
            count = await count_mutual_connections(
                self.graph, nodes.source.node_id, nodes.target.node_id
            )
            result = replace(result, mutual_connections=count)

        strategy = build_mutual_strategy(result, target)
        log.info(
            f"Found {strategy.path.hop_count}-hop mutual connection path with "
            f"{strategy.estimated_acceptance_rate:.0%} estimated acceptance"
        )
        return strategy

    async def find_intermediaries(
        self,
        source: Profile,
        target: Profile,
        nodes: NodePair,
        log: Optional[PipelineLogger] = None,
    ) -> List[IntermediaryCandidate]:
        """
        Stage 3 input: every sampled intermediary candidate, ranked.

        Outbound candidates come from the source's connections; inbound ones
        only when the accessor confirmed the target exists in the graph.
        """
        log = (log or self._logger(None)).with_layer("intermediary")
        if not nodes.source.found:
            log.debug("Skipping intermediary search: source not in graph")
            return []

        source_connections = await get_connections(self.graph, nodes.source.node_id)
        target_connections: List[Profile] = []
        if nodes.target.confirmed:
            target_connections = await get_connections(self.graph, nodes.target.node_id)

        log.debug(
            f"Scoring {len(source_connections)} outbound and "
            f"{len(target_connections)} inbound candidates"
        )
        return score_all_intermediaries(
            source,
            target,
            source_connections,
            target_connections,
            config=self.similarity_config,
            cache=self.cache,
            max_connections=self.max_connections,
        )

    def select_intermediary(
        self, candidates: List[IntermediaryCandidate]
    ) -> Tuple[Optional[IntermediaryCandidate], bool]:
        """
        Top-ranked candidate if its path strength clears the intermediary threshold.

        The bridging link only decides the low-confidence flag.

        Returns:
            (candidate or None, low_confidence flag)
        """
        if not candidates:
            return None, False
        best = candidates[0]
        if best.path_strength < self.thresholds.intermediary_good:
            return None, False
        low_confidence = best.bridging_similarity <= self.thresholds.intermediary_good
        return best, low_confidence

    async def find(
        self, source: Profile, target: Profile, run_id: Optional[str] = None
    ) -> ConnectionStrategy:
        """
        Find the single best strategy for reaching target from source.

        Args:
            source: Your profile
            target: Target person's profile
            run_id: Optional correlation id for log lines

        Returns:
            ConnectionStrategy (never None)

        Raises:
            GraphAccessorError: if the graph accessor keeps failing
        """
        log = self._logger(run_id)
        log.info(f"Finding connection strategy: {source.name} -> {target.name}")

        # ===== STAGE 1: Mutual Connections =====
        nodes = await self.resolve_nodes(source, target)
        notes = nodes.notes(source, target)
        for note in notes:
            log.warning(note)

        mutual = await self.find_mutual_strategy(target, nodes, log)
        if mutual:
            return mutual

        # ===== STAGE 2: Direct High Similarity =====
        similarity = calculate_detailed_similarity(source, target, self.similarity_config)
        log.debug(f"Direct similarity {similarity.overall:.3f}")

        if similarity.overall >= self.thresholds.direct_high:
            log.info(f"Direct similarity strategy ({similarity.overall:.1%})")
            return append_notes(build_direct_similarity_strategy(target, similarity), notes)

        # ===== STAGE 3: Intermediary Matching =====
        candidates = await self.find_intermediaries(source, target, nodes, log)
        best, low_confidence = self.select_intermediary(candidates)
        if best is not None:
            log.info(
                f"Intermediary strategy via {best.person.name} "
                f"({best.direction}, path strength {best.path_strength:.3f})"
            )
            return append_notes(
                build_intermediary_strategy(best, target, low_confidence), notes
            )

        # ===== STAGE 4: Cold Similarity =====
        if similarity.overall >= self.thresholds.cold_personalization:
            log.info(f"Cold similarity strategy ({similarity.overall:.1%})")
            return append_notes(build_cold_similarity_strategy(target, similarity), notes)

        # ===== STAGE 5: None =====
        log.info("No viable path, falling back to generic cold outreach")
        return append_notes(build_none_strategy(target, similarity), notes)


async def find_connection_strategy(
    source: Profile,
    target: Profile,
    graph: Any,
    thresholds: Optional[StrategyThresholds] = None,
    similarity_config: Optional[SimilarityConfig] = None,
    cache: Optional[SimilarityCache] = None,
) -> ConnectionStrategy:
    """
    Find the best connection strategy for one target.

    Convenience wrapper around ConnectionStrategyEngine.find.
    """
    engine = ConnectionStrategyEngine(
        graph, thresholds=thresholds, similarity_config=similarity_config, cache=cache
    )
    return await engine.find(source, target)
