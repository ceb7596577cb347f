"""
Batch Processing.

Runs the strategy engine over many targets for the "Discover Connections"
view, and compares alternative strategies for a single target.
"""

import asyncio
import logging
from typing import Any, List, Optional, Sequence

from warmpath.common.config import Config
from warmpath.common.types import Profile
from warmpath.intermediary.cache import SimilarityCache
from warmpath.pathfinder.engine import ConnectionStrategyEngine
from warmpath.pathfinder.strategies import (
    append_notes,
    build_cold_similarity_strategy,
    build_direct_similarity_strategy,
    build_intermediary_strategy,
    build_none_strategy,
)
from warmpath.pathfinder.types import (
    ConnectionStrategy,
    StrategyThresholds,
    StrategyType,
    strategies_by_confidence,
)
from warmpath.similarity.scorer import calculate_detailed_similarity
from warmpath.similarity.types import SimilarityConfig

logger = logging.getLogger(__name__)

ALTERNATIVE_PREFIX = "Alternative: "


async def batch_discover_connections(
    source: Profile,
    targets: Sequence[Profile],
    graph: Any,
    thresholds: Optional[StrategyThresholds] = None,
    similarity_config: Optional[SimilarityConfig] = None,
    cache: Optional[SimilarityCache] = None,
    max_concurrent: Optional[int] = None,
    max_search_time: Optional[float] = None,
) -> List[ConnectionStrategy]:
    """
    Discover connection strategies for many targets in parallel.

    Each target runs the full engine independently. A target exceeding the
    search time falls back to a "none" strategy; a target whose graph lookups
    fail is logged and omitted.

    Args:
        source: Your profile
        targets: Target profiles
        graph: Graph accessor
        thresholds: Strategy thresholds (default: from Config)
        similarity_config: Similarity overrides
        cache: Optional similarity cache shared across targets
        max_concurrent: Maximum concurrent lookups (default: Config.BATCH_MAX_CONCURRENT)
        max_search_time: Per-target timeout in seconds (default: Config.MAX_SEARCH_TIME_SECONDS)

    Returns:
        Strategies with confidence above the batch floor, highest first
    """
    thresholds = thresholds or StrategyThresholds.from_config()
    if max_concurrent is None:
        max_concurrent = Config.BATCH_MAX_CONCURRENT
    if max_search_time is None:
        max_search_time = Config.MAX_SEARCH_TIME_SECONDS
    if max_concurrent < 1:
        raise ValueError(f"max_concurrent must be at least 1, got {max_concurrent}")

    engine = ConnectionStrategyEngine(
        graph, thresholds=thresholds, similarity_config=similarity_config, cache=cache
    )

    logger.info(
        f"Discovering connections for {len(targets)} targets - "
        f"max_concurrent: {max_concurrent}, timeout: {max_search_time}s"
    )

    # Use semaphore for controlled concurrency
    semaphore = asyncio.Semaphore(max_concurrent)

    async def discover_with_limit(target: Profile) -> ConnectionStrategy:
        async with semaphore:
            try:
                return await asyncio.wait_for(engine.find(source, target), timeout=max_search_time)
            except asyncio.TimeoutError:
                logger.warning(f"Search for {target.name} timed out after {max_search_time}s")
                return append_notes(
                    build_none_strategy(target),
                    [f"search timed out after {max_search_time:g}s"],
                )

    tasks = [discover_with_limit(target) for target in targets]
    results = await asyncio.gather(*tasks, return_exceptions=True)

    strategies = []
    for target, result in zip(targets, results):
        if isinstance(result, Exception):
            logger.error(f"Error discovering connection to {target.name}: {result}")
            continue
        if isinstance(result, BaseException):
            raise result
        strategies.append(result)

    # Only recommend good matches
    recommended = [s for s in strategies if s.confidence > thresholds.batch_confidence_floor]
    logger.info(f"Batch complete: {len(recommended)}/{len(targets)} targets above floor")
    return strategies_by_confidence(recommended)


async def compare_strategies(
    source: Profile,
    target: Profile,
    graph: Any,
    thresholds: Optional[StrategyThresholds] = None,
    similarity_config: Optional[SimilarityConfig] = None,
    cache: Optional[SimilarityCache] = None,
) -> List[ConnectionStrategy]:
    """
    Compare the recommended strategy with viable alternatives.

    Useful for showing alternative paths and for validating acceptance-rate
    predictions. The "none" strategy is never included.

    Returns:
        All viable strategies sorted by confidence (highest first)
    """
    engine = ConnectionStrategyEngine(
        graph, thresholds=thresholds, similarity_config=similarity_config, cache=cache
    )
    thresholds = engine.thresholds

    recommended = await engine.find(source, target)
    strategies = [] if recommended.type == StrategyType.NONE else [recommended]

    # Direct outreach alternative (if not already recommended)
    if recommended.type not in (StrategyType.DIRECT_SIMILARITY, StrategyType.COLD_SIMILARITY):
        similarity = calculate_detailed_similarity(source, target, similarity_config)
        if similarity.overall >= thresholds.direct_high:
            strategies.append(
                build_direct_similarity_strategy(target, similarity, ALTERNATIVE_PREFIX)
            )
        elif similarity.overall >= thresholds.cold_personalization:
            strategies.append(
                build_cold_similarity_strategy(target, similarity, ALTERNATIVE_PREFIX)
            )

    # Intermediary alternative (if not already recommended)
    if recommended.type != StrategyType.INTERMEDIARY:
        nodes = await engine.resolve_nodes(source, target)
        candidates = await engine.find_intermediaries(source, target, nodes)
        best, low_confidence = engine.select_intermediary(candidates)
        if best is not None:
            strategies.append(
                build_intermediary_strategy(
                    best, target, low_confidence, reasoning_prefix=ALTERNATIVE_PREFIX
                )
            )

    return strategies_by_confidence(strategies)
