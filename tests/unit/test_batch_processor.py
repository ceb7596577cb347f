"""
Unit tests for warmpath/pathfinder/batch.py

Tests batch discovery and strategy comparison:
- Confidence floor filtering and ordering
- Per-target timeouts fall back to "none"
- Failed targets are logged and omitted
- Alternatives are prefixed and sorted by confidence
"""

import logging

import pytest

from warmpath.pathfinder.batch import (
    ALTERNATIVE_PREFIX,
    batch_discover_connections,
    compare_strategies,
)
from warmpath.pathfinder.types import StrategyThresholds, StrategyType


@pytest.fixture
def network(graph_factory):
    """Graph holding every profile, with no connections."""
    return graph_factory(
        connections={"alice": [], "dana": [], "erin": [], "frank": [], "gina": []}
    )


@pytest.fixture
def bridged_network(graph_factory, carol):
    """Graph where alice knows carol."""
    return graph_factory(
        connections={"alice": [carol], "dana": [], "erin": [], "frank": [], "gina": []}
    )


class TestBatchDiscoverConnections:
    """Tests for batch_discover_connections."""

    @pytest.mark.asyncio
    async def test_filters_below_floor_and_sorts(self, network, alice, dana, erin, frank, gina):
        strategies = await batch_discover_connections(alice, [gina, erin, frank, dana], network)

        # frank (none, 0.30) and gina (none, 0.10) fall below 0.45
        assert [s.type for s in strategies] == [
            StrategyType.DIRECT_SIMILARITY,
            StrategyType.COLD_SIMILARITY,
        ]
        assert strategies[0].confidence == pytest.approx(0.70)
        assert strategies[1].confidence == pytest.approx(0.505)

    @pytest.mark.asyncio
    async def test_custom_floor(self, bridged_network, alice, frank, gina):
        thresholds = StrategyThresholds(batch_confidence_floor=0.2)

        strategies = await batch_discover_connections(
            alice, [frank, gina], bridged_network, thresholds=thresholds
        )

        assert [s.type for s in strategies] == [StrategyType.INTERMEDIARY]

    @pytest.mark.asyncio
    async def test_empty_targets(self, network, alice):
        assert await batch_discover_connections(alice, [], network) == []

    @pytest.mark.asyncio
    async def test_limited_concurrency(self, network, alice, dana, erin):
        strategies = await batch_discover_connections(alice, [dana, erin], network, max_concurrent=1)
        assert len(strategies) == 2

    @pytest.mark.asyncio
    async def test_timeout_falls_back_to_none(self, graph_factory, alice, dana):
        graph = graph_factory(
            connections={"alice": [], "dana": []},
            search_result={"path": ["alice", "dana"], "probability": 0.85},
            search_delay=1.0,
        )
        # Keep zero-confidence results so the fallback is visible
        thresholds = StrategyThresholds(batch_confidence_floor=-1.0)

        strategies = await batch_discover_connections(
            alice, [dana], graph, thresholds=thresholds, max_search_time=0.05
        )

        assert len(strategies) == 1
        assert strategies[0].type == StrategyType.NONE
        assert strategies[0].confidence == 0.0
        assert strategies[0].reasoning.endswith("(search timed out after 0.05s)")

    @pytest.mark.asyncio
    async def test_zero_search_time_is_not_replaced_by_default(self, graph_factory, alice, dana):
        graph = graph_factory(
            connections={"alice": [], "dana": []},
            search_result={"path": ["alice", "dana"], "probability": 0.85},
            search_delay=1.0,
        )
        thresholds = StrategyThresholds(batch_confidence_floor=-1.0)

        strategies = await batch_discover_connections(
            alice, [dana], graph, thresholds=thresholds, max_search_time=0
        )

        assert strategies[0].type == StrategyType.NONE
        assert strategies[0].reasoning.endswith("(search timed out after 0s)")

    @pytest.mark.asyncio
    async def test_zero_concurrency_is_rejected(self, network, alice, dana):
        with pytest.raises(ValueError, match="max_concurrent"):
            await batch_discover_connections(alice, [dana], network, max_concurrent=0)

    @pytest.mark.asyncio
    async def test_failed_target_is_omitted(self, graph_factory, caplog, alice, dana, frank):
        graph = graph_factory(
            connections={"alice": [], "dana": [], "frank": []},
            failing={"get_connections"},
        )

        with caplog.at_level(logging.ERROR, logger="warmpath.pathfinder.batch"):
            strategies = await batch_discover_connections(alice, [dana, frank], graph)

        # dana resolves at the direct stage without touching connections
        assert [s.type for s in strategies] == [StrategyType.DIRECT_SIMILARITY]
        assert "Error discovering connection to Frank" in caplog.text


class TestCompareStrategies:
    """Tests for compare_strategies."""

    @pytest.mark.asyncio
    async def test_direct_with_intermediary_alternative(self, graph_factory, alice, carol, dana):
        graph = graph_factory(connections={"alice": [carol], "dana": []})

        strategies = await compare_strategies(alice, dana, graph)

        assert [s.type for s in strategies] == [
            StrategyType.DIRECT_SIMILARITY,
            StrategyType.INTERMEDIARY,
        ]
        assert not strategies[0].reasoning.startswith(ALTERNATIVE_PREFIX)
        assert strategies[1].reasoning.startswith("Alternative: Carol is similar to Dana (50% match)")
        assert strategies[1].confidence == pytest.approx(0.4)

    @pytest.mark.asyncio
    async def test_mutual_with_cold_alternative(self, graph_factory, alice, erin):
        graph = graph_factory(
            connections={"alice": [], "erin": []},
            search_result={"path": ["alice", "bob", "erin"], "probability": 0.65, "mutual_connections": 1},
        )

        strategies = await compare_strategies(alice, erin, graph)

        assert [s.type for s in strategies] == [StrategyType.MUTUAL, StrategyType.COLD_SIMILARITY]
        assert strategies[1].reasoning.startswith("Alternative: Moderate profile similarity")

    @pytest.mark.asyncio
    async def test_mutual_with_direct_alternative(self, graph_factory, alice, dana):
        graph = graph_factory(
            connections={"alice": [], "dana": []},
            search_result={"path": ["alice", "dana"], "probability": 0.85, "mutual_connections": 0},
        )

        strategies = await compare_strategies(alice, dana, graph)

        assert [s.type for s in strategies] == [StrategyType.MUTUAL, StrategyType.DIRECT_SIMILARITY]
        assert strategies[1].reasoning.startswith("Alternative: Very high profile similarity")

    @pytest.mark.asyncio
    async def test_intermediary_only(self, bridged_network, alice, frank):
        strategies = await compare_strategies(alice, frank, bridged_network)
        assert [s.type for s in strategies] == [StrategyType.INTERMEDIARY]

    @pytest.mark.asyncio
    async def test_none_is_never_included(self, bridged_network, alice, gina):
        # carol is too far from gina to bridge
        assert await compare_strategies(alice, gina, bridged_network) == []
