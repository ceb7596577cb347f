"""
Unit tests for warmpath/pathfinder/memory_graph.py

Tests the in-memory graph accessor:
- Graph document loading (camelCase and snake_case profiles)
- Alias resolution by email and name
- Bidirectional BFS shortest path bounded by max_hops
- End-to-end mutual strategy through the engine
"""

import json
import logging

import pytest

from warmpath.common.types import Profile
from warmpath.pathfinder.engine import find_connection_strategy
from warmpath.pathfinder.memory_graph import InMemoryGraph
from warmpath.pathfinder.types import StrategyType


@pytest.fixture
def chain_document():
    """a - b - c - d - e, plus an isolated f."""
    return {
        "profiles": [
            {"id": "a", "name": "Ann", "email": "ann@example.com"},
            {"id": "b", "name": "Ben"},
            {"id": "c", "name": "Cy", "workExperience": [{"company": "Acme"}]},
            {"id": "d", "name": "Di"},
            {"id": "e", "name": "Ed"},
            {"id": "f", "name": "Flo"},
        ],
        "connections": [["a", "b"], ["b", "c"], ["c", "d"], ["d", "e"]],
    }


@pytest.fixture
def chain(chain_document):
    return InMemoryGraph.from_dict(chain_document)


def path_ids(result):
    return [profile.id for profile in result["path"]]


class TestConstruction:
    """Tests for building graphs."""

    def test_from_dict(self, chain):
        assert len(chain) == 6
        assert chain.get_node("c").work_experience[0].company == "Acme"

    def test_from_json_file(self, tmp_path, chain_document):
        path = tmp_path / "graph.json"
        path.write_text(json.dumps(chain_document), encoding="utf-8")

        graph = InMemoryGraph.from_json_file(path, max_hops=2)

        assert len(graph) == 6
        assert graph.max_hops == 2

    def test_invalid_json_file_is_logged(self, tmp_path, caplog):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")

        with caplog.at_level(logging.ERROR, logger="warmpath.pathfinder.memory_graph"):
            with pytest.raises(ValueError):
                InMemoryGraph.from_json_file(path)

        assert "load graph" in caplog.text

    def test_alias_lookup(self, chain):
        assert chain.get_node("ann@example.com").id == "a"
        assert chain.get_node("Ben").id == "b"
        assert chain.get_node("nobody") is None

    def test_unknown_profile_in_connection(self):
        with pytest.raises(ValueError, match="Unknown profile in connection: zed"):
            InMemoryGraph([Profile(id="a")], [("a", "zed")])

    def test_self_loops_are_ignored(self):
        graph = InMemoryGraph([Profile(id="a")], [("a", "a")])
        assert graph.get_mutual_connections("a", "a") == []


class TestAccessorMethods:
    """Tests for the accessor protocol methods."""

    @pytest.mark.asyncio
    async def test_get_connections(self, chain):
        connections = await chain.get_connections("b")
        assert [p.id for p in connections] == ["a", "c"]

    @pytest.mark.asyncio
    async def test_get_connections_unknown(self, chain):
        assert await chain.get_connections("nobody") == []

    def test_mutual_connections(self, chain):
        assert [p.id for p in chain.get_mutual_connections("a", "c")] == ["b"]
        assert chain.get_mutual_connections("a", "nobody") == []


class TestBidirectionalSearch:
    """Tests for the bounded shortest-path search."""

    @pytest.mark.asyncio
    async def test_direct_neighbours(self, chain):
        result = await chain.bidirectional_search("a", "b")
        assert path_ids(result) == ["a", "b"]
        assert result["probability"] == pytest.approx(0.85)

    @pytest.mark.asyncio
    async def test_two_hops(self, chain):
        result = await chain.bidirectional_search("a", "c")
        assert path_ids(result) == ["a", "b", "c"]
        assert result["probability"] == pytest.approx(0.65)
        assert result["mutual_connections"] == 1

    @pytest.mark.asyncio
    async def test_three_hops(self, chain):
        result = await chain.bidirectional_search("a", "d")
        assert path_ids(result) == ["a", "b", "c", "d"]
        assert result["probability"] == pytest.approx(0.45)
        assert result["mutual_connections"] == 0

    @pytest.mark.asyncio
    async def test_reverse_direction(self, chain):
        result = await chain.bidirectional_search("d", "a")
        assert path_ids(result) == ["d", "c", "b", "a"]

    @pytest.mark.asyncio
    async def test_beyond_max_hops(self, chain):
        assert await chain.bidirectional_search("a", "e") is None

    @pytest.mark.asyncio
    async def test_max_hops_is_configurable(self, chain_document):
        graph = InMemoryGraph.from_dict(chain_document, max_hops=4)
        result = await graph.bidirectional_search("a", "e")
        assert len(result["path"]) == 5
        assert result["probability"] == pytest.approx(0.30)

    @pytest.mark.asyncio
    async def test_shortest_of_several_paths(self):
        profiles = [Profile(id=x) for x in "abcdx"]
        graph = InMemoryGraph(
            profiles, [("a", "b"), ("b", "c"), ("c", "d"), ("a", "x"), ("x", "d")]
        )
        result = await graph.bidirectional_search("a", "d")
        assert path_ids(result) == ["a", "x", "d"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("source,target", [("a", "f"), ("a", "a"), ("a", "nobody")])
    async def test_no_path(self, chain, source, target):
        assert await chain.bidirectional_search(source, target) is None

    @pytest.mark.asyncio
    async def test_resolves_aliases(self, chain):
        result = await chain.bidirectional_search("ann@example.com", "Cy")
        assert path_ids(result) == ["a", "b", "c"]


class TestEngineIntegration:
    """The in-memory graph drives the full engine."""

    @pytest.mark.asyncio
    async def test_mutual_strategy(self, chain):
        strategy = await find_connection_strategy(chain.get_node("a"), chain.get_node("c"), chain)

        assert strategy.type == StrategyType.MUTUAL
        assert strategy.reasoning == "Found path via 1 intermediary with 1 mutual connections"
        assert strategy.next_steps[0] == "Message Ben (mutual connection)"
        assert strategy.to_dict()["path"]["nodes"][1]["id"] == "b"

    @pytest.mark.asyncio
    async def test_isolated_target_falls_back(self, chain):
        strategy = await find_connection_strategy(chain.get_node("a"), chain.get_node("f"), chain)
        assert strategy.type == StrategyType.NONE
