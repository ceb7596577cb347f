"""
In-memory graph accessor.

Implements the full accessor protocol over an undirected adjacency map, with
a bidirectional breadth-first path search bounded by a maximum hop count.
Used by the command-line driver and the test suite.

Graph document format:
    {
        "profiles": [{"id": "alice", "name": "Alice", ...}, ...],
        "connections": [["alice", "bob"], ["bob", "carol"]]
    }
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple, Union

from warmpath.common.error_handling import log_on_exception
from warmpath.common.types import Profile
from warmpath.similarity.acceptance_estimator import mutual_connection_acceptance_rate

logger = logging.getLogger(__name__)

DEFAULT_MAX_HOPS = 3


class InMemoryGraph:
    """Undirected professional graph held in memory."""

    def __init__(
        self,
        profiles: Iterable[Profile] = (),
        connections: Iterable[Sequence[str]] = (),
        max_hops: int = DEFAULT_MAX_HOPS,
    ):
        self.max_hops = max_hops
        self._profiles: Dict[str, Profile] = {}
        self._aliases: Dict[str, str] = {}
        # Insertion-ordered neighbour maps keep searches deterministic
        self._adjacency: Dict[str, Dict[str, None]] = {}

        for profile in profiles:
            self.add_profile(profile)
        for a, b in connections:
            self.add_connection(a, b)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], max_hops: int = DEFAULT_MAX_HOPS) -> "InMemoryGraph":
        """Build a graph from a parsed graph document."""
        profiles = [Profile.model_validate(raw) for raw in data.get("profiles", [])]
        connections = [tuple(pair) for pair in data.get("connections", [])]
        return cls(profiles, connections, max_hops=max_hops)

    @classmethod
    def from_json_file(cls, path: Union[str, Path], max_hops: int = DEFAULT_MAX_HOPS) -> "InMemoryGraph":
        with log_on_exception(logger, f"load graph {path}", level=logging.ERROR):
            with open(path, "r", encoding="utf-8") as f:
                return cls.from_dict(json.load(f), max_hops=max_hops)

    # ===== Construction =====

    def add_profile(self, profile: Profile) -> None:
        key = profile.key
        self._profiles[key] = profile
        self._adjacency.setdefault(key, {})
        for alias in profile.candidate_ids():
            self._aliases.setdefault(alias, key)

    def add_connection(self, a: str, b: str) -> None:
        key_a = self._resolve(a)
        key_b = self._resolve(b)
        if key_a is None or key_b is None:
            missing = a if key_a is None else b
            raise ValueError(f"Unknown profile in connection: {missing}")
        if key_a == key_b:
            return
        self._adjacency[key_a][key_b] = None
        self._adjacency[key_b][key_a] = None

    def _resolve(self, node_id: str) -> Optional[str]:
        if node_id in self._profiles:
            return node_id
        return self._aliases.get(node_id)

    def __len__(self) -> int:
        return len(self._profiles)

    # ===== Accessor protocol =====

    def get_node(self, node_id: str) -> Optional[Profile]:
        key = self._resolve(node_id)
        return self._profiles[key] if key is not None else None

    async def get_connections(self, profile_id: str) -> List[Profile]:
        key = self._resolve(profile_id)
        if key is None:
            return []
        return [self._profiles[neighbour] for neighbour in self._adjacency[key]]

    def get_mutual_connections(self, id1: str, id2: str) -> List[Profile]:
        key1 = self._resolve(id1)
        key2 = self._resolve(id2)
        if key1 is None or key2 is None:
            return []
        neighbours2 = self._adjacency[key2]
        return [self._profiles[n] for n in self._adjacency[key1] if n in neighbours2]

    async def bidirectional_search(self, source_id: str, target_id: str) -> Optional[Dict[str, Any]]:
        """
        Shortest path between two profiles within max_hops.

        Returns:
            {"path": [Profile, ...], "probability": float, "mutual_connections": int}
            or None when no path exists within the hop limit
        """
        source = self._resolve(source_id)
        target = self._resolve(target_id)
        if source is None or target is None or source == target:
            return None

        path = self._shortest_path(source, target)
        if path is None:
            return None

        return {
            "path": [self._profiles[key] for key in path],
            "probability": mutual_connection_acceptance_rate(len(path) - 1),
            "mutual_connections": len(self.get_mutual_connections(source, target)),
        }

    # ===== Search =====

    def _expand(
        self,
        frontier: List[str],
        parents: Dict[str, Optional[str]],
        other_parents: Dict[str, Optional[str]],
    ) -> Tuple[List[str], Optional[str]]:
        next_frontier = []
        meeting = None
        for node in frontier:
            for neighbour in self._adjacency[node]:
                if neighbour in parents:
                    continue
                parents[neighbour] = node
                next_frontier.append(neighbour)
                if meeting is None and neighbour in other_parents:
                    meeting = neighbour
        return next_frontier, meeting

    def _shortest_path(self, source: str, target: str) -> Optional[List[str]]:
        forward: Dict[str, Optional[str]] = {source: None}
        backward: Dict[str, Optional[str]] = {target: None}
        forward_frontier = [source]
        backward_frontier = [target]

        # Each full level expansion adds exactly one hop to any meeting path
        for _ in range(self.max_hops):
            if not forward_frontier or not backward_frontier:
                return None
            if len(forward_frontier) <= len(backward_frontier):
                forward_frontier, meeting = self._expand(forward_frontier, forward, backward)
            else:
                backward_frontier, meeting = self._expand(backward_frontier, backward, forward)
            if meeting is not None:
                return self._join(meeting, forward, backward)
        return None

    @staticmethod
    def _join(
        meeting: str,
        forward: Dict[str, Optional[str]],
        backward: Dict[str, Optional[str]],
    ) -> List[str]:
        path = []
        node: Optional[str] = meeting
        while node is not None:
            path.append(node)
            node = forward[node]
        path.reverse()

        node = backward[meeting]
        while node is not None:
            path.append(node)
            node = backward[node]
        return path
