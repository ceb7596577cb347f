"""
Global fixtures for all unit tests.

This conftest provides:
- Environment variable isolation (no WARMPATH_* overrides leak into tests)
- Zero retry backoff so accessor-failure tests run instantly
- A profile factory and a configurable fake graph accessor

These fixtures apply automatically to ALL tests in tests/unit/.
"""

import asyncio
import os
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

import pytest

from warmpath.common.config import Config
from warmpath.common.types import EducationEntry, Profile, ProfileMetadata, Skill, WorkEntry

# Set test environment BEFORE any other imports read it
os.environ["WARMPATH_DEBUG_MODE"] = "false"


@pytest.fixture(autouse=True)
def isolate_environment(monkeypatch):
    """
    Isolate tests from local .env files and shell overrides.

    Config values are read at import time, so the class attributes are
    pinned to their defaults as well.
    """
    for name in list(os.environ):
        if name.startswith("WARMPATH_"):
            monkeypatch.delenv(name, raising=False)

    monkeypatch.setattr(Config, "DIRECT_HIGH_THRESHOLD", 0.65)
    monkeypatch.setattr(Config, "COLD_PERSONALIZATION_THRESHOLD", 0.45)
    monkeypatch.setattr(Config, "INTERMEDIARY_GOOD_THRESHOLD", 0.35)
    monkeypatch.setattr(Config, "BATCH_CONFIDENCE_FLOOR", 0.45)
    monkeypatch.setattr(Config, "BATCH_MAX_CONCURRENT", 100)
    monkeypatch.setattr(Config, "MAX_SEARCH_TIME_SECONDS", 30.0)
    monkeypatch.setattr(Config, "MAX_SAMPLED_CONNECTIONS", 500)
    monkeypatch.setattr(Config, "MAX_INTERMEDIARIES", 5)
    monkeypatch.setattr(Config, "GRAPH_ACCESSOR_ATTEMPTS", 2)
    monkeypatch.setattr(Config, "GRAPH_RETRY_MIN_WAIT", 0)
    monkeypatch.setattr(Config, "GRAPH_RETRY_MAX_WAIT", 0)


# ===== PROFILES =====

def build_profile(
    id: str,
    name: Optional[str] = None,
    work: Iterable[Tuple[str, Optional[str]]] = (),
    education: Iterable[Tuple[str, Optional[str]]] = (),
    skills: Iterable[str] = (),
    location: str = "",
    **extra: Any,
) -> Profile:
    """
    Build a Profile from compact arguments.

    Args:
        id: Profile id
        name: Display name (defaults to the capitalized id)
        work: (company, industry) pairs
        education: (school, field of study) pairs
        skills: Skill names
        location: Free-text location
    """
    return Profile(
        id=id,
        name=name or id.capitalize(),
        location=location,
        work_experience=[WorkEntry(company=company, industry=industry) for company, industry in work],
        education=[EducationEntry(school=school, field_of_study=field) for school, field in education],
        skills=[Skill(name=skill) for skill in skills],
        **extra,
    )


@pytest.fixture
def make_profile():
    """Factory fixture wrapping build_profile."""
    return build_profile


@pytest.fixture
def alice():
    """The source profile used by engine scenarios."""
    return build_profile(
        "alice",
        work=[("Acme", "Software Development")],
        education=[("MIT", "Computer Science")],
        skills=["Python", "Go", "SQL"],
        location="San Francisco, CA",
    )


@pytest.fixture
def dana():
    """Target with very high similarity to alice (~0.70)."""
    return build_profile(
        "dana",
        work=[("Globex", "Software Development")],
        education=[("MIT", "Computer Science")],
        skills=["Python", "Rust", "Java"],
        location="San Francisco, CA",
    )


@pytest.fixture
def erin():
    """Target with moderate similarity to alice (~0.505)."""
    return build_profile(
        "erin",
        work=[("Hooli", "Software Development")],
        education=[("Stanford", "Computer Science")],
        location="Los Angeles, CA",
    )


@pytest.fixture
def frank():
    """Target sharing only an industry with alice (0.30)."""
    return build_profile(
        "frank",
        work=[("Initech", "Software Development")],
        location="Berlin, Germany",
    )


@pytest.fixture
def carol():
    """Good bridge from alice to frank (0.50 to alice, 0.55 to frank)."""
    return build_profile(
        "carol",
        work=[("Initech", "Software Development")],
        education=[("MIT", "Computer Science")],
        location="Berlin, Germany",
    )


@pytest.fixture
def gina():
    """Target sharing only a field of study with alice (0.10)."""
    return build_profile(
        "gina",
        work=[("Umbrella", "Biotechnology")],
        education=[("Stanford", "Computer Science")],
        location="Tokyo",
    )


# ===== GRAPH ACCESSOR =====

class FakeGraph:
    """
    Configurable graph accessor.

    Optional capabilities can be switched off, in which case the method
    raises NotImplementedError. Operations listed in `failing` always raise
    ConnectionError; `fail_times` makes an operation fail N times first.
    """

    def __init__(
        self,
        connections: Optional[Dict[str, Sequence[Profile]]] = None,
        nodes: Optional[Iterable[str]] = None,
        search_result: Any = None,
        mutual_connections: Optional[List[Profile]] = None,
        supports_search: bool = True,
        supports_get_node: bool = True,
        supports_mutual: bool = True,
        failing: Iterable[str] = (),
        fail_times: Optional[Dict[str, int]] = None,
        search_delay: float = 0.0,
    ):
        self.connections = {key: list(value) for key, value in (connections or {}).items()}
        self.nodes = set(nodes) if nodes is not None else set(self.connections)
        self.search_result = search_result
        self.mutual_connections = mutual_connections or []
        self.supports_search = supports_search
        self.supports_get_node = supports_get_node
        self.supports_mutual = supports_mutual
        self.failing = set(failing)
        self.fail_times = dict(fail_times or {})
        self.search_delay = search_delay
        self.calls: List[Tuple[str, tuple]] = []

    def _record(self, operation: str, *args: Any) -> None:
        self.calls.append((operation, args))
        if operation in self.failing:
            raise ConnectionError(f"{operation} unavailable")
        remaining = self.fail_times.get(operation, 0)
        if remaining:
            self.fail_times[operation] = remaining - 1
            raise ConnectionError(f"{operation} flaked")

    def called(self, operation: str) -> List[tuple]:
        return [args for name, args in self.calls if name == operation]

    async def get_connections(self, profile_id: str) -> List[Profile]:
        self._record("get_connections", profile_id)
        return self.connections.get(profile_id, [])

    async def bidirectional_search(self, source_id: str, target_id: str) -> Any:
        if not self.supports_search:
            raise NotImplementedError
        self._record("bidirectional_search", source_id, target_id)
        if self.search_delay:
            await asyncio.sleep(self.search_delay)
        return self.search_result

    def get_node(self, node_id: str) -> Optional[Dict[str, str]]:
        if not self.supports_get_node:
            raise NotImplementedError
        self._record("get_node", node_id)
        return {"id": node_id} if node_id in self.nodes else None

    async def get_mutual_connections(self, id1: str, id2: str) -> List[Profile]:
        if not self.supports_mutual:
            raise NotImplementedError
        self._record("get_mutual_connections", id1, id2)
        return self.mutual_connections


@pytest.fixture
def graph_factory():
    """Factory fixture returning FakeGraph instances."""
    return FakeGraph
