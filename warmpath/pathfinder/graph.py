"""
Graph accessor boundary.

The engine never owns graph data. Callers pass any object implementing:

    async get_connections(profile_id) -> list[Profile]           (required)
    async bidirectional_search(source_id, target_id) -> result   (optional)
    get_node(node_id) -> node or None                            (optional, sync or async)
    get_mutual_connections(id1, id2) -> list or int              (optional, sync or async)

An optional method that is missing, or raises NotImplementedError, marks the
capability as unsupported and the stage needing it is skipped. Any other
failure is retried with exponential backoff and then raised as
GraphAccessorError.
"""

import inspect
import logging
from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Protocol, Sequence

from tenacity import (
    AsyncRetrying,
    retry_if_not_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from warmpath.common.config import Config
from warmpath.common.error_handling import GraphAccessorError
from warmpath.common.types import Profile
from warmpath.pathfinder.types import PathSearchResult

logger = logging.getLogger(__name__)

# Returned by call_optional when the accessor lacks a capability
UNSUPPORTED = object()


class GraphAccessor(Protocol):
    """Minimal accessor contract; optional methods are detected at runtime."""

    async def get_connections(self, profile_id: str) -> Sequence[Profile]:
        ...


@dataclass(frozen=True)
class NodeLookup:
    """
    Where a profile sits in the graph.

    node_id is None when the accessor reports the profile as absent.
    confirmed is True only when get_node positively found the node.
    """

    node_id: Optional[str]
    confirmed: bool = False

    @property
    def found(self) -> bool:
        return self.node_id is not None


def capability(graph: Any, name: str) -> Optional[Callable]:
    """Return the accessor method if the graph exposes it."""
    method = getattr(graph, name, None)
    return method if callable(method) else None


async def call_accessor(operation: str, func: Callable, *args: Any) -> Any:
    """
    Call an accessor method (sync or async) with retries.

    NotImplementedError passes through untouched so callers can treat it as
    an unsupported capability.

    Raises:
        GraphAccessorError: after Config.GRAPH_ACCESSOR_ATTEMPTS failed attempts
    """
    try:
        async for attempt in AsyncRetrying(
            stop=stop_after_attempt(Config.GRAPH_ACCESSOR_ATTEMPTS),
            wait=wait_exponential(min=Config.GRAPH_RETRY_MIN_WAIT, max=Config.GRAPH_RETRY_MAX_WAIT),
            retry=retry_if_not_exception_type(NotImplementedError),
            reraise=True,
        ):
            with attempt:
                result = func(*args)
                if inspect.isawaitable(result):
                    result = await result
        return result
    except NotImplementedError:
        raise
    except Exception as e:
        logger.error(f"Graph accessor {operation} failed: {e}")
        raise GraphAccessorError(operation, str(e), e) from e


async def call_optional(graph: Any, name: str, *args: Any) -> Any:
    """Call an optional accessor method; UNSUPPORTED if the graph lacks it."""
    method = capability(graph, name)
    if method is None:
        return UNSUPPORTED
    try:
        return await call_accessor(name, method, *args)
    except NotImplementedError:
        logger.debug(f"Graph accessor does not implement {name}")
        return UNSUPPORTED


async def get_connections(graph: Any, profile_id: str) -> List[Profile]:
    """Fetch first-degree connections through the required accessor method."""
    connections = await call_accessor("get_connections", graph.get_connections, profile_id)
    return list(connections or [])


async def find_node_id(graph: Any, profile: Profile) -> NodeLookup:
    """
    Locate a profile in the graph.

    Tries id, email, name and public id in order. Without a working get_node
    the first available identifier is assumed to be the node id.
    """
    candidates = profile.candidate_ids()
    if not candidates:
        return NodeLookup(node_id=None)

    for candidate in candidates:
        node = await call_optional(graph, "get_node", candidate)
        if node is UNSUPPORTED:
            return NodeLookup(node_id=candidates[0], confirmed=False)
        if node:
            return NodeLookup(node_id=candidate, confirmed=True)

    return NodeLookup(node_id=None)


# ===== PATH SEARCH RESPONSE NORMALIZER =====

def _field(raw: Any, *names: str) -> Any:
    for name in names:
        if isinstance(raw, dict):
            if name in raw:
                return raw[name]
        elif hasattr(raw, name):
            return getattr(raw, name)
    return None


def normalize_path_result(raw: Any) -> Optional[PathSearchResult]:
    """
    Normalize path-search responses into a PathSearchResult.

    Supports:
      - Dict responses: {"path": [...], "probability": 0.8, "mutual_connections": 3}
      - camelCase dicts: {"mutualConnections": 3}
      - Objects exposing .path / .probability / .mutual_connections

    Returns:
        PathSearchResult, or None when no path was found
    """
    if not raw:
        return None

    path = _field(raw, "path")
    if not path:
        return None

    probability = _field(raw, "probability", "success_probability")
    mutual = _field(raw, "mutual_connections", "mutualConnections")

    return PathSearchResult(
        path=tuple(path),
        probability=min(max(float(probability or 0.0), 0.0), 1.0),
        mutual_connections=int(mutual) if mutual is not None else None,
    )


async def count_mutual_connections(graph: Any, id1: str, id2: str) -> Optional[int]:
    """Mutual connection count from the optional accessor method, if supported."""
    result = await call_optional(graph, "get_mutual_connections", id1, id2)
    if result is UNSUPPORTED or result is None:
        return None
    if isinstance(result, int):
        return result
    return len(result)
