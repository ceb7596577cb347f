"""Connection strategy engine, graph accessor boundary, batch and calibration helpers."""

from warmpath.pathfinder.batch import batch_discover_connections, compare_strategies
from warmpath.pathfinder.calibration import (
    CalibrationRecord,
    calculate_calibration_metrics,
    track_connection_result,
)
from warmpath.pathfinder.engine import ConnectionStrategyEngine, find_connection_strategy
from warmpath.pathfinder.graph import GraphAccessor, find_node_id
from warmpath.pathfinder.memory_graph import InMemoryGraph
from warmpath.pathfinder.types import (
    ConnectionPath,
    ConnectionStrategy,
    StrategyThresholds,
    StrategyType,
)

__all__ = [
    "CalibrationRecord",
    "ConnectionPath",
    "ConnectionStrategy",
    "ConnectionStrategyEngine",
    "GraphAccessor",
    "InMemoryGraph",
    "StrategyThresholds",
    "StrategyType",
    "batch_discover_connections",
    "calculate_calibration_metrics",
    "compare_strategies",
    "find_connection_strategy",
    "find_node_id",
    "track_connection_result",
]
