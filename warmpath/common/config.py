"""
Configuration loader for the connection-strategy engine.

Loads all settings from environment variables (.env file).
Validates threshold ranges and provides type-safe access.
"""

import os
from typing import Dict

from dotenv import load_dotenv

from warmpath.common.error_handling import ConfigurationError

# Load environment variables from .env file
load_dotenv()


def _env_float(name: str, default: float) -> float:
    return float(os.getenv(name, str(default)))


def _env_int(name: str, default: int) -> int:
    return int(os.getenv(name, str(default)))


class Config:
    """
    Centralized configuration for all engine components.

    Every value can be overridden with a WARMPATH_* environment variable.
    Per-call overrides go through StrategyThresholds / SimilarityConfig instead.
    """

    # ===== Strategy Thresholds =====
    # Direct high similarity (>= 0.65) - "same school" quality
    DIRECT_HIGH_THRESHOLD: float = _env_float("WARMPATH_DIRECT_HIGH_THRESHOLD", 0.65)

    # Cold with personalization (>= 0.45) - above "same industry"
    COLD_PERSONALIZATION_THRESHOLD: float = _env_float(
        "WARMPATH_COLD_PERSONALIZATION_THRESHOLD", 0.45
    )

    # Intermediary path strength (>= 0.35) - viable two-hop path
    INTERMEDIARY_GOOD_THRESHOLD: float = _env_float("WARMPATH_INTERMEDIARY_GOOD_THRESHOLD", 0.35)

    # ===== Batch Discovery =====
    BATCH_CONFIDENCE_FLOOR: float = _env_float("WARMPATH_BATCH_CONFIDENCE_FLOOR", 0.45)
    BATCH_MAX_CONCURRENT: int = _env_int("WARMPATH_BATCH_MAX_CONCURRENT", 100)
    MAX_SEARCH_TIME_SECONDS: float = _env_float("WARMPATH_MAX_SEARCH_TIME_SECONDS", 30.0)

    # ===== Intermediary Search =====
    MAX_SAMPLED_CONNECTIONS: int = _env_int("WARMPATH_MAX_SAMPLED_CONNECTIONS", 500)
    MAX_INTERMEDIARIES: int = _env_int("WARMPATH_MAX_INTERMEDIARIES", 5)
    SIMILARITY_CACHE_TTL_DAYS: int = _env_int("WARMPATH_SIMILARITY_CACHE_TTL_DAYS", 7)

    # ===== Graph Accessor =====
    # Total attempts per accessor call (1 = no retry)
    GRAPH_ACCESSOR_ATTEMPTS: int = _env_int("WARMPATH_GRAPH_ACCESSOR_ATTEMPTS", 2)
    GRAPH_RETRY_MIN_WAIT: float = _env_float("WARMPATH_GRAPH_RETRY_MIN_WAIT", 0.1)
    GRAPH_RETRY_MAX_WAIT: float = _env_float("WARMPATH_GRAPH_RETRY_MAX_WAIT", 2.0)

    # ===== Logging =====
    LOG_LEVEL: str = os.getenv("WARMPATH_LOG_LEVEL", "INFO")
    LOG_FORMAT: str = os.getenv("WARMPATH_LOG_FORMAT", "simple")

    @classmethod
    def thresholds(cls) -> Dict[str, float]:
        """Strategy thresholds keyed by name."""
        return {
            "DIRECT_HIGH_THRESHOLD": cls.DIRECT_HIGH_THRESHOLD,
            "COLD_PERSONALIZATION_THRESHOLD": cls.COLD_PERSONALIZATION_THRESHOLD,
            "INTERMEDIARY_GOOD_THRESHOLD": cls.INTERMEDIARY_GOOD_THRESHOLD,
            "BATCH_CONFIDENCE_FLOOR": cls.BATCH_CONFIDENCE_FLOOR,
        }

    @classmethod
    def validate(cls) -> None:
        """
        Validate that all configuration values are usable.
        Raises ConfigurationError if a value is out of range.
        """
        out_of_range = [
            name for name, value in cls.thresholds().items() if not 0.0 <= value <= 1.0
        ]
        if out_of_range:
            raise ConfigurationError(
                f"Thresholds must be within [0, 1]: {', '.join(out_of_range)}"
            )

        if cls.COLD_PERSONALIZATION_THRESHOLD > cls.DIRECT_HIGH_THRESHOLD:
            raise ConfigurationError(
                "WARMPATH_COLD_PERSONALIZATION_THRESHOLD must not exceed "
                "WARMPATH_DIRECT_HIGH_THRESHOLD."
            )

        positive = {
            "BATCH_MAX_CONCURRENT": cls.BATCH_MAX_CONCURRENT,
            "MAX_SEARCH_TIME_SECONDS": cls.MAX_SEARCH_TIME_SECONDS,
            "MAX_SAMPLED_CONNECTIONS": cls.MAX_SAMPLED_CONNECTIONS,
            "MAX_INTERMEDIARIES": cls.MAX_INTERMEDIARIES,
            "GRAPH_ACCESSOR_ATTEMPTS": cls.GRAPH_ACCESSOR_ATTEMPTS,
        }
        non_positive = [name for name, value in positive.items() if value <= 0]
        if non_positive:
            raise ConfigurationError(
                f"Settings must be positive: {', '.join(non_positive)}"
            )

    @classmethod
    def summary(cls) -> str:
        """Return a summary of the current configuration (safe for logging)."""
        return f"""
Configuration Summary:
  Direct similarity: >= {cls.DIRECT_HIGH_THRESHOLD}
  Cold personalization: >= {cls.COLD_PERSONALIZATION_THRESHOLD}
  Intermediary path strength: >= {cls.INTERMEDIARY_GOOD_THRESHOLD}
  Batch floor: > {cls.BATCH_CONFIDENCE_FLOOR} (max {cls.BATCH_MAX_CONCURRENT} concurrent)
  Max search time: {cls.MAX_SEARCH_TIME_SECONDS}s
  Sampled connections: {cls.MAX_SAMPLED_CONNECTIONS}
  Accessor attempts: {cls.GRAPH_ACCESSOR_ATTEMPTS}
        """.strip()
