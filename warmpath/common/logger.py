"""
Logging for strategy lookups.

Every engine log line carries the lookup's run id and the stage that wrote
it, e.g. "[run:3f2a9c1d] [intermediary] Scoring 12 outbound candidates".
The CLI configures the root handler once via setup_logging.
"""

import logging
import os
import sys
from typing import Optional

# Set from WARMPATH_DEBUG_MODE or the CLI --debug flag
_debug_mode = os.getenv("WARMPATH_DEBUG_MODE", "false").lower() == "true"

_FORMATS = {
    "simple": "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    "json": '{"time": "%(asctime)s", "level": "%(levelname)s", "name": "%(name)s", "message": "%(message)s"}',
}


def set_global_debug_mode(enabled: bool) -> None:
    global _debug_mode
    _debug_mode = enabled


class PipelineLogger(logging.LoggerAdapter):
    """Logger adapter that prefixes messages with run id and stage."""

    def __init__(self, name: str, run_id: Optional[str] = None, layer: Optional[str] = None):
        super().__init__(logging.getLogger(name), {})
        self.run_id = run_id
        self.layer = layer

    def with_layer(self, layer: str) -> "PipelineLogger":
        """Same run, different stage tag."""
        return PipelineLogger(self.logger.name, self.run_id, layer)

    def process(self, msg, kwargs):
        prefix = []
        if self.run_id:
            prefix.append(f"[run:{self.run_id[:8]}]")
        if self.layer:
            prefix.append(f"[{self.layer}]")
        if prefix:
            msg = f"{' '.join(prefix)} {msg}"
        return msg, kwargs


def setup_logging(level: str = "INFO", format: str = "simple") -> None:
    """
    Replace root handlers with a single stderr handler.

    stdout stays free for the CLI's JSON output.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR)
        format: "simple" or "json"
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        logging.Formatter(_FORMATS.get(format, _FORMATS["simple"]), datefmt="%Y-%m-%d %H:%M:%S")
    )

    root_logger = logging.getLogger()
    for existing in root_logger.handlers[:]:
        root_logger.removeHandler(existing)
    root_logger.addHandler(handler)
    root_logger.setLevel(log_level)


def get_logger(
    name: str,
    run_id: Optional[str] = None,
    layer: Optional[str] = None,
    debug_mode: Optional[bool] = None,
) -> PipelineLogger:
    """
    Get a pipeline logger.

    Args:
        name: Logger name (usually __name__)
        run_id: Optional lookup identifier
        layer: Optional stage name
        debug_mode: Force DEBUG level on; None defers to the global setting
    """
    if debug_mode is None:
        debug_mode = _debug_mode
    if debug_mode:
        logging.getLogger(name).setLevel(logging.DEBUG)
    return PipelineLogger(name, run_id, layer)
