"""
Acceptance-rate calibration.

Track actual connection outcomes against the predicted acceptance rate to:
- Validate research-backed thresholds
- Tune acceptance rate formulas
- A/B test different approaches
"""

from collections import defaultdict
from dataclasses import asdict, dataclass
from typing import Any, Dict, Iterable, List, Mapping, Union

from warmpath.pathfinder.types import ConnectionStrategy


@dataclass(frozen=True)
class CalibrationRecord:
    """One connection attempt: what was predicted and what happened."""

    predicted: float
    actual: float
    strategy: str
    error: float

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def track_connection_result(strategy: ConnectionStrategy, accepted: bool) -> CalibrationRecord:
    """
    Record the outcome of a connection attempt.

    Call this after the user attempts a connection.

    Args:
        strategy: The strategy that was recommended
        accepted: Whether the connection was accepted

    Returns:
        CalibrationRecord for later analysis
    """
    actual = 1.0 if accepted else 0.0
    return CalibrationRecord(
        predicted=strategy.estimated_acceptance_rate,
        actual=actual,
        strategy=strategy.type.value,
        error=abs(strategy.estimated_acceptance_rate - actual),
    )


def _as_record(record: Union[CalibrationRecord, Mapping[str, Any]]) -> CalibrationRecord:
    if isinstance(record, CalibrationRecord):
        return record
    predicted = float(record["predicted"])
    actual = float(record["actual"])
    return CalibrationRecord(
        predicted=predicted,
        actual=actual,
        strategy=str(record["strategy"]),
        error=float(record.get("error", abs(predicted - actual))),
    )


def calculate_calibration_metrics(
    records: Iterable[Union[CalibrationRecord, Mapping[str, Any]]],
) -> Dict[str, Dict[str, float]]:
    """
    Calibration metrics grouped by strategy type.

    Returns:
        {strategy: {"avg_predicted", "avg_actual", "count", "error"}} where
        error is |avg_predicted - avg_actual|
    """
    by_strategy: Dict[str, List[CalibrationRecord]] = defaultdict(list)
    for record in records:
        parsed = _as_record(record)
        by_strategy[parsed.strategy].append(parsed)

    metrics = {}
    for strategy, results in by_strategy.items():
        avg_predicted = sum(r.predicted for r in results) / len(results)
        avg_actual = sum(r.actual for r in results) / len(results)
        metrics[strategy] = {
            "avg_predicted": avg_predicted,
            "avg_actual": avg_actual,
            "count": len(results),
            "error": abs(avg_predicted - avg_actual),
        }
    return metrics
