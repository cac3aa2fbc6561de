"""Session-level training statistics: PRs, volume trend and session grades."""
from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional, Sequence

from liftlog.constants import REST
from liftlog.models import LogEntry, normalize_entry, normalize_log, normalize_sleep_log, round_half_up
from liftlog.readiness import sleep_quality_tier

# Session grade ladder: (min deep sleep %, min working sets, grade), checked in order
GRADE_LADDER = [
    (20.0, 22, 'S++'),
    (15.0, 20, 'S/A+'),
    (12.0, 16, 'A/A+'),
    (10.0, 14, 'B+'),
]


def personal_records(log: Iterable[Any], rest_marker: str = REST) -> List[Dict[str, Any]]:
    """Best peak weight per exercise, heaviest first. The earliest session reaching it wins."""
    records: Dict[str, Dict[str, Any]] = {}
    for entry in normalize_log(log, rest_marker):
        for exercise in entry.exercises:
            peak = exercise.peak_weight
            current = records.get(exercise.name)
            if current is None or peak > current['weight']:
                records[exercise.name] = {
                    'name': exercise.name,
                    'weight': peak,
                    'sets': len(exercise.reps),
                    'reps': '/'.join(str(r) for r in exercise.reps),
                    'date': entry.date.isoformat(),
                }
    return sorted(records.values(), key=lambda pr: -pr['weight'])


def volume_comparison(entry: Any, log: Iterable[Any], rest_marker: str = REST) -> Optional[Dict[str, Any]]:
    """
    Volume change against the most recent earlier session of the same
    training type. None for rest days and when no earlier session with
    volume exists.
    """
    entry = normalize_entry(entry, rest_marker)
    if entry.is_rest(rest_marker):
        return None

    previous: Optional[LogEntry] = None
    for candidate in normalize_log(log, rest_marker):
        if (candidate.actual_type == entry.actual_type
                and candidate.date < entry.date
                and candidate.total_volume > 0):
            previous = candidate
    if previous is None:
        return None

    diff = entry.total_volume - previous.total_volume
    return {
        'diff': diff,
        'percent': round_half_up(diff * 100 / previous.total_volume, 1),
        'is_increase': diff > 0,
        'last_volume': previous.total_volume,
        'last_date': previous.date.isoformat(),
    }


def session_grade(deep_sleep_percent: Optional[float], total_sets: Optional[int]) -> str:
    if deep_sleep_percent is None or total_sets is None:
        return 'N/A'
    for min_deep, min_sets, grade in GRADE_LADDER:
        if deep_sleep_percent >= min_deep and total_sets >= min_sets:
            return grade
    if deep_sleep_percent < 10 and total_sets < 14:
        return 'C'
    return 'B'


def session_summary(entry: Any, sleep_records: Sequence[Any] = (), rest_marker: str = REST) -> Dict[str, Any]:
    """Volume, set count, grade and sleep tier for one logged session."""
    entry = normalize_entry(entry, rest_marker)
    nights = [r for r in normalize_sleep_log(sleep_records) if r.date == entry.date]
    deep = nights[-1].deep_sleep_percent if nights else None
    return {
        'date': entry.date.isoformat(),
        'training_type': entry.actual_type,
        'total_volume': entry.total_volume,
        'total_sets': entry.total_sets,
        'grade': session_grade(deep, entry.total_sets),
        'sleep_tier': sleep_quality_tier(deep),
    }
