"""
Record types for training and sleep logs, and the normalisation that turns
raw stored dictionaries into them.

Stored logs come in several historical shapes: camelCase keys from the
browser app, a single scalar ``weight`` instead of per-set ``weights``,
missing ``rpe`` and missing cycle indices. Everything is normalised here once
so the engines never branch on shape.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Iterable, List, Mapping, Optional, Sequence, Tuple

from liftlog.constants import REST

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExerciseRecord:
    name: str
    weights: Tuple[float, ...] = ()
    reps: Tuple[int, ...] = ()
    rpe: Optional[float] = None
    variant: Optional[str] = None
    lengthening_partial: bool = False

    @property
    def volume_load(self) -> float:
        """Sum of weight x reps over every set."""
        return sum(w * r for w, r in zip(self.weights, self.reps))

    @property
    def peak_weight(self) -> float:
        positive = [w for w in self.weights if w > 0]
        return max(positive) if positive else 0.0


@dataclass(frozen=True)
class LogEntry:
    date: date
    actual_type: str
    planned_type: Optional[str] = None
    cycle_index: Optional[int] = None
    exercises: Tuple[ExerciseRecord, ...] = ()

    def is_rest(self, rest_marker: str = REST) -> bool:
        return self.actual_type == rest_marker

    def is_skipped_training_day(self, rest_marker: str = REST) -> bool:
        """Rested on a day the plan said to train."""
        return (self.actual_type == rest_marker
                and self.planned_type is not None
                and self.planned_type != rest_marker)

    def find_exercise(self, name: str) -> Optional[ExerciseRecord]:
        for exercise in self.exercises:
            if exercise.name == name:
                return exercise
        return None

    @property
    def total_volume(self) -> float:
        return sum(ex.volume_load for ex in self.exercises)

    @property
    def total_sets(self) -> int:
        return sum(len(ex.reps) for ex in self.exercises)


@dataclass(frozen=True)
class SleepRecord:
    date: date
    sleep_hours: Optional[float] = None
    deep_sleep_percent: Optional[float] = None
    recovery_rating: Optional[float] = None
    weight: Optional[float] = None


@dataclass(frozen=True)
class Cycle:
    slots: Tuple[str, ...]
    rest_marker: str = REST

    def __post_init__(self):
        if not self.slots:
            raise ValueError("A training cycle needs at least one slot.")

    def __len__(self) -> int:
        return len(self.slots)

    def __getitem__(self, index: int) -> str:
        return self.slots[index % len(self.slots)]

    def is_rest(self, label: Optional[str]) -> bool:
        return label == self.rest_marker

    def index_of(self, label: Optional[str]) -> int:
        """First position of ``label`` in the cycle, or -1."""
        try:
            return self.slots.index(label)
        except ValueError:
            return -1

    def training_labels(self) -> List[str]:
        """Distinct non-rest labels in order of first appearance."""
        seen: List[str] = []
        for slot in self.slots:
            if not self.is_rest(slot) and slot not in seen:
                seen.append(slot)
        return seen


# --- Field aliases accepted from stored data ---
_ACTUAL_TYPE_KEYS = ('actual_type', 'actualType', 'trainingType', 'training_type')
_PLANNED_TYPE_KEYS = ('planned_type', 'plannedType', 'plannedTrainingType', 'planned_training_type')
_CYCLE_INDEX_KEYS = ('cycle_index', 'cycleIndex', 'cycleDay', 'cycle_day')
_SLEEP_HOURS_KEYS = ('sleep_hours', 'sleepHours')
_DEEP_SLEEP_KEYS = ('deep_sleep_percent', 'deepSleepPercent')
_RECOVERY_RATING_KEYS = ('recovery_rating', 'recoveryRating')
_LENGTHENING_KEYS = ('lengthening_partial', 'isLengtheningPartial', 'is_lengthening_partial')


def _first_present(raw: Mapping[str, Any], keys: Sequence[str]) -> Any:
    for key in keys:
        if raw.get(key) is not None:
            return raw[key]
    return None


def _to_float(value: Any, default: float = 0.0) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        return default


def _to_optional_float(value: Any) -> Optional[float]:
    if value is None or value == '':
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def round_half_up(value: float, ndigits: int = 0) -> float:
    """Rounds halves upward (2.5 -> 3, 12.25 -> 12.3) instead of to the nearest even digit."""
    scale = 10 ** ndigits
    rounded = math.floor(value * scale + 0.5) / scale
    return int(rounded) if ndigits == 0 else rounded


def parse_date(value: Any) -> date:
    """Accepts a date, a datetime or an ISO ``YYYY-MM-DD`` string."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value.strip()[:10])
        except ValueError:
            pass
    raise ValueError(f"Invalid date: {value!r}")


def parse_datetime(value: Any) -> datetime:
    """Accepts a datetime, a date (midnight) or an ISO string. Result is naive local time."""
    if isinstance(value, datetime):
        return value.replace(tzinfo=None) if value.tzinfo else value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if isinstance(value, str):
        try:
            parsed = datetime.fromisoformat(value.strip().replace('Z', '+00:00'))
        except ValueError:
            raise ValueError(f"Invalid datetime: {value!r}")
        return parsed.replace(tzinfo=None) if parsed.tzinfo else parsed
    raise ValueError(f"Invalid datetime: {value!r}")


def normalize_exercise(raw: Any) -> ExerciseRecord:
    if isinstance(raw, ExerciseRecord):
        return raw
    if not isinstance(raw, Mapping):
        raise ValueError(f"Exercise record must be an object, got {type(raw).__name__}")

    raw_reps = raw.get('reps') or []
    if not isinstance(raw_reps, (list, tuple)):
        raw_reps = [raw_reps]
    reps = tuple(int(_to_float(r)) for r in raw_reps)

    raw_weights = raw.get('weights')
    if isinstance(raw_weights, (list, tuple)):
        weights = [_to_float(w) for w in raw_weights[:len(reps)]]
        weights.extend([0.0] * (len(reps) - len(weights)))
    else:
        # Older records carry one weight for every set
        scalar = raw_weights if raw_weights is not None else raw.get('weight')
        weights = [_to_float(scalar)] * len(reps)

    rpe = _to_optional_float(raw.get('rpe'))
    if rpe is not None and rpe <= 0:
        rpe = None

    return ExerciseRecord(
        name=str(raw.get('name') or '').strip(),
        weights=tuple(weights),
        reps=reps,
        rpe=rpe,
        variant=raw.get('variant') or None,
        lengthening_partial=bool(_first_present(raw, _LENGTHENING_KEYS)),
    )


def normalize_entry(raw: Any, rest_marker: str = REST) -> LogEntry:
    if isinstance(raw, LogEntry):
        return raw
    if not isinstance(raw, Mapping):
        raise ValueError(f"Log entry must be an object, got {type(raw).__name__}")
    if raw.get('date') is None:
        raise ValueError("Log entry is missing 'date'.")

    exercises = tuple(normalize_exercise(ex) for ex in (raw.get('exercises') or []))
    planned_type = _first_present(raw, _PLANNED_TYPE_KEYS)
    actual_type = _first_present(raw, _ACTUAL_TYPE_KEYS)
    if actual_type is None:
        if not exercises:
            actual_type = rest_marker
        elif planned_type is not None and str(planned_type) != rest_marker:
            actual_type = planned_type
        else:
            # trained without a label; still a training day
            actual_type = ''

    cycle_index = _first_present(raw, _CYCLE_INDEX_KEYS)
    if cycle_index is not None:
        try:
            cycle_index = int(cycle_index)
        except (TypeError, ValueError):
            logger.warning(f"Ignoring non-integer cycle index {cycle_index!r} on entry {raw.get('date')}")
            cycle_index = None

    return LogEntry(
        date=parse_date(raw['date']),
        actual_type=str(actual_type),
        planned_type=str(planned_type) if planned_type is not None else None,
        cycle_index=cycle_index,
        exercises=exercises,
    )


def normalize_log(raw_entries: Optional[Iterable[Any]], rest_marker: str = REST) -> List[LogEntry]:
    """Normalise and order a training log: by date, insertion order breaking ties."""
    entries = [normalize_entry(raw, rest_marker) for raw in (raw_entries or [])]
    # sorted() is stable, so same-day entries keep their logged order
    return sorted(entries, key=lambda entry: entry.date)


def sleep_values(raw: Mapping[str, Any]) -> Tuple[Optional[float], Optional[float]]:
    """(sleep hours, deep sleep percent) from a raw sleep mapping; either may be None."""
    return (_to_optional_float(_first_present(raw, _SLEEP_HOURS_KEYS)),
            _to_optional_float(_first_present(raw, _DEEP_SLEEP_KEYS)))


def normalize_sleep_record(raw: Any) -> SleepRecord:
    if isinstance(raw, SleepRecord):
        return raw
    if not isinstance(raw, Mapping):
        raise ValueError(f"Sleep record must be an object, got {type(raw).__name__}")
    if raw.get('date') is None:
        raise ValueError("Sleep record is missing 'date'.")
    sleep_hours, deep_sleep_percent = sleep_values(raw)
    return SleepRecord(
        date=parse_date(raw['date']),
        sleep_hours=sleep_hours,
        deep_sleep_percent=deep_sleep_percent,
        recovery_rating=_to_optional_float(_first_present(raw, _RECOVERY_RATING_KEYS)),
        weight=_to_optional_float(raw.get('weight')),
    )


def normalize_sleep_log(raw_records: Optional[Iterable[Any]]) -> List[SleepRecord]:
    records = [normalize_sleep_record(raw) for raw in (raw_records or [])]
    return sorted(records, key=lambda record: record.date)


def normalize_cycle(raw: Any, rest_marker: str = REST) -> Cycle:
    if isinstance(raw, Cycle):
        return raw
    if not isinstance(raw, (list, tuple)) or not all(isinstance(slot, str) for slot in raw):
        raise ValueError("Training cycle must be a list of workout labels.")
    return Cycle(slots=tuple(raw), rest_marker=rest_marker)
