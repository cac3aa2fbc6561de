"""
Muscle fatigue accumulation and recovery.

Each logged exercise deposits fatigue on the muscles it activates; fatigue
then decays exponentially at a muscle-specific rate that sleep quality speeds
up or slows down. Everything here is recomputed from the log on every call.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from enum import Enum
from math import exp
from typing import Any, Dict, Iterable, List, Optional, Tuple

from liftlog.constants import (
    BASELINE_FATIGUE,
    DEFAULT_LOOKBACK_DAYS,
    RECOVERED_FRACTION,
    REST,
    SECONDARY_MUSCLE_FACTOR,
    VOLUME_NORMALIZATION,
)
from liftlog.library import MuscleRef, ReferenceLibrary, default_library
from liftlog.models import (
    ExerciseRecord,
    SleepRecord,
    normalize_log,
    normalize_sleep_log,
    parse_datetime,
    round_half_up,
)
from liftlog.readiness import average_sleep_multiplier, rpe_multiplier

logger = logging.getLogger(__name__)


class RecoveryStatus(Enum):
    """Recovery state of a muscle, worst first."""
    SEVERELY_FATIGUED = "Severely fatigued - avoid training this muscle"
    FATIGUED = "Fatigued - reduce volume or take rest day"
    RECOVERING = "Recovering - light work acceptable"
    GOOD = "Good to train - moderate volume"
    FRESH = "Fresh - ready for high volume"
    FULLY_RECOVERED = "Fully recovered - optimal for PRs"


RECOVERY_STATUS_LADDER = [
    (90.0, RecoveryStatus.SEVERELY_FATIGUED),
    (70.0, RecoveryStatus.FATIGUED),
    (50.0, RecoveryStatus.RECOVERING),
    (30.0, RecoveryStatus.GOOD),
    (15.0, RecoveryStatus.FRESH),
]

RED_THRESHOLD = 70.0
YELLOW_THRESHOLD = 40.0


@dataclass(frozen=True)
class FatigueContribution:
    date: date
    exercise: str
    initial_fatigue: float
    current_fatigue: float
    hours_elapsed: float


@dataclass(frozen=True)
class FatigueState:
    key: str
    name: str
    total_fatigue: float = 0.0
    fatigue_percent: float = 0.0
    status: RecoveryStatus = RecoveryStatus.FULLY_RECOVERED
    color: str = 'green'
    last_trained: Optional[date] = None
    contributions: Tuple[FatigueContribution, ...] = field(default_factory=tuple)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'name': self.name,
            'total_fatigue': round(self.total_fatigue, 4),
            'fatigue_percent': self.fatigue_percent,
            'status': self.status.name,
            'description': self.status.value,
            'color': self.color,
            'last_trained': self.last_trained.isoformat() if self.last_trained else None,
            'contributions': [
                {
                    'date': c.date.isoformat(),
                    'exercise': c.exercise,
                    'initial_fatigue': round(c.initial_fatigue, 4),
                    'current_fatigue': round(c.current_fatigue, 4),
                    'hours_elapsed': round(c.hours_elapsed, 1),
                }
                for c in self.contributions
            ],
        }


def recovery_status(fatigue_percent: float) -> RecoveryStatus:
    for threshold, status in RECOVERY_STATUS_LADDER:
        if fatigue_percent >= threshold:
            return status
    return RecoveryStatus.FULLY_RECOVERED


def recovery_color(fatigue_percent: float) -> str:
    if fatigue_percent >= RED_THRESHOLD:
        return 'red'
    if fatigue_percent >= YELLOW_THRESHOLD:
        return 'yellow'
    return 'green'


def volume_load(exercise: ExerciseRecord) -> float:
    """Sum of per-set weight x reps. Normalised records already carry one weight per set."""
    return exercise.volume_load


def muscle_fatigue(
    exercise: ExerciseRecord,
    sleep_mult: float = 1.0,
    library: Optional[ReferenceLibrary] = None,
) -> Dict[str, float]:
    """
    Fatigue deposited on each muscle by one logged exercise.

    Core formula per muscle:
        (volume / 175) x activation% x RPE x tier x lengthening x sleep
    with secondary muscles scaled by a further 0.7 and added to any primary
    contribution for the same muscle.

    Args:
        exercise: Normalised exercise record.
        sleep_mult: Sleep multiplier for the night before the session.
        library: Reference tables; the default library when omitted.

    Returns:
        Mapping muscle key -> fatigue points. Empty for unknown exercises
        and for exercises without volume.
    """
    library = library or default_library()
    exercise_ref = library.exercise(exercise.name, exercise.variant)
    if exercise_ref is None:
        logger.warning(f"Exercise not found in library: {exercise.name!r}. It contributes no fatigue.")
        return {}

    raw_volume = volume_load(exercise)
    if raw_volume <= 0:
        return {}

    normalized_volume = raw_volume / VOLUME_NORMALIZATION
    base = (normalized_volume
            * rpe_multiplier(exercise.rpe)
            * library.tier_multiplier(exercise_ref.tier))
    lengthening = (exercise_ref.lengthening_multiplier
                   if exercise.lengthening_partial and exercise_ref.lengthening_partials
                   else 1.0)
    scale = base * lengthening * sleep_mult

    fatigue: Dict[str, float] = {}
    for muscle_key, activation in exercise_ref.primary_muscles.items():
        fatigue[muscle_key] = scale * (activation / 100.0)
    for muscle_key, activation in exercise_ref.secondary_muscles.items():
        contribution = scale * (activation / 100.0) * SECONDARY_MUSCLE_FACTOR
        fatigue[muscle_key] = fatigue.get(muscle_key, 0.0) + contribution
    return fatigue


def current_fatigue(
    initial_fatigue: float,
    muscle: MuscleRef,
    hours_elapsed: float,
    recovery_sleep_multiplier: float = 1.0,
) -> float:
    """
    Fatigue remaining after ``hours_elapsed`` of exponential decay:
    initial x e^(-rate x hours / 100), where the muscle's base rate is scaled
    by (2 - sleep multiplier) so better sleep recovers faster.
    Snaps to 0 once under 1% of the initial value.
    """
    if initial_fatigue <= 0 or hours_elapsed < 0:
        return 0.0

    adjusted_rate = muscle.base_decay_rate * (2.0 - recovery_sleep_multiplier)
    remaining = initial_fatigue * exp(-adjusted_rate * hours_elapsed / 100.0)
    return 0.0 if remaining < initial_fatigue * RECOVERED_FRACTION else remaining


def _records_on(sleep_log: List[SleepRecord], day: date) -> List[SleepRecord]:
    return [record for record in sleep_log if record.date == day]


def _records_between(sleep_log: List[SleepRecord], start: date, end: date) -> List[SleepRecord]:
    return [record for record in sleep_log if start <= record.date <= end]


def evaluate(
    workout_log: Iterable[Any],
    sleep_log: Iterable[Any],
    now: Any,
    lookback_days: int = DEFAULT_LOOKBACK_DAYS,
    library: Optional[ReferenceLibrary] = None,
    rest_marker: str = REST,
) -> Dict[str, FatigueState]:
    """
    Current fatigue of every muscle in the library.

    Workouts logged within ``lookback_days`` of ``now`` deposit fatigue using
    the sleep of their own night, then decay using the average sleep logged
    since. Muscles the exercise library references but the muscle table
    lacks are skipped.

    Returns:
        Mapping muscle key -> FatigueState, in library order.
    """
    library = library or default_library()
    entries = normalize_log(workout_log, rest_marker)
    sleeps = normalize_sleep_log(sleep_log)
    now = parse_datetime(now)
    cutoff = now - timedelta(days=lookback_days)

    totals: Dict[str, float] = {key: 0.0 for key in library.muscles}
    contributions: Dict[str, List[FatigueContribution]] = {key: [] for key in library.muscles}
    last_trained: Dict[str, Optional[date]] = {key: None for key in library.muscles}

    for entry in entries:
        workout_at = datetime(entry.date.year, entry.date.month, entry.date.day)
        if not cutoff <= workout_at <= now:
            continue
        if entry.is_rest(rest_marker) or not entry.exercises:
            continue

        hours_elapsed = (now - workout_at).total_seconds() / 3600.0
        creation_mult = average_sleep_multiplier(_records_on(sleeps, entry.date))
        recovery_mult = average_sleep_multiplier(_records_between(sleeps, entry.date, now.date()))

        for exercise in entry.exercises:
            for muscle_key, initial in muscle_fatigue(exercise, creation_mult, library).items():
                muscle = library.muscle(muscle_key)
                if muscle is None:
                    logger.debug(f"Muscle {muscle_key!r} from {exercise.name!r} is not in the muscle table; skipping.")
                    continue
                remaining = current_fatigue(initial, muscle, hours_elapsed, recovery_mult)
                totals[muscle_key] += remaining
                contributions[muscle_key].append(FatigueContribution(
                    date=entry.date,
                    exercise=exercise.name,
                    initial_fatigue=initial,
                    current_fatigue=remaining,
                    hours_elapsed=hours_elapsed,
                ))
                if last_trained[muscle_key] is None or entry.date > last_trained[muscle_key]:
                    last_trained[muscle_key] = entry.date

    state: Dict[str, FatigueState] = {}
    for key, muscle in library.muscles.items():
        percent = totals[key] * 100.0 / BASELINE_FATIGUE
        state[key] = FatigueState(
            key=key,
            name=muscle.name,
            total_fatigue=totals[key],
            fatigue_percent=round_half_up(percent, 1),
            status=recovery_status(percent),
            color=recovery_color(percent),
            last_trained=last_trained[key],
            contributions=tuple(contributions[key]),
        )
    return state
