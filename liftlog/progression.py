"""Per-exercise performance profiling and next-session targets."""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Iterable, List, Optional

from liftlog.constants import DEFAULT_DEEP_SLEEP_PERCENT, REST, SUGGESTION_HISTORY_LIMIT
from liftlog.models import normalize_log, round_half_up

WEIGHT_UNIT = "lbs"

DELOAD_SLEEP_PERCENT = 12.0  # below this, today is a deload whatever the history says
GOOD_SLEEP_PERCENT = 15.0
MAXED_OUT_RPE = 9.5
MASTERED_RPE = 8.0

DELOAD_FACTOR = 0.85
BACK_OFF_FACTOR = 0.9
WEIGHT_INCREMENT = 5


class PerformanceStatus(Enum):
    """Where an exercise stands relative to its recent history."""
    NEW = "First time logging this! Let's set a baseline."
    NO_RPE = "No RPE logged for the last session. Cannot analyze trend."
    MAXED_OUT = "You hit RPE 10 last session. Recovery comes first."
    MASTERED = "RPE is stable or decreasing. You've mastered this weight."
    PROGRESSING = "You're still working at this weight. Let's get more reps."


def _fmt(weight: float) -> str:
    return f"{weight:g}"


def get_exercise_history(
    exercise_name: str,
    log: Iterable[Any],
    limit: int = SUGGESTION_HISTORY_LIMIT,
    rest_marker: str = REST,
) -> List[Dict[str, Any]]:
    """
    The ``limit`` most recent sessions of ``exercise_name``, oldest first.
    Each session's weight is its heaviest set.
    """
    history: List[Dict[str, Any]] = []
    for entry in reversed(normalize_log(log, rest_marker)):
        exercise = entry.find_exercise(exercise_name)
        if exercise is not None:
            history.append({
                'date': entry.date,
                'weight': exercise.peak_weight,
                'reps': list(exercise.reps),
                'sets': len(exercise.reps),
                'rpe': exercise.rpe,
            })
        if len(history) >= limit:
            break
    history.reverse()
    return history


def rpe_trend(history: List[Dict[str, Any]]) -> str:
    """
    Direction of RPE across sessions at the last session's weight:
    'down' when the same load feels easier, 'up' when harder, else 'flat'.
    """
    if not history:
        return 'flat'
    last_weight = history[-1]['weight']
    at_weight = [s for s in history if s['weight'] == last_weight and s['rpe'] is not None]
    if len(at_weight) < 2:
        return 'flat'
    first_rpe, latest_rpe = at_weight[0]['rpe'], at_weight[-1]['rpe']
    if latest_rpe < first_rpe:
        return 'down'
    if latest_rpe > first_rpe:
        return 'up'
    return 'flat'


def analyze_performance_profile(history: List[Dict[str, Any]]) -> Dict[str, Any]:
    """
    Classifies an exercise history.

    Returns:
        A dictionary containing:
            'status': PerformanceStatus
            'note': str - the status message.
            'last_session': dict or None
            'rpe_trend': str or None - None until an RPE is available.
    """
    if not history:
        return {'status': PerformanceStatus.NEW, 'note': PerformanceStatus.NEW.value,
                'last_session': None, 'rpe_trend': None}

    last = history[-1]
    if last['rpe'] is None:
        return {'status': PerformanceStatus.NO_RPE, 'note': PerformanceStatus.NO_RPE.value,
                'last_session': last, 'rpe_trend': None}

    trend = rpe_trend(history)
    if last['rpe'] >= MAXED_OUT_RPE:
        status = PerformanceStatus.MAXED_OUT
    elif trend == 'down' or (trend == 'flat' and last['rpe'] <= MASTERED_RPE):
        status = PerformanceStatus.MASTERED
    else:
        status = PerformanceStatus.PROGRESSING
    return {'status': status, 'note': status.value, 'last_session': last, 'rpe_trend': trend}


def _suggestion(title: str, target: str, note: str, profile: Dict[str, Any], **targets: Any) -> Dict[str, Any]:
    suggestion = {
        'title': title,
        'target': target,
        'note': note,
        'status': profile['status'].name,
        'rpe_trend': profile['rpe_trend'],
        'target_weight': None,
        'target_sets': None,
        'target_reps': None,
        'target_rpe': None,
        'unit': WEIGHT_UNIT,
    }
    suggestion.update(targets)
    return suggestion


def suggest(
    exercise_name: str,
    log: Iterable[Any],
    today_sleep_percent: Optional[float] = None,
    rest_marker: str = REST,
) -> Dict[str, Any]:
    """
    Next-session target for one exercise. Rules are checked in order, first
    match wins: new exercise, no RPE, poor sleep deload, maxed-out back-off,
    mastered weight increase, then add reps.
    """
    sleep = DEFAULT_DEEP_SLEEP_PERCENT if today_sleep_percent is None else float(today_sleep_percent)
    profile = analyze_performance_profile(get_exercise_history(exercise_name, log, rest_marker=rest_marker))
    status = profile['status']
    last = profile['last_session']

    if status is PerformanceStatus.NEW:
        return _suggestion(
            "Set a Baseline",
            "Find a weight for 3-4 sets of 6-8 reps (RPE 8)",
            "Focus on perfect form. We'll build from here.",
            profile,
            target_sets=3, target_reps=[6, 8], target_rpe=8.0,
        )

    weight = last['weight']
    reps = last['reps']
    reps_str = '/'.join(str(r) for r in reps)

    if status is PerformanceStatus.NO_RPE:
        return _suggestion(
            "Add Reps",
            f"No RPE data for last session. Aim to beat {reps_str} reps at {_fmt(weight)} {WEIGHT_UNIT}.",
            "Start logging RPE on this exercise to unlock smarter suggestions.",
            profile,
            target_weight=weight, target_sets=len(reps), target_reps=list(reps),
        )

    rpe = last['rpe']

    if sleep < DELOAD_SLEEP_PERCENT:
        target_weight = round_half_up(weight * DELOAD_FACTOR)
        return _suggestion(
            f"Deload Day (Sleep < {DELOAD_SLEEP_PERCENT:g}%)",
            f"{target_weight} {WEIGHT_UNIT} for 3 sets of 8-10 reps (RPE 7)",
            f"Last time: {_fmt(weight)} {WEIGHT_UNIT} for {reps_str}. Sleep is very low. "
            "Today is about stimulus, not PRs.",
            profile,
            target_weight=target_weight, target_sets=3, target_reps=[8, 10], target_rpe=7.0,
        )

    if status is PerformanceStatus.MAXED_OUT:
        target_weight = round_half_up(weight * BACK_OFF_FACTOR)
        return _suggestion(
            f"Manage Fatigue (RPE {rpe:g})",
            f"{target_weight} {WEIGHT_UNIT} for 3 sets of 5-7 reps (RPE 8)",
            f"You hit RPE {rpe:g} at {_fmt(weight)} {WEIGHT_UNIT} last time. "
            "A light back-off lets you recover and build volume.",
            profile,
            target_weight=target_weight, target_sets=3, target_reps=[5, 7], target_rpe=8.0,
        )

    if status is PerformanceStatus.MASTERED and sleep >= GOOD_SLEEP_PERCENT:
        target_weight = weight + WEIGHT_INCREMENT
        return _suggestion(
            f"Add Weight (Sleep >= {GOOD_SLEEP_PERCENT:g}%)",
            f"{_fmt(target_weight)} {WEIGHT_UNIT} for 3 sets of 4-6 reps (RPE 9)",
            f"You mastered {_fmt(weight)} {WEIGHT_UNIT} (RPE {rpe:g}). Your sleep is good. "
            f"Push for a {WEIGHT_INCREMENT}{WEIGHT_UNIT} PR.",
            profile,
            target_weight=target_weight, target_sets=3, target_reps=[4, 6], target_rpe=9.0,
        )

    next_rep = (reps[0] if reps else 0) + 1
    target_reps = [next_rep] + [
        (reps[i] if i < len(reps) and reps[i] else next_rep) for i in (1, 2)
    ]
    return _suggestion(
        "Add Reps",
        f"{_fmt(weight)} {WEIGHT_UNIT} for 3 sets. Try to beat {reps_str} "
        f"(e.g., {'/'.join(str(r) for r in target_reps)})",
        f"Last RPE was {rpe:g}. Own this weight by adding more reps.",
        profile,
        target_weight=weight, target_sets=3, target_reps=target_reps, target_rpe=rpe,
    )


__all__ = [
    "PerformanceStatus",
    "get_exercise_history",
    "rpe_trend",
    "analyze_performance_profile",
    "suggest",
]
