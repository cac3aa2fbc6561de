"""Go / reduce-volume / rest recommendation for a planned workout."""
from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from liftlog.constants import DEFAULT_DEEP_SLEEP_PERCENT, DEFAULT_SLEEP_HOURS, WORKOUT_MUSCLE_GROUPS
from liftlog.fatigue import FatigueState
from liftlog.models import SleepRecord, round_half_up, sleep_values
from liftlog.readiness import baseline_sets_for_sleep, sleep_multiplier

logger = logging.getLogger(__name__)

EXCELLENT_SLEEP_MULTIPLIER = 0.85
POOR_SLEEP_MULTIPLIER = 1.2
EXCELLENT_SLEEP_ADJUSTMENT = 1.1
POOR_SLEEP_ADJUSTMENT = 0.75

FORCED_REST_FATIGUE = 90.0
HIGH_FATIGUE = 70.0
MODERATE_AVG_FATIGUE = 50.0
FRESH_AVG_FATIGUE = 20.0
HIGH_FATIGUE_ADJUSTMENT = 0.65
MODERATE_FATIGUE_ADJUSTMENT = 0.85


@dataclass(frozen=True)
class Recommendation:
    proceed: bool
    volume_adjustment: float
    suggested_sets: int
    baseline_sets: int
    average_fatigue: float
    max_fatigue: float
    most_fatigued_muscle: Optional[str]
    involved_muscles: Tuple[str, ...] = field(default_factory=tuple)
    sleep_impact: str = ''
    fatigue_warning: str = ''
    reasoning: str = ''

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data['involved_muscles'] = list(self.involved_muscles)
        data['volume_adjustment'] = round(self.volume_adjustment, 4)
        data['average_fatigue'] = round_half_up(self.average_fatigue, 1)
        return data


def involved_muscles(
    planned_label: Optional[str],
    muscle_groups: Sequence[Tuple[Sequence[str], Sequence[str]]] = WORKOUT_MUSCLE_GROUPS,
) -> List[str]:
    """
    Muscles a workout label works, from keyword matches on the case-folded label.
    Several groups can match one label ("Push/Biceps"); duplicates are dropped.
    """
    label = (planned_label or '').casefold()
    muscles: List[str] = []
    for keywords, group in muscle_groups:
        if any(keyword in label for keyword in keywords):
            for muscle_key in group:
                if muscle_key not in muscles:
                    muscles.append(muscle_key)
    return muscles


def _sleep_inputs(todays_sleep: Any) -> Tuple[float, float]:
    if todays_sleep is None:
        hours, deep = None, None
    elif isinstance(todays_sleep, SleepRecord):
        hours, deep = todays_sleep.sleep_hours, todays_sleep.deep_sleep_percent
    elif isinstance(todays_sleep, Mapping):
        hours, deep = sleep_values(todays_sleep)
    else:
        raise ValueError(f"Today's sleep must be an object, got {type(todays_sleep).__name__}")
    return hours or DEFAULT_SLEEP_HOURS, deep or DEFAULT_DEEP_SLEEP_PERCENT


def recommend(
    fatigue_state: Mapping[str, FatigueState],
    todays_sleep: Any,
    planned_label: Optional[str],
    muscle_groups: Sequence[Tuple[Sequence[str], Sequence[str]]] = WORKOUT_MUSCLE_GROUPS,
) -> Recommendation:
    """
    Turns the current fatigue map and last night's sleep into a volume call
    for ``planned_label``.

    Sleep sets the starting volume adjustment (1.1 excellent, 0.75 poor); the
    most fatigued involved muscle then forces rest at 90% or cuts volume at
    70%, and a high average cuts it at 50%. Suggested sets scale the sleep
    baseline (22/20/18/14) by the final adjustment.
    """
    hours, deep = _sleep_inputs(todays_sleep)
    sleep_mult = sleep_multiplier(hours, deep)
    muscles = involved_muscles(planned_label, muscle_groups)

    total = 0.0
    max_fatigue = 0.0
    most_fatigued = None
    for muscle_key in muscles:
        state = fatigue_state.get(muscle_key)
        if state is None:
            continue
        total += state.fatigue_percent
        if state.fatigue_percent > max_fatigue:
            max_fatigue = state.fatigue_percent
            most_fatigued = state.name
    avg_fatigue = total / len(muscles) if muscles else 0.0

    proceed = True
    adjustment = 1.0
    sleep_impact = ''
    fatigue_warning = ''

    if sleep_mult <= EXCELLENT_SLEEP_MULTIPLIER:
        sleep_impact = f"Excellent sleep ({deep:g}% deep). Optimal for high volume."
        adjustment = EXCELLENT_SLEEP_ADJUSTMENT
    elif sleep_mult >= POOR_SLEEP_MULTIPLIER:
        sleep_impact = f"Poor sleep ({deep:g}% deep). Consider deload or rest."
        adjustment = POOR_SLEEP_ADJUSTMENT

    if max_fatigue >= FORCED_REST_FATIGUE:
        proceed = False
        adjustment = 0.0
        fatigue_warning = f"{most_fatigued} severely fatigued ({max_fatigue:.0f}%). Rest day recommended."
    elif max_fatigue >= HIGH_FATIGUE:
        adjustment *= HIGH_FATIGUE_ADJUSTMENT
        fatigue_warning = f"{most_fatigued} fatigued ({max_fatigue:.0f}%). Reduce volume by 30-40%."
    elif avg_fatigue >= MODERATE_AVG_FATIGUE:
        adjustment *= MODERATE_FATIGUE_ADJUSTMENT
        fatigue_warning = f"Moderate fatigue (avg {avg_fatigue:.0f}%). Reduce volume by 15-20%."
    elif avg_fatigue < FRESH_AVG_FATIGUE:
        fatigue_warning = f"Muscles fresh (avg {avg_fatigue:.0f}%). Ready for progressive overload."

    baseline = baseline_sets_for_sleep(deep)
    suggested = int(baseline * adjustment + 0.5)
    reasoning = (f"Baseline: {baseline} sets (sleep-based). "
                 f"Adjusted to {suggested} sets (fatigue x {adjustment:.2f}).")

    if not muscles:
        logger.info(f"No muscle groups matched workout label {planned_label!r}")

    return Recommendation(
        proceed=proceed,
        volume_adjustment=adjustment,
        suggested_sets=suggested,
        baseline_sets=baseline,
        average_fatigue=avg_fatigue,
        max_fatigue=max_fatigue,
        most_fatigued_muscle=most_fatigued,
        involved_muscles=tuple(muscles),
        sleep_impact=sleep_impact,
        fatigue_warning=fatigue_warning,
        reasoning=reasoning,
    )
