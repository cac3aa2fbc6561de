from typing import Iterable, Optional

from liftlog.constants import DEFAULT_SLEEP_HOURS, DEFAULT_DEEP_SLEEP_PERCENT, DEFAULT_RPE
from liftlog.models import SleepRecord

# Sleep duration modifiers (7-9 hours is neutral)
SHORT_SLEEP_HOURS = 6.0
SUBOPTIMAL_SLEEP_HOURS = 7.0
LONG_SLEEP_HOURS = 9.0

# Deep sleep quality ladder: (minimum deep %, fatigue modifier)
DEEP_SLEEP_QUALITY = [
    (20.0, 0.8),
    (15.0, 0.9),
    (12.0, 1.0),
    (8.0, 1.15),
]
VERY_POOR_SLEEP_MODIFIER = 1.3

# RPE ladder: (minimum RPE, fatigue modifier). RPE 7 (3 RIR) is the baseline.
RPE_MULTIPLIERS = [
    (10.0, 1.5),
    (9.0, 1.3),
    (8.0, 1.2),
    (7.0, 1.0),
    (6.0, 0.8),
]
EASY_RPE_MULTIPLIER = 0.6

# Working-set baselines keyed on last night's deep sleep
EXCELLENT_SLEEP_SETS = 22
TARGET_SLEEP_SETS = 20
BASELINE_SLEEP_SETS = 18
POOR_SLEEP_SETS = 14


def sleep_multiplier(sleep_hours: float, deep_sleep_percent: float) -> float:
    """
    Fatigue modifier for a night of sleep. Lower is better recovery.

    Args:
        sleep_hours: Total sleep duration.
        deep_sleep_percent: Share of the night spent in deep sleep (0-100).

    Returns:
        duration modifier x quality modifier, ranging roughly 0.8 to 1.56.
    """
    duration_mod = 1.0
    if sleep_hours < SHORT_SLEEP_HOURS:
        duration_mod = 1.2
    elif sleep_hours < SUBOPTIMAL_SLEEP_HOURS:
        duration_mod = 1.1
    elif sleep_hours > LONG_SLEEP_HOURS:
        duration_mod = 1.05

    quality_mod = VERY_POOR_SLEEP_MODIFIER
    for min_deep_percent, modifier in DEEP_SLEEP_QUALITY:
        if deep_sleep_percent >= min_deep_percent:
            quality_mod = modifier
            break

    return duration_mod * quality_mod


def rpe_multiplier(rpe: Optional[float]) -> float:
    """Harder sets accumulate more fatigue. A missing RPE counts as RPE 8."""
    if rpe is None:
        rpe = DEFAULT_RPE
    for min_rpe, modifier in RPE_MULTIPLIERS:
        if rpe >= min_rpe:
            return modifier
    return EASY_RPE_MULTIPLIER


def _hours_or_default(record: SleepRecord) -> float:
    return record.sleep_hours if record.sleep_hours else DEFAULT_SLEEP_HOURS


def _deep_or_default(record: SleepRecord) -> float:
    return record.deep_sleep_percent if record.deep_sleep_percent else DEFAULT_DEEP_SLEEP_PERCENT


def average_sleep_multiplier(records: Iterable[SleepRecord]) -> float:
    """
    Sleep multiplier of the averaged hours and deep-sleep percent across
    ``records``. Missing fields, or no records at all, fall back to
    8 hours / 15% deep.
    """
    records = list(records)
    if not records:
        return sleep_multiplier(DEFAULT_SLEEP_HOURS, DEFAULT_DEEP_SLEEP_PERCENT)
    avg_hours = sum(_hours_or_default(r) for r in records) / len(records)
    avg_deep = sum(_deep_or_default(r) for r in records) / len(records)
    return sleep_multiplier(avg_hours, avg_deep)


def baseline_sets_for_sleep(deep_sleep_percent: float) -> int:
    if deep_sleep_percent >= 20:
        return EXCELLENT_SLEEP_SETS
    if deep_sleep_percent >= 15:
        return TARGET_SLEEP_SETS
    if deep_sleep_percent < 12:
        return POOR_SLEEP_SETS
    return BASELINE_SLEEP_SETS


def sleep_quality_tier(deep_sleep_percent: Optional[float]) -> str:
    if deep_sleep_percent is None:
        return 'UNKNOWN'
    if deep_sleep_percent >= 20:
        return 'PR_RANGE'
    if deep_sleep_percent >= 15:
        return 'TARGET_RANGE'
    if deep_sleep_percent >= 12:
        return 'BASELINE_RANGE'
    return 'POOR'
