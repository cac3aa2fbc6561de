"""
Training-cycle resolution: which slot of the repeating cycle is due today.

The log's last entry is the source of truth. Entries logged by current
clients snapshot the cycle index they were planned against; legacy entries
without one are placed by matching recent workouts against the cycle.
"""
from __future__ import annotations

import logging
from collections import Counter
from datetime import date
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Tuple

from liftlog.constants import CYCLE_PRESETS, REST
from liftlog.models import Cycle, LogEntry, normalize_cycle, normalize_log, parse_date, round_half_up

logger = logging.getLogger(__name__)

PATTERN_LENGTH = 3
FREQUENCY_WINDOW = 7


class ResolutionBranch(str, Enum):
    """Which rule placed today in the cycle."""
    FIRST_CYCLE = "first_cycle"
    EXPLICIT_INDEX = "explicit_index"
    SKIP_RETRY = "skip_retry"
    SKIP_CATCH_UP = "skip_catch_up"
    PATTERN_MATCH = "pattern_match"
    SIMPLE_PROGRESSION = "simple_progression"
    FREQUENCY_FALLBACK = "frequency_fallback"


def _result(cycle: Cycle, index: int, note: str, branch: ResolutionBranch, trace: List[Dict[str, Any]]) -> Dict[str, Any]:
    trace.append({'event': 'resolved', 'branch': branch.value, 'cycle_index': index, 'today': cycle[index]})
    logger.info(f"Cycle resolved via {branch.value}: index {index} ({cycle[index]})")
    return {
        'today': cycle[index],
        'note': note,
        'cycle_index': index,
        'branch': branch,
        'trace': trace,
    }


def _from_explicit_index(last: LogEntry, cycle: Cycle, today: date, trace: List[Dict[str, Any]]) -> Dict[str, Any]:
    """
    Walks forward from the last entry's stored index by the calendar days
    elapsed since it. A training day skipped yesterday is retried today;
    an older skip costs one step so the missed session is not lost.
    """
    elapsed = max(0, (today - last.date).days)
    skipped = last.is_skipped_training_day(cycle.rest_marker)
    trace.append({
        'event': 'explicit_index',
        'last_date': last.date.isoformat(),
        'last_index': last.cycle_index,
        'elapsed_days': elapsed,
        'skipped': skipped,
    })

    if skipped and elapsed == 1:
        index = last.cycle_index % len(cycle)
        note = f"You skipped {last.planned_type} yesterday. Let's hit that today to stay on track."
        return _result(cycle, index, note, ResolutionBranch.SKIP_RETRY, trace)

    if skipped and elapsed > 1:
        # Approximation: one missed session per skip, however many days ago
        index = (last.cycle_index + elapsed - 1) % len(cycle)
        note = (f"You skipped {last.planned_type} on {last.date.isoformat()}. "
                f"Catching up: today is {cycle[index]}.")
        return _result(cycle, index, note, ResolutionBranch.SKIP_CATCH_UP, trace)

    index = (last.cycle_index + elapsed) % len(cycle)
    note = f"Last workout was {last.date.isoformat()}. Next up is {cycle[index]}."
    return _result(cycle, index, note, ResolutionBranch.EXPLICIT_INDEX, trace)


def _match_pattern(recent: List[str], cycle: Cycle) -> Optional[int]:
    """
    Finds ``recent`` as a run of consecutive training slots in the circular
    cycle (rest slots removed). Returns the cycle position, rests included,
    of the last matched slot, or None.
    """
    compacted: List[Tuple[int, str]] = [
        (position, label) for position, label in enumerate(cycle.slots) if not cycle.is_rest(label)
    ]
    if not compacted:
        return None
    size = len(compacted)
    for start in range(size):
        if all(compacted[(start + offset) % size][1] == label for offset, label in enumerate(recent)):
            return compacted[(start + len(recent) - 1) % size][0]
    return None


def _least_trained_index(recent: List[str], cycle: Cycle) -> int:
    labels = cycle.training_labels()
    if not labels:
        return 0
    counts = Counter(label for label in recent if label in labels)
    # min() keeps the first label on ties, which is cycle order
    choice = min(labels, key=lambda label: counts[label])
    return cycle.index_of(choice)


def _from_history(entries: List[LogEntry], cycle: Cycle, trace: List[Dict[str, Any]]) -> Dict[str, Any]:
    last = entries[-1]
    trained = [entry.actual_type for entry in entries if not entry.is_rest(cycle.rest_marker)]

    if len(trained) < PATTERN_LENGTH:
        position = cycle.index_of(last.planned_type)
        if position == -1:
            position = cycle.index_of(last.actual_type)
        trace.append({'event': 'simple_progression', 'trained_entries': len(trained), 'last_position': position})
        if last.is_skipped_training_day(cycle.rest_marker) and position != -1:
            note = f"You skipped {last.planned_type} yesterday. Let's hit that today to stay on track."
            return _result(cycle, position, note, ResolutionBranch.SKIP_RETRY, trace)
        index = (position + 1) % len(cycle)
        note = f"Last workout was {last.date.isoformat()}. Next up is {cycle[index]}."
        return _result(cycle, index, note, ResolutionBranch.SIMPLE_PROGRESSION, trace)

    recent = trained[-PATTERN_LENGTH:]
    matched_position = _match_pattern(recent, cycle)
    trace.append({'event': 'pattern_search', 'pattern': list(recent), 'matched_position': matched_position})
    if matched_position is not None:
        index = (matched_position + 1) % len(cycle)
        note = f"Your last workouts ({' > '.join(recent)}) match the cycle. Next up is {cycle[index]}."
        return _result(cycle, index, note, ResolutionBranch.PATTERN_MATCH, trace)

    window = trained[-FREQUENCY_WINDOW:]
    index = _least_trained_index(window, cycle)
    trace.append({'event': 'frequency_fallback', 'window': list(window)})
    note = f"Recent workouts are off-pattern. {cycle[index]} has been trained least recently, so it's next."
    return _result(cycle, index, note, ResolutionBranch.FREQUENCY_FALLBACK, trace)


def resolve_today(
    log: Iterable[Any],
    cycle: Any,
    today: Any = None,
    rest_marker: str = REST,
) -> Dict[str, Any]:
    """
    Determines today's slot in the training cycle.

    Args:
        log: Training log entries, raw or normalised, in any order.
        cycle: Ordered slot labels, or a ``Cycle``.
        today: Date to resolve for; the current date when omitted.
        rest_marker: Label that marks a rest slot.

    Returns:
        A dictionary containing:
            'today': str - the slot label due today.
            'note': str - human-readable reason.
            'cycle_index': int - slot index in ``[0, len(cycle))``.
            'branch': ResolutionBranch - which rule decided.
            'trace': list - structured decision events.
    """
    cycle = normalize_cycle(cycle, rest_marker)
    entries = normalize_log(log, cycle.rest_marker)
    today = parse_date(today) if today is not None else date.today()
    trace: List[Dict[str, Any]] = [{'event': 'start', 'entries': len(entries), 'cycle_length': len(cycle)}]

    if not entries:
        return _result(cycle, 0, "Starting your first cycle!", ResolutionBranch.FIRST_CYCLE, trace)

    last = entries[-1]
    if last.cycle_index is not None:
        return _from_explicit_index(last, cycle, today, trace)
    return _from_history(entries, cycle, trace)


def planned_for_date(log: Iterable[Any], cycle: Any, on_date: Any, rest_marker: str = REST) -> Dict[str, Any]:
    """
    Planned slot for a calendar date. A logged entry answers with its own
    snapshot; otherwise the cycle is resolved from the entries up to that date.
    """
    cycle = normalize_cycle(cycle, rest_marker)
    on_date = parse_date(on_date)
    entries = normalize_log(log, cycle.rest_marker)

    for entry in reversed(entries):
        if entry.date == on_date:
            return {
                'date': on_date.isoformat(),
                'planned': entry.planned_type or entry.actual_type,
                'cycle_index': entry.cycle_index if entry.cycle_index is not None else 0,
                'logged': True,
            }

    result = resolve_today([e for e in entries if e.date <= on_date], cycle, on_date)
    return {
        'date': on_date.isoformat(),
        'planned': result['today'],
        'cycle_index': result['cycle_index'],
        'logged': False,
    }


def cycle_stats(cycle: Any, rest_marker: str = REST) -> Dict[str, Any]:
    cycle = normalize_cycle(cycle, rest_marker)
    rest_days = sum(1 for slot in cycle.slots if cycle.is_rest(slot))
    training_days = len(cycle) - rest_days
    return {
        'length': len(cycle),
        'training_days': training_days,
        'rest_days': rest_days,
        'frequency': round_half_up(training_days * 100 / len(cycle)),
    }


def list_presets() -> List[Dict[str, Any]]:
    return [
        {'id': preset_id, **preset, 'stats': cycle_stats(preset['days'])}
        for preset_id, preset in CYCLE_PRESETS.items()
    ]


__all__ = [
    "ResolutionBranch",
    "resolve_today",
    "planned_for_date",
    "cycle_stats",
    "list_presets",
]
