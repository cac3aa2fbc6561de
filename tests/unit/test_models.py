import pytest
from datetime import date, datetime, timezone

from liftlog.models import (
    Cycle,
    ExerciseRecord,
    LogEntry,
    normalize_cycle,
    normalize_entry,
    normalize_exercise,
    normalize_log,
    normalize_sleep_record,
    parse_date,
    parse_datetime,
    round_half_up,
)


# --- Exercise normalisation ---

def test_scalar_weight_is_broadcast_to_every_set():
    record = normalize_exercise({'name': 'Dips', 'weight': 45, 'reps': [10, 9, 8]})
    assert record.weights == (45.0, 45.0, 45.0)
    assert record.reps == (10, 9, 8)


def test_scalar_and_explicit_weights_give_same_volume():
    scalar = normalize_exercise({'name': 'Dips', 'weight': 45, 'reps': [10, 9, 8]})
    explicit = normalize_exercise({'name': 'Dips', 'weights': [45, 45, 45], 'reps': [10, 9, 8]})
    assert scalar.volume_load == explicit.volume_load == 45 * 27


def test_volume_is_sum_of_weight_times_reps():
    record = normalize_exercise({'name': 'Squat', 'weights': [100, 120], 'reps': [10, 5]})
    assert record.volume_load == 100 * 10 + 120 * 5


def test_short_weights_list_is_padded_with_zero():
    record = normalize_exercise({'name': 'Squat', 'weights': [100], 'reps': [10, 8]})
    assert record.weights == (100.0, 0.0)
    assert record.volume_load == 1000


def test_long_weights_list_is_truncated_to_reps():
    record = normalize_exercise({'name': 'Squat', 'weights': [100, 110, 120], 'reps': [5]})
    assert record.weights == (100.0,)


def test_non_numeric_values_coerce():
    record = normalize_exercise({'name': 'Row', 'weights': ['abc', '80'], 'reps': ['8', None], 'rpe': 'hard'})
    assert record.weights == (0.0, 80.0)
    assert record.reps == (8, 0)
    assert record.rpe is None


def test_zero_rpe_is_treated_as_missing():
    assert normalize_exercise({'name': 'Row', 'weight': 80, 'reps': [8], 'rpe': 0}).rpe is None


def test_lengthening_partial_alias():
    record = normalize_exercise({'name': 'Fly', 'weight': 20, 'reps': [12], 'isLengtheningPartial': True})
    assert record.lengthening_partial is True


def test_peak_weight_ignores_non_positive():
    record = ExerciseRecord(name='Pull-Up', weights=(0.0, -5.0, 25.0, 20.0), reps=(5, 5, 5, 5))
    assert record.peak_weight == 25.0
    assert ExerciseRecord(name='Pull-Up', weights=(0.0,), reps=(5,)).peak_weight == 0.0


def test_exercise_must_be_mapping():
    with pytest.raises(ValueError):
        normalize_exercise(['Bench', 100])


# --- Entry normalisation ---

def test_camel_case_aliases():
    entry = normalize_entry({
        'date': '2024-05-01',
        'trainingType': 'Push',
        'plannedTrainingType': 'Push',
        'cycleDay': 3,
    })
    assert entry.actual_type == 'Push'
    assert entry.planned_type == 'Push'
    assert entry.cycle_index == 3
    assert entry.date == date(2024, 5, 1)


def test_missing_actual_type_without_exercises_is_rest():
    entry = normalize_entry({'date': '2024-05-01', 'planned_type': 'Pull'})
    assert entry.actual_type == 'REST'
    assert entry.is_skipped_training_day()


def test_missing_actual_type_with_exercises_uses_planned():
    entry = normalize_entry({
        'date': '2024-05-01',
        'planned_type': 'Pull',
        'exercises': [{'name': 'Row', 'weight': 80, 'reps': [8]}],
    })
    assert entry.actual_type == 'Pull'
    assert not entry.is_rest()


@pytest.mark.parametrize('planned', [None, 'REST'])
def test_untyped_entry_with_exercises_is_never_rest(planned):
    raw = {'date': '2024-05-01', 'exercises': [{'name': 'Row', 'weight': 80, 'reps': [8]}]}
    if planned is not None:
        raw['planned_type'] = planned
    entry = normalize_entry(raw)
    assert entry.actual_type == ''
    assert not entry.is_rest()
    assert not entry.is_skipped_training_day()


def test_planned_rest_is_not_a_skip():
    entry = normalize_entry({'date': '2024-05-01', 'actual_type': 'REST', 'planned_type': 'REST'})
    assert entry.is_rest()
    assert not entry.is_skipped_training_day()


def test_invalid_cycle_index_is_dropped():
    entry = normalize_entry({'date': '2024-05-01', 'actual_type': 'Push', 'cycle_index': 'two'})
    assert entry.cycle_index is None


def test_entry_totals():
    entry = normalize_entry({
        'date': '2024-05-01',
        'actual_type': 'Push',
        'exercises': [
            {'name': 'Bench', 'weights': [100, 100], 'reps': [8, 8]},
            {'name': 'Dips', 'weight': 20, 'reps': [10]},
        ],
    })
    assert entry.total_volume == 1800
    assert entry.total_sets == 3
    assert entry.find_exercise('Dips').weights == (20.0,)
    assert entry.find_exercise('Squat') is None


@pytest.mark.parametrize('raw', [
    {'actual_type': 'Push'},
    {'date': 'not-a-date', 'actual_type': 'Push'},
    'Push on Monday',
])
def test_malformed_entries_raise(raw):
    with pytest.raises(ValueError):
        normalize_entry(raw)


def test_log_is_sorted_by_date_keeping_same_day_order():
    log = normalize_log([
        {'date': '2024-05-03', 'actual_type': 'Legs'},
        {'date': '2024-05-01', 'actual_type': 'Push'},
        {'date': '2024-05-03', 'actual_type': 'Core'},
    ])
    assert [e.actual_type for e in log] == ['Push', 'Legs', 'Core']


def test_normalize_log_passes_records_through():
    entry = LogEntry(date=date(2024, 5, 1), actual_type='Push')
    assert normalize_log([entry]) == [entry]
    assert normalize_log(None) == []


# --- Sleep, dates and cycles ---

def test_sleep_record_aliases():
    record = normalize_sleep_record({'date': '2024-05-01', 'sleepHours': 7.5, 'deepSleepPercent': 18, 'recoveryRating': 4})
    assert record.sleep_hours == 7.5
    assert record.deep_sleep_percent == 18.0
    assert record.recovery_rating == 4.0


def test_parse_date_accepts_datetime_and_strings():
    assert parse_date(datetime(2024, 5, 1, 18, 30)) == date(2024, 5, 1)
    assert parse_date('2024-05-01T07:00:00') == date(2024, 5, 1)


def test_parse_datetime_drops_timezone():
    parsed = parse_datetime('2024-05-01T07:00:00Z')
    assert parsed == datetime(2024, 5, 1, 7, 0)
    assert parse_datetime(datetime(2024, 5, 1, 7, tzinfo=timezone.utc)).tzinfo is None
    assert parse_datetime(date(2024, 5, 1)) == datetime(2024, 5, 1)


def test_cycle_wraps_and_finds_labels():
    cycle = normalize_cycle(['REST', 'Push', 'REST', 'Pull', 'Push'])
    assert len(cycle) == 5
    assert cycle[6] == 'Push'
    assert cycle.index_of('Push') == 1
    assert cycle.index_of('Legs') == -1
    assert cycle.training_labels() == ['Push', 'Pull']


def test_empty_cycle_is_rejected():
    with pytest.raises(ValueError):
        Cycle(slots=())
    with pytest.raises(ValueError):
        normalize_cycle('Push,Pull')


@pytest.mark.parametrize('value, ndigits, expected', [
    (2.5, 0, 3),
    (184.5, 0, 185),
    (170.0, 0, 170),
    (12.5, 0, 13),
    (12.25, 1, 12.3),
    (0.05, 1, 0.1),
    (-2.5, 0, -2),
])
def test_round_half_up(value, ndigits, expected):
    assert round_half_up(value, ndigits) == expected
