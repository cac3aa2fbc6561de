import logging
import math
import pytest
from datetime import date, datetime

from liftlog.fatigue import (
    FatigueState,
    RecoveryStatus,
    current_fatigue,
    evaluate,
    muscle_fatigue,
    recovery_color,
    recovery_status,
    volume_load,
)
from liftlog.library import ExerciseRef, MuscleRef, ReferenceLibrary
from liftlog.models import ExerciseRecord, normalize_exercise

CHEST = MuscleRef(key='chest', name='Chest', base_decay_rate=2.0)
TRICEPS = MuscleRef(key='triceps', name='Triceps', base_decay_rate=3.0)


@pytest.fixture
def library():
    return ReferenceLibrary(
        muscles=[CHEST, TRICEPS],
        exercises=[
            ExerciseRef(name='Press', tier=2, primary_muscles={'chest': 100}, secondary_muscles={'triceps': 50}),
            ExerciseRef(name='Fly', tier=4, primary_muscles={'chest': 80}, secondary_muscles={'chest': 20},
                        lengthening_partials=True, lengthening_multiplier=1.3),
            ExerciseRef(name='Shrug', tier=3, primary_muscles={'traps': 100}),
        ],
        tier_multipliers={2: 1.2, 3: 1.0, 4: 0.6},
    )


def press(weights=(100, 100), reps=(10, 10), rpe=7.0):
    return ExerciseRecord(name='Press', weights=tuple(weights), reps=tuple(reps), rpe=rpe)


# --- volume_load / muscle_fatigue ---

def test_volume_load_is_additive():
    assert volume_load(press(weights=(100, 80), reps=(10, 5))) == 100 * 10 + 80 * 5


def test_volume_load_scalar_broadcast_matches_sequence():
    scalar = normalize_exercise({'name': 'Press', 'weight': 60, 'reps': [12, 10, 8]})
    sequence = normalize_exercise({'name': 'Press', 'weights': [60, 60, 60], 'reps': [12, 10, 8]})
    assert volume_load(scalar) == volume_load(sequence)


def test_muscle_fatigue_primary_and_secondary(library):
    fatigue = muscle_fatigue(press(), 1.0, library)
    # 2000 volume / 175, RPE 7 -> 1.0, tier 2 -> 1.2
    scale = 2000 / 175 * 1.0 * 1.2
    assert fatigue['chest'] == pytest.approx(scale)
    assert fatigue['triceps'] == pytest.approx(scale * 0.5 * 0.7)


def test_muscle_fatigue_scales_with_sleep_and_rpe(library):
    rested = muscle_fatigue(press(rpe=7.0), 0.8, library)
    tired = muscle_fatigue(press(rpe=10.0), 1.3, library)
    assert tired['chest'] == pytest.approx(rested['chest'] / 0.8 * 1.3 * 1.5)


def test_secondary_role_adds_to_primary(library):
    fly = ExerciseRecord(name='Fly', weights=(35.0,), reps=(10,), rpe=7.0)
    fatigue = muscle_fatigue(fly, 1.0, library)
    scale = 350 / 175 * 0.6
    assert fatigue['chest'] == pytest.approx(scale * 0.8 + scale * 0.2 * 0.7)


def test_lengthening_bonus_only_when_flagged(library):
    plain = ExerciseRecord(name='Fly', weights=(35.0,), reps=(10,), rpe=7.0)
    partial = ExerciseRecord(name='Fly', weights=(35.0,), reps=(10,), rpe=7.0, lengthening_partial=True)
    assert muscle_fatigue(partial, 1.0, library)['chest'] == pytest.approx(
        muscle_fatigue(plain, 1.0, library)['chest'] * 1.3)

    # Press is not eligible, so the flag changes nothing
    flagged_press = ExerciseRecord(name='Press', weights=(100.0,), reps=(10,), rpe=7.0, lengthening_partial=True)
    assert muscle_fatigue(flagged_press, 1.0, library) == muscle_fatigue(press((100,), (10,)), 1.0, library)


def test_zero_volume_gives_empty_map(library):
    assert muscle_fatigue(press(weights=(0, 0)), 1.0, library) == {}
    assert muscle_fatigue(press(weights=(), reps=()), 1.0, library) == {}


def test_unknown_exercise_is_skipped_with_warning(library, caplog):
    with caplog.at_level(logging.WARNING, logger='liftlog.fatigue'):
        result = muscle_fatigue(ExerciseRecord(name='Jazzercise', weights=(10.0,), reps=(10,)), 1.0, library)
    assert result == {}
    assert 'Jazzercise' in caplog.text


# --- current_fatigue ---

@pytest.mark.parametrize('multiplier', [0.8, 0.9, 1.0, 1.3])
def test_decay_identity_at_zero_hours(multiplier):
    assert current_fatigue(42.0, CHEST, 0, multiplier) == 42.0


def test_decay_is_strictly_decreasing():
    values = [current_fatigue(50.0, CHEST, hours, 1.0) for hours in (0, 6, 12, 24, 48, 96)]
    assert all(later < earlier for earlier, later in zip(values, values[1:]))


def test_decay_formula():
    # rate 2.0 scaled by (2 - 0.9) = 2.2
    assert current_fatigue(50.0, CHEST, 24, 0.9) == pytest.approx(50.0 * math.exp(-2.2 * 24 / 100))


def test_better_sleep_recovers_faster():
    assert current_fatigue(50.0, CHEST, 24, 0.8) < current_fatigue(50.0, CHEST, 24, 1.3)


def test_decay_snaps_to_zero_below_one_percent():
    # e^(-0.02h) < 0.01 once h > ~230
    assert current_fatigue(50.0, CHEST, 220, 1.0) > 0
    assert current_fatigue(50.0, CHEST, 240, 1.0) == 0.0


def test_decay_guards():
    assert current_fatigue(0.0, CHEST, 5, 1.0) == 0.0
    assert current_fatigue(-3.0, CHEST, 5, 1.0) == 0.0
    assert current_fatigue(10.0, CHEST, -1, 1.0) == 0.0


# --- status ladder ---

@pytest.mark.parametrize('percent, status', [
    (120, RecoveryStatus.SEVERELY_FATIGUED),
    (90, RecoveryStatus.SEVERELY_FATIGUED),
    (89.9, RecoveryStatus.FATIGUED),
    (70, RecoveryStatus.FATIGUED),
    (50, RecoveryStatus.RECOVERING),
    (30, RecoveryStatus.GOOD),
    (15, RecoveryStatus.FRESH),
    (14.9, RecoveryStatus.FULLY_RECOVERED),
    (0, RecoveryStatus.FULLY_RECOVERED),
])
def test_recovery_status(percent, status):
    assert recovery_status(percent) is status


@pytest.mark.parametrize('percent, color', [(95, 'red'), (70, 'red'), (69, 'yellow'), (40, 'yellow'), (39.9, 'green'), (0, 'green')])
def test_recovery_color(percent, color):
    assert recovery_color(percent) == color


# --- evaluate ---

NOW = datetime(2024, 3, 10, 12, 0)


def workout(day, exercises, actual_type='Push'):
    return {'date': day, 'actual_type': actual_type, 'exercises': exercises}


PRESS_SETS = {'name': 'Press', 'weights': [100, 100], 'reps': [10, 10], 'rpe': 7}


def test_evaluate_without_sleep_uses_defaults(library):
    state = evaluate([workout('2024-03-10', [PRESS_SETS])], [], NOW, library=library)

    # creation and recovery multipliers both default to 8h / 15% -> 0.9
    initial = 2000 / 175 * 1.2 * 0.9
    expected = initial * math.exp(-2.0 * 1.1 * 12 / 100)
    chest = state['chest']
    assert chest.total_fatigue == pytest.approx(expected)
    assert chest.fatigue_percent == pytest.approx(expected, abs=0.06)
    assert chest.last_trained == date(2024, 3, 10)
    assert len(chest.contributions) == 1
    assert chest.contributions[0].initial_fatigue == pytest.approx(initial)
    assert chest.contributions[0].hours_elapsed == pytest.approx(12.0)


def test_evaluate_uses_creation_and_recovery_sleep(library):
    sleep = [
        {'date': '2024-03-09', 'sleep_hours': 8, 'deep_sleep_percent': 20},   # workout night
        {'date': '2024-03-10', 'sleep_hours': 8, 'deep_sleep_percent': 10},
    ]
    state = evaluate([workout('2024-03-09', [PRESS_SETS])], sleep, NOW, library=library)

    initial = 2000 / 175 * 1.2 * 0.8
    recovery_mult = 0.9  # 20% and 10% deep sleep average to 15%
    expected = initial * math.exp(-2.0 * (2 - recovery_mult) * 36 / 100)
    assert state['chest'].total_fatigue == pytest.approx(expected)


def test_evaluate_ignores_workouts_outside_window(library):
    state = evaluate([workout('2024-03-01', [PRESS_SETS])], [], NOW, lookback_days=7, library=library)
    assert state['chest'].total_fatigue == 0.0
    assert state['chest'].status is RecoveryStatus.FULLY_RECOVERED
    assert state['chest'].color == 'green'
    assert state['chest'].last_trained is None


def test_evaluate_ignores_future_and_rest_entries(library):
    log = [
        workout('2024-03-11', [PRESS_SETS]),
        {'date': '2024-03-09', 'actual_type': 'REST', 'exercises': [PRESS_SETS]},
    ]
    state = evaluate(log, [], NOW, library=library)
    assert state['chest'].total_fatigue == 0.0


def test_evaluate_counts_untyped_workouts(library):
    state = evaluate([{'date': '2024-03-10', 'exercises': [PRESS_SETS]}], [], NOW, library=library)
    typed = evaluate([workout('2024-03-10', [PRESS_SETS])], [], NOW, library=library)
    assert state['chest'].total_fatigue > 0
    assert state['chest'].total_fatigue == pytest.approx(typed['chest'].total_fatigue)


def test_fatigue_percent_rounds_half_up():
    library = ReferenceLibrary(
        muscles=[CHEST],
        exercises=[ExerciseRef(name='Press', tier=3, primary_muscles={'chest': 100})],
        tier_multipliers={3: 1.0},
    )
    # 2143.75 / 175 = 12.25 fatigue points; 8h / 12% deep and RPE 7 are neutral
    log = [workout('2024-03-10', [{'name': 'Press', 'weight': 2143.75, 'reps': [1], 'rpe': 7}])]
    sleep = [{'date': '2024-03-10', 'sleep_hours': 8, 'deep_sleep_percent': 12}]
    state = evaluate(log, sleep, datetime(2024, 3, 10), library=library)
    assert state['chest'].total_fatigue == 12.25
    assert state['chest'].fatigue_percent == 12.3


def test_evaluate_accumulates_across_workouts(library):
    single = evaluate([workout('2024-03-10', [PRESS_SETS])], [], NOW, library=library)
    double = evaluate([workout('2024-03-10', [PRESS_SETS, PRESS_SETS])], [], NOW, library=library)
    assert double['chest'].total_fatigue == pytest.approx(2 * single['chest'].total_fatigue)
    assert len(double['chest'].contributions) == 2


def test_evaluate_skips_muscles_missing_from_library(library):
    state = evaluate([workout('2024-03-10', [{'name': 'Shrug', 'weight': 100, 'reps': [10]}])], [], NOW, library=library)
    assert list(state) == ['chest', 'triceps']
    assert all(s.total_fatigue == 0.0 for s in state.values())


def test_evaluate_is_idempotent(library):
    log = [workout('2024-03-08', [PRESS_SETS]), workout('2024-03-10', [PRESS_SETS])]
    sleep = [{'date': '2024-03-08', 'sleep_hours': 6.5, 'deep_sleep_percent': 13}]
    assert evaluate(log, sleep, NOW, library=library) == evaluate(log, sleep, NOW, library=library)


def test_evaluate_with_default_library():
    log = [workout('2024-03-10', [{'name': 'Barbell Bench Press', 'weights': [185, 185, 185], 'reps': [8, 8, 7], 'rpe': 9}])]
    state = evaluate(log, [], NOW)
    assert state['pectoralsLower'].fatigue_percent > state['pectoralsUpper'].fatigue_percent > 0
    assert state['vastusLateralis'].fatigue_percent == 0.0


def test_fatigue_state_to_dict(library):
    state = evaluate([workout('2024-03-10', [PRESS_SETS])], [], NOW, library=library)
    data = state['chest'].to_dict()
    assert data['status'] == state['chest'].status.name
    assert data['last_trained'] == '2024-03-10'
    assert data['contributions'][0]['exercise'] == 'Press'
    assert FatigueState(key='x', name='X').to_dict()['contributions'] == []


def test_default_library_covers_pull_day(caplog):
    log = [workout('2024-03-10', [
        {'name': 'Pull-Ups', 'weight': 25, 'reps': [8, 8, 6], 'rpe': 9},
        {'name': 'Lat Pulldowns', 'weight': 150, 'reps': [10, 10, 10], 'rpe': 9},
        {'name': 'Hammer Curls', 'weight': 35, 'reps': [12, 12], 'rpe': 8},
    ], actual_type='Pull')]
    with caplog.at_level(logging.WARNING, logger='liftlog.fatigue'):
        state = evaluate(log, [], NOW)
    assert not caplog.records
    assert state['latsUpper'].fatigue_percent > 0
    assert state['brachialis'].fatigue_percent > 0
