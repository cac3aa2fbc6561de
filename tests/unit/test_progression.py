import unittest
from datetime import date, timedelta

from liftlog.progression import (
    PerformanceStatus,
    analyze_performance_profile,
    get_exercise_history,
    rpe_trend,
    suggest,
)


START = date(2024, 2, 1)


def session_log(*sessions, name='Barbell Bench Press'):
    """Builds a log with one Push day per session tuple (weight, reps, rpe)."""
    log = []
    for i, (weight, reps, rpe) in enumerate(sessions):
        exercise = {'name': name, 'weight': weight, 'reps': reps}
        if rpe is not None:
            exercise['rpe'] = rpe
        log.append({
            'date': (START + timedelta(days=2 * i)).isoformat(),
            'actual_type': 'Push',
            'exercises': [exercise],
        })
    return log


class TestExerciseHistory(unittest.TestCase):
    def test_history_is_limited_and_oldest_first(self):
        log = session_log(*[(100 + i * 5, [8, 8, 8], 8) for i in range(7)])
        history = get_exercise_history('Barbell Bench Press', log)
        self.assertEqual(len(history), 5)
        self.assertEqual([s['weight'] for s in history], [110, 115, 120, 125, 130])

    def test_history_skips_other_exercises(self):
        log = session_log((100, [8], 8)) + session_log((50, [12], 7), name='Dips')
        history = get_exercise_history('Dips', log)
        self.assertEqual(len(history), 1)
        self.assertEqual(history[0]['weight'], 50)

    def test_session_weight_is_heaviest_set(self):
        log = [{'date': '2024-02-01', 'actual_type': 'Push',
                'exercises': [{'name': 'Squat', 'weights': [135, 185, 165], 'reps': [5, 5, 5], 'rpe': 8}]}]
        self.assertEqual(get_exercise_history('Squat', log)[0]['weight'], 185)


class TestPerformanceProfile(unittest.TestCase):
    def test_new_exercise(self):
        profile = analyze_performance_profile([])
        self.assertEqual(profile['status'], PerformanceStatus.NEW)
        self.assertIsNone(profile['last_session'])

    def test_missing_rpe(self):
        history = get_exercise_history('Barbell Bench Press', session_log((200, [8, 8, 8], None)))
        self.assertEqual(analyze_performance_profile(history)['status'], PerformanceStatus.NO_RPE)

    def test_trend_down_at_same_weight(self):
        history = get_exercise_history('Barbell Bench Press', session_log((200, [8], 9), (200, [8], 8.5)))
        self.assertEqual(rpe_trend(history), 'down')
        self.assertEqual(analyze_performance_profile(history)['status'], PerformanceStatus.MASTERED)

    def test_trend_up_keeps_progressing(self):
        history = get_exercise_history('Barbell Bench Press', session_log((200, [8], 8), (200, [8], 9)))
        self.assertEqual(rpe_trend(history), 'up')
        self.assertEqual(analyze_performance_profile(history)['status'], PerformanceStatus.PROGRESSING)

    def test_trend_only_counts_sessions_at_last_weight(self):
        history = get_exercise_history('Barbell Bench Press', session_log((190, [8], 9), (200, [8], 9)))
        self.assertEqual(rpe_trend(history), 'flat')
        self.assertEqual(analyze_performance_profile(history)['status'], PerformanceStatus.PROGRESSING)

    def test_flat_and_easy_is_mastered(self):
        history = get_exercise_history('Barbell Bench Press', session_log((200, [8], 8)))
        self.assertEqual(analyze_performance_profile(history)['status'], PerformanceStatus.MASTERED)

    def test_maxed_out(self):
        history = get_exercise_history('Barbell Bench Press', session_log((200, [8], 9.5)))
        self.assertEqual(analyze_performance_profile(history)['status'], PerformanceStatus.MAXED_OUT)


class TestSuggest(unittest.TestCase):
    def test_new_exercise_gets_baseline_instruction(self):
        result = suggest('Barbell Bench Press', [], 18)
        self.assertEqual(result['status'], 'NEW')
        self.assertEqual(result['title'], 'Set a Baseline')
        self.assertIsNone(result['target_weight'])

    def test_no_rpe_quotes_last_session(self):
        result = suggest('Barbell Bench Press', session_log((200, [8, 8, 7], None)), 18)
        self.assertEqual(result['status'], 'NO_RPE')
        self.assertIn('8/8/7 reps at 200 lbs', result['target'])

    def test_no_rpe_wins_over_low_sleep(self):
        result = suggest('Barbell Bench Press', session_log((200, [8, 8, 8], None)), 5)
        self.assertEqual(result['status'], 'NO_RPE')
        self.assertIsNone(result['target_rpe'])

    def test_low_sleep_deload_fires_before_maxed_out(self):
        result = suggest('Barbell Bench Press', session_log((200, [8, 8, 8], 10)), 5)
        self.assertTrue(result['title'].startswith('Deload Day'))
        self.assertEqual(result['target_weight'], 170)
        self.assertTrue(result['target'].startswith('170 lbs for 3 sets of 8-10 reps'))
        self.assertEqual(result['target_rpe'], 7.0)

    def test_maxed_out_backs_off(self):
        result = suggest('Barbell Bench Press', session_log((200, [8, 8, 8], 10)), 15)
        self.assertEqual(result['status'], 'MAXED_OUT')
        self.assertEqual(result['target_weight'], 180)
        self.assertEqual(result['target_reps'], [5, 7])

    def test_back_off_rounds_half_up(self):
        result = suggest('Barbell Bench Press', session_log((205, [8, 8, 8], 10)), 15)
        self.assertEqual(result['target_weight'], 185)  # 184.5

    def test_mastered_with_good_sleep_adds_weight(self):
        result = suggest('Barbell Bench Press', session_log((200, [8, 8, 8], 9), (200, [8, 8, 8], 8)), 15)
        self.assertEqual(result['status'], 'MASTERED')
        self.assertEqual(result['rpe_trend'], 'down')
        self.assertEqual(result['target_weight'], 205)
        self.assertIn('205 lbs for 3 sets of 4-6 reps (RPE 9)', result['target'])

    def test_mastered_with_middling_sleep_adds_reps(self):
        result = suggest('Barbell Bench Press', session_log((200, [8, 8, 8], 8)), 13)
        self.assertEqual(result['title'], 'Add Reps')
        self.assertEqual(result['target_weight'], 200)
        self.assertEqual(result['target_reps'], [9, 8, 8])

    def test_add_reps_fills_missing_sets_with_incremented_value(self):
        result = suggest('Barbell Bench Press', session_log((200, [8, 7], 9)), 18)
        self.assertEqual(result['status'], 'PROGRESSING')
        self.assertEqual(result['target_reps'], [9, 7, 9])
        self.assertIn('e.g., 9/7/9', result['target'])

    def test_missing_sleep_defaults_to_target_range(self):
        result = suggest('Barbell Bench Press', session_log((200, [8, 8, 8], 8)))
        self.assertEqual(result['target_weight'], 205)

    def test_suggest_is_idempotent(self):
        log = session_log((200, [8, 8, 8], 9), (200, [9, 8, 8], 9))
        self.assertEqual(suggest('Barbell Bench Press', log, 14), suggest('Barbell Bench Press', log, 14))


if __name__ == '__main__':
    unittest.main()
