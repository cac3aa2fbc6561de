# liftlog/constants.py

REST = 'REST'

# Defaults substituted when a night's sleep was not logged
DEFAULT_SLEEP_HOURS = 8.0
DEFAULT_DEEP_SLEEP_PERCENT = 15.0
DEFAULT_RPE = 8.0

DEFAULT_LOOKBACK_DAYS = 7
SUGGESTION_HISTORY_LIMIT = 5

# Fatigue model calibration
VOLUME_NORMALIZATION = 175.0  # typical sessions land on a 0-100ish scale
SECONDARY_MUSCLE_FACTOR = 0.7
BASELINE_FATIGUE = 100.0
RECOVERED_FRACTION = 0.01

# Planned workout keywords -> muscles involved. Several keywords may match one label.
WORKOUT_MUSCLE_GROUPS = [
    (('push', 'chest'), ['pectoralsUpper', 'pectoralsLower', 'deltsFront', 'tricepsLong', 'tricepsLateral']),
    (('pull', 'back'), ['latsUpper', 'latsLower', 'trapsMid', 'rhomboids']),
    (('biceps', 'arm'), ['bicepsLong', 'bicepsShort', 'brachialis']),
    (('triceps', 'arm'), ['tricepsLong', 'tricepsLateral']),
    (('legs', 'squat'), ['vastusLateralis', 'vastusMedialis', 'rectusFemoris', 'glutesUpper', 'glutesLower']),
    (('shoulder',), ['deltsFront', 'deltsMid', 'deltsRear']),
    (('core',), ['rectusAbdominis', 'obliqueExternal', 'obliqueInternal']),
]

CYCLE_PRESETS = {
    'current-14-day': {
        'name': 'Current 14-Day (Push/Pull/Legs)',
        'days': [
            'REST', 'Push/Biceps', 'REST', 'Pull/Triceps', 'REST', 'Push/Biceps', 'Legs/Core',
            'REST', 'Pull/Triceps', 'REST', 'Push/Biceps', 'REST', 'Pull/Triceps', 'Legs/Core',
        ],
        'description': '14-day push/pull/legs cycle with integrated arm work',
    },
    'upper-lower-4day': {
        'name': 'Upper/Lower 4-Day',
        'days': ['Upper', 'Lower', 'REST', 'Upper', 'Lower', 'REST', 'REST'],
        'description': 'Classic 4-day upper/lower split',
    },
    'ppl-6day': {
        'name': 'PPL 6-Day',
        'days': ['Push', 'Pull', 'Legs', 'Push', 'Pull', 'Legs', 'REST'],
        'description': 'High frequency push/pull/legs, 6 days per week',
    },
    'full-body-3day': {
        'name': 'Full Body 3x/week',
        'days': ['Full Body', 'REST', 'Full Body', 'REST', 'Full Body', 'REST', 'REST'],
        'description': 'Ideal for beginners or maintenance phases',
    },
    'arnold-split': {
        'name': 'Arnold Split',
        'days': ['Chest/Back', 'Shoulders/Arms', 'Legs', 'REST', 'Chest/Back', 'Shoulders/Arms', 'Legs'],
        'description': 'Antagonist pairing split',
    },
    'bro-split-5day': {
        'name': 'Bro Split 5-Day',
        'days': ['Chest', 'Back', 'REST', 'Shoulders', 'Legs', 'Arms', 'REST'],
        'description': 'Traditional bodybuilding split, one muscle group per day',
    },
}
