# liftlog/reference_data.py
# Default muscle and exercise tables shipped with the engine.
# Activation values are % MVIC; decay rates are % fatigue recovered per hour.

MUSCLES_DATA = [
    # Chest
    {"key": "pectoralsUpper", "name": "Upper Pecs", "recovery_hours": 84, "decay_rate": 1.25},
    {"key": "pectoralsLower", "name": "Lower Pecs", "recovery_hours": 84, "decay_rate": 1.25},
    # Shoulders
    {"key": "deltsFront", "name": "Front Delts", "recovery_hours": 60, "decay_rate": 2.25},
    {"key": "deltsMid", "name": "Mid Delts", "recovery_hours": 60, "decay_rate": 2.25},
    {"key": "deltsRear", "name": "Rear Delts", "recovery_hours": 60, "decay_rate": 2.25},
    # Rotator cuff
    {"key": "infraspinatus", "name": "Infraspinatus", "recovery_hours": 54, "decay_rate": 2.5},
    {"key": "supraspinatus", "name": "Supraspinatus", "recovery_hours": 54, "decay_rate": 2.5},
    # Quads
    {"key": "vastusLateralis", "name": "Vastus Lateralis", "recovery_hours": 48, "decay_rate": 4.0},
    {"key": "vastusMedialis", "name": "Vastus Medialis (VMO)", "recovery_hours": 48, "decay_rate": 4.0},
    {"key": "rectusFemoris", "name": "Rectus Femoris", "recovery_hours": 48, "decay_rate": 4.0},
    # Hamstrings
    {"key": "bicepsFemoris", "name": "Biceps Femoris", "recovery_hours": 60, "decay_rate": 2.25},
    {"key": "semitendinosus", "name": "Semitendinosus", "recovery_hours": 60, "decay_rate": 2.25},
    # Triceps
    {"key": "tricepsLong", "name": "Triceps Long Head", "recovery_hours": 72, "decay_rate": 1.75},
    {"key": "tricepsLateral", "name": "Triceps Lateral Head", "recovery_hours": 72, "decay_rate": 1.75},
    # Biceps and forearms
    {"key": "bicepsLong", "name": "Biceps Long Head", "recovery_hours": 66, "decay_rate": 2.0},
    {"key": "bicepsShort", "name": "Biceps Short Head", "recovery_hours": 66, "decay_rate": 2.0},
    {"key": "brachialis", "name": "Brachialis", "recovery_hours": 60, "decay_rate": 2.5},
    {"key": "brachioradialis", "name": "Brachioradialis", "recovery_hours": 54, "decay_rate": 3.0},
    {"key": "forearms", "name": "Forearms", "recovery_hours": 36, "decay_rate": 4.0},
    # Lats
    {"key": "latsUpper", "name": "Upper Lats", "recovery_hours": 60, "decay_rate": 2.25},
    {"key": "latsLower", "name": "Lower Lats", "recovery_hours": 60, "decay_rate": 2.25},
    # Traps
    {"key": "trapsUpper", "name": "Upper Traps", "recovery_hours": 42, "decay_rate": 3.0},
    {"key": "trapsMid", "name": "Mid Traps", "recovery_hours": 42, "decay_rate": 3.0},
    {"key": "trapsLower", "name": "Lower Traps", "recovery_hours": 42, "decay_rate": 3.0},
    # Calves
    {"key": "gastrocnemius", "name": "Gastrocnemius", "recovery_hours": 36, "decay_rate": 4.5},
    {"key": "soleus", "name": "Soleus", "recovery_hours": 36, "decay_rate": 4.5},
    # Glutes
    {"key": "glutesUpper", "name": "Upper Glutes", "recovery_hours": 60, "decay_rate": 2.5},
    {"key": "glutesLower", "name": "Lower Glutes", "recovery_hours": 60, "decay_rate": 2.5},
    {"key": "gluteMed", "name": "Glute Medius", "recovery_hours": 60, "decay_rate": 2.5},
    # Core
    {"key": "rectusAbdominis", "name": "Abs", "recovery_hours": 48, "decay_rate": 3.5},
    {"key": "obliqueExternal", "name": "External Obliques", "recovery_hours": 48, "decay_rate": 3.5},
    {"key": "obliqueInternal", "name": "Internal Obliques", "recovery_hours": 48, "decay_rate": 3.5},
    # Other
    {"key": "erectorSpinae", "name": "Erector Spinae", "recovery_hours": 60, "decay_rate": 2.5},
    {"key": "rhomboids", "name": "Rhomboids", "recovery_hours": 42, "decay_rate": 3.0},
    {"key": "serratusAnterior", "name": "Serratus Anterior", "recovery_hours": 48, "decay_rate": 3.0},
]

# Tier 1: high CNS demand, tier 2: multi-muscle compound,
# tier 3: single-joint compound, tier 4: isolation
EXERCISE_TIERS = {
    1: {"multiplier": 1.5, "name": "High CNS Demand"},
    2: {"multiplier": 1.2, "name": "Multi-Muscle Compound"},
    3: {"multiplier": 1.0, "name": "Single-Joint Compound"},
    4: {"multiplier": 0.6, "name": "Isolation"},
}

EXERCISES_DATA = [
    # --- Gym rotation ---
    {
        "name": "Seated Lat Pull-Downs",
        "category": "compound",
        "tier": 2,
        "primary_muscles": {"latsUpper": 110, "latsLower": 105, "trapsMid": 85, "rhomboids": 75},
        "secondary_muscles": {"bicepsLong": 45, "bicepsShort": 45, "deltsRear": 35},
    },
    {
        "name": "Rope Cable Face-Pulls",
        "category": "isolation",
        "tier": 3,
        "primary_muscles": {"deltsRear": 110, "trapsMid": 65, "rhomboids": 55},
        "secondary_muscles": {"trapsUpper": 25, "bicepsLong": 15},
    },
    {
        "name": "Rope Tricep Cable Push-Downs",
        "category": "isolation",
        "tier": 4,
        "primary_muscles": {"tricepsLateral": 75, "tricepsLong": 60},
        "secondary_muscles": {"forearms": 25},
    },
    {
        "name": "Gym80 3040 Seated Row Machine",
        "category": "compound",
        "tier": 2,
        "variants": ["Narrow Grip", "Wide Grip"],
        "primary_muscles": {"latsUpper": 68, "latsLower": 64, "trapsMid": 95, "rhomboids": 35},
        "secondary_muscles": {"deltsRear": 70, "bicepsLong": 50, "bicepsShort": 50, "erectorSpinae": 25},
        "variant_adjustments": {
            "Wide Grip": {
                "latsUpper": -16, "latsLower": -19, "trapsMid": 10, "rhomboids": 10, "deltsRear": 35,
            },
        },
    },
    {
        "name": "Dumbbell Incline Bench Press",
        "category": "compound",
        "tier": 2,
        "primary_muscles": {"pectoralsUpper": 70, "pectoralsLower": 55, "deltsFront": 80},
        "secondary_muscles": {"tricepsLong": 50, "tricepsLateral": 50, "deltsMid": 20},
        "lengthening_partials": True,
        "lengthening_multiplier": 1.3,
    },
    {
        "name": "Standing EZ-Bar Shoulder Press",
        "category": "compound",
        "tier": 2,
        "primary_muscles": {"deltsFront": 85, "deltsMid": 75, "pectoralsUpper": 35},
        "secondary_muscles": {"tricepsLong": 55, "tricepsLateral": 55, "trapsUpper": 30, "erectorSpinae": 20},
    },
    {
        "name": "Standing Dumbbell Cross-Body Hammer Curls",
        "category": "isolation",
        "tier": 4,
        "primary_muscles": {"bicepsLong": 75, "bicepsShort": 75, "brachialis": 60, "brachioradialis": 55},
        "secondary_muscles": {"deltsFront": 15, "forearms": 40},
    },
    {
        "name": "Gym80 3022 Pec Fly Machine",
        "category": "isolation",
        "tier": 3,
        "primary_muscles": {"pectoralsLower": 70, "pectoralsUpper": 60},
        "secondary_muscles": {"deltsFront": 20, "bicepsShort": 10, "serratusAnterior": 15},
        "lengthening_partials": True,
        "lengthening_multiplier": 1.3,
    },
    {
        "name": "Weighted Pull-Ups",
        "category": "compound",
        "tier": 2,
        "primary_muscles": {"latsUpper": 110, "latsLower": 110, "trapsMid": 92, "rhomboids": 86},
        "secondary_muscles": {
            "bicepsLong": 60, "bicepsShort": 60, "deltsRear": 40, "forearms": 50, "brachialis": 55,
            "rectusAbdominis": 25,
        },
    },
    {
        "name": "Gym80 3025 Reverse Fly/Rear Delt",
        "category": "isolation",
        "tier": 3,
        "variants": ["Neutral Grip", "Pronated Grip"],
        "primary_muscles": {"deltsRear": 90, "infraspinatus": 50, "rhomboids": 40, "trapsMid": 45},
        "secondary_muscles": {"trapsLower": 25, "latsUpper": 12},
        "variant_adjustments": {
            "Pronated Grip": {"deltsRear": -7, "infraspinatus": -13, "rhomboids": 5, "trapsMid": 5},
        },
    },
    {
        "name": "Standing Dumbbell Skull-Crushers",
        "category": "isolation",
        "tier": 4,
        "primary_muscles": {"tricepsLong": 85, "tricepsLateral": 70},
        "secondary_muscles": {"deltsFront": 15, "pectoralsUpper": 10},
        "lengthening_partials": True,
        "lengthening_multiplier": 1.4,
    },
    {
        "name": "Gym80 4353 Pure Kraft Pendulum Squat",
        "category": "compound",
        "tier": 1,
        "variants": ["Standard", "Heel Elevated"],
        "primary_muscles": {"vastusLateralis": 65, "vastusMedialis": 58, "rectusFemoris": 35},
        "secondary_muscles": {
            "glutesUpper": 30, "glutesLower": 35, "bicepsFemoris": 15, "semitendinosus": 13,
            "erectorSpinae": 12,
        },
        "variant_adjustments": {
            "Heel Elevated": {
                "vastusLateralis": 10, "vastusMedialis": 12, "rectusFemoris": 5, "glutesUpper": 5,
                "glutesLower": 5,
            },
        },
    },
    {
        "name": "Gym80 3018 Standing Calf Raise Machine",
        "category": "isolation",
        "tier": 4,
        "primary_muscles": {"gastrocnemius": 53, "soleus": 51},
        "secondary_muscles": {},
        "lengthening_partials": True,
        "lengthening_multiplier": 2.2,
    },
    {
        "name": "Gym80 3018 Standing Calf Raise Machine Lower-End Partials",
        "category": "isolation",
        "tier": 4,
        "primary_muscles": {"gastrocnemius": 53, "soleus": 51},
        "secondary_muscles": {},
        "lengthening_partials": True,
        "lengthening_multiplier": 2.2,
    },
    {
        "name": "Gym80 3001 Leg Extension Machine",
        "category": "isolation",
        "tier": 4,
        "variants": ["Toes Neutral", "Toes In", "Toes Out"],
        "primary_muscles": {"vastusMedialis": 70, "vastusLateralis": 65, "rectusFemoris": 43},
        "secondary_muscles": {},
        "variant_adjustments": {
            "Toes In": {"vastusMedialis": 10, "vastusLateralis": 10, "rectusFemoris": -8},
            "Toes Out": {"vastusMedialis": -10, "vastusLateralis": -10, "rectusFemoris": 7},
        },
        "lengthening_partials": True,
        "lengthening_multiplier": 1.5,
    },
    {
        "name": "Rope Cable Crunches",
        "category": "isolation",
        "tier": 4,
        "primary_muscles": {"rectusAbdominis": 90, "obliqueExternal": 45, "obliqueInternal": 45},
        "secondary_muscles": {"latsUpper": 15},
    },
    # --- Shoulders ---
    {
        "name": "Dumbbell Lateral Raises",
        "category": "isolation",
        "tier": 4,
        "variants": ["Thumbs Up (External)", "Neutral (Palms Down)", "Thumbs Down (Internal)"],
        "primary_muscles": {"deltsMid": 55, "deltsRear": 52, "deltsFront": 36},
        "secondary_muscles": {"trapsUpper": 105, "supraspinatus": 30},
        "variant_adjustments": {
            "Thumbs Up (External)": {"deltsFront": 44, "deltsMid": -7, "deltsRear": -16},
            "Thumbs Down (Internal)": {"deltsFront": -2, "deltsMid": -3, "deltsRear": 33},
        },
    },
    {
        "name": "Cable Lateral Raises",
        "category": "isolation",
        "tier": 4,
        "primary_muscles": {"deltsMid": 55, "deltsFront": 36, "deltsRear": 52},
        "secondary_muscles": {"trapsUpper": 105, "supraspinatus": 30},
    },
    {
        "name": "Dumbbell Shoulder Press",
        "category": "compound",
        "tier": 2,
        "primary_muscles": {"deltsFront": 74, "deltsMid": 62},
        "secondary_muscles": {
            "deltsRear": 10, "tricepsLong": 55, "tricepsLateral": 55, "trapsUpper": 30,
            "pectoralsUpper": 25, "erectorSpinae": 25,
        },
    },
    {
        "name": "Arnold Press",
        "category": "compound",
        "tier": 2,
        "primary_muscles": {"deltsFront": 95, "deltsMid": 71},
        "secondary_muscles": {"deltsRear": 15, "tricepsLong": 60, "tricepsLateral": 60, "pectoralsUpper": 30},
    },
    {
        "name": "Front Raises",
        "category": "isolation",
        "tier": 4,
        "primary_muscles": {"deltsFront": 57, "deltsMid": 36},
        "secondary_muscles": {"deltsRear": 9, "pectoralsUpper": 20, "serratusAnterior": 15},
    },
    {
        "name": "Upright Rows",
        "category": "compound",
        "tier": 3,
        "variants": ["Wide Grip (200% biacromial)", "Standard Grip"],
        "primary_muscles": {"deltsMid": 73, "trapsMid": 70, "deltsFront": 33},
        "secondary_muscles": {"deltsRear": 31, "bicepsLong": 35, "bicepsShort": 35, "brachialis": 25},
        "variant_adjustments": {
            "Standard Grip": {"bicepsLong": 15, "bicepsShort": 15},
        },
    },
    {
        "name": "Seated Rear Lateral Raise",
        "category": "isolation",
        "tier": 4,
        "primary_muscles": {"deltsRear": 73, "deltsMid": 70},
        "secondary_muscles": {"deltsFront": 5, "rhomboids": 35, "trapsMid": 40},
    },
    {
        "name": "45° Incline Row",
        "category": "compound",
        "tier": 3,
        "primary_muscles": {"deltsMid": 84, "deltsRear": 69, "trapsMid": 75, "rhomboids": 45},
        "secondary_muscles": {
            "deltsFront": 6, "latsUpper": 40, "latsLower": 40, "bicepsLong": 50, "bicepsShort": 50,
        },
    },
    {
        "name": "Barbell Shrugs",
        "category": "isolation",
        "tier": 4,
        "primary_muscles": {"trapsUpper": 102, "trapsMid": 45},
        "secondary_muscles": {"deltsMid": 15, "erectorSpinae": 20, "forearms": 40},
    },
    # --- Biceps ---
    {
        "name": "Concentration Curls",
        "category": "isolation",
        "tier": 4,
        "primary_muscles": {"bicepsLong": 97, "bicepsShort": 97},
        "secondary_muscles": {"brachialis": 60, "brachioradialis": 40, "deltsFront": 10},
        "lengthening_partials": True,
        "lengthening_multiplier": 1.5,
    },
    {
        "name": "Cable Curls",
        "category": "isolation",
        "tier": 4,
        "primary_muscles": {"bicepsLong": 95, "bicepsShort": 95},
        "secondary_muscles": {"brachialis": 55, "brachioradialis": 45, "deltsFront": 12},
    },
    {
        "name": "Chin-Ups",
        "category": "compound",
        "tier": 2,
        "primary_muscles": {"latsUpper": 105, "latsLower": 105, "bicepsLong": 95, "bicepsShort": 95},
        "secondary_muscles": {
            "trapsMid": 60, "trapsLower": 48, "rhomboids": 70, "deltsRear": 53, "pectoralsLower": 45,
            "brachialis": 60, "brachioradialis": 50, "forearms": 55, "rectusAbdominis": 25,
        },
    },
    {
        "name": "Barbell Curls",
        "category": "isolation",
        "tier": 4,
        "primary_muscles": {"bicepsLong": 90, "bicepsShort": 90},
        "secondary_muscles": {"brachialis": 50, "brachioradialis": 40, "deltsFront": 12, "forearms": 30},
    },
    {
        "name": "EZ-Bar Curls",
        "category": "isolation",
        "tier": 4,
        "primary_muscles": {"bicepsLong": 88, "bicepsShort": 88},
        "secondary_muscles": {"brachialis": 53, "brachioradialis": 48, "deltsFront": 12, "forearms": 32},
    },
    {
        "name": "Incline Dumbbell Curls",
        "category": "isolation",
        "tier": 4,
        "primary_muscles": {"bicepsLong": 92, "bicepsShort": 78},
        "secondary_muscles": {"brachialis": 48, "brachioradialis": 38, "deltsFront": 15},
        "lengthening_partials": True,
        "lengthening_multiplier": 1.5,
    },
    {
        "name": "Preacher Curls",
        "category": "isolation",
        "tier": 4,
        "primary_muscles": {"bicepsLong": 75, "bicepsShort": 88},
        "secondary_muscles": {"brachialis": 55, "brachioradialis": 42, "deltsFront": 8},
        "lengthening_partials": True,
        "lengthening_multiplier": 2.6,
    },
    {
        "name": "Hammer Curls",
        "category": "isolation",
        "tier": 4,
        "primary_muscles": {"brachialis": 80, "brachioradialis": 65, "bicepsLong": 70, "bicepsShort": 70},
        "secondary_muscles": {"deltsFront": 12, "forearms": 45},
    },
    # --- Triceps ---
    {
        "name": "Triangle Push-Ups",
        "category": "compound",
        "tier": 3,
        "primary_muscles": {
            "tricepsLong": 100, "tricepsLateral": 100, "pectoralsLower": 75, "pectoralsUpper": 65,
        },
        "secondary_muscles": {
            "deltsFront": 55, "deltsMid": 15, "serratusAnterior": 30, "rectusAbdominis": 35,
        },
    },
    {
        "name": "Dips",
        "category": "compound",
        "tier": 2,
        "variants": ["Bench Dips", "Parallel Bar Dips"],
        "primary_muscles": {"tricepsLong": 87, "tricepsLateral": 88, "pectoralsLower": 60, "deltsFront": 55},
        "secondary_muscles": {
            "pectoralsUpper": 40, "deltsMid": 20, "serratusAnterior": 25, "rectusAbdominis": 25,
        },
    },
    {
        "name": "Overhead Tricep Extensions",
        "category": "isolation",
        "tier": 4,
        "primary_muscles": {"tricepsLong": 95, "tricepsLateral": 72},
        "secondary_muscles": {"deltsFront": 15, "pectoralsUpper": 10, "erectorSpinae": 15},
        "lengthening_partials": True,
        "lengthening_multiplier": 1.5,
    },
    {
        "name": "Incline Dumbbell Kickbacks",
        "category": "isolation",
        "tier": 4,
        "primary_muscles": {"tricepsLong": 106, "tricepsLateral": 87},
        "secondary_muscles": {"deltsRear": 20, "deltsMid": 15},
    },
    {
        "name": "Rope Pushdowns",
        "category": "isolation",
        "tier": 4,
        "primary_muscles": {"tricepsLong": 81, "tricepsLateral": 67},
        "secondary_muscles": {"forearms": 20, "deltsFront": 10},
    },
    {
        "name": "Bar Pushdowns",
        "category": "isolation",
        "tier": 4,
        "primary_muscles": {"tricepsLong": 75, "tricepsLateral": 59},
        "secondary_muscles": {"forearms": 18, "deltsFront": 8},
    },
    {
        "name": "Skull Crushers",
        "category": "isolation",
        "tier": 4,
        "primary_muscles": {"tricepsLong": 70, "tricepsLateral": 55},
        "secondary_muscles": {"deltsFront": 12, "pectoralsUpper": 10, "forearms": 20},
        "lengthening_partials": True,
        "lengthening_multiplier": 1.4,
    },
    {
        "name": "Close-Grip Bench Press",
        "category": "compound",
        "tier": 2,
        "primary_muscles": {
            "tricepsLong": 61, "tricepsLateral": 63, "pectoralsLower": 80, "pectoralsUpper": 65,
        },
        "secondary_muscles": {"deltsFront": 50, "deltsMid": 15, "serratusAnterior": 20},
    },
    # --- Chest ---
    {
        "name": "Barbell Bench Press",
        "category": "compound",
        "tier": 2,
        "primary_muscles": {"pectoralsLower": 95, "pectoralsUpper": 60, "deltsFront": 79},
        "secondary_muscles": {
            "tricepsLong": 67, "tricepsLateral": 67, "deltsMid": 25, "serratusAnterior": 18,
        },
    },
    {
        "name": "Incline Barbell Bench Press (30°)",
        "category": "compound",
        "tier": 2,
        "primary_muscles": {"pectoralsUpper": 70, "pectoralsLower": 55, "deltsFront": 80},
        "secondary_muscles": {
            "tricepsLong": 65, "tricepsLateral": 65, "deltsMid": 28, "serratusAnterior": 20,
        },
        "lengthening_partials": True,
        "lengthening_multiplier": 1.3,
    },
    {
        "name": "Incline Bench Press (45°)",
        "category": "compound",
        "tier": 2,
        "primary_muscles": {"pectoralsUpper": 62, "pectoralsLower": 45, "deltsFront": 90},
        "secondary_muscles": {"tricepsLong": 60, "tricepsLateral": 60, "deltsMid": 32},
        "lengthening_partials": True,
        "lengthening_multiplier": 1.3,
    },
    {
        "name": "Incline Bench Press (60°)",
        "category": "compound",
        "tier": 2,
        "primary_muscles": {"pectoralsUpper": 50, "pectoralsLower": 35, "deltsFront": 105},
        "secondary_muscles": {"tricepsLong": 55, "tricepsLateral": 55, "deltsMid": 38},
    },
    {
        "name": "Decline Bench Press",
        "category": "compound",
        "tier": 2,
        "primary_muscles": {"pectoralsLower": 100, "pectoralsUpper": 45, "deltsFront": 55},
        "secondary_muscles": {"tricepsLong": 70, "tricepsLateral": 70, "deltsMid": 18},
    },
    {
        "name": "Standard Push-Ups",
        "category": "compound",
        "tier": 3,
        "primary_muscles": {
            "pectoralsLower": 85, "pectoralsUpper": 75, "deltsFront": 70, "tricepsLong": 90,
            "tricepsLateral": 90,
        },
        "secondary_muscles": {"deltsMid": 20, "serratusAnterior": 35, "rectusAbdominis": 40},
    },
    {
        "name": "TRX/Suspension Push-Ups",
        "category": "compound",
        "tier": 3,
        "primary_muscles": {
            "pectoralsLower": 90, "pectoralsUpper": 80, "deltsFront": 75, "tricepsLong": 106,
            "tricepsLateral": 106,
        },
        "secondary_muscles": {
            "deltsMid": 22, "serratusAnterior": 40, "rectusAbdominis": 55, "obliqueExternal": 35,
        },
    },
    {
        "name": "Pec Deck Machine",
        "category": "isolation",
        "tier": 3,
        "primary_muscles": {"pectoralsLower": 93, "pectoralsUpper": 75},
        "secondary_muscles": {"deltsFront": 22, "serratusAnterior": 18, "bicepsShort": 8},
        "lengthening_partials": True,
        "lengthening_multiplier": 1.3,
    },
    {
        "name": "Cable Crossovers",
        "category": "isolation",
        "tier": 3,
        "primary_muscles": {"pectoralsLower": 88, "pectoralsUpper": 70},
        "secondary_muscles": {"deltsFront": 25, "serratusAnterior": 20, "rectusAbdominis": 18},
        "lengthening_partials": True,
        "lengthening_multiplier": 1.3,
    },
    {
        "name": "Dumbbell Flyes",
        "category": "isolation",
        "tier": 4,
        "primary_muscles": {"pectoralsLower": 63, "pectoralsUpper": 50},
        "secondary_muscles": {"deltsFront": 28, "bicepsShort": 15},
        "lengthening_partials": True,
        "lengthening_multiplier": 1.3,
    },
    # --- Core ---
    {
        "name": "Bicycle Crunches",
        "category": "isolation",
        "tier": 4,
        "primary_muscles": {"rectusAbdominis": 169, "obliqueExternal": 166, "obliqueInternal": 166},
        "secondary_muscles": {},
    },
    {
        "name": "Captain's Chair/Hanging Leg Raises",
        "category": "compound",
        "tier": 3,
        "primary_muscles": {"rectusAbdominis": 144, "obliqueExternal": 177, "obliqueInternal": 177},
        "secondary_muscles": {"latsUpper": 25, "forearms": 45, "deltsFront": 15},
    },
    {
        "name": "Ab Wheel Rollout",
        "category": "compound",
        "tier": 3,
        "primary_muscles": {"rectusAbdominis": 58, "obliqueExternal": 46, "obliqueInternal": 46},
        "secondary_muscles": {"erectorSpinae": 8, "latsUpper": 35, "latsLower": 30, "deltsFront": 40},
    },
    {
        "name": "RKC Plank",
        "category": "isometric",
        "tier": 4,
        "primary_muscles": {"rectusAbdominis": 100, "obliqueExternal": 100, "obliqueInternal": 100},
        "secondary_muscles": {"glutesUpper": 85, "glutesLower": 85, "erectorSpinae": 8},
    },
    {
        "name": "Standard Front Plank",
        "category": "isometric",
        "tier": 4,
        "primary_muscles": {"rectusAbdominis": 47, "obliqueExternal": 49, "obliqueInternal": 49},
        "secondary_muscles": {"deltsFront": 30, "erectorSpinae": 8},
    },
    {
        "name": "Side Planks (Feet Elevated)",
        "category": "isometric",
        "tier": 4,
        "primary_muscles": {"obliqueInternal": 205, "obliqueExternal": 145, "rectusAbdominis": 55},
        "secondary_muscles": {"gluteMed": 65, "deltsMid": 40},
    },
    {
        "name": "Traditional Crunches",
        "category": "isolation",
        "tier": 4,
        "primary_muscles": {"rectusAbdominis": 68, "obliqueExternal": 57, "obliqueInternal": 64},
        "secondary_muscles": {},
    },
    # --- Back ---
    {
        "name": "Bent-Over Barbell Row",
        "category": "compound",
        "tier": 2,
        "primary_muscles": {
            "latsUpper": 91, "latsLower": 91, "trapsMid": 107, "rhomboids": 60, "infraspinatus": 55,
            "erectorSpinae": 66,
        },
        "secondary_muscles": {
            "deltsRear": 70, "trapsLower": 50, "bicepsLong": 55, "bicepsShort": 55, "brachialis": 40,
            "forearms": 50, "rectusAbdominis": 30, "obliqueExternal": 25,
        },
    },
    {
        "name": "Pull-Ups",
        "category": "compound",
        "tier": 2,
        "primary_muscles": {"latsUpper": 108, "latsLower": 108, "trapsMid": 80, "trapsLower": 54},
        "secondary_muscles": {
            "rhomboids": 70, "infraspinatus": 51, "deltsRear": 40, "bicepsLong": 55, "bicepsShort": 55,
            "brachialis": 50, "forearms": 55, "erectorSpinae": 46, "rectusAbdominis": 25,
        },
    },
    {
        "name": "Inverted Rows",
        "category": "compound",
        "tier": 3,
        "primary_muscles": {
            "trapsMid": 108, "latsUpper": 83, "latsLower": 83, "rhomboids": 55, "infraspinatus": 51,
        },
        "secondary_muscles": {
            "trapsLower": 55, "deltsRear": 60, "bicepsLong": 65, "bicepsShort": 65, "brachialis": 45,
            "erectorSpinae": 44, "rectusAbdominis": 35,
        },
    },
    {
        "name": "Seated Cable Rows",
        "category": "compound",
        "tier": 3,
        "primary_muscles": {"latsUpper": 90, "latsLower": 90, "trapsMid": 99, "rhomboids": 45},
        "secondary_muscles": {
            "trapsLower": 47, "deltsRear": 55, "infraspinatus": 46, "bicepsLong": 50, "bicepsShort": 50,
            "brachialis": 40, "erectorSpinae": 44,
        },
    },
    {
        "name": "One-Arm Dumbbell Rows",
        "category": "compound",
        "tier": 3,
        "primary_muscles": {"latsUpper": 91, "latsLower": 91, "trapsMid": 85, "rhomboids": 50},
        "secondary_muscles": {
            "deltsRear": 55, "trapsLower": 45, "bicepsLong": 60, "bicepsShort": 60, "brachialis": 42,
            "obliqueExternal": 95, "rectusAbdominis": 40, "erectorSpinae": 50,
        },
    },
    {
        "name": "Lat Pulldowns",
        "category": "compound",
        "tier": 3,
        "primary_muscles": {"latsUpper": 88, "latsLower": 88, "trapsMid": 61, "trapsLower": 61},
        "secondary_muscles": {
            "deltsRear": 37, "rhomboids": 40, "bicepsLong": 45, "bicepsShort": 45, "brachialis": 35,
            "erectorSpinae": 20,
        },
    },
    # --- Legs ---
    {
        "name": "Barbell Back Squat",
        "category": "compound",
        "tier": 1,
        "primary_muscles": {
            "vastusLateralis": 110, "vastusMedialis": 74, "rectusFemoris": 45, "glutesUpper": 30,
            "glutesLower": 30,
        },
        "secondary_muscles": {
            "erectorSpinae": 60, "bicepsFemoris": 35, "semitendinosus": 30, "rectusAbdominis": 35,
            "obliqueExternal": 25,
        },
    },
    {
        "name": "Barbell Hip Thrust",
        "category": "compound",
        "tier": 2,
        "primary_muscles": {"glutesLower": 87, "glutesUpper": 70, "bicepsFemoris": 41},
        "secondary_muscles": {"semitendinosus": 30, "erectorSpinae": 25, "rectusAbdominis": 20},
    },
    {
        "name": "Step-Ups (Forward)",
        "category": "compound",
        "tier": 3,
        "primary_muscles": {
            "vastusLateralis": 70, "vastusMedialis": 65, "rectusFemoris": 55, "glutesUpper": 65,
            "glutesLower": 70, "gluteMed": 50,
        },
        "secondary_muscles": {"bicepsFemoris": 35, "semitendinosus": 30, "erectorSpinae": 30},
    },
    {
        "name": "Step-Ups (Lateral)",
        "category": "compound",
        "tier": 3,
        "primary_muscles": {
            "vastusLateralis": 65, "vastusMedialis": 60, "rectusFemoris": 50, "glutesUpper": 60,
            "glutesLower": 64, "gluteMed": 55,
        },
        "secondary_muscles": {
            "bicepsFemoris": 30, "semitendinosus": 25, "obliqueExternal": 35, "erectorSpinae": 25,
        },
    },
    {
        "name": "Bulgarian Split Squats",
        "category": "compound",
        "tier": 2,
        "variants": ["Upright Torso", "Forward Trunk Lean (~40°)"],
        "primary_muscles": {
            "vastusLateralis": 78, "vastusMedialis": 70, "rectusFemoris": 55, "glutesUpper": 46,
            "glutesLower": 50, "gluteMed": 50,
        },
        "secondary_muscles": {"bicepsFemoris": 35, "semitendinosus": 30, "erectorSpinae": 35},
        "variant_adjustments": {
            "Forward Trunk Lean (~40°)": {
                "glutesUpper": 10, "glutesLower": 10, "bicepsFemoris": 15, "rectusFemoris": 10,
            },
        },
    },
    {
        "name": "Forward Lunges",
        "category": "compound",
        "tier": 3,
        "variants": ["Static", "Walking"],
        "primary_muscles": {
            "vastusLateralis": 66, "vastusMedialis": 58, "rectusFemoris": 48, "glutesUpper": 41,
            "glutesLower": 44, "gluteMed": 31,
        },
        "secondary_muscles": {"bicepsFemoris": 24, "semitendinosus": 21, "erectorSpinae": 24},
        "variant_adjustments": {
            "Walking": {"erectorSpinae": 16},
        },
    },
    {
        "name": "Single-Leg Deadlift",
        "category": "compound",
        "tier": 3,
        "primary_muscles": {
            "glutesUpper": 59, "glutesLower": 59, "gluteMed": 58, "bicepsFemoris": 70,
            "semitendinosus": 65, "erectorSpinae": 65,
        },
        "secondary_muscles": {
            "vastusLateralis": 25, "vastusMedialis": 20, "obliqueExternal": 60, "obliqueInternal": 55,
            "forearms": 50,
        },
        "lengthening_partials": True,
        "lengthening_multiplier": 1.3,
    },
    {
        "name": "Wall Sits",
        "category": "isometric",
        "tier": 4,
        "primary_muscles": {"vastusLateralis": 55, "vastusMedialis": 52, "rectusFemoris": 45},
        "secondary_muscles": {"glutesLower": 30, "erectorSpinae": 20},
    },
    {
        "name": "Nordic Curls",
        "category": "isolation",
        "tier": 3,
        "primary_muscles": {"bicepsFemoris": 85, "semitendinosus": 85},
        "secondary_muscles": {"gastrocnemius": 35, "erectorSpinae": 30, "glutesUpper": 25, "glutesLower": 25},
        "lengthening_partials": True,
        "lengthening_multiplier": 1.4,
    },
    {
        "name": "Lying Leg Curls",
        "category": "isolation",
        "tier": 4,
        "primary_muscles": {"bicepsFemoris": 82, "semitendinosus": 82},
        "secondary_muscles": {"gastrocnemius": 25},
        "lengthening_partials": True,
        "lengthening_multiplier": 1.4,
    },
    {
        "name": "Conventional Deadlift",
        "category": "compound",
        "tier": 1,
        "primary_muscles": {
            "erectorSpinae": 90, "vastusLateralis": 85, "vastusMedialis": 70, "glutesUpper": 60,
            "glutesLower": 65, "bicepsFemoris": 70, "semitendinosus": 65,
        },
        "secondary_muscles": {
            "trapsMid": 50, "trapsUpper": 55, "rhomboids": 35, "rectusAbdominis": 35, "forearms": 80,
            "latsUpper": 40, "latsLower": 40,
        },
    },
    {
        "name": "Romanian Deadlift",
        "category": "compound",
        "tier": 2,
        "primary_muscles": {
            "semitendinosus": 90, "bicepsFemoris": 85, "glutesUpper": 70, "glutesLower": 75,
            "erectorSpinae": 70,
        },
        "secondary_muscles": {"vastusLateralis": 20, "vastusMedialis": 15, "forearms": 60},
        "lengthening_partials": True,
        "lengthening_multiplier": 1.3,
    },
    {
        "name": "Stiff-Leg Deadlift",
        "category": "compound",
        "tier": 2,
        "primary_muscles": {
            "erectorSpinae": 95, "bicepsFemoris": 85, "semitendinosus": 85, "glutesUpper": 70,
            "glutesLower": 75,
        },
        "secondary_muscles": {
            "vastusLateralis": 25, "vastusMedialis": 20, "forearms": 70, "latsUpper": 35,
            "trapsMid": 45,
        },
        "lengthening_partials": True,
        "lengthening_multiplier": 1.3,
    },
    {
        "name": "Leg Press Calf Raises",
        "category": "isolation",
        "tier": 4,
        "primary_muscles": {"gastrocnemius": 50, "soleus": 48},
        "secondary_muscles": {},
        "lengthening_partials": True,
        "lengthening_multiplier": 2.2,
    },
    {
        "name": "Seated Calf Raises",
        "category": "isolation",
        "tier": 4,
        "primary_muscles": {"soleus": 65, "gastrocnemius": 25},
        "secondary_muscles": {},
        "lengthening_partials": True,
        "lengthening_multiplier": 2.2,
    },
]
