"""
Starter exercise library offered to new users.
"""

# (name, muscle groups, is_cardio)
DEFAULT_EXERCISES = [
    ("Barbell Bench Press", ["Chest", "Triceps", "Shoulders"], False),
    ("Incline Dumbbell Press", ["Chest", "Shoulders"], False),
    ("Overhead Press", ["Shoulders", "Triceps"], False),
    ("Lateral Raise", ["Shoulders"], False),
    ("Triceps Pushdown", ["Triceps"], False),
    ("Deadlift", ["Back", "Legs"], False),
    ("Pull Up", ["Back", "Biceps"], False),
    ("Barbell Row", ["Back", "Biceps"], False),
    ("Lat Pulldown", ["Back", "Biceps"], False),
    ("Biceps Curl", ["Biceps"], False),
    ("Back Squat", ["Legs"], False),
    ("Leg Press", ["Legs"], False),
    ("Romanian Deadlift", ["Legs", "Back"], False),
    ("Plank", ["Abs"], False),
    ("Crunch", ["Abs"], False),
    ("Running", ["Cardio"], True),
    ("Cycling", ["Cardio"], True),
    ("Rowing Machine", ["Cardio", "Back"], True),
]
