"""Exercise catalog and training programs, hardcoded for O(1) lookups.

The catalog is static reference data: every exercise the client can pick,
grouped by muscle group, plus the preset programs whose days prefill a new
session. Custom exercises are not stored here; a logged exercise may carry
any name.
"""

from __future__ import annotations

from typing import Optional

MUSCLE_GROUPS: tuple[str, ...] = (
    "All",
    "Chest",
    "Back",
    "Legs",
    "Shoulders",
    "Biceps",
    "Triceps",
    "Abs",
    "Cardio",
    "HIIT",
    "Forearms",
)

# ── Catalog: { muscle_group: ((exercise_id, name), ...) } ──
_EXERCISES_BY_GROUP: dict[str, tuple[tuple[str, str], ...]] = {
    "Chest": (
        ("bp", "Barbell Bench Press"),
        ("idb", "Incline Dumbbell Press"),
        ("cabl", "Cable Fly"),
        ("dbbp", "Dumbbell Bench Press"),
        ("dips", "Chest Dips"),
        ("pec", "Pec Deck Machine"),
        ("decline", "Decline Bench Press"),
        ("pushup", "Push Up"),
        ("dbfly", "Dumbbell Fly"),
        ("cablecross", "Cable Crossover"),
        ("landminepress", "Landmine Press"),
        ("svend", "Svend Press"),
        ("machinepress", "Machine Chest Press"),
        ("lowcable", "Low to High Cable Fly"),
        ("guillotine", "Guillotine Press"),
    ),
    "Back": (
        ("dl", "Deadlift"),
        ("lat", "Lat Pulldown"),
        ("row", "Barbell Row"),
        ("pull", "Pull Up"),
        ("dbrow", "Dumbbell Row"),
        ("seatrow", "Seated Cable Row"),
        ("face", "Face Pull"),
        ("tbar", "T-Bar Row"),
        ("pullver", "Dumbbell Pullover"),
        ("hyperext", "Hyperextension"),
        ("rackpull", "Rack Pull"),
        ("csrow", "Chest Supported Row"),
        ("meadows", "Meadows Row"),
        ("goodmorning", "Good Morning"),
        ("singlepulldown", "Single Arm Lat Pulldown"),
        ("pendlay", "Pendlay Row"),
        ("sealrow", "Seal Row"),
        ("cablepullover", "Cable Pullover"),
    ),
    "Legs": (
        ("sq", "Barbell Squat"),
        ("lpress", "Leg Press"),
        ("ext", "Leg Extension"),
        ("lcurl", "Seated Leg Curl"),
        ("lyingcurl", "Lying Leg Curl"),
        ("rdl", "Romanian Deadlift"),
        ("lung", "Walking Lunges"),
        ("bulg", "Bulgarian Split Squat"),
        ("calf", "Standing Calf Raise"),
        ("seatcalf", "Seated Calf Raise"),
        ("hack", "Hack Squat"),
        ("hip", "Hip Thrust"),
        ("add", "Hip Adduction"),
        ("abd", "Hip Abduction"),
        ("fsq", "Front Squat"),
        ("zercher", "Zercher Squat"),
        ("stepup", "Dumbbell Step-Up"),
        ("pistolsq", "Pistol Squat"),
        ("glutebridge", "Glute Bridge"),
        ("sledpush", "Sled Push"),
        ("stepmill", "Stair Climber"),
        ("splitjerk", "Split Squat"),
        ("legcurl", "Prone Leg Curl"),
        ("powerclean", "Power Clean"),
        ("frontfoot", "Front Foot Elevated Split Squat"),
    ),
    "Shoulders": (
        ("ohp", "Overhead Press"),
        ("latr", "Dumbbell Lateral Raise"),
        ("cablat", "Cable Lateral Raise"),
        ("dbpress", "Seated Dumbbell Press"),
        ("rearfly", "Rear Delt Fly"),
        ("shrug", "Dumbbell Shrug"),
        ("front", "Front Raise"),
        ("upright", "Upright Row"),
        ("arnold", "Arnold Press"),
        ("shoulderpress", "Shoulder Press Machine"),
        ("facepulls", "Rope Face Pull"),
        ("behindneck", "Behind-the-Neck Press"),
        ("cuban", "Cuban Press"),
        ("landminerow", "Landmine Lateral Raise"),
    ),
    "Biceps": (
        ("cur", "Barbell Bicep Curl"),
        ("dbcur", "Dumbbell Bicep Curl"),
        ("ham", "Hammer Curl"),
        ("preach", "Preacher Curl"),
        ("conc", "Concentration Curl"),
        ("inclinecurl", "Incline Dumbbell Curl"),
        ("spidercurl", "Spider Curl"),
        ("zotmancurl", "Zottman Curl"),
    ),
    "Triceps": (
        ("tri", "Tricep Rope Pushdown"),
        ("skul", "Skullcrushers"),
        ("ovhtri", "Overhead Tricep Extension"),
        ("dips_tri", "Tricep Dips"),
        ("kick", "Tricep Kickback"),
        ("cgbench", "Close Grip Bench Press"),
        ("jmpress", "JM Press"),
        ("singlepush", "Single Arm Pushdown"),
    ),
    "Abs": (
        ("crunch", "Crunch"),
        ("plank", "Plank"),
        ("legraise", "Hanging Leg Raise"),
        ("cablecrunch", "Cable Crunch"),
        ("russ", "Russian Twist"),
        ("abwheel", "Ab Wheel Rollout"),
        ("vups", "V-Ups"),
        ("sideplank", "Side Plank"),
        ("mountainclimber", "Mountain Climber (Abs)"),
        ("hollow", "Hollow Hold"),
        ("declinesitup", "Decline Sit-Up"),
        ("reversecrunch", "Reverse Crunch"),
    ),
    "Cardio": (
        ("tread", "Treadmill Run"),
        ("bike", "Cycling"),
        ("rower", "Rowing Machine"),
        ("stair", "Stairmaster"),
        ("elliptical", "Elliptical"),
        ("spin", "Spin Bike"),
        ("swim", "Swimming"),
        ("assaultcardio", "Assault Bike (Steady)"),
        ("runout", "Outdoor Run"),
        ("track", "Track Intervals"),
        ("hike", "Hiking"),
        ("stairsprint", "Stair Sprints"),
        ("inclinewalk", "Incline Walking"),
    ),
    "HIIT": (
        ("burp", "Burpees"),
        ("kettle", "Kettlebell Swing"),
        ("box", "Box Jumps"),
        ("rope", "Jump Rope"),
        ("mount", "Mountain Climbers"),
        ("sprint", "Sprints"),
        ("battlerope", "Battle Ropes"),
        ("assault", "Assault Bike"),
        ("shuttle", "Shuttle Runs"),
        ("prowler", "Prowler Push"),
    ),
    "Forearms": (
        ("wrcurl", "Wrist Curl"),
        ("revwrcurl", "Reverse Wrist Curl"),
        ("hammerfore", "Hammer Curl"),
        ("farmer", "Farmer's Carry"),
        ("platepinch", "Plate Pinch Hold"),
        ("towelpull", "Towel Pull-Up"),
        ("reversecurl", "Reverse Curl"),
        ("wristroller", "Wrist Roller"),
    ),
}

EXERCISE_DATABASE: tuple[dict, ...] = tuple(
    {"id": ex_id, "name": name, "muscle_group": group}
    for group, entries in _EXERCISES_BY_GROUP.items()
    for ex_id, name in entries
)

# First entry wins for names listed under two groups (Hammer Curl)
_BY_NAME: dict[str, dict] = {}
for _entry in EXERCISE_DATABASE:
    _BY_NAME.setdefault(_entry["name"], _entry)


def find_exercise(name: str) -> Optional[dict]:
    """Catalog entry for an exact exercise name, or None for custom exercises."""
    return _BY_NAME.get(name)


def catalog_group(name: str) -> Optional[str]:
    entry = _BY_NAME.get(name)
    return entry["muscle_group"] if entry else None


def search_exercises(query: str = "", group: str = "All") -> list[dict]:
    """Case-insensitive substring search, optionally filtered by muscle group."""
    needle = query.strip().lower()
    return [
        ex
        for ex in EXERCISE_DATABASE
        if needle in ex["name"].lower() and (group == "All" or ex["muscle_group"] == group)
    ]


def _day(day_id: str, label: str, *exercises: tuple[str, float, str], rest: bool = False) -> dict:
    return {
        "id": day_id,
        "label": label,
        "rest": rest,
        "exercises": [{"name": n, "weight": w, "muscle_group": g} for n, w, g in exercises],
    }


PROGRAMS: tuple[dict, ...] = (
    {
        "id": "custom-split",
        "name": "Your Split (Upper/Lower/Push/Pull/Leg)",
        "days": [
            _day(
                "day1",
                "Upper (Monday)",
                ("Incline Dumbbell Chest Press", 40, "Chest"),
                ("Shoulder Press", 30, "Shoulders"),
                ("Lying Bicep Curl", 20, "Biceps"),
                ("Bent Tricep Extension", 15, "Triceps"),
                ("Back Extension", 20, "Back"),
            ),
            _day(
                "day2",
                "Lower (Tuesday)",
                ("Goblin Squats", 30, "Legs"),
                ("Lunges", 20, "Legs"),
                ("Split Squats", 15, "Legs"),
                ("Leg Deadlift", 25, "Legs"),
                ("Calf Raises", 25, "Legs"),
            ),
            _day("day3", "Break (Wednesday)", rest=True),
            _day(
                "day4",
                "Push (Thursday)",
                ("Incline Dumbbell Press", 30, "Chest"),
                ("Lateral Raises", 15, "Shoulders"),
                ("Lying Tricep Extension", 10, "Triceps"),
                ("Shoulder Press", 25, "Shoulders"),
                ("Close Grip Dumbbell Press", 20, "Chest"),
                ("Pec Fly", 15, "Chest"),
            ),
            _day(
                "day5",
                "Pull (Friday)",
                ("Rear Delt Rows", 20, "Back"),
                ("Zottman Curls", 20, "Biceps"),
                ("Rear Delt Fly", 15, "Shoulders"),
                ("Bicep Curls", 25, "Biceps"),
                ("Reverse Curls", 10, "Forearms"),
            ),
            _day(
                "day6",
                "Legs (Saturday)",
                ("Goblin Squats", 30, "Legs"),
                ("Lunges", 20, "Legs"),
                ("Split Squats", 20, "Legs"),
                ("Leg Deadlift", 25, "Legs"),
                ("Calf Raises", 25, "Legs"),
            ),
            _day("day7", "Break (Sunday)", rest=True),
        ],
    },
    {
        "id": "ppl-classic",
        "name": "PPL Classic",
        "days": [
            _day(
                "ppl-push",
                "Push",
                ("Barbell Bench Press", 95, "Chest"),
                ("Overhead Press", 65, "Shoulders"),
                ("Dumbbell Incline Press", 40, "Chest"),
                ("Lateral Raises", 15, "Shoulders"),
                ("Tricep Rope Pushdown", 30, "Triceps"),
            ),
            _day(
                "ppl-pull",
                "Pull",
                ("Deadlift", 135, "Back"),
                ("Lat Pulldown", 70, "Back"),
                ("Seated Cable Row", 70, "Back"),
                ("Hammer Curl", 25, "Biceps"),
                ("Face Pull", 25, "Shoulders"),
            ),
            _day(
                "ppl-legs",
                "Legs",
                ("Barbell Squat", 115, "Legs"),
                ("Romanian Deadlift", 95, "Legs"),
                ("Leg Press", 180, "Legs"),
                ("Leg Extension", 60, "Legs"),
                ("Calf Raises", 60, "Legs"),
            ),
        ],
    },
    {
        "id": "arnold-split",
        "name": "Arnold Classic Split",
        "days": [
            _day(
                "arnold-chest-back",
                "Chest & Back",
                ("Barbell Bench Press", 135, "Chest"),
                ("Incline Dumbbell Press", 45, "Chest"),
                ("Weighted Pull Up", 0, "Back"),
                ("Barbell Row", 115, "Back"),
                ("Dumbbell Fly", 30, "Chest"),
                ("Straight Arm Pulldown", 40, "Back"),
            ),
            _day(
                "arnold-shoulders-arms",
                "Shoulders & Arms",
                ("Overhead Press", 75, "Shoulders"),
                ("Arnold Press", 35, "Shoulders"),
                ("Lateral Raises", 15, "Shoulders"),
                ("Barbell Curl", 65, "Biceps"),
                ("Skullcrushers", 55, "Triceps"),
                ("Hammer Curl", 25, "Biceps"),
                ("Tricep Rope Pushdown", 30, "Triceps"),
            ),
            _day(
                "arnold-legs",
                "Legs",
                ("Barbell Squat", 135, "Legs"),
                ("Romanian Deadlift", 115, "Legs"),
                ("Leg Press", 180, "Legs"),
                ("Walking Lunges", 40, "Legs"),
                ("Leg Extension", 60, "Legs"),
                ("Leg Curl", 60, "Legs"),
                ("Calf Raises", 80, "Legs"),
            ),
        ],
    },
    {
        "id": "jeff-upper-lower",
        "name": "Jeff Nippard Upper/Lower",
        "days": [
            _day(
                "jeff-upper",
                "Upper",
                ("Incline Barbell Bench Press", 115, "Chest"),
                ("Weighted Pull Up", 0, "Back"),
                ("Seated Cable Row", 80, "Back"),
                ("Dumbbell Shoulder Press", 40, "Shoulders"),
                ("Lateral Raises", 15, "Shoulders"),
                ("Barbell Curl", 65, "Biceps"),
                ("Overhead Tricep Extension", 45, "Triceps"),
            ),
            _day(
                "jeff-lower",
                "Lower",
                ("Back Squat", 145, "Legs"),
                ("Romanian Deadlift", 115, "Legs"),
                ("Leg Press", 200, "Legs"),
                ("Leg Curl", 70, "Legs"),
                ("Calf Raises", 90, "Legs"),
                ("Walking Lunges", 40, "Legs"),
            ),
        ],
    },
    {
        "id": "cbum-ppl",
        "name": "CBUM Push/Pull/Legs",
        "days": [
            _day(
                "cbum-push",
                "Push",
                ("Dumbbell Bench Press", 120, "Chest"),
                ("Incline Dumbbell Press", 50, "Chest"),
                ("Overhead Press", 75, "Shoulders"),
                ("Lateral Raises", 20, "Shoulders"),
                ("Tricep Rope Pushdown", 40, "Triceps"),
                ("Dips", 0, "Triceps"),
            ),
            _day(
                "cbum-pull",
                "Pull",
                ("Barbell Row", 115, "Back"),
                ("Lat Pulldown", 90, "Back"),
                ("Seated Cable Row", 90, "Back"),
                ("Face Pull", 30, "Shoulders"),
                ("Hammer Curl", 30, "Biceps"),
                ("Preacher Curl", 50, "Biceps"),
            ),
            _day(
                "cbum-legs",
                "Legs",
                ("Hack Squat", 180, "Legs"),
                ("Romanian Deadlift", 135, "Legs"),
                ("Leg Press", 220, "Legs"),
                ("Leg Curl", 80, "Legs"),
                ("Calf Raises", 100, "Legs"),
            ),
        ],
    },
)

_PROGRAMS_BY_ID: dict[str, dict] = {p["id"]: p for p in PROGRAMS}


def get_program(program_id: str) -> Optional[dict]:
    return _PROGRAMS_BY_ID.get(program_id)


def get_program_day(program_id: str, day_id: str) -> Optional[dict]:
    program = _PROGRAMS_BY_ID.get(program_id)
    if program is None:
        return None
    return next((d for d in program["days"] if d["id"] == day_id), None)
