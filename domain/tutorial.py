"""
First-run tutorial content, one section per app area.
"""

from typing import Dict, List, Tuple

# section -> [(title, description), ...]
TUTORIAL_SECTIONS: Dict[str, List[Tuple[str, str]]] = {
    "dashboard": [
        ("Dashboard", "Weight trend, calorie balance and goal projections at a glance."),
        ("Settings", "Configure goals, units and how progress is estimated."),
        ("Customize Layout", "Reorder or hide dashboard cards."),
        ("Health Sync", "Pull calories and macros written by other apps into your logs."),
    ],
    "logs": [
        ("Logs", "Daily nutrition totals, kept in step with synced health data."),
        ("Add Entries", "Add calories or macros by hand."),
    ],
    "workouts": [
        ("Workouts", "Training sessions and history."),
        ("Workout Controls", "Start a workout or manage the exercise library."),
    ],
    "weight": [
        ("Weight", "Your weigh-ins."),
        ("Phase Stats", "Review bulking, cutting and maintenance phases."),
        ("Log Weight", "Record today's weight."),
    ],
}


def total_steps(section: str) -> int:
    return len(TUTORIAL_SECTIONS[section])
