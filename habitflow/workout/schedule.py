"""Day-of-week workout plan and the daily face routine checklist."""

from dataclasses import dataclass, field
from typing import Iterator

WEEKLY_SCHEDULE: dict[str, list[str]] = {
    "Monday": [
        "15–20 min cardio (treadmill, cycling)",
        "Deadlift",
        "Barbell Row – 4x8–12",
        "Lat Pulldown – 4x10–12",
        "Seated Row / Lat Pullover – 4x10–12",
        "T-bar Row",
        "Hyperextensions – 3x15",
        "Normal Curls – 3x12",
        "Hammer Curls – 3x12",
        "Plank – 30–45 sec",
        "Leg Raises – 20 reps",
        "Russian Twists – 20 each side",
    ],
    "Tuesday": [
        "15–20 min steady cardio",
        "Flat Bench Press – 4x8–12",
        "Incline Bench (Barbell/Dumbbell) – 4x8–12",
        "Incline DB Press",
        "Inclined Flies – 3x12",
        "Pec Dec Flies – 3x12",
        "Cable Flies – 3x12",
        "Rope Pushdown – 3x12",
        "Rod Pushdown – 3x12",
        "Overhead Press – 3x10",
        "Bicycle Crunches – 20 reps",
        "Plank with Shoulder Tap – 20 taps",
        "Reverse Crunch – 15 reps",
    ],
    "Wednesday": [
        "HIIT: 30 sec sprint, 30 sec rest x10",
        "Machine Shoulder Press – 4x10",
        "DB Shoulder Press",
        "Side Lateral Raise – 3x12",
        "Front Raise + Upright Row – 3x12",
        "Reverse Pec Dec – 3x12",
        "Shrugs – 3x15",
        "Squats – 4x15",
        "Leg Extension – 3x12",
        "Hamstring Curls – 3x12",
        "Hanging/Lying Leg Raises – 15–20 reps",
        "Side Planks – 30 sec each side",
        "Mountain Climbers – 20 reps",
    ],
    "Thursday": [
        "15–20 min cardio",
        "Zigzag Bar/Cable Curls – 3x12",
        "Preacher Curls – 3x12",
        "Cable Curl",
        "Dumbbell Curls – 3x12",
        "Hammer Curls – 3x12",
        "Landmine Row – 4x10",
        "Seated Cable Curls – 3x12",
        "Lat Pulldown – 4x10",
        "Leg Raises – 15–20 reps",
        "Side Planks – 30 sec each side",
        "Mountain Climbers – 20 reps",
    ],
    "Friday": [
        "15–20 min cardio",
        "Skull Crusher",
        "Rope Pushdown – 3x12",
        "Rod/V-Bar Pushdown – 3x12",
        "Overhead Press – 3x10",
        "Kickbacks – 3x12",
        "Decline Bench Press – 4x8–12",
        "Decline DB Flies – 3x12",
        "Cable Flies – 3x12",
        "Plank – 45 sec",
        "Russian Twists – 20 reps",
        "Leg Raises – 20 reps",
    ],
    "Saturday": [
        "15–20 min cardio",
        "Squats – 4x15",
        "Leg Press",
        "Leg Extension – 3x12",
        "Hamstring Curls / RDL – 3x12",
        "Calf Raises – 3x20",
        "Shoulder Press – 3x10",
        "Side Lateral Raises – 3x12",
        "Shrugs – 3x15",
        "Plank – 45 sec",
        "Russian Twists – 20 reps",
        "Leg Raises – 20 reps",
    ],
}

FACE_FAT_ROUTINE: list[str] = [
    "Jawline toning (chewing motion) – 3 sets of 20 reps",
    "Fish face hold – 3 sets of 20 seconds",
    "Chin lifts – 3 sets of 15 reps",
    "Neck rolls – 2 sets clockwise + 2 sets counterclockwise",
    "Blow balloon – 2–3 minutes",
    "Stay hydrated – 2+ liters water",
    "Avoid salty foods",
    "15–20 min cardio",
]


def schedule_for(day_name: str) -> list[str]:
    """Exercises for a weekday name; Sunday and unknown names get none."""
    return list(WEEKLY_SCHEDULE.get(day_name, []))


def toggle_checklist_item(mapping: dict[int, bool], index: int) -> dict[int, bool]:
    """Flip the done flag at index (absent counts as not done)."""
    mapping[index] = not mapping.get(index, False)
    return mapping


@dataclass
class Checklist:
    """A numbered list of items with session-only completion flags."""
    title: str
    items: list[str]
    completed: dict[int, bool] = field(default_factory=dict)

    def toggle(self, index: int) -> bool:
        """Flip item index and return its new state."""
        toggle_checklist_item(self.completed, index)
        return self.completed[index]

    def is_done(self, index: int) -> bool:
        return self.completed.get(index, False)

    def entries(self) -> Iterator[tuple[int, str, bool]]:
        for index, text in enumerate(self.items):
            yield index, text, self.is_done(index)
