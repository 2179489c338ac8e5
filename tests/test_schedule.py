import pytest

from habitflow.workout.schedule import (
    FACE_FAT_ROUTINE,
    WEEKLY_SCHEDULE,
    Checklist,
    schedule_for,
    toggle_checklist_item,
)


def test_monday_schedule():
    tasks = schedule_for("Monday")

    assert len(tasks) == 12
    assert tasks[0] == "15–20 min cardio (treadmill, cycling)"
    assert tasks[-1] == "Russian Twists – 20 each side"


@pytest.mark.parametrize("day", ["Sunday", "monday", "Funday", ""])
def test_unknown_days_have_no_schedule(day):
    assert schedule_for(day) == []


def test_schedule_covers_monday_to_saturday():
    assert list(WEEKLY_SCHEDULE) == [
        "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday",
    ]


def test_schedule_for_returns_a_copy():
    schedule_for("Monday").append("extra")
    assert len(schedule_for("Monday")) == 12


def test_toggle_checklist_item():
    mapping = {}

    assert toggle_checklist_item(mapping, 2) == {2: True}
    assert toggle_checklist_item(mapping, 2) == {2: False}
    assert toggle_checklist_item(mapping, 0) == {2: False, 0: True}


def test_checklist_entries_and_toggle():
    checklist = Checklist(title="Face", items=list(FACE_FAT_ROUTINE))

    assert checklist.toggle(1) is True
    entries = list(checklist.entries())

    assert len(entries) == 8
    assert entries[0] == (0, FACE_FAT_ROUTINE[0], False)
    assert entries[1] == (1, FACE_FAT_ROUTINE[1], True)

    assert checklist.toggle(1) is False
    assert not checklist.is_done(1)
