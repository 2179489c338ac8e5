from habitflow.habits.chart import chart_series, series_color
from habitflow.habits.models import Habit

LABELS = ["03-01", "03-02", "03-03", "03-04", "03-05", "03-06", "03-07"]


def make_habit(name, completions=None):
    return Habit(id=name, name=name, completions=completions or {}, goal=3)


def test_series_marks_truthy_days():
    habit = make_habit("Read", {"2024-03-02": True, "2024-03-05": True, "2024-03-06": False})

    [series] = chart_series([habit], LABELS, year=2024)

    assert series.label == "Read"
    assert series.data == [0, 1, 0, 0, 1, 0, 0]


def test_series_uses_given_year_only():
    habit = make_habit("Read", {"2023-03-02": True})

    [series] = chart_series([habit], LABELS, year=2024)

    assert series.data == [0] * 7


def test_one_series_per_habit_in_order():
    habits = [make_habit(name) for name in ["a", "b", "c"]]

    series = chart_series(habits, LABELS, year=2024)

    assert [s.label for s in series] == ["a", "b", "c"]
    assert [s.color for s in series] == [series_color(i) for i in range(3)]


def test_first_six_colors_are_distinct():
    colors = [series_color(i) for i in range(6)]

    assert colors[0] == "hsl(0, 85%, 60%)"
    assert colors[1] == "hsl(60, 85%, 60%)"
    assert len(set(colors)) == 6
    assert series_color(6) == colors[0]


def test_no_habits_no_series():
    assert chart_series([], LABELS) == []


def test_window_across_new_year_reads_current_year_only():
    labels = ["12-27", "12-28", "12-29", "12-30", "12-31", "01-01", "01-02"]
    habit = make_habit("Read", {"2024-12-30": True, "2024-12-31": True, "2025-01-02": True})

    [series] = chart_series([habit], labels, year=2025)

    # December days expand to 2025, so last year's completions show as 0
    assert series.data == [0, 0, 0, 0, 0, 0, 1]
