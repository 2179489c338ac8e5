from datetime import date, datetime

from habitflow.habits.dates import (
    date_key_for_label,
    day_name,
    last_seven_day_labels,
    today_key,
)


def test_today_key_format():
    assert today_key(date(2024, 3, 5)) == "2024-03-05"


def test_today_key_defaults_to_local_date():
    assert today_key() == date.today().isoformat()


def test_last_seven_day_labels_ends_today():
    labels = last_seven_day_labels(date(2024, 3, 5))
    assert labels == ["02-28", "02-29", "03-01", "03-02", "03-03", "03-04", "03-05"]


def test_last_seven_day_labels_strictly_increasing():
    today = date(2024, 7, 15)
    labels = last_seven_day_labels(today)

    assert len(labels) == 7
    parsed = [datetime.strptime(f"2024-{label}", "%Y-%m-%d").date() for label in labels]
    assert parsed == sorted(set(parsed))
    assert labels[-1] == today.strftime("%m-%d")


def test_last_seven_day_labels_default_window():
    labels = last_seven_day_labels()
    assert len(labels) == 7
    assert labels[-1] == date.today().strftime("%m-%d")


def test_day_name():
    assert day_name(date(2024, 3, 4)) == "Monday"
    assert day_name(date(2024, 3, 10)) == "Sunday"


def test_date_key_for_label():
    assert date_key_for_label("03-05", 2024) == "2024-03-05"


def test_last_seven_day_labels_across_new_year():
    labels = last_seven_day_labels(date(2025, 1, 2))
    assert labels == ["12-27", "12-28", "12-29", "12-30", "12-31", "01-01", "01-02"]
