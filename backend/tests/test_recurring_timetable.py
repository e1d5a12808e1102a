import json

from classbook.services.recurring_timetable import (
    RecurringTimetable,
    load_recurring_timetable,
    normalize_regular_classes,
)


def test_default_timetable_has_monday_classes():
    timetable = RecurringTimetable.default()
    monday = timetable.classes_for(1)
    assert monday["CSE-101"]["09:00-10:00"].batch_name == "CS2024A"
    assert monday["CSE-101"]["09:00-10:00"].course_name == "CS101"
    assert timetable.has_class(2, "CSE-202", "10:00-11:00")
    assert timetable.classes_for(6) == {}
    assert timetable.class_count() > 0


def test_classes_for_returns_a_copy():
    timetable = RecurringTimetable.default()
    timetable.classes_for(1)["CSE-101"].clear()
    assert timetable.has_class(1, "CSE-101", "09:00-10:00")


def test_normalize_accepts_day_names_and_legacy_keys():
    normalized = normalize_regular_classes(
        {
            "Tuesday": {"CSE-301": {"10:00-11:00": {"batchName": "B1", "TeacherName": "Dr. X", "Course": "OS"}}},
            "5": {"CSE-302": {"09:00-10:00": {"batch_name": "B2"}}},
        }
    )
    assert normalized is not None
    detail = normalized[2]["CSE-301"]["10:00-11:00"]
    assert detail.teacher_name == "Dr. X"
    assert detail.course_name == "OS"
    assert normalized[5]["CSE-302"]["09:00-10:00"].batch_name == "B2"


def test_normalize_drops_invalid_entries():
    normalized = normalize_regular_classes(
        {
            1: {
                "CSE-301": {
                    "13:00-14:00": {"batchName": "Lunch"},
                    "09:00-10:00": {"courseName": "No batch"},
                    "10:00-11:00": {"batchName": "Kept"},
                }
            },
            "saturday": {"CSE-302": {"09:00-10:00": {"batchName": "Weekend"}}},
        }
    )
    assert normalized is not None
    assert list(normalized[1]["CSE-301"]) == ["10:00-11:00"]
    assert all(not rooms for day, rooms in normalized.items() if day != 1)


def test_normalize_returns_none_without_classes():
    assert normalize_regular_classes({}) is None
    assert normalize_regular_classes([]) is None
    assert normalize_regular_classes({"monday": {"CSE-101": {}}}) is None


def test_load_uses_override_file(tmp_path):
    path = tmp_path / "regular_classes.json"
    path.write_text(json.dumps({"3": {"CSE-401": {"14:00-15:00": {"batchName": "AI2025"}}}}), encoding="utf-8")
    timetable = load_recurring_timetable(path)
    assert timetable.class_count() == 1
    assert timetable.has_class(3, "CSE-401", "14:00-15:00")


def test_load_falls_back_to_defaults(tmp_path):
    default_count = RecurringTimetable.default().class_count()

    assert load_recurring_timetable(tmp_path / "missing.json").class_count() == default_count

    broken = tmp_path / "broken.json"
    broken.write_text("{not json", encoding="utf-8")
    assert load_recurring_timetable(broken).class_count() == default_count

    empty = tmp_path / "empty.json"
    empty.write_text("{}", encoding="utf-8")
    assert load_recurring_timetable(empty).class_count() == default_count


def test_normalize_drops_overlong_batch_names():
    normalized = normalize_regular_classes(
        {
            "monday": {
                "CSE-301": {
                    "09:00-10:00": {"batchName": "B" * 101},
                    "10:00-11:00": {"batchName": "B" * 100},
                }
            }
        }
    )
    assert list(normalized[1]["CSE-301"]) == ["10:00-11:00"]
