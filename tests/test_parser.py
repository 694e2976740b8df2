from datetime import date, datetime, timedelta

import pytest
from pydantic import ValidationError

from quickadd.nlp.parser import DEFAULT_TITLE, clean_title, parse_task_input


def test_parser_extracts_title_date_time_and_tags(now):
    r = parse_task_input("Review report tomorrow at 2pm #work", now=now)
    assert r.title == "Review report"
    assert r.date == date(2026, 10, 20)
    assert r.time == "14:00"
    assert r.tags == ("work",)
    assert r.raw_input == "Review report tomorrow at 2pm #work"


def test_parser_relative_days_and_tag_lists(now):
    r = parse_task_input("Fix bug in 2 days #bug tag: urgent, critical", now=now)
    assert r.title == "Fix bug"
    assert r.date == date(2026, 10, 21)
    assert r.time is None
    assert set(r.tags) == {"bug", "urgent", "critical"}


def test_parser_falls_back_to_placeholder_title(now):
    r = parse_task_input("today at 9:30am #urgent", now=now)
    assert r.title == DEFAULT_TITLE == "New Task"
    assert r.date == now.date()
    assert r.time == "09:30"
    assert r.tags == ("urgent",)


@pytest.mark.parametrize(
    "text, title, day, time, tags",
    [
        ("Buy groceries saturday evening #shopping #personal", "Buy groceries", date(2026, 10, 24), "18:00", {"shopping", "personal"}),
        ("Team meeting next monday morning", "Team meeting", date(2026, 10, 26), "09:00", set()),
        ("Call mom january 15", "Call mom", date(2027, 1, 15), None, set()),
        ("Write report due next friday #work #urgent", "Write report due", date(2026, 10, 23), None, {"work", "urgent"}),
        ("Exercise fri afternoon #health", "Exercise", date(2026, 10, 23), "14:00", {"health"}),
        ("Write documentation #work #documentation", "Write documentation", None, None, {"work", "documentation"}),
    ],
)
def test_parser_demo_inputs(now, text, title, day, time, tags):
    r = parse_task_input(text, now=now)
    assert r.title == title
    assert r.date == day
    assert r.time == time
    assert set(r.tags) == tags


def test_parser_handles_minimal_text(now):
    r = parse_task_input("Buy milk", now=now)
    assert r.title == "Buy milk"
    assert r.date is None
    assert r.time is None
    assert r.tags == ()


def test_parser_empty_input(now):
    r = parse_task_input("", now=now)
    assert r.title == "New Task"
    assert r.raw_input == ""


def test_higher_priority_date_rule_wins(now):
    # "today" outranks the weekday name even though friday appears first
    r = parse_task_input("friday or today", now=now)
    assert r.date == now.date()


def test_every_date_fragment_is_stripped_from_title(now):
    r = parse_task_input("Plan trip tomorrow friday dec 24 12/31/2026", now=now)
    assert r.date == now.date() + timedelta(days=1)
    assert r.title == "Plan trip"


def test_time_without_date(now):
    r = parse_task_input("Stand-up 9:15", now=now)
    assert r.date is None
    assert r.time == "09:15"
    assert r.title == "Stand-up"


def test_uses_wall_clock_when_now_omitted():
    before = datetime.now().date()
    r = parse_task_input("call dentist today")
    assert r.date in {before, before + timedelta(days=1)}


def test_clean_title_is_idempotent():
    once = clean_title("Email Joel   about   the SOW tomorrow #acme")
    assert once == "Email Joel about the SOW"
    assert clean_title(once) == once


def test_clean_title_strips_fragments_exposed_by_earlier_removals():
    once = clean_title("Call jan 2pm 5")
    assert once == "Call"
    assert clean_title(once) == once


def test_parsed_task_is_immutable(now):
    r = parse_task_input("Pay rent tomorrow", now=now)
    with pytest.raises(ValidationError):
        r.title = "changed"


def test_with_overrides_returns_new_task(now):
    r = parse_task_input("Pay rent tomorrow #home", now=now)
    fixed = r.with_overrides(date=date(2026, 11, 1), time="08:00")
    assert fixed.date == date(2026, 11, 1)
    assert fixed.time == "08:00"
    assert fixed.title == r.title
    assert r.date == date(2026, 10, 20)
    with pytest.raises(ValidationError):
        r.with_overrides(time="25:00")
