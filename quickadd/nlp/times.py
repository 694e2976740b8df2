from __future__ import annotations

import re
from collections.abc import Callable
from typing import NamedTuple

CLOCK_PAT = re.compile(r"\b([01]?\d|2[0-3]):([0-5]\d)\s*(am|pm)?\b", re.IGNORECASE)
MERIDIEM_PAT = re.compile(r"\b(1[0-2]|0?[1-9])\s*(am|pm)\b", re.IGNORECASE)
PERIOD_PAT = re.compile(r"\b(morning|afternoon|evening|tonight|night)\b", re.IGNORECASE)

PERIOD_TIMES = {
    "morning": "09:00",
    "afternoon": "14:00",
    "evening": "18:00",
    "night": "21:00",
    "tonight": "20:00",
}

# title cleanup also eats a leading "at" ("at 2pm", "at 9:30am")
TIME_STRIP_PATS: tuple[re.Pattern[str], ...] = (
    re.compile(r"(?:\bat\s+)?" + CLOCK_PAT.pattern, re.IGNORECASE),
    re.compile(r"(?:\bat\s+)?" + MERIDIEM_PAT.pattern, re.IGNORECASE),
    PERIOD_PAT,
)


class TimeRule(NamedTuple):
    name: str
    pattern: re.Pattern[str]
    resolve: Callable[[re.Match[str]], str]


def _to_24h(hour: int, minute: int, meridiem: str | None) -> str:
    meridiem = (meridiem or "").lower()
    if hour <= 12:
        if meridiem == "pm" and hour != 12:
            hour += 12
        elif meridiem == "am" and hour == 12:
            hour = 0
    return f"{hour:02d}:{minute:02d}"


def _clock(m: re.Match[str]) -> str:
    return _to_24h(int(m.group(1)), int(m.group(2)), m.group(3))


def _meridiem(m: re.Match[str]) -> str:
    return _to_24h(int(m.group(1)), 0, m.group(2))


def _period(m: re.Match[str]) -> str:
    return PERIOD_TIMES[m.group(1).lower()]


TIME_RULES: tuple[TimeRule, ...] = (
    TimeRule("clock", CLOCK_PAT, _clock),
    TimeRule("meridiem", MERIDIEM_PAT, _meridiem),
    TimeRule("period", PERIOD_PAT, _period),
)


def match_time(text: str) -> tuple[str, str] | None:
    for rule in TIME_RULES:
        m = rule.pattern.search(text)
        if m:
            return rule.name, rule.resolve(m)
    return None


def extract_time(text: str) -> str | None:
    """24-hour 'HH:MM' for the first time expression found, else None."""
    found = match_time(text)
    return found[1] if found else None
