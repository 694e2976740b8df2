"""
Date recognition for quick-add text.

Rules live in DATE_RULES and are tried in order; the first rule whose pattern
matches *and* resolves to a real calendar day wins. All results are plain
``date`` values (local midnight), computed relative to an explicit ``now``.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from datetime import date, datetime, timedelta
from typing import NamedTuple

from dateutil.relativedelta import relativedelta

logger = logging.getLogger(__name__)

WEEKDAYS = {
    "monday": 0,
    "tuesday": 1,
    "wednesday": 2,
    "thursday": 3,
    "friday": 4,
    "saturday": 5,
    "sunday": 6,
    "mon": 0,
    "tue": 1,
    "wed": 2,
    "thu": 3,
    "fri": 4,
    "sat": 5,
    "sun": 6,
}

MONTHS = {
    "january": 1,
    "february": 2,
    "march": 3,
    "april": 4,
    "may": 5,
    "june": 6,
    "july": 7,
    "august": 8,
    "september": 9,
    "october": 10,
    "november": 11,
    "december": 12,
    "jan": 1,
    "feb": 2,
    "mar": 3,
    "apr": 4,
    "jun": 6,
    "jul": 7,
    "aug": 8,
    "sep": 9,
    "oct": 10,
    "nov": 11,
    "dec": 12,
}

# dict order puts full names before abbreviations, which the alternation needs
_WEEKDAY_ALT = "|".join(WEEKDAYS)
_MONTH_ALT = "|".join(MONTHS)

TODAY_PAT = re.compile(r"\btoday\b", re.IGNORECASE)
TOMORROW_PAT = re.compile(r"\btomorrow\b", re.IGNORECASE)
NEXT_WEEKDAY_PAT = re.compile(rf"\bnext\s+({_WEEKDAY_ALT})\b", re.IGNORECASE)
WEEKDAY_PAT = re.compile(rf"\b({_WEEKDAY_ALT})\b", re.IGNORECASE)
MONTH_DAY_PAT = re.compile(rf"\b({_MONTH_ALT})\s+(\d{{1,2}})\b", re.IGNORECASE)
RELATIVE_PAT = re.compile(r"\bin\s+(\d+)\s+(day|week|month|hour|minute)s?\b", re.IGNORECASE)
NUMERIC_PAT = re.compile(r"\b(\d{1,2})[/.\-](\d{1,2})[/.\-](\d{2,4})\b")

Resolver = Callable[[re.Match[str], datetime], date | None]


class DateRule(NamedTuple):
    name: str
    pattern: re.Pattern[str]
    resolve: Resolver


def _today(m: re.Match[str], now: datetime) -> date:
    return now.date()


def _tomorrow(m: re.Match[str], now: datetime) -> date:
    return now.date() + timedelta(days=1)


def _next_weekday(m: re.Match[str], now: datetime) -> date:
    # strictly after today: "next monday" on a Monday is a week out
    ahead = (WEEKDAYS[m.group(1).lower()] - now.weekday()) % 7 or 7
    return now.date() + timedelta(days=ahead)


def _weekday(m: re.Match[str], now: datetime) -> date:
    ahead = (WEEKDAYS[m.group(1).lower()] - now.weekday()) % 7
    return now.date() + timedelta(days=ahead)


def _month_day(m: re.Match[str], now: datetime) -> date | None:
    month, day = MONTHS[m.group(1).lower()], int(m.group(2))
    try:
        candidate = datetime(now.year, month, day, tzinfo=now.tzinfo)
        if candidate < now:
            candidate = candidate.replace(year=now.year + 1)
    except ValueError:
        return None
    return candidate.date()


def _relative(m: re.Match[str], now: datetime) -> date | None:
    unit = m.group(2).lower()
    try:
        amount = int(m.group(1))
        if unit == "day":
            moved = now + timedelta(days=amount)
        elif unit == "week":
            moved = now + timedelta(weeks=amount)
        elif unit == "month":
            moved = now + relativedelta(months=amount)
        elif unit == "hour":
            moved = now + timedelta(hours=amount)
        else:
            moved = now + timedelta(minutes=amount)
    except (OverflowError, ValueError):
        return None
    # only the calendar day is kept, even for hours/minutes
    return moved.date()


def _numeric(m: re.Match[str], now: datetime) -> date | None:
    month, day, year = (int(g) for g in m.groups())
    if year < 100:
        year += 2000 if year < 50 else 1900
    try:
        return date(year, month, day)
    except ValueError:
        return None


DATE_RULES: tuple[DateRule, ...] = (
    DateRule("today", TODAY_PAT, _today),
    DateRule("tomorrow", TOMORROW_PAT, _tomorrow),
    DateRule("next_weekday", NEXT_WEEKDAY_PAT, _next_weekday),
    DateRule("weekday", WEEKDAY_PAT, _weekday),
    DateRule("month_day", MONTH_DAY_PAT, _month_day),
    DateRule("relative", RELATIVE_PAT, _relative),
    DateRule("numeric", NUMERIC_PAT, _numeric),
)

# patterns whose every occurrence is removed from the title
DATE_STRIP_PATS: tuple[re.Pattern[str], ...] = (
    TODAY_PAT,
    TOMORROW_PAT,
    re.compile(r"\btonight\b", re.IGNORECASE),
    NEXT_WEEKDAY_PAT,
    WEEKDAY_PAT,
    MONTH_DAY_PAT,
    RELATIVE_PAT,
    NUMERIC_PAT,
)


def match_date(text: str, now: datetime) -> tuple[str, date] | None:
    """Return (rule name, resolved date) for the first rule that resolves."""
    for rule in DATE_RULES:
        m = rule.pattern.search(text)
        if not m:
            continue
        resolved = rule.resolve(m, now)
        if resolved is not None:
            return rule.name, resolved
        logger.debug("date rule %s matched %r but is not a calendar day", rule.name, m.group(0))
    return None


def extract_date(text: str, now: datetime) -> date | None:
    found = match_date(text, now)
    return found[1] if found else None


def format_for_display(value: date, now: datetime) -> str:
    """'Today', 'Tomorrow', or a short label like 'Mon, Jan 15'."""
    if isinstance(value, datetime):
        value = value.date()
    today = now.date()
    if value == today:
        return "Today"
    if value == today + timedelta(days=1):
        return "Tomorrow"
    return f"{value.strftime('%a, %b')} {value.day}"
