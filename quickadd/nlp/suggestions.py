from __future__ import annotations

import re
from datetime import date, datetime, timedelta

from ..schemas import DateSuggestion, TagSuggestion, TimeSuggestion

DATE_ICON = "📅"

TIME_SUGGESTIONS = (
    ("Morning", "09:00", "🌅"),
    ("Afternoon", "14:00", "🌤️"),
    ("Evening", "18:00", "🌆"),
    ("Night", "21:00", "🌙"),
)

COMMON_TAGS = (
    ("work", "💼"),
    ("personal", "👤"),
    ("shopping", "🛒"),
    ("health", "💪"),
    ("learning", "📚"),
    ("bug", "🐛"),
    ("feature", "⭐"),
    ("urgent", "⚡"),
)


# every letter optional but in order: "tdy", "tmrw", "week", "next.week"
TODAY_PARTIAL_PAT = re.compile(r"^t?o?d?a?y?$", re.IGNORECASE)
TOMORROW_PARTIAL_PAT = re.compile(r"^t?o?m?o?r?r?o?w?$", re.IGNORECASE)
NEXT_WEEK_PARTIAL_PAT = re.compile(r"^n?e?x?t?\.?\s?w?e?e?k?$", re.IGNORECASE)


def _quick_picks(now: datetime) -> list[tuple[str, date, re.Pattern[str]]]:
    today = now.date()
    return [
        ("Today", today, TODAY_PARTIAL_PAT),
        ("Tomorrow", today + timedelta(days=1), TOMORROW_PARTIAL_PAT),
        ("Next Week", today + timedelta(days=7), NEXT_WEEK_PARTIAL_PAT),
    ]


def date_suggestions(partial: str, now: datetime) -> list[DateSuggestion]:
    """Quick-pick dates for a partially typed date word ('to', 'tmrw', 'next w')."""
    typed = partial.strip()
    picks = _quick_picks(now)

    out: list[DateSuggestion] = []
    for label, day, pat in picks:
        if pat.match(typed):
            out.append(DateSuggestion(label=label, date=day, icon=DATE_ICON))

    # Today / Tomorrow stay available once anything has been typed
    if partial:
        seen = {s.date for s in out}
        for label, day, _ in picks[:2]:
            if day not in seen:
                out.append(DateSuggestion(label=label, date=day, icon=DATE_ICON))
                seen.add(day)
    return out


def time_suggestions(partial: str = "") -> list[TimeSuggestion]:
    return [TimeSuggestion(label=label, time=t, icon=icon) for label, t, icon in TIME_SUGGESTIONS]


def common_tags() -> list[TagSuggestion]:
    return [TagSuggestion(label=label, icon=icon) for label, icon in COMMON_TAGS]
