from __future__ import annotations

import logging
from datetime import datetime

from ..schemas import ParsedTask
from ..utils.clock import resolve_now
from ..utils.text import collapse_whitespace, strip_patterns
from .dates import DATE_STRIP_PATS, match_date
from .tags import HASHTAG_PAT, TAG_LIST_PAT, extract_tags
from .times import TIME_STRIP_PATS, match_time

logger = logging.getLogger(__name__)

DEFAULT_TITLE = "New Task"

# order matters: "next monday" must go before the bare weekday pattern
TITLE_STRIP_PATS = (HASHTAG_PAT, TAG_LIST_PAT, *DATE_STRIP_PATS, *TIME_STRIP_PATS)


def clean_title(text: str) -> str:
    """
    Remove every tag, date and time fragment from the text, not only the
    ones that produced a value, then tidy whitespace. Repeats until nothing
    changes, since removing one fragment can join the pieces of another
    ("jan 2pm 5" -> "jan 5").
    """
    title = collapse_whitespace(text)
    while True:
        stripped = collapse_whitespace(strip_patterns(title, TITLE_STRIP_PATS))
        if stripped == title:
            break
        title = stripped
    return title or DEFAULT_TITLE


def parse_task_input(text: str, now: datetime | None = None) -> ParsedTask:
    """
    Quick-add parser:
    - tags via #hashtag and 'tag: a, b'
    - date via today/tomorrow/weekdays/'jan 15'/'in 2 days'/'12/25/2024'
    - time via '9:30am', '2pm', '14:00' or morning/afternoon/evening/night
    - title is whatever text is left
    """
    now = resolve_now(now)
    tags = extract_tags(text)
    date_hit = match_date(text, now)
    time_hit = match_time(text)
    title = clean_title(text)

    logger.debug(
        "parsed %r: title=%r date=%s time=%s tags=%s",
        text,
        title,
        date_hit,
        time_hit,
        tags,
    )
    return ParsedTask(
        title=title,
        date=date_hit[1] if date_hit else None,
        time=time_hit[1] if time_hit else None,
        tags=tags,
        raw_input=text,
    )
