import re
from collections.abc import Iterable

_SPACE_RE = re.compile(r"\s+")


def collapse_whitespace(text: str) -> str:
    return _SPACE_RE.sub(" ", text).strip()


def strip_patterns(text: str, patterns: Iterable[re.Pattern[str]]) -> str:
    """Remove every occurrence of each pattern, in the order given."""
    for pat in patterns:
        text = pat.sub(" ", text)
    return text


def unique(items: Iterable[str]) -> tuple[str, ...]:
    # preserve order, remove dups and empties
    return tuple(dict.fromkeys(i for i in items if i))
