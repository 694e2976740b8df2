import re

from ..utils.text import unique

HASHTAG_PAT = re.compile(r"#([A-Za-z0-9_\-]+)")
# "tag: urgent, critical" / "TAG: a; b"
TAG_LIST_PAT = re.compile(r"\btag:\s*([A-Za-z0-9_\s,;]+)", re.IGNORECASE)
_SEP_PAT = re.compile(r"[,;]")


def extract_tags(text: str) -> tuple[str, ...]:
    """
    Collect tags from both syntaxes over the same text:
    - #hashtags (the '#' is dropped)
    - tag: a, b; c lists (each item trimmed)
    Lowercased, de-duplicated, first occurrence first.
    """
    found = [t.lower() for t in HASHTAG_PAT.findall(text)]
    for listing in TAG_LIST_PAT.findall(text):
        found.extend(item.strip().lower() for item in _SEP_PAT.split(listing))
    return unique(found)
