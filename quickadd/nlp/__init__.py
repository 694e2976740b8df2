from .dates import extract_date, format_for_display
from .parser import clean_title, parse_task_input
from .suggestions import common_tags, date_suggestions, time_suggestions
from .tags import extract_tags
from .times import extract_time

__all__ = [
    "clean_title",
    "common_tags",
    "date_suggestions",
    "extract_date",
    "extract_tags",
    "extract_time",
    "format_for_display",
    "parse_task_input",
    "time_suggestions",
]
