import datetime as dt

from pydantic import BaseModel, ConfigDict, Field

TIME_PATTERN = r"^([01]\d|2[0-3]):[0-5]\d$"


class ParsedTaskBase(BaseModel):
    title: str = Field(..., min_length=1)
    date: dt.date | None = None
    time: str | None = Field(None, pattern=TIME_PATTERN)  # 24h HH:MM
    tags: tuple[str, ...] = ()
    raw_input: str = ""


class ParsedTask(ParsedTaskBase):
    """Structured result of one quick-add parse. Immutable; use with_overrides()."""

    model_config = ConfigDict(frozen=True)

    def with_overrides(self, **fields) -> "ParsedTask":
        # re-validated, unlike model_copy(update=...)
        return ParsedTask.model_validate({**self.model_dump(), **fields})


class DateSuggestion(BaseModel):
    label: str
    date: dt.date
    icon: str


class TimeSuggestion(BaseModel):
    label: str
    time: str = Field(..., pattern=TIME_PATTERN)
    icon: str


class TagSuggestion(BaseModel):
    label: str
    icon: str


class ParseIn(BaseModel):
    text: str
    now: dt.datetime | None = None  # reference instant; server clock when omitted


class ParseOut(ParsedTaskBase):
    date_label: str | None = None  # "Today", "Tomorrow", "Mon, Jan 15"


class LabelOut(BaseModel):
    label: str
