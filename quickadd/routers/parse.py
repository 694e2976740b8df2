from datetime import date, datetime

from fastapi import APIRouter, Query

from ..nlp.dates import format_for_display
from ..nlp.parser import parse_task_input
from ..schemas import LabelOut, ParseIn, ParseOut
from ..utils.clock import resolve_now

router = APIRouter()


@router.post("", response_model=ParseOut)
def parse(payload: ParseIn):
    now = resolve_now(payload.now)
    parsed = parse_task_input(payload.text, now=now)
    label = format_for_display(parsed.date, now) if parsed.date else None
    return ParseOut(**parsed.model_dump(), date_label=label)


@router.get("/label", response_model=LabelOut)
def label(
    value: date = Query(..., alias="date", description="Calendar day to label"),
    now: datetime | None = Query(None, description="Reference instant; server clock when omitted"),
):
    return LabelOut(label=format_for_display(value, resolve_now(now)))
