from datetime import datetime

from fastapi import APIRouter, Query

from ..nlp.suggestions import common_tags, date_suggestions, time_suggestions
from ..schemas import DateSuggestion, TagSuggestion, TimeSuggestion
from ..utils.clock import resolve_now

router = APIRouter()


@router.get("/dates", response_model=list[DateSuggestion])
def get_date_suggestions(
    q: str = Query("", description="Partially typed date word"),
    now: datetime | None = Query(None, description="Reference instant; server clock when omitted"),
) -> list[DateSuggestion]:
    return date_suggestions(q, resolve_now(now))


@router.get("/times", response_model=list[TimeSuggestion])
def get_time_suggestions(q: str = Query("")) -> list[TimeSuggestion]:
    return time_suggestions(q)


@router.get("/tags", response_model=list[TagSuggestion])
def get_tag_suggestions() -> list[TagSuggestion]:
    return common_tags()
