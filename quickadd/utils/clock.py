from datetime import datetime


def resolve_now(now: datetime | None = None) -> datetime:
    """The reference instant for one parse call; local wall clock when not injected."""
    return now if now is not None else datetime.now()
