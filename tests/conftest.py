from datetime import datetime

import pytest


@pytest.fixture
def now() -> datetime:
    # a Monday, mid-morning
    return datetime(2026, 10, 19, 10, 30)
