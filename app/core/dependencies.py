from datetime import datetime

from app.core.datetime_utils import utc_now


def get_now() -> datetime:
    """Request-scoped clock. Read once per request and overridden in tests."""
    return utc_now()
