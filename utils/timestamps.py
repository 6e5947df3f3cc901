# utils/timestamps.py
from datetime import datetime, timezone
from typing import Annotated

from pydantic import AfterValidator


def as_utc(value: datetime) -> datetime:
     """Naive datetimes are taken to be UTC."""
     if value.tzinfo is None:
          return value.replace(tzinfo=timezone.utc)
     return value


UTCDateTime = Annotated[datetime, AfterValidator(as_utc)]
