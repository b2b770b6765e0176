"""
Tolerant-read decoding of stored documents.

Documents in the collections were written by more than one schema generation,
so a single logical field can arrive under different names or encodings. Each
decoder below tries the accepted encodings in order, returns the first one that
fits and otherwise falls back to a default. None of them raise.
"""

import logging
import math
import re
from collections.abc import Mapping
from datetime import date, datetime, timezone
from typing import Any, List, Optional, Tuple

from bson import ObjectId
from bson.datetime_ms import DatetimeMS
from bson.errors import InvalidBSON

from app.models.geo_point import GeoPoint

logger = logging.getLogger(__name__)

NIL_OBJECT_ID = ObjectId("0" * 24)
BIRTHDATE_FORMAT = "%Y-%m-%d"
BIRTHDATE_RE = re.compile(r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$")
INVALID_AGE = -1


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    """Naive datetimes coming out of the store are UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


# -------------------------------------------------------
# Scalars
# -------------------------------------------------------
def decode_object_id(raw: Mapping) -> ObjectId:
    value = raw.get("_id")
    if isinstance(value, ObjectId):
        return value
    return NIL_OBJECT_ID


def decode_name(raw: Mapping, alias: str) -> str:
    """`name` first, then the legacy alias; first non-empty string wins."""
    for field in ("name", alias):
        value = raw.get(field)
        if isinstance(value, str) and value:
            return value
    return ""


def decode_reference(value: Any) -> str:
    """Weak reference stored either as plain text or as an ObjectId."""
    if isinstance(value, str):
        return value
    if isinstance(value, ObjectId):
        return str(value)
    return ""


def decode_int(value: Any) -> Optional[int]:
    """int32, int64 or float64; floats are truncated toward zero."""
    # bool is an int subclass but never a stored number
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return int(value)
    if isinstance(value, float):
        if not math.isfinite(value):
            return None
        return int(value)
    return None


def decode_float(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return float(value)
    if isinstance(value, float) and math.isfinite(value):
        return value
    return None


def decode_bool(value: Any, default: bool = False) -> bool:
    if isinstance(value, bool):
        return value
    return default


def decode_optional_str(value: Any) -> Optional[str]:
    if isinstance(value, str):
        return value
    return None


def decode_datetime(value: Any) -> Optional[datetime]:
    if isinstance(value, datetime):
        return as_utc(value)
    return None


# -------------------------------------------------------
# Age
# -------------------------------------------------------
def _whole_years(birth: date, now: datetime) -> int:
    now = as_utc(now)
    years = now.year - birth.year
    try:
        birthday = datetime(now.year, birth.month, birth.day, tzinfo=timezone.utc)
    except ValueError:
        # Feb 29 outside a leap year rolls over to Mar 1
        birthday = datetime(now.year, 3, 1, tzinfo=timezone.utc)
    if now < birthday:
        years -= 1
    if years < 0:
        return INVALID_AGE
    return years


def age_from_birthdate(text: str, now: Optional[datetime] = None) -> int:
    """
    Whole years elapsed since a YYYY-MM-DD date.
    Returns -1 when the string does not parse or the date lies in the future.
    """
    if not text or not BIRTHDATE_RE.match(text):
        return INVALID_AGE
    try:
        birth = datetime.strptime(text, BIRTHDATE_FORMAT).date()
    except ValueError:
        return INVALID_AGE
    return _whole_years(birth, now or utcnow())


def age_from_datetime(value: date, now: Optional[datetime] = None) -> int:
    if isinstance(value, datetime):
        value = as_utc(value).date()
    return _whole_years(value, now or utcnow())


def decode_birthdate_age(value: Any, now: Optional[datetime] = None) -> int:
    if isinstance(value, str):
        return age_from_birthdate(value, now)
    if isinstance(value, DatetimeMS):
        try:
            value = value.as_datetime()
        except (InvalidBSON, OverflowError, ValueError):
            return INVALID_AGE
    if isinstance(value, date):
        return age_from_datetime(value, now)
    return INVALID_AGE


def resolve_age(raw: Mapping, now: Optional[datetime] = None) -> int:
    """Stored age, else age derived from `birthdate` (never negative), else 0."""
    stored = decode_int(raw.get("age"))
    if stored is not None:
        return stored
    if "birthdate" in raw:
        return max(decode_birthdate_age(raw["birthdate"], now), 0)
    return 0


# -------------------------------------------------------
# Location
# -------------------------------------------------------
def decode_geo_point(value: Any) -> Optional[GeoPoint]:
    """
    GeoJSON point with numeric coordinates of any width.

    Elements that are not numbers are dropped, so a malformed pair comes back
    shorter instead of padded.
    """
    if not isinstance(value, Mapping):
        return None
    kind = value.get("type")
    coordinates: List[float] = []
    raw_coordinates = value.get("coordinates")
    if isinstance(raw_coordinates, (list, tuple)):
        for item in raw_coordinates:
            number = decode_float(item)
            if number is None:
                logger.debug("dropping non-numeric coordinate %r", item)
                continue
            coordinates.append(number)
    return GeoPoint(type=kind if isinstance(kind, str) else "", coordinates=coordinates)


# -------------------------------------------------------
# Timestamps
# -------------------------------------------------------
def decode_timestamps(raw: Mapping, oid: ObjectId) -> Tuple[Optional[datetime], Optional[datetime]]:
    created = decode_datetime(raw.get("createdAt"))
    updated = decode_datetime(raw.get("updatedAt"))
    # legacy documents: creation time is embedded in the ObjectId
    if created is None and oid != NIL_OBJECT_ID:
        created = oid.generation_time
    if updated is None:
        updated = created
    return created, updated
