"""Tests for the tolerant-read decoders."""

from datetime import date, datetime, timezone

import pytest
from bson import ObjectId
from bson.datetime_ms import DatetimeMS
from bson.int64 import Int64

from app.core.normalize import (
    NIL_OBJECT_ID,
    age_from_birthdate,
    age_from_datetime,
    decode_bool,
    decode_geo_point,
    decode_int,
    decode_name,
    decode_object_id,
    decode_optional_str,
    decode_reference,
    decode_timestamps,
    resolve_age,
)


def utc(*args):
    return datetime(*args, tzinfo=timezone.utc)


class TestAgeFromBirthdate:
    def test_birthday_not_reached_yet(self):
        assert age_from_birthdate("2000-06-15", now=utc(2024, 6, 14)) == 23

    def test_birthday_today(self):
        assert age_from_birthdate("2000-06-15", now=utc(2024, 6, 15)) == 24

    def test_birthday_passed(self):
        assert age_from_birthdate("2000-06-15", now=utc(2024, 12, 31)) == 24

    @pytest.mark.parametrize("text", ["not-a-date", "", "2000/06/15", "2000-13-01", "2000-6-5", " 2000-06-15", "\u0662000-06-15"])
    def test_unparsable_is_invalid(self, text):
        assert age_from_birthdate(text, now=utc(2024, 6, 14)) == -1

    def test_future_date_is_invalid(self):
        assert age_from_birthdate("2030-01-01", now=utc(2024, 6, 14)) == -1

    def test_later_this_year_is_invalid(self):
        assert age_from_birthdate("2024-08-01", now=utc(2024, 6, 14)) == -1

    def test_leap_day_birthday_in_common_year(self):
        assert age_from_birthdate("2000-02-29", now=utc(2023, 2, 28)) == 22
        assert age_from_birthdate("2000-02-29", now=utc(2023, 3, 1)) == 23

    def test_naive_now_is_treated_as_utc(self):
        assert age_from_birthdate("2000-06-15", now=datetime(2024, 6, 15)) == 24

    def test_datetime_and_date_inputs(self):
        now = utc(2024, 6, 14)
        assert age_from_datetime(utc(2000, 6, 15), now=now) == 23
        assert age_from_datetime(date(2000, 6, 1), now=now) == 24


class TestResolveAge:
    @pytest.mark.parametrize("stored", [7, Int64(7), 7.0, 7.9])
    def test_numeric_encodings_agree(self, stored):
        assert resolve_age({"age": stored}) == 7

    def test_negative_float_truncates_toward_zero(self):
        assert resolve_age({"age": -2.5}) == -2

    def test_stored_age_beats_birthdate(self):
        assert resolve_age({"age": 3, "birthdate": "2000-01-01"}, now=utc(2024, 6, 14)) == 3

    def test_birthdate_string(self):
        assert resolve_age({"birthdate": "2000-06-15"}, now=utc(2024, 6, 14)) == 23

    def test_birthdate_native_datetime(self):
        assert resolve_age({"birthdate": datetime(2000, 6, 15)}, now=utc(2024, 6, 15)) == 24

    def test_birthdate_datetime_wrapper(self):
        wrapped = DatetimeMS(utc(2000, 6, 15))
        assert resolve_age({"birthdate": wrapped}, now=utc(2024, 6, 15)) == 24

    def test_unparsable_birthdate_falls_back_to_zero(self):
        assert resolve_age({"birthdate": "not-a-date"}, now=utc(2024, 6, 14)) == 0

    def test_future_birthdate_never_negative(self):
        assert resolve_age({"birthdate": "2099-01-01"}, now=utc(2024, 6, 14)) == 0

    @pytest.mark.parametrize("stored", ["7", True, None, float("nan"), float("inf")])
    def test_non_numeric_age_is_ignored(self, stored):
        assert resolve_age({"age": stored}) == 0

    def test_nothing_stored(self):
        assert resolve_age({}) == 0


class TestScalars:
    def test_object_id(self, oid):
        assert decode_object_id({"_id": oid}) == oid
        assert decode_object_id({}) == NIL_OBJECT_ID
        assert decode_object_id({"_id": str(oid)}) == NIL_OBJECT_ID

    def test_name_prefers_canonical(self):
        assert decode_name({"name": "Rex", "animal_name": "Old"}, "animal_name") == "Rex"

    def test_name_falls_back_to_alias_when_empty(self):
        assert decode_name({"name": "", "animal_name": "Old"}, "animal_name") == "Old"
        assert decode_name({"animal_name": "Old"}, "animal_name") == "Old"

    def test_name_missing_everywhere(self):
        assert decode_name({"name": 5}, "animal_name") == ""

    def test_reference(self, oid):
        assert decode_reference("dog") == "dog"
        assert decode_reference(oid) == str(oid)
        assert decode_reference(12) == ""
        assert decode_reference(None) == ""

    def test_bool_requires_bool_type(self):
        assert decode_bool(True) is True
        assert decode_bool("true") is False
        assert decode_bool(1) is False

    def test_optional_str(self):
        assert decode_optional_str("http://img") == "http://img"
        assert decode_optional_str(42) is None

    def test_int_rejects_bool(self):
        assert decode_int(False) is None


class TestGeoPoint:
    def test_mixed_numeric_coordinates(self):
        point = decode_geo_point({"type": "Point", "coordinates": [Int64(-73), 40.5]})
        assert point.type == "Point"
        assert point.coordinates == [-73.0, 40.5]

    def test_unrecognized_elements_are_dropped(self):
        point = decode_geo_point({"type": "Point", "coordinates": ["x", 40.5]})
        assert point.coordinates == [40.5]

    def test_missing_location(self):
        assert decode_geo_point(None) is None
        assert decode_geo_point("somewhere") is None

    def test_missing_parts(self):
        point = decode_geo_point({})
        assert point.type == ""
        assert point.coordinates == []


class TestTimestamps:
    def test_missing_created_uses_object_id_time(self, oid):
        created, updated = decode_timestamps({}, oid)
        assert created == utc(2023, 3, 1, 8, 30)
        assert updated == created

    def test_missing_updated_copies_created(self, oid):
        created, updated = decode_timestamps({"createdAt": utc(2024, 1, 1)}, oid)
        assert created == utc(2024, 1, 1)
        assert updated == created

    def test_naive_datetimes_become_utc(self, oid):
        created, updated = decode_timestamps(
            {"createdAt": datetime(2024, 1, 1), "updatedAt": datetime(2024, 2, 1)}, oid
        )
        assert created == utc(2024, 1, 1)
        assert updated == utc(2024, 2, 1)

    def test_non_datetime_values_are_ignored(self, oid):
        created, _ = decode_timestamps({"createdAt": "2024-01-01"}, oid)
        assert created == oid.generation_time

    def test_nil_id_without_timestamps(self):
        assert decode_timestamps({}, NIL_OBJECT_ID) == (None, None)

    def test_ids_order_like_insertion(self):
        first = ObjectId.from_datetime(utc(2020, 1, 1))
        second = ObjectId.from_datetime(utc(2021, 1, 1))
        assert decode_timestamps({}, first)[0] < decode_timestamps({}, second)[0]
