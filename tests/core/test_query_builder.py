"""Tests for FilterBuilder and the parameter parsers."""

import pytest
from bson import ObjectId
from pymongo import ASCENDING, DESCENDING

from app.core.query_builder import (
    FilterBuilder,
    clean_text,
    parse_int,
    parse_object_id,
    parse_pagination,
    parse_sort,
)


class TestParseInt:
    @pytest.mark.parametrize("value,expected", [("5", 5), (" 7 ", 7), ("+3", 3), ("-4", -4)])
    def test_valid(self, value, expected):
        assert parse_int(value) == expected

    @pytest.mark.parametrize("value", [None, "", "abc", "1.5", "1_000", "5x", "\u0665", "1\u0662"])
    def test_invalid(self, value):
        assert parse_int(value) is None

    def test_64_bit_bounds_are_inclusive(self):
        assert parse_int(str(2 ** 63 - 1)) == 2 ** 63 - 1
        assert parse_int(str(-(2 ** 63))) == -(2 ** 63)

    @pytest.mark.parametrize("value", ["99999999999999999999", str(2 ** 63), "-9223372036854775809"])
    def test_out_of_64_bit_range(self, value):
        assert parse_int(value) is None


class TestPagination:
    def test_defaults(self):
        assert parse_pagination(None, None) == (1, 10)

    @pytest.mark.parametrize("page", ["0", "-3", "abc"])
    def test_bad_page_falls_back_to_one(self, page):
        assert parse_pagination(page, "20") == (1, 20)

    @pytest.mark.parametrize("limit", ["500", "101", "0", "-1", "ten"])
    def test_bad_limit_falls_back_to_ten(self, limit):
        assert parse_pagination("2", limit) == (2, 10)

    def test_limit_upper_bound_is_inclusive(self):
        assert parse_pagination("1", "100") == (1, 100)

    def test_page_too_large_to_skip_falls_back_to_one(self):
        assert parse_pagination("99999999999999999999", "10") == (1, 10)
        assert parse_pagination(str(2 ** 62), "10") == (1, 10)

    def test_largest_page_with_encodable_skip(self):
        page = str(2 ** 62)
        assert parse_pagination(page, "1") == (2 ** 62, 1)


class TestSort:
    ALLOWED = ("name", "createdAt")

    def test_default_is_created_desc_with_id_tiebreak(self):
        assert parse_sort(None, None, self.ALLOWED) == [("createdAt", DESCENDING), ("_id", DESCENDING)]

    def test_unknown_field_falls_back(self):
        assert parse_sort("password", "asc", self.ALLOWED) == [("createdAt", ASCENDING), ("_id", ASCENDING)]

    def test_allowed_field_has_no_tiebreak(self):
        assert parse_sort("name", "ASC", self.ALLOWED) == [("name", ASCENDING)]

    @pytest.mark.parametrize("order", ["desc", "up", ""])
    def test_anything_but_asc_is_descending(self, order):
        assert parse_sort("name", order, self.ALLOWED) == [("name", DESCENDING)]


class TestFilterBuilder:
    def test_empty(self):
        assert FilterBuilder().build() == {}

    def test_range_bounds_merge(self):
        built = FilterBuilder().add_range("age", gte=2).add_range("age", lte=5).build()
        assert built == {"age": {"$gte": 2, "$lte": 5}}

    def test_range_without_bounds_adds_nothing(self):
        assert FilterBuilder().add_range("age").build() == {}

    def test_alternatives_for_same_group_merge(self):
        built = (
            FilterBuilder()
            .add_alternatives("name", [{"name": "a"}])
            .add_alternatives("name", [{"animal_name": "a"}])
            .build()
        )
        assert built == {"$or": [{"name": "a"}, {"animal_name": "a"}]}

    def test_separate_groups_are_anded(self):
        built = (
            FilterBuilder()
            .add_alternatives("name", [{"name": "a"}, {"animal_name": "a"}])
            .add_alternatives("species", [{"species": "dog"}])
            .build()
        )
        assert built == {
            "$and": [
                {"$or": [{"name": "a"}, {"animal_name": "a"}]},
                {"$or": [{"species": "dog"}]},
            ]
        }

    def test_contains_escapes_regex(self):
        built = FilterBuilder().add_contains("name", ("name",), "a.b*").build()
        assert built == {"$or": [{"name": {"$regex": r"a\.b\*", "$options": "i"}}]}

    def test_reference_with_object_id(self):
        oid = ObjectId()
        built = FilterBuilder().add_reference("species", str(oid)).build()
        assert built == {"$or": [{"species": str(oid)}, {"species": oid}]}

    def test_reference_plain_text(self):
        built = FilterBuilder().add_reference("species", "dog").build()
        assert built == {"$or": [{"species": "dog"}]}

    def test_equals_alongside_alternatives(self):
        built = FilterBuilder().add_equals("adopted", True).add_reference("species", "dog").build()
        assert built == {"adopted": True, "$or": [{"species": "dog"}]}


def test_clean_text():
    assert clean_text("  rex ") == "rex"
    assert clean_text("   ") is None
    assert clean_text(None) is None


def test_parse_object_id():
    oid = ObjectId()
    assert parse_object_id(str(oid)) == oid
    assert parse_object_id("not-an-id") is None
    assert parse_object_id(None) is None
