from typing import Mapping

from app.core.query_builder import FilterBuilder, QuerySpec, clean_text, finish_query

SORT_FIELDS = ("name", "createdAt")


def build_category_query(params: Mapping[str, str]) -> QuerySpec:
    builder = FilterBuilder()
    name = clean_text(params.get("name"))
    if name:
        builder.add_contains("name", ("name",), name)
    return finish_query(builder, params, SORT_FIELDS)
