from typing import Mapping

from app.core.query_builder import FilterBuilder, QuerySpec, clean_text, finish_query

SORT_FIELDS = ("name", "createdAt", "species_name")
NAME_FIELDS = ("name", "species_name")


def build_species_query(params: Mapping[str, str]) -> QuerySpec:
    builder = FilterBuilder()

    name = clean_text(params.get("name"))
    if name:
        builder.add_contains("name", NAME_FIELDS, name)

    category = clean_text(params.get("category"))
    if category:
        builder.add_reference("category", category)

    return finish_query(builder, params, SORT_FIELDS)
