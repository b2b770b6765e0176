from typing import Mapping

from app.core.query_builder import FilterBuilder, QuerySpec, clean_text, finish_query, parse_int

SORT_FIELDS = ("name", "age", "createdAt", "birthdate", "animal_name")
NAME_FIELDS = ("name", "animal_name")


def build_animal_query(params: Mapping[str, str]) -> QuerySpec:
    builder = FilterBuilder()

    species = clean_text(params.get("species"))
    if species:
        builder.add_reference("species", species)

    name = clean_text(params.get("name"))
    if name:
        builder.add_contains("name", NAME_FIELDS, name)

    # only stored ages are filterable; birthdate-only documents never match
    builder.add_range(
        "age",
        gte=parse_int(params.get("minAge")),
        lte=parse_int(params.get("maxAge")),
    )

    adopted = params.get("adopted")
    if adopted in ("true", "false"):
        builder.add_equals("adopted", adopted == "true")

    return finish_query(builder, params, SORT_FIELDS)
