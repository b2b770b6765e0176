"""
Building MongoDB list queries from optional query-string parameters.

Nothing here rejects a request. A parameter that does not parse is left out of
the query and the documented default applies instead.
"""

import re
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from bson import ObjectId
from pymongo import ASCENDING, DESCENDING

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
MAX_LIMIT = 100
DEFAULT_SORT_FIELD = "createdAt"

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1

_INT_RE = re.compile(r"^[+-]?[0-9]+$")


def parse_int(value: Optional[str]) -> Optional[int]:
    """Strict ASCII decimal integer that fits in 64 bits, optional sign. Anything else is None."""
    if value is None:
        return None
    value = value.strip()
    if not _INT_RE.match(value):
        return None
    number = int(value)
    if not INT64_MIN <= number <= INT64_MAX:
        return None
    return number


def parse_object_id(value: Optional[str]) -> Optional[ObjectId]:
    if isinstance(value, str) and ObjectId.is_valid(value):
        return ObjectId(value)
    return None


def clean_text(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


@dataclass
class QuerySpec:
    filter: Dict[str, Any]
    sort: List[Tuple[str, int]]
    skip: int
    limit: int
    page: int


class FilterBuilder:
    """
    Accumulates predicates for one find/count filter.

    Disjunctions are grouped by logical field: branches added for the same
    group are merged into one `$or`, separate groups are AND-ed together.
    """

    def __init__(self):
        self._clauses: Dict[str, Any] = {}
        self._alternatives: Dict[str, List[Dict[str, Any]]] = {}

    def add_equals(self, field_name: str, value: Any) -> "FilterBuilder":
        self._clauses[field_name] = value
        return self

    def add_range(self, field_name: str, gte: Optional[Any] = None, lte: Optional[Any] = None) -> "FilterBuilder":
        bounds = {}
        if gte is not None:
            bounds["$gte"] = gte
        if lte is not None:
            bounds["$lte"] = lte
        if not bounds:
            return self
        existing = self._clauses.get(field_name)
        if isinstance(existing, dict):
            existing.update(bounds)
        else:
            self._clauses[field_name] = bounds
        return self

    def add_alternatives(self, group: str, branches: Iterable[Dict[str, Any]]) -> "FilterBuilder":
        self._alternatives.setdefault(group, []).extend(branches)
        return self

    def add_contains(self, group: str, fields: Sequence[str], text: str) -> "FilterBuilder":
        """Case-insensitive substring match on any of `fields`."""
        pattern = re.escape(text)
        return self.add_alternatives(
            group,
            [{f: {"$regex": pattern, "$options": "i"}} for f in fields],
        )

    def add_reference(self, field_name: str, value: str) -> "FilterBuilder":
        """Weak reference stored either as the literal string or as an ObjectId."""
        branches: List[Dict[str, Any]] = [{field_name: value}]
        oid = parse_object_id(value)
        if oid is not None:
            branches.append({field_name: oid})
        return self.add_alternatives(field_name, branches)

    def build(self) -> Dict[str, Any]:
        result = dict(self._clauses)
        groups = [{"$or": list(b)} for b in self._alternatives.values() if b]
        if len(groups) == 1:
            result.update(groups[0])
        elif groups:
            result["$and"] = groups
        return result


def parse_pagination(page: Optional[str], limit: Optional[str]) -> Tuple[int, int]:
    page_num = parse_int(page)
    if page_num is None or page_num < 1:
        page_num = DEFAULT_PAGE
    page_size = parse_int(limit)
    if page_size is None or page_size < 1 or page_size > MAX_LIMIT:
        page_size = DEFAULT_LIMIT
    # skip must stay encodable as a 64-bit int
    if (page_num - 1) * page_size > INT64_MAX:
        page_num = DEFAULT_PAGE
    return page_num, page_size


def parse_sort(sort: Optional[str], order: Optional[str], allowed: Iterable[str]) -> List[Tuple[str, int]]:
    sort_field = sort if sort in set(allowed) else DEFAULT_SORT_FIELD
    direction = ASCENDING if (order or "").lower() == "asc" else DESCENDING
    spec = [(sort_field, direction)]
    if sort_field == "createdAt":
        # _id breaks ties between equal or missing timestamps
        spec.append(("_id", direction))
    return spec


def finish_query(builder: FilterBuilder, params: Mapping[str, str], sort_fields: Iterable[str]) -> QuerySpec:
    page, limit = parse_pagination(params.get("page"), params.get("limit"))
    return QuerySpec(
        filter=builder.build(),
        sort=parse_sort(params.get("sort"), params.get("order"), sort_fields),
        skip=(page - 1) * limit,
        limit=limit,
        page=page,
    )
