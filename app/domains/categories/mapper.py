from collections.abc import Mapping

from app.core.normalize import decode_name, decode_object_id, decode_timestamps
from app.models.category import Category


def map_category(raw: Mapping) -> Category:
    """Stored category document -> Category (category_name alias, timestamp fallback)."""
    oid = decode_object_id(raw)
    created_at, updated_at = decode_timestamps(raw, oid)
    return Category(
        id=str(oid),
        name=decode_name(raw, "category_name"),
        createdAt=created_at,
        updatedAt=updated_at,
    )
