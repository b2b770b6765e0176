from collections.abc import Mapping
from datetime import datetime
from typing import Optional

from app.core.normalize import (
    decode_bool,
    decode_geo_point,
    decode_name,
    decode_object_id,
    decode_optional_str,
    decode_reference,
    decode_timestamps,
    resolve_age,
)
from app.models.animal import Animal


def map_animal(raw: Mapping, now: Optional[datetime] = None) -> Animal:
    """
    Stored animal document -> Animal.
    Handles animal_name -> name, ObjectId species, age derived from birthdate
    and timestamps missing from legacy documents.
    """
    oid = decode_object_id(raw)
    created_at, updated_at = decode_timestamps(raw, oid)
    return Animal(
        id=str(oid),
        name=decode_name(raw, "animal_name"),
        species=decode_reference(raw.get("species")),
        age=resolve_age(raw, now),
        adopted=decode_bool(raw.get("adopted")),
        image=decode_optional_str(raw.get("image")),
        owner=decode_optional_str(raw.get("owner")),
        location=decode_geo_point(raw.get("location")),
        createdAt=created_at,
        updatedAt=updated_at,
    )
