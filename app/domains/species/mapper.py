from collections.abc import Mapping

from app.core.normalize import decode_name, decode_object_id, decode_reference, decode_timestamps
from app.models.species import Species


def map_species(raw: Mapping) -> Species:
    oid = decode_object_id(raw)
    created_at, updated_at = decode_timestamps(raw, oid)
    return Species(
        id=str(oid),
        name=decode_name(raw, "species_name"),
        category=decode_reference(raw.get("category")),
        createdAt=created_at,
        updatedAt=updated_at,
    )
