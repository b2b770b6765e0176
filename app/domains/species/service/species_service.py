import logging
from typing import Any, Dict, Mapping, Optional

from fastapi import Request, Response
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from pymongo.database import Database
from pymongo.errors import PyMongoError

from app.core.normalize import utcnow
from app.core.query_builder import parse_object_id
from app.core.validation import length_between, pick_name
from app.domains.species.exception import species_error
from app.domains.species.mapper import map_species
from app.domains.species.query import build_species_query
from app.domains.species.repository.species_repository import SpeciesRepository
from app.schemas.species.species_schema import SpeciesCreateRequest, SpeciesUpdateRequest

logger = logging.getLogger(__name__)


def category_reference(value: Optional[str]):
    """Category ids are stored as ObjectId, anything else as the literal text."""
    if not value or not value.strip():
        return None
    value = value.strip()
    oid = parse_object_id(value)
    return oid if oid is not None else value


class SpeciesService:
    def __init__(self, db: Database):
        self.repo = SpeciesRepository(db)

    def create_species(self, request: Request, body: SpeciesCreateRequest):
        path = request.url.path

        name = pick_name(body.name, body.species_name)
        if name is None:
            return species_error("SPECIES_400_1", path)
        if not length_between(name, 2, 200):
            return species_error("SPECIES_400_2", path)

        now = utcnow()
        doc: Dict[str, Any] = {"name": name}
        category = category_reference(body.category)
        doc["category"] = category if category is not None else ""
        doc["createdAt"] = now
        doc["updatedAt"] = now

        try:
            oid = self.repo.insert(doc)
        except PyMongoError:
            logger.exception("SPECIES_CREATE_ERROR")
            return species_error("SPECIES_500_1", path)

        doc["_id"] = oid
        logger.info("species created: %s", oid)
        return JSONResponse(status_code=201, content=jsonable_encoder(map_species(doc)))

    def get_species(self, request: Request, species_id: str):
        path = request.url.path
        oid = parse_object_id(species_id)
        if oid is None:
            return species_error("SPECIES_400_4", path)

        try:
            raw = self.repo.get_by_id(oid)
        except PyMongoError:
            logger.exception("SPECIES_GET_ERROR")
            return species_error("SPECIES_500_1", path)

        if raw is None:
            return species_error("SPECIES_404_1", path)
        return JSONResponse(status_code=200, content=jsonable_encoder(map_species(raw)))

    def list_species(self, request: Request, params: Mapping[str, str]):
        path = request.url.path
        spec = build_species_query(params)

        try:
            raws = self.repo.find(spec)
            total = self.repo.count(spec.filter)
        except PyMongoError:
            logger.exception("SPECIES_LIST_ERROR")
            return species_error("SPECIES_500_1", path)

        resp = {
            "items": [map_species(r) for r in raws],
            "page": spec.page,
            "limit": spec.limit,
            "total": total,
        }
        return JSONResponse(status_code=200, content=jsonable_encoder(resp))

    def update_species(self, request: Request, species_id: str, body: SpeciesUpdateRequest):
        path = request.url.path
        oid = parse_object_id(species_id)
        if oid is None:
            return species_error("SPECIES_400_4", path)

        fields: Dict[str, Any] = {"updatedAt": utcnow()}
        name = pick_name(body.name, body.species_name)
        if name is not None:
            if not length_between(name, 2, 200):
                return species_error("SPECIES_400_2", path)
            fields["name"] = name
        category = category_reference(body.category)
        if category is not None:
            fields["category"] = category

        try:
            raw = self.repo.update_partial(oid, fields)
        except PyMongoError:
            logger.exception("SPECIES_UPDATE_ERROR")
            return species_error("SPECIES_500_1", path)

        if raw is None:
            return species_error("SPECIES_404_1", path)
        return JSONResponse(status_code=200, content=jsonable_encoder(map_species(raw)))

    def delete_species(self, request: Request, species_id: str):
        path = request.url.path
        oid = parse_object_id(species_id)
        if oid is None:
            return species_error("SPECIES_400_4", path)

        try:
            deleted = self.repo.delete(oid)
        except PyMongoError:
            logger.exception("SPECIES_DELETE_ERROR")
            return species_error("SPECIES_500_1", path)

        if not deleted:
            return species_error("SPECIES_404_1", path)
        logger.info("species deleted: %s", oid)
        return Response(status_code=204)
