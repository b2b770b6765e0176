import logging
from typing import Any, Dict, Mapping

from fastapi import Request, Response
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from pymongo.database import Database
from pymongo.errors import PyMongoError

from app.core.normalize import age_from_birthdate, utcnow
from app.core.query_builder import parse_object_id
from app.core.validation import length_between, pick_name
from app.domains.animals.exception import animal_error
from app.domains.animals.mapper import map_animal
from app.domains.animals.query import build_animal_query
from app.domains.animals.repository.animal_repository import AnimalRepository
from app.schemas.animals.animal_schema import AnimalCreateRequest, AnimalUpdateRequest

logger = logging.getLogger(__name__)

MIN_AGE, MAX_AGE = 0, 120


class AnimalService:
    def __init__(self, db: Database):
        self.repo = AnimalRepository(db)

    # --------------------------------------------------
    # field helpers
    # --------------------------------------------------
    @staticmethod
    def _resolve_age(body: AnimalCreateRequest):
        """Explicit age wins; otherwise a parseable birthdate. None if neither."""
        if body.age is not None:
            return body.age
        if body.birthdate:
            age = age_from_birthdate(body.birthdate)
            if age >= 0:
                return age
        return None

    @staticmethod
    def _optional_fields(body: AnimalCreateRequest) -> Dict[str, Any]:
        fields: Dict[str, Any] = {}
        if body.adopted is not None:
            fields["adopted"] = body.adopted
        if body.image:
            fields["image"] = body.image
        if body.owner:
            fields["owner"] = body.owner
        if body.location is not None:
            fields["location"] = {
                "type": body.location.type or "Point",
                "coordinates": list(body.location.coordinates),
            }
        return fields

    # --------------------------------------------------
    # create
    # --------------------------------------------------
    def create_animal(self, request: Request, body: AnimalCreateRequest):
        path = request.url.path

        name = pick_name(body.name, body.animal_name)
        if name is None:
            return animal_error("ANIMAL_400_1", path)
        if not length_between(name, 2, 100):
            return animal_error("ANIMAL_400_2", path)

        age = self._resolve_age(body)
        if age is not None and not MIN_AGE <= age <= MAX_AGE:
            return animal_error("ANIMAL_400_3", path)

        now = utcnow()
        doc: Dict[str, Any] = {
            "name": name,
            "species": (body.species or "").strip(),
            "age": age or 0,
            "adopted": False,
        }
        doc.update(self._optional_fields(body))
        doc["createdAt"] = now
        doc["updatedAt"] = now

        try:
            oid = self.repo.insert(doc)
        except PyMongoError:
            logger.exception("ANIMAL_CREATE_ERROR")
            return animal_error("ANIMAL_500_1", path)

        doc["_id"] = oid
        logger.info("animal created: %s", oid)
        return JSONResponse(status_code=201, content=jsonable_encoder(map_animal(doc)))

    # --------------------------------------------------
    # read
    # --------------------------------------------------
    def get_animal(self, request: Request, animal_id: str):
        path = request.url.path

        oid = parse_object_id(animal_id)
        if oid is None:
            return animal_error("ANIMAL_400_4", path)

        try:
            raw = self.repo.get_by_id(oid)
        except PyMongoError:
            logger.exception("ANIMAL_GET_ERROR")
            return animal_error("ANIMAL_500_1", path)

        if raw is None:
            return animal_error("ANIMAL_404_1", path)
        return JSONResponse(status_code=200, content=jsonable_encoder(map_animal(raw)))

    def list_animals(self, request: Request, params: Mapping[str, str]):
        path = request.url.path
        spec = build_animal_query(params)

        try:
            raws = self.repo.find(spec)
            # total comes from its own count over the unpaginated filter
            total = self.repo.count(spec.filter)
        except PyMongoError:
            logger.exception("ANIMAL_LIST_ERROR")
            return animal_error("ANIMAL_500_1", path)

        resp = {
            "items": [map_animal(r) for r in raws],
            "page": spec.page,
            "limit": spec.limit,
            "total": total,
        }
        return JSONResponse(status_code=200, content=jsonable_encoder(resp))

    # --------------------------------------------------
    # update
    # --------------------------------------------------
    def update_animal(self, request: Request, animal_id: str, body: AnimalUpdateRequest):
        path = request.url.path

        oid = parse_object_id(animal_id)
        if oid is None:
            return animal_error("ANIMAL_400_4", path)

        fields: Dict[str, Any] = {}
        name = pick_name(body.name, body.animal_name)
        if name is not None:
            if not length_between(name, 2, 100):
                return animal_error("ANIMAL_400_2", path)
            fields["name"] = name
        if body.species and body.species.strip():
            fields["species"] = body.species.strip()
        age = self._resolve_age(body)
        if age is not None:
            if not MIN_AGE <= age <= MAX_AGE:
                return animal_error("ANIMAL_400_3", path)
            fields["age"] = age
        fields.update(self._optional_fields(body))
        fields["updatedAt"] = utcnow()

        try:
            raw = self.repo.update_partial(oid, fields)
        except PyMongoError:
            logger.exception("ANIMAL_UPDATE_ERROR")
            return animal_error("ANIMAL_500_1", path)

        if raw is None:
            return animal_error("ANIMAL_404_1", path)
        return JSONResponse(status_code=200, content=jsonable_encoder(map_animal(raw)))

    # --------------------------------------------------
    # delete
    # --------------------------------------------------
    def delete_animal(self, request: Request, animal_id: str):
        path = request.url.path

        oid = parse_object_id(animal_id)
        if oid is None:
            return animal_error("ANIMAL_400_4", path)

        try:
            deleted = self.repo.delete(oid)
        except PyMongoError:
            logger.exception("ANIMAL_DELETE_ERROR")
            return animal_error("ANIMAL_500_1", path)

        if not deleted:
            return animal_error("ANIMAL_404_1", path)
        logger.info("animal deleted: %s", oid)
        return Response(status_code=204)
