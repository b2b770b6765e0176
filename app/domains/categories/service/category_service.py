import logging
from typing import Any, Dict, Mapping

from fastapi import Request, Response
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from pymongo.database import Database
from pymongo.errors import PyMongoError

from app.core.normalize import utcnow
from app.core.query_builder import parse_object_id
from app.core.validation import length_between, pick_name
from app.domains.categories.exception import category_error
from app.domains.categories.mapper import map_category
from app.domains.categories.query import build_category_query
from app.domains.categories.repository.category_repository import CategoryRepository
from app.schemas.categories.category_schema import CategoryCreateRequest, CategoryUpdateRequest

logger = logging.getLogger(__name__)


class CategoryService:
    def __init__(self, db: Database):
        self.repo = CategoryRepository(db)

    def create_category(self, request: Request, body: CategoryCreateRequest):
        path = request.url.path

        name = pick_name(body.name, body.category_name)
        if name is None:
            return category_error("CATEGORY_400_1", path)
        if not length_between(name, 2, 100):
            return category_error("CATEGORY_400_2", path)

        now = utcnow()
        doc: Dict[str, Any] = {"name": name, "createdAt": now, "updatedAt": now}
        try:
            oid = self.repo.insert(doc)
        except PyMongoError:
            logger.exception("CATEGORY_CREATE_ERROR")
            return category_error("CATEGORY_500_1", path)

        doc["_id"] = oid
        logger.info("category created: %s", oid)
        return JSONResponse(status_code=201, content=jsonable_encoder(map_category(doc)))

    def get_category(self, request: Request, category_id: str):
        path = request.url.path
        oid = parse_object_id(category_id)
        if oid is None:
            return category_error("CATEGORY_400_4", path)

        try:
            raw = self.repo.get_by_id(oid)
        except PyMongoError:
            logger.exception("CATEGORY_GET_ERROR")
            return category_error("CATEGORY_500_1", path)

        if raw is None:
            return category_error("CATEGORY_404_1", path)
        return JSONResponse(status_code=200, content=jsonable_encoder(map_category(raw)))

    def list_categories(self, request: Request, params: Mapping[str, str]):
        path = request.url.path
        spec = build_category_query(params)

        try:
            raws = self.repo.find(spec)
            total = self.repo.count(spec.filter)
        except PyMongoError:
            logger.exception("CATEGORY_LIST_ERROR")
            return category_error("CATEGORY_500_1", path)

        resp = {
            "items": [map_category(r) for r in raws],
            "page": spec.page,
            "limit": spec.limit,
            "total": total,
        }
        return JSONResponse(status_code=200, content=jsonable_encoder(resp))

    def update_category(self, request: Request, category_id: str, body: CategoryUpdateRequest):
        path = request.url.path
        oid = parse_object_id(category_id)
        if oid is None:
            return category_error("CATEGORY_400_4", path)

        fields: Dict[str, Any] = {"updatedAt": utcnow()}
        name = pick_name(body.name, body.category_name)
        if name is not None:
            if not length_between(name, 2, 100):
                return category_error("CATEGORY_400_2", path)
            fields["name"] = name

        try:
            raw = self.repo.update_partial(oid, fields)
        except PyMongoError:
            logger.exception("CATEGORY_UPDATE_ERROR")
            return category_error("CATEGORY_500_1", path)

        if raw is None:
            return category_error("CATEGORY_404_1", path)
        return JSONResponse(status_code=200, content=jsonable_encoder(map_category(raw)))

    def delete_category(self, request: Request, category_id: str):
        path = request.url.path
        oid = parse_object_id(category_id)
        if oid is None:
            return category_error("CATEGORY_400_4", path)

        try:
            deleted = self.repo.delete(oid)
        except PyMongoError:
            logger.exception("CATEGORY_DELETE_ERROR")
            return category_error("CATEGORY_500_1", path)

        if not deleted:
            return category_error("CATEGORY_404_1", path)
        logger.info("category deleted: %s", oid)
        return Response(status_code=204)
