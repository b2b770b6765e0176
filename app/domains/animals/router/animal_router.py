from fastapi import APIRouter, Depends, Path, Query, Request
from pymongo.database import Database
from typing import Optional

from app.db import get_db
from app.models.animal import Animal
from app.schemas.animals.animal_schema import (
    AnimalCreateRequest,
    AnimalListResponse,
    AnimalUpdateRequest,
)
from app.domains.animals.exception import (
    ANIMAL_CREATE_RESPONSES,
    ANIMAL_ITEM_RESPONSES,
    ANIMAL_LIST_RESPONSES,
)
from app.domains.animals.service.animal_service import AnimalService


router = APIRouter(
    prefix="/api/v1/animals",
    tags=["Animals"]
)


# ------------------------
# 1. create
# ------------------------
@router.post(
    "",
    summary="Create a new animal",
    description="Accepts both the current schema and dataset-style fields (animal_name, birthdate).",
    status_code=201,
    response_model=Animal,
    responses=ANIMAL_CREATE_RESPONSES,
)
def create_animal(
    request: Request,
    body: AnimalCreateRequest,
    db: Database = Depends(get_db),
):
    service = AnimalService(db)
    return service.create_animal(request, body)


# ------------------------
# 2. list
# ------------------------
@router.get(
    "",
    summary="List animals with filtering, sorting, pagination",
    description="Unparseable filter values are ignored rather than rejected.",
    status_code=200,
    response_model=AnimalListResponse,
    responses=ANIMAL_LIST_RESPONSES,
)
def list_animals(
    request: Request,
    species: Optional[str] = Query(None, description="Species text or Species id"),
    name: Optional[str] = Query(None, description="Name contains (case-insensitive)"),
    minAge: Optional[str] = Query(None, description="Minimum age"),
    maxAge: Optional[str] = Query(None, description="Maximum age"),
    adopted: Optional[str] = Query(None, description="true or false"),
    sort: Optional[str] = Query(None, description="name, age, createdAt, birthdate, animal_name"),
    order: Optional[str] = Query(None, description="asc or desc (default desc)"),
    page: Optional[str] = Query(None, description="Page number (1-based)"),
    limit: Optional[str] = Query(None, description="Page size (1-100, default 10)"),
    db: Database = Depends(get_db),
):
    params = {
        "species": species,
        "name": name,
        "minAge": minAge,
        "maxAge": maxAge,
        "adopted": adopted,
        "sort": sort,
        "order": order,
        "page": page,
        "limit": limit,
    }
    service = AnimalService(db)
    return service.list_animals(request, {k: v for k, v in params.items() if v is not None})


# ------------------------
# 3. get one
# ------------------------
@router.get(
    "/{animal_id}",
    summary="Get animal by id",
    status_code=200,
    response_model=Animal,
    responses=ANIMAL_ITEM_RESPONSES,
)
def get_animal(
    request: Request,
    animal_id: str = Path(..., description="Animal id (ObjectId hex)"),
    db: Database = Depends(get_db),
):
    service = AnimalService(db)
    return service.get_animal(request, animal_id)


# ------------------------
# 4. partial update
# ------------------------
@router.put(
    "/{animal_id}",
    summary="Update an animal by id",
    description="Only the fields sent are changed; updatedAt is always refreshed.",
    status_code=200,
    response_model=Animal,
    responses=ANIMAL_ITEM_RESPONSES,
)
def update_animal(
    request: Request,
    body: AnimalUpdateRequest,
    animal_id: str = Path(..., description="Animal id (ObjectId hex)"),
    db: Database = Depends(get_db),
):
    service = AnimalService(db)
    return service.update_animal(request, animal_id, body)


# ------------------------
# 5. delete
# ------------------------
@router.delete(
    "/{animal_id}",
    summary="Delete an animal by id",
    status_code=204,
    responses=ANIMAL_ITEM_RESPONSES,
)
def delete_animal(
    request: Request,
    animal_id: str = Path(..., description="Animal id (ObjectId hex)"),
    db: Database = Depends(get_db),
):
    service = AnimalService(db)
    return service.delete_animal(request, animal_id)
