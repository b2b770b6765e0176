from fastapi import APIRouter, Depends, Path, Query, Request
from pymongo.database import Database
from typing import Optional

from app.db import get_db
from app.models.species import Species
from app.schemas.species.species_schema import (
    SpeciesCreateRequest,
    SpeciesListResponse,
    SpeciesUpdateRequest,
)
from app.domains.species.exception import (
    SPECIES_CREATE_RESPONSES,
    SPECIES_ITEM_RESPONSES,
    SPECIES_LIST_RESPONSES,
)
from app.domains.species.service.species_service import SpeciesService


router = APIRouter(
    prefix="/api/v1/species",
    tags=["Species"]
)


@router.post(
    "",
    summary="Create a species",
    description="Accepts name or species_name; category may be a Category id or free text.",
    status_code=201,
    response_model=Species,
    responses=SPECIES_CREATE_RESPONSES,
)
def create_species(
    request: Request,
    body: SpeciesCreateRequest,
    db: Database = Depends(get_db),
):
    return SpeciesService(db).create_species(request, body)


@router.get(
    "",
    summary="List species with filtering, sorting, pagination",
    status_code=200,
    response_model=SpeciesListResponse,
    responses=SPECIES_LIST_RESPONSES,
)
def list_species(
    request: Request,
    name: Optional[str] = Query(None, description="Name contains (case-insensitive)"),
    category: Optional[str] = Query(None, description="Category id or text"),
    sort: Optional[str] = Query(None, description="name, createdAt, species_name"),
    order: Optional[str] = Query(None, description="asc or desc (default desc)"),
    page: Optional[str] = Query(None, description="Page number (1-based)"),
    limit: Optional[str] = Query(None, description="Page size (1-100, default 10)"),
    db: Database = Depends(get_db),
):
    params = {
        "name": name,
        "category": category,
        "sort": sort,
        "order": order,
        "page": page,
        "limit": limit,
    }
    return SpeciesService(db).list_species(
        request, {k: v for k, v in params.items() if v is not None}
    )


@router.get(
    "/{species_id}",
    summary="Get species by id",
    status_code=200,
    response_model=Species,
    responses=SPECIES_ITEM_RESPONSES,
)
def get_species(
    request: Request,
    species_id: str = Path(..., description="Species id (ObjectId hex)"),
    db: Database = Depends(get_db),
):
    return SpeciesService(db).get_species(request, species_id)


@router.put(
    "/{species_id}",
    summary="Update a species by id",
    status_code=200,
    response_model=Species,
    responses=SPECIES_ITEM_RESPONSES,
)
def update_species(
    request: Request,
    body: SpeciesUpdateRequest,
    species_id: str = Path(..., description="Species id (ObjectId hex)"),
    db: Database = Depends(get_db),
):
    return SpeciesService(db).update_species(request, species_id, body)


@router.delete(
    "/{species_id}",
    summary="Delete a species by id",
    status_code=204,
    responses=SPECIES_ITEM_RESPONSES,
)
def delete_species(
    request: Request,
    species_id: str = Path(..., description="Species id (ObjectId hex)"),
    db: Database = Depends(get_db),
):
    return SpeciesService(db).delete_species(request, species_id)
