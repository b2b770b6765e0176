from fastapi import APIRouter, Depends, Path, Query, Request
from pymongo.database import Database
from typing import Optional

from app.db import get_db
from app.models.category import Category
from app.schemas.categories.category_schema import (
    CategoryCreateRequest,
    CategoryListResponse,
    CategoryUpdateRequest,
)
from app.domains.categories.exception import (
    CATEGORY_CREATE_RESPONSES,
    CATEGORY_ITEM_RESPONSES,
    CATEGORY_LIST_RESPONSES,
)
from app.domains.categories.service.category_service import CategoryService


router = APIRouter(
    prefix="/api/v1/categories",
    tags=["Categories"]
)


@router.post(
    "",
    summary="Create a category",
    description="Accepts name or category_name.",
    status_code=201,
    response_model=Category,
    responses=CATEGORY_CREATE_RESPONSES,
)
def create_category(
    request: Request,
    body: CategoryCreateRequest,
    db: Database = Depends(get_db),
):
    return CategoryService(db).create_category(request, body)


@router.get(
    "",
    summary="List categories with pagination and sorting",
    status_code=200,
    response_model=CategoryListResponse,
    responses=CATEGORY_LIST_RESPONSES,
)
def list_categories(
    request: Request,
    name: Optional[str] = Query(None, description="Name contains (case-insensitive)"),
    sort: Optional[str] = Query(None, description="name or createdAt"),
    order: Optional[str] = Query(None, description="asc or desc (default desc)"),
    page: Optional[str] = Query(None, description="Page number (1-based)"),
    limit: Optional[str] = Query(None, description="Page size (1-100, default 10)"),
    db: Database = Depends(get_db),
):
    params = {"name": name, "sort": sort, "order": order, "page": page, "limit": limit}
    return CategoryService(db).list_categories(
        request, {k: v for k, v in params.items() if v is not None}
    )


@router.get(
    "/{category_id}",
    summary="Get category by id",
    status_code=200,
    response_model=Category,
    responses=CATEGORY_ITEM_RESPONSES,
)
def get_category(
    request: Request,
    category_id: str = Path(..., description="Category id (ObjectId hex)"),
    db: Database = Depends(get_db),
):
    return CategoryService(db).get_category(request, category_id)


@router.put(
    "/{category_id}",
    summary="Update a category by id",
    status_code=200,
    response_model=Category,
    responses=CATEGORY_ITEM_RESPONSES,
)
def update_category(
    request: Request,
    body: CategoryUpdateRequest,
    category_id: str = Path(..., description="Category id (ObjectId hex)"),
    db: Database = Depends(get_db),
):
    return CategoryService(db).update_category(request, category_id, body)


@router.delete(
    "/{category_id}",
    summary="Delete a category by id",
    status_code=204,
    responses=CATEGORY_ITEM_RESPONSES,
)
def delete_category(
    request: Request,
    category_id: str = Path(..., description="Category id (ObjectId hex)"),
    db: Database = Depends(get_db),
):
    return CategoryService(db).delete_category(request, category_id)
