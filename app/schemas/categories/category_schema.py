from pydantic import BaseModel, Field
from typing import List, Optional

from app.models.category import Category


class CategoryCreateRequest(BaseModel):
    """Category create request (name or category_name)"""
    name: Optional[str] = Field(None, description="Name")
    category_name: Optional[str] = Field(None, description="Legacy name field, used when name is empty")


class CategoryUpdateRequest(CategoryCreateRequest):
    """Partial update; only the fields sent are changed"""


class CategoryListResponse(BaseModel):
    items: List[Category] = Field(default_factory=list)
    page: int = Field(..., description="Page number (1-based)")
    limit: int = Field(..., description="Page size")
    total: int = Field(..., description="Documents matching the filter")
