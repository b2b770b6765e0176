from pydantic import BaseModel, Field
from typing import List, Optional

from app.models.species import Species


class SpeciesCreateRequest(BaseModel):
    """Species create request (name or species_name)"""
    name: Optional[str] = Field(None, description="Name")
    species_name: Optional[str] = Field(None, description="Legacy name field, used when name is empty")
    category: Optional[str] = Field(None, description="Category id or free text")


class SpeciesUpdateRequest(SpeciesCreateRequest):
    """Partial update; only the fields sent are changed"""


class SpeciesListResponse(BaseModel):
    items: List[Species] = Field(default_factory=list)
    page: int = Field(..., description="Page number (1-based)")
    limit: int = Field(..., description="Page size")
    total: int = Field(..., description="Documents matching the filter")
