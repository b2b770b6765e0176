from pydantic import BaseModel, Field
from typing import List, Optional

from app.models.animal import Animal


class LocationIn(BaseModel):
    type: Optional[str] = Field(None, description="GeoJSON type, defaults to Point")
    coordinates: List[float] = Field(default_factory=list, description="[lng, lat]")


class AnimalCreateRequest(BaseModel):
    """Animal create request; dataset-style fields (animal_name, birthdate) are accepted"""
    name: Optional[str] = Field(None, description="Name")
    animal_name: Optional[str] = Field(None, description="Legacy name field, used when name is empty")
    species: Optional[str] = Field(None, description="Free text or Species id")
    birthdate: Optional[str] = Field(None, description="YYYY-MM-DD, used when age is missing")
    age: Optional[int] = Field(None, description="Age in years (0-120)")
    adopted: Optional[bool] = Field(None)
    image: Optional[str] = Field(None, description="Image URL")
    owner: Optional[str] = Field(None)
    location: Optional[LocationIn] = Field(None)


class AnimalUpdateRequest(AnimalCreateRequest):
    """Partial update; only the fields sent are changed"""


class AnimalListResponse(BaseModel):
    items: List[Animal] = Field(default_factory=list)
    page: int = Field(..., description="Page number (1-based)")
    limit: int = Field(..., description="Page size")
    total: int = Field(..., description="Documents matching the filter")
