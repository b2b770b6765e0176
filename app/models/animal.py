from datetime import datetime
from typing import Any, Dict, Optional

from bson import ObjectId
from pydantic import BaseModel, Field

from app.models.geo_point import GeoPoint

NIL_ID = "0" * 24


class Animal(BaseModel):
    """
    Canonical animal record
    Collection: "animals"
    """
    id: str = Field(NIL_ID, description="ObjectId hex")
    name: str = Field("", description="Name (legacy documents: animal_name)")
    species: str = Field("", description="Free text or Species id hex")
    age: int = Field(0, description="Age in years, stored or derived from birthdate")
    adopted: bool = Field(False)
    image: Optional[str] = Field(None, description="Image URL")
    owner: Optional[str] = Field(None)
    location: Optional[GeoPoint] = Field(None)
    createdAt: Optional[datetime] = Field(None)
    updatedAt: Optional[datetime] = Field(None)

    def to_document(self) -> Dict[str, Any]:
        doc: Dict[str, Any] = {
            "_id": ObjectId(self.id),
            "name": self.name,
            "species": self.species,
            "age": self.age,
            "adopted": self.adopted,
        }
        if self.image is not None:
            doc["image"] = self.image
        if self.owner is not None:
            doc["owner"] = self.owner
        if self.location is not None:
            doc["location"] = self.location.model_dump()
        doc["createdAt"] = self.createdAt
        doc["updatedAt"] = self.updatedAt
        return doc
