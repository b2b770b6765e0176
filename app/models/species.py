from datetime import datetime
from typing import Any, Dict, Optional

from bson import ObjectId
from pydantic import BaseModel, Field

from app.models.animal import NIL_ID


class Species(BaseModel):
    """
    Canonical species record
    Collection: "species"
    """
    id: str = Field(NIL_ID, description="ObjectId hex")
    name: str = Field("", description="Name (legacy documents: species_name)")
    category: str = Field("", description="Free text or Category id hex")
    createdAt: Optional[datetime] = Field(None)
    updatedAt: Optional[datetime] = Field(None)

    def to_document(self) -> Dict[str, Any]:
        return {
            "_id": ObjectId(self.id),
            "name": self.name,
            "category": self.category,
            "createdAt": self.createdAt,
            "updatedAt": self.updatedAt,
        }
