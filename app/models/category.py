from datetime import datetime
from typing import Any, Dict, Optional

from bson import ObjectId
from pydantic import BaseModel, Field

from app.models.animal import NIL_ID


class Category(BaseModel):
    """
    Canonical category record
    Collection: "categories"
    """
    id: str = Field(NIL_ID, description="ObjectId hex")
    name: str = Field("", description="Name (legacy documents: category_name)")
    createdAt: Optional[datetime] = Field(None)
    updatedAt: Optional[datetime] = Field(None)

    def to_document(self) -> Dict[str, Any]:
        return {
            "_id": ObjectId(self.id),
            "name": self.name,
            "createdAt": self.createdAt,
            "updatedAt": self.updatedAt,
        }
