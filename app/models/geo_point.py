from pydantic import BaseModel, Field
from typing import List


class GeoPoint(BaseModel):
    """GeoJSON point, e.g. {"type": "Point", "coordinates": [lng, lat]}"""
    type: str = Field("Point", description="GeoJSON type tag")
    coordinates: List[float] = Field(default_factory=list, description="Ordered coordinate pair")
