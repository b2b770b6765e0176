from pydantic import BaseModel, Field


class BackfillResult(BaseModel):
    """Per-collection update counts"""
    matched: int = Field(..., description="Documents scanned")
    modified: int = Field(..., description="Documents that received a timestamp")
