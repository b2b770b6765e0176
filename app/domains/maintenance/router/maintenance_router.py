from fastapi import APIRouter, Depends, Request
from pymongo.database import Database
from typing import Dict

from app.db import get_db
from app.schemas.maintenance.backfill_schema import BackfillResult
from app.domains.maintenance.exception import MAINTENANCE_RESPONSES
from app.domains.maintenance.service.maintenance_service import MaintenanceService


router = APIRouter(
    prefix="/api/v1/maintenance",
    tags=["Maintenance"]
)


@router.post(
    "/backfill-timestamps",
    summary="Backfill missing createdAt/updatedAt",
    description=(
        "Sets createdAt from the ObjectId timestamp and updatedAt from createdAt "
        "wherever they are missing, in animals, categories and species."
    ),
    status_code=200,
    response_model=Dict[str, BackfillResult],
    responses=MAINTENANCE_RESPONSES,
)
def backfill_timestamps(
    request: Request,
    db: Database = Depends(get_db),
):
    return MaintenanceService(db).backfill_timestamps(request)
