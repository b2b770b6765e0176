import logging

from fastapi import Request
from fastapi.responses import JSONResponse
from pymongo.database import Database
from pymongo.errors import PyMongoError

from app.core.config import settings
from app.domains.maintenance.exception import maintenance_error
from app.domains.maintenance.repository.maintenance_repository import MaintenanceRepository

logger = logging.getLogger(__name__)


class MaintenanceService:
    def __init__(self, db: Database):
        self.repo = MaintenanceRepository(db)

    def backfill_timestamps(self, request: Request):
        path = request.url.path
        try:
            result = self.repo.backfill_timestamps(settings.collections)
        except PyMongoError:
            logger.exception("BACKFILL_ERROR")
            return maintenance_error("MAINTENANCE_500_1", path)

        logger.info("timestamp backfill: %s", result)
        return JSONResponse(status_code=200, content=result)
