from typing import Dict

from app.core.error_handler import ApiError, table_error
from app.schemas.error_schema import ErrorResponse


MAINTENANCE_ERRORS: Dict[str, ApiError] = {
    "MAINTENANCE_500_1": ApiError(500, "MAINTENANCE_500_1", "timestamp backfill failed"),
}


def maintenance_error(code: str, path: str):
    return table_error(MAINTENANCE_ERRORS, code, "MAINTENANCE_500_1", path)


MAINTENANCE_RESPONSES = {
    500: {"model": ErrorResponse, "description": "Database error"},
}
