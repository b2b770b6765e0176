from typing import Dict

from app.core.error_handler import ApiError, table_error
from app.schemas.error_schema import ErrorResponse


SPECIES_ERRORS: Dict[str, ApiError] = {
    "SPECIES_400_1": ApiError(400, "SPECIES_400_1", "name is required"),
    "SPECIES_400_2": ApiError(400, "SPECIES_400_2", "name must be between 2 and 200 characters"),
    "SPECIES_400_4": ApiError(400, "SPECIES_400_4", "invalid id"),
    "SPECIES_404_1": ApiError(404, "SPECIES_404_1", "species not found"),
    "SPECIES_500_1": ApiError(500, "SPECIES_500_1", "database error"),
}


def species_error(code: str, path: str):
    return table_error(SPECIES_ERRORS, code, "SPECIES_500_1", path)


# Swagger responses
SPECIES_CREATE_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Missing or invalid name"},
    500: {"model": ErrorResponse, "description": "Database error"},
}

SPECIES_LIST_RESPONSES = {
    500: {"model": ErrorResponse, "description": "Database error"},
}

SPECIES_ITEM_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Invalid id or name"},
    404: {"model": ErrorResponse, "description": "Species not found"},
    500: {"model": ErrorResponse, "description": "Database error"},
}
