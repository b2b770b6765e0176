from typing import Dict

from app.core.error_handler import ApiError, table_error
from app.schemas.error_schema import ErrorResponse


ANIMAL_ERRORS: Dict[str, ApiError] = {
    "ANIMAL_400_1": ApiError(400, "ANIMAL_400_1", "name is required"),
    "ANIMAL_400_2": ApiError(400, "ANIMAL_400_2", "name must be between 2 and 100 characters"),
    "ANIMAL_400_3": ApiError(400, "ANIMAL_400_3", "age must be between 0 and 120"),
    "ANIMAL_400_4": ApiError(400, "ANIMAL_400_4", "invalid id"),
    "ANIMAL_404_1": ApiError(404, "ANIMAL_404_1", "animal not found"),
    "ANIMAL_500_1": ApiError(500, "ANIMAL_500_1", "database error"),
}


def animal_error(code: str, path: str):
    return table_error(ANIMAL_ERRORS, code, "ANIMAL_500_1", path)


# Swagger responses
ANIMAL_CREATE_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Missing or invalid field"},
    500: {"model": ErrorResponse, "description": "Database error"},
}

ANIMAL_LIST_RESPONSES = {
    500: {"model": ErrorResponse, "description": "Database error"},
}

ANIMAL_ITEM_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Invalid id or field"},
    404: {"model": ErrorResponse, "description": "Animal not found"},
    500: {"model": ErrorResponse, "description": "Database error"},
}
