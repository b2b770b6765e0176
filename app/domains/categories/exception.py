from typing import Dict

from app.core.error_handler import ApiError, table_error
from app.schemas.error_schema import ErrorResponse


CATEGORY_ERRORS: Dict[str, ApiError] = {
    "CATEGORY_400_1": ApiError(400, "CATEGORY_400_1", "name is required"),
    "CATEGORY_400_2": ApiError(400, "CATEGORY_400_2", "name must be between 2 and 100 characters"),
    "CATEGORY_400_4": ApiError(400, "CATEGORY_400_4", "invalid id"),
    "CATEGORY_404_1": ApiError(404, "CATEGORY_404_1", "category not found"),
    "CATEGORY_500_1": ApiError(500, "CATEGORY_500_1", "database error"),
}


def category_error(code: str, path: str):
    return table_error(CATEGORY_ERRORS, code, "CATEGORY_500_1", path)


# Swagger responses
CATEGORY_CREATE_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Missing or invalid name"},
    500: {"model": ErrorResponse, "description": "Database error"},
}

CATEGORY_LIST_RESPONSES = {
    500: {"model": ErrorResponse, "description": "Database error"},
}

CATEGORY_ITEM_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Invalid id or name"},
    404: {"model": ErrorResponse, "description": "Category not found"},
    500: {"model": ErrorResponse, "description": "Database error"},
}
