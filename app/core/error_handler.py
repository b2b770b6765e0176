from dataclasses import dataclass
from typing import Dict
from fastapi.responses import JSONResponse
from datetime import datetime, timezone
from app.schemas.error_schema import ErrorResponse

def error_response(status: int, code: str, reason: str, path: str) -> JSONResponse:

    error = ErrorResponse(
        success=False,
        status=status,
        code=code,
        reason=reason,
        timeStamp=datetime.now(timezone.utc).isoformat(),
        path=path
    )

    return JSONResponse(
        status_code=status,
        content=error.model_dump()
    )


@dataclass(frozen=True)
class ApiError:
    status: int
    code: str
    reason: str


def table_error(table: Dict[str, ApiError], code: str, fallback: str, path: str) -> JSONResponse:
    err = table.get(code) or table[fallback]
    return error_response(err.status, err.code, err.reason, path)
