from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from app.core.config import settings
from app.core.logging_config import configure_logging
from app.core.error_handler import error_response
from app.domains.animals.router.animal_router import router as animal_router
from app.domains.categories.router.category_router import router as category_router
from app.domains.species.router.species_router import router as species_router
from app.domains.maintenance.router.maintenance_router import router as maintenance_router


def create_app() -> FastAPI:
    configure_logging(settings.LOG_LEVEL)

    app = FastAPI(
        title="Animals API",
        version="1.0.0",
        description="REST API for managing animals, categories and species.",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        openapi_tags=[
            {"name": "Animals", "description": "Animal CRUD, filtering and pagination"},
            {"name": "Categories", "description": "Category CRUD"},
            {"name": "Species", "description": "Species CRUD, filter by category"},
            {"name": "Maintenance", "description": "Data repair jobs"},
        ]
    )

    app.include_router(animal_router)
    app.include_router(category_router)
    app.include_router(species_router)

    app.include_router(maintenance_router)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        # malformed bodies share the ErrorResponse envelope instead of the default 422
        reason = "Invalid request body"
        errors = exc.errors()
        if errors:
            first = errors[0]
            location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
            reason = f"{location}: {first.get('msg')}" if location else first.get("msg", reason)
        return error_response(400, "REQUEST_400_1", reason, request.url.path)

    @app.get("/health")
    def health():
        return {"status": "ok"}

    return app


app = create_app()

# local entry point
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "app.main:app",
        host="0.0.0.0",
        port=settings.PORT,
        reload=True
    )
