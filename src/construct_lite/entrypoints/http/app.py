import logging

from fastapi import FastAPI

from construct_lite.entrypoints.http.exception_handlers import register_exception_handlers
from construct_lite.entrypoints.http.routes.designs import router as designs_router
from construct_lite.entrypoints.http.routes.health import router as health_router
from construct_lite.entrypoints.http.routes.loans import router as loans_router

logger = logging.getLogger(__name__)


def build_app() -> FastAPI:
    app = FastAPI(
        title="Construct Lite API",
        description="""
        House design catalog and loan quotation API for a construction company.

        ## Features
        - Browse and filter the design catalog
        - Compute amortized payment schedules
        - Preview and export loan quotations for financed designs

        ## Money
        All monetary values are decimal strings rounded to cents.

        ## Error Handling
        All errors return structured JSON responses with error codes.
        See the error response schemas in the API documentation.
        """,
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        contact={
            "name": "Construct Lite Team",
        },
        license_info={
            "name": "Proprietary",
        },
    )

    register_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(designs_router, prefix="/v1")
    app.include_router(loans_router, prefix="/v1")

    logger.debug("Application built", extra={"routes": len(app.routes)})
    return app


app = build_app()
