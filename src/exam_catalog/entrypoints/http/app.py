from fastapi import FastAPI

from exam_catalog.entrypoints.http.exception_handlers import register_exception_handlers
from exam_catalog.entrypoints.http.routes.catalog import router as catalog_router
from exam_catalog.entrypoints.http.routes.exams import router as exams_router
from exam_catalog.entrypoints.http.routes.health import router as health_router
from exam_catalog.entrypoints.http.routes.uploads import router as uploads_router


def build_app() -> FastAPI:
    app = FastAPI(
        title="Exam Catalog API",
        description="""
        Exam paper catalog: publish exam documents and serve the catalog to
        browsing clients.

        ## Features
        - Full catalog document for browsing clients
        - Server-side filtering, pagination and keyword search
        - View and download counters
        - Multipart upload of exam documents with preview images

        ## Error Handling
        All errors return structured JSON responses with error codes.
        """,
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    register_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(catalog_router, prefix="/api")
    app.include_router(exams_router, prefix="/api")
    app.include_router(uploads_router, prefix="/api")

    return app


app = build_app()
