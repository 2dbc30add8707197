"""
Room Layout Planner API

FastAPI application for rule-based living room furniture layouts.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from layout_planner.config import get_settings
from layout_planner.models.api import ErrorResponse, HealthResponse
from layout_planner.routes import furniture, layout, suggest
from layout_planner.services.catalog import CatalogError


# Get settings
settings = get_settings()

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(name)s %(levelname)s: %(message)s"
)
logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="""
    **Room Layout Planner API** - Places living room furniture inside a rectangular room.

    ## Features
    - **Furniture**: Browse the furniture catalog
    - **Layout**: Deterministic placement of sofa, coffee table, TV stand and extras within budget
    - **Suggest**: Optional AI-generated alternative layout, reviewed against the same rules

    ## Workflow
    1. Browse the catalog → `/api/furniture`
    2. Submit room length, width and budget → `/api/layout`
    3. Optionally compare with an AI layout → `/api/suggest`
    """,
    docs_url="/docs",
    redoc_url="/redoc"
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(furniture.router, prefix=settings.api_prefix)
app.include_router(layout.router, prefix=settings.api_prefix)
app.include_router(suggest.router, prefix=settings.api_prefix)


# ============ Error Handlers ============

@app.exception_handler(CatalogError)
async def catalog_error_handler(request: Request, exc: CatalogError) -> JSONResponse:
    """Catalog load failures make the service unavailable, not broken."""
    logger.error("Furniture catalog unavailable: %s", exc)
    body = ErrorResponse(detail=str(exc), error_code="catalog_unavailable")
    return JSONResponse(status_code=503, content=body.model_dump())


# ============ Health Check ============

@app.get("/", response_model=HealthResponse, tags=["Health"])
async def root():
    """Root endpoint - health check."""
    return HealthResponse(
        status="ok",
        version=settings.app_version,
        message="Room Layout Planner API is running. Visit /docs for API documentation."
    )


@app.get("/health", response_model=HealthResponse, tags=["Health"])
async def health_check():
    """Health check endpoint."""
    return HealthResponse(
        status="ok",
        version=settings.app_version
    )


# ============ Run with Uvicorn ============

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "layout_planner.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.debug
    )
