"""
LICHSU - Main FastAPI Application

Admin backend for the Vietnamese history site. Owns display ordering
for every admin list and the guarded deletion of historical periods.
"""
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from lichsu import __version__
from lichsu.config import get_settings
from lichsu.api.router import api_router
from lichsu.exceptions import ConflictError, ContentIntegrityError, TransactionFailure

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.project_name,
    description="""
    Content-integrity API for the Vietnamese history site.

    ## Areas

    - **Periods**: listing, editing, ordering, guarded deletion
    - **Events / Historical figures / Historical sites**: per-period ordering
    - **Event types**: global ordering
    """,
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.backend_cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(ConflictError)
async def conflict_handler(request: Request, exc: ConflictError):
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "success": False,
            "message": exc.message,
            "data": exc.payload.model_dump(mode="json", by_alias=True),
        },
    )


@app.exception_handler(TransactionFailure)
async def transaction_failure_handler(request: Request, exc: TransactionFailure):
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "message": exc.message, "retryable": exc.retryable},
    )


@app.exception_handler(ContentIntegrityError)
async def content_integrity_handler(request: Request, exc: ContentIntegrityError):
    """ValidationError -> 400, NotFoundError -> 404."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "message": exc.message},
    )


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Malformed bodies are rejected before any database access."""
    logger.info("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
    return JSONResponse(
        status_code=400,
        content={
            "success": False,
            "message": "Invalid request data",
            "errors": jsonable_errors(exc),
        },
    )


def jsonable_errors(exc: RequestValidationError) -> list[dict]:
    return [
        {"loc": list(error.get("loc", ())), "msg": error.get("msg", ""), "type": error.get("type", "")}
        for error in exc.errors()
    ]


# Include API router
app.include_router(api_router, prefix=settings.api_prefix)


@app.get("/")
async def root():
    """Root endpoint - system status."""
    return {
        "system": settings.project_name,
        "status": "operational",
        "version": __version__,
    }


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}
