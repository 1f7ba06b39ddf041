from datetime import datetime
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from core.config import settings
from core.context import resolve_locale
from core.exceptions import BaseCustomException
from core.i18n import translate
from core.middleware import RequestLoggingMiddleware, SecurityHeadersMiddleware
from core.response import error_response
from database.connection import create_tables
from routers import auth, catalog, offer, property, rating, search_request, service, upload

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Cascais Directory API",
    description="Local services, offers and real estate in Cascais",
    version="1.0.0"
)


def _error(request: Request, status_code: int, message: str, error_code: str, details=None) -> JSONResponse:
    """Log a failed request and wrap it in the error envelope, tagged with its request id."""
    request_id = getattr(request.state, 'request_id', None)
    log = logger.error if status_code >= 500 else logger.warning
    log(f"{error_code} [{request_id}] {request.method} {request.url.path} -> {status_code}: {message}")

    details = dict(details or {})
    if request_id:
        details.setdefault("request_id", request_id)
    return JSONResponse(
        status_code=status_code,
        content=error_response(message=message, error_code=error_code, details=details)
    )


def _locale(request: Request) -> str:
    return getattr(request.state, 'locale', None) or resolve_locale(
        request.query_params.get("lang"), request.headers.get("accept-language")
    )


# Directory errors carry an already localized message
@app.exception_handler(BaseCustomException)
async def directory_exception_handler(request: Request, exc: BaseCustomException):
    return _error(request, exc.status_code, exc.message, exc.__class__.__name__, exc.details)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Malformed request bodies and query strings, one entry per offending field."""
    errors = [
        {
            # Drop the "body"/"query" prefix so fields match the form names
            "field": '.'.join(str(x) for x in error['loc'][1:]) or str(error['loc'][0]),
            "message": error['msg'],
            "type": error['type'],
        }
        for error in exc.errors()
    ]
    return _error(
        request, 422, translate("request_invalid", _locale(request)), "VALIDATION_ERROR",
        {"errors": errors}
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    message = exc.detail if isinstance(exc.detail, str) else "HTTP error occurred"
    return _error(request, exc.status_code, message, "HTTP_ERROR")


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return _error(request, 500, translate("unexpected_error", _locale(request)), "INTERNAL_SERVER_ERROR")


# CORS first so preflight requests are answered
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["*"],
)

# Order matters: first added is executed last
app.add_middleware(SecurityHeadersMiddleware)
app.add_middleware(RequestLoggingMiddleware)

# Include routers
app.include_router(auth.router, prefix="/api/auth", tags=["Authentication"])
app.include_router(catalog.router, prefix="/api/catalog", tags=["Catalog"])
app.include_router(service.router, prefix="/api/services", tags=["Services"])
app.include_router(rating.router)
app.include_router(offer.router, prefix="/api/offers", tags=["Offers"])
app.include_router(property.router, prefix="/api/properties", tags=["Properties"])
app.include_router(search_request.router, prefix="/api/property-search-requests", tags=["Property Search"])
app.include_router(upload.router, prefix="/api/uploads", tags=["File Uploads"])

# Uploaded images are served from the media root
app.mount("/uploads", StaticFiles(directory=settings.MEDIA_ROOT, check_dir=False), name="uploads")

# Create database tables on startup
@app.on_event("startup")
async def startup_event():
    """Initialize the application on startup."""
    logger.info("Starting up Cascais Directory API...")
    create_tables()
    logger.info("Database tables created successfully")

@app.get("/")
def root():
    """Root endpoint for API health check."""
    return {
        "message": "Welcome to Cascais Directory API",
        "status": "healthy",
        "version": "1.0.0"
    }

@app.get("/health")
def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "environment": settings.ENVIRONMENT,
        "timestamp": datetime.utcnow().isoformat()
    }

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
