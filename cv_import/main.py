import uvicorn
from fastapi import FastAPI
from fastapi.openapi.utils import get_openapi

from cv_import import config
from cv_import.api.routes.parse import router as parse_router
from cv_import.core.rate_limiter import UploadRateLimiter
from cv_import.logger import configure_logging

configure_logging(config.LOG_LEVEL)

app = FastAPI(
    title="CV Import (Resume Parsing Service)",
    description="Turns uploaded PDF/DOCX/TXT resumes into structured candidate profiles for the CV editor",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json"
)

app.state.rate_limiter = UploadRateLimiter(
    max_requests=config.RATE_LIMIT_MAX_REQUESTS,
    window_seconds=config.RATE_LIMIT_WINDOW_SECONDS,
)

app.include_router(parse_router)

@app.get("/", tags=["health"])
def root():
    return {"service": "cv-import", "status": "running"}

@app.get("/health", tags=["health"])
def health():
    return {"status": "ok"}

def custom_openapi():
    """Generate OpenAPI schema with custom settings."""
    if app.openapi_schema:
        return app.openapi_schema
    openapi_schema = get_openapi(
        title="CV Import API",
        version="0.1.0",
        description="Resume upload parsing into an editable candidate profile",
        routes=app.routes,
    )
    app.openapi_schema = openapi_schema
    return app.openapi_schema

app.openapi = custom_openapi


def run():
    """Serve the app with uvicorn on the configured host and port."""
    uvicorn.run(app, host=config.HOST, port=config.PORT, log_level=config.LOG_LEVEL.lower())


if __name__ == "__main__":
    run()
