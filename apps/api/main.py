"""
FastAPI application entry point.

Sets up logging, error tracking, middleware, the JSON error handlers and
every router of the wellness API.
"""
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from routers import (
    activities,
    admin_ai,
    admin_categories,
    admin_content,
    admin_subscriptions,
    dashboard,
    goals,
    insights,
    journal,
    meditation,
    nutrition,
    preferences,
    quotes,
    renewal,
    sleep_tools,
    subscriptions,
    themes,
    uploads,
    visuals,
    wellness_enrollments,
    wellness_programs,
    workouts,
)
from core.config import settings
from core.database import check_db_connection
from core.logging import bind_request_id, reset_request_id, setup_logging
from core.exceptions import UpstreamFailure, register_exception_handlers
from core.security_headers import SecurityHeadersMiddleware
import logging
import time
import uuid

import sentry_sdk
from sentry_sdk.integrations.fastapi import FastApiIntegration
from sentry_sdk.integrations.sqlalchemy import SqlalchemyIntegration

# Setup logging first
setup_logging()
logger = logging.getLogger(__name__)


def _filter_sensitive_data(event):
    """Filter sensitive data before sending to Sentry."""
    if "request" in event and "headers" in event["request"]:
        headers = event["request"]["headers"]
        if isinstance(headers, dict):
            headers.pop("authorization", None)
            headers.pop("cookie", None)
    return event


# Error tracking is enabled only when a DSN is configured
if settings.SENTRY_DSN:
    sentry_sdk.init(
        dsn=settings.SENTRY_DSN,
        environment=settings.ENVIRONMENT,
        traces_sample_rate=settings.SENTRY_TRACES_SAMPLE_RATE,
        integrations=[
            FastApiIntegration(transaction_style="endpoint"),
            SqlalchemyIntegration(),
        ],
        send_default_pii=False,
        before_send=lambda event, hint: _filter_sensitive_data(event),
    )
    logger.info(f"Sentry initialized for environment: {settings.ENVIRONMENT}")


app = FastAPI(
    title="Wellness Tracker API",
    description="Journal, nutrition, workouts, meditation, goals, wellness programs and themed content",
    version="1.0.0",
    docs_url="/docs" if (settings.DEBUG or settings.EXPOSE_API_DOCS) else None,
    redoc_url="/redoc" if (settings.DEBUG or settings.EXPOSE_API_DOCS) else None,
)

register_exception_handlers(app)


# CORS middleware
# Production: set CORS_ORIGINS env var (comma-separated)
# Development: DEBUG=True allows all origins
if settings.DEBUG:
    allowed_origins = ["*"]
elif settings.CORS_ORIGINS:
    allowed_origins = [origin.strip() for origin in settings.CORS_ORIGINS.split(",")]
else:
    # Expo dev server and local web preview
    allowed_origins = [
        "http://localhost:8081",
        "http://localhost:19006",
        "http://127.0.0.1:8081",
    ]
app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_middleware(SecurityHeadersMiddleware)


# Request logging middleware
@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log each request with its id and timing."""
    request_id = request.headers.get("X-Request-ID") or uuid.uuid4().hex
    token = bind_request_id(request_id)
    start_time = time.time()
    fields = {"method": request.method, "path": request.url.path}

    try:
        response = await call_next(request)
    except Exception as e:
        logger.error(
            f"Request failed: {request.method} {request.url.path}",
            exc_info=True,
            extra={"extra_fields": {**fields, "error": str(e)}},
        )
        raise
    finally:
        reset_request_id(token)

    process_time = time.time() - start_time
    logger.info(
        f"{request.method} {request.url.path} {response.status_code}",
        extra={
            "extra_fields": {
                **fields,
                "request_id": request_id,
                "status_code": response.status_code,
                "process_time_ms": round(process_time * 1000, 2),
            }
        },
    )

    response.headers["X-Request-ID"] = request_id
    response.headers["X-Process-Time"] = str(process_time)
    return response


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Global exception handler for unhandled errors."""
    logger.error(
        f"Unhandled exception: {exc}",
        exc_info=True,
        extra={
            "extra_fields": {
                "method": request.method,
                "path": request.url.path,
            }
        }
    )
    failure = UpstreamFailure()
    return JSONResponse(
        status_code=failure.status_code,
        content={"error": failure.detail, "error_code": failure.error_code},
    )


@app.get("/health")
async def health():
    """
    Health check for load balancers and uptime monitors.

    Returns:
        - 200: database reachable
        - 503: database unavailable
    """
    if not check_db_connection():
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "unhealthy",
                "database": "unavailable",
            }
        )

    return {
        "status": "healthy",
        "timestamp": time.time(),
    }


@app.get("/ping")
async def ping():
    """No dependencies checked; confirms the API is responding."""
    return {"pong": True}


# Include routers
app.include_router(journal.router)
app.include_router(nutrition.router)
app.include_router(workouts.router)
app.include_router(meditation.router)
app.include_router(activities.router)
app.include_router(goals.router)
app.include_router(dashboard.router)
app.include_router(wellness_programs.router)
app.include_router(wellness_enrollments.router)
app.include_router(insights.router)
app.include_router(renewal.router)
app.include_router(sleep_tools.router)
app.include_router(subscriptions.router)
app.include_router(preferences.router)
app.include_router(themes.router)
app.include_router(visuals.router)
app.include_router(admin_content.router)
app.include_router(admin_categories.router)
app.include_router(admin_subscriptions.router)
app.include_router(admin_ai.router)
app.include_router(quotes.router)
app.include_router(uploads.router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.API_RELOAD,
    )
