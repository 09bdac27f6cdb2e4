from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import text

from app.analytics.routes import analytics
from app.attendance.routes import attendance
from app.core.config import settings
from app.core.exceptions import register_exception_handlers
from app.core.log_config import RequestLoggingMiddleware, setup_logging
from app.db.session import SessionLocal

setup_logging()
logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    logger.info("application_starting", project=settings.PROJECT_NAME)
    yield
    logger.info("application_stopped")


app = FastAPI(
    title=settings.PROJECT_NAME,
    debug=settings.DEBUG,
    lifespan=lifespan,
    description="Attendance tracking backend with period-based attendance analytics",
    version="1.0.0",
)

register_exception_handlers(app)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(RequestLoggingMiddleware)

app.include_router(
    analytics.router, prefix=f"{settings.API_V1_PREFIX}/admin", tags=["admin-analytics"]
)
app.include_router(
    attendance.router, prefix=f"{settings.API_V1_PREFIX}/admin", tags=["admin-attendance"]
)


@app.get("/")
async def root() -> dict[str, str]:
    return {"message": settings.PROJECT_NAME, "version": "1.0.0", "status": "running"}


@app.get("/health")
async def health_check() -> dict[str, str]:
    db_status = "unknown"

    try:
        db = SessionLocal()
        try:
            db.execute(text("SELECT 1"))
            db_status = "healthy"
        finally:
            db.close()
    except Exception:
        logger.exception("health_check_database_failed")
        db_status = "unhealthy"

    overall = "healthy" if db_status == "healthy" else "degraded"
    return {"status": overall, "database": db_status}
