from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from luct_reports.config import Settings, settings as default_settings
from luct_reports.dependencies import get_database
from luct_reports.errors import register_error_handlers
from luct_reports.extensions import Database
from luct_reports.routers.auth.routes import router as auth_router
from luct_reports.routers.classes.routes import router as classes_router
from luct_reports.routers.courses.routes import router as courses_router
from luct_reports.routers.dashboards.routes import router as dashboards_router
from luct_reports.routers.enrollments.routes import router as enrollments_router
from luct_reports.routers.faculties.routes import router as faculties_router
from luct_reports.routers.grades.routes import router as grades_router
from luct_reports.routers.ratings.routes import router as ratings_router
from luct_reports.routers.reports.routes import router as reports_router
from luct_reports.routers.users.routes import router as users_router
from luct_reports.seeds import seed_faculties
from luct_reports.utils import success

log = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    db: Database = app.state.db
    db.create_all()
    if app.state.settings.SEED_DEFAULTS:
        with db.session() as session:
            seed_faculties(session)
    log.info("%s started (%s)", app.state.settings.APP_NAME, app.state.settings.ENVIRONMENT)
    try:
        yield
    finally:
        db.dispose()


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or default_settings
    configure_logging(settings.LOG_LEVEL)

    app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)
    app.state.settings = settings
    app.state.db = Database(
        settings.DATABASE_URL,
        pool_size=settings.DB_POOL_SIZE,
        pool_timeout=settings.DB_POOL_TIMEOUT,
        echo=settings.DB_ECHO,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_error_handlers(app, expose_errors=not settings.is_production)

    for router in (
        auth_router,
        faculties_router,
        users_router,
        courses_router,
        classes_router,
        enrollments_router,
        reports_router,
        ratings_router,
        grades_router,
        dashboards_router,
    ):
        app.include_router(router)

    @app.get("/", response_class=PlainTextResponse)
    def index():
        return "LUCT Reporting System API is running"

    @app.get("/api/health")
    def health(db: Database = Depends(get_database)):
        return success(status="ok", database=db.ping())

    return app
