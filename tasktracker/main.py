# tasktracker/main.py
import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import text

from tasktracker.core.config import settings
from tasktracker.core.logging_config import setup_logging
from tasktracker.db.session import engine, prepare_schema

# 라우터
from tasktracker.routers import index, task

setup_logging(settings.log_level.upper())
logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).resolve().parent / "static"


@asynccontextmanager
async def lifespan(app: FastAPI):
    prepare_schema(settings.schema_mode)
    logger.info("Task Tracker started (env=%s)", settings.app_env)
    yield


app = FastAPI(
    title="Task Tracker",
    version=settings.app_version,
    lifespan=lifespan,
)


@app.middleware("http")
async def add_charset_for_json(request: Request, call_next):
    resp = await call_next(request)
    ct = resp.headers.get("content-type", "")
    if ct.startswith("application/json") and "charset" not in ct.lower():
        resp.headers["content-type"] = "application/json; charset=utf-8"
    return resp


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    errors = [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg", "")}
        for err in exc.errors()
    ]
    return JSONResponse(status_code=400, content={"detail": errors})


@app.exception_handler(IntegrityError)
async def integrity_error_handler(request: Request, exc: IntegrityError):
    logger.warning("Constraint violation on %s %s: %s", request.method, request.url.path, exc.orig)
    return JSONResponse(status_code=409, content={"detail": "Constraint violation"})


@app.exception_handler(SQLAlchemyError)
async def database_error_handler(request: Request, exc: SQLAlchemyError):
    logger.error(
        "Database failure on %s %s", request.method, request.url.path, exc_info=exc
    )
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


# 라우터 등록
app.include_router(task.router)
app.include_router(index.router)
app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")


@app.get("/health")
def health_app():
    return {"ok": True}


@app.get("/health/db")
def health_db():
    # Schema management belongs to Alembic / SCHEMA_MODE; this only checks connectivity.
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        return {"ok": True}
    except SQLAlchemyError:
        logger.exception("Database health check failed")
        raise HTTPException(status_code=500, detail="Database connection failed")
