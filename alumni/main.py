import logging
import os
from contextlib import asynccontextmanager

from asyncpg import InterfaceError, PostgresError
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from alumni.api.v1 import routers
from alumni.core.config import settings
from alumni.core.exceptions import AlumniException, StoreFailureException
from alumni.db.session import close_db_pool, connect_db_pool
from alumni.middleware.auth_middleware import AuthMiddleware

logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    await connect_db_pool()
    yield
    await close_db_pool()

app = FastAPI(
    title="Alumni Network API",
    description="Alumni registration, verification, profiles and membership cards",
    version="1.0.0",
    lifespan=lifespan
)

app.add_middleware(AuthMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.FRONTEND_URL],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(routers.router)

os.makedirs(settings.UPLOAD_DIR, exist_ok=True)
app.mount("/uploads", StaticFiles(directory=settings.UPLOAD_DIR), name="uploads")


@app.exception_handler(AlumniException)
async def alumni_exception_handler(request: Request, exc: AlumniException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "message": exc.detail},
        headers=exc.headers,
    )


@app.exception_handler(PostgresError)
@app.exception_handler(InterfaceError)
async def store_failure_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Store failure on %s %s", request.method, request.url.path, exc_info=exc)
    return await alumni_exception_handler(request, StoreFailureException())


@app.get("/")
async def root():
    return {"message": "Welcome to the Alumni Network API"}
