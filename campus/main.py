# campus/main.py
"""
FastAPI application entry point.
Includes request logging middleware, error handlers, and all routers.
"""

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from campus.routers import buildings, health, room_status, rooms
from campus.database import create_tables
from campus.config import settings
from campus.exceptions import CampusError
from campus.utils.logger import get_logger
import time

logger = get_logger(__name__)

app = FastAPI(
    title="Campus Rooms API",
    description="Rooms, their ownership metadata and the room status audit trail.",
    version="2.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ── Request Timing Middleware ────────────────────────────────────────────────
@app.middleware("http")
async def log_requests(request: Request, call_next):
    start = time.time()
    response = await call_next(request)
    duration = round((time.time() - start) * 1000, 2)
    logger.debug(f"{request.method} {request.url.path} → {response.status_code} ({duration}ms)")
    return response


# ── Exception Handlers ───────────────────────────────────────────────────────
@app.exception_handler(CampusError)
async def campus_error_handler(request: Request, exc: CampusError):
    logger.info(f"{request.method} {request.url.path} → {exc.status_code}: {exc.detail}")
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled exception on {request.url.path}: {exc}", exc_info=True)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


# ── Routers ──────────────────────────────────────────────────────────────────
# room_status before rooms: /room/status must not be captured by /room/{id}
app.include_router(room_status.router, prefix=settings.API_PREFIX, tags=["Room Status"])
app.include_router(rooms.router,       prefix=settings.API_PREFIX, tags=["Rooms"])
app.include_router(buildings.router,   prefix=settings.API_PREFIX, tags=["Buildings"])
app.include_router(health.router,      prefix=settings.API_PREFIX, tags=["Health"])


# ── Startup ───────────────────────────────────────────────────────────────────
@app.on_event("startup")
async def startup():
    logger.info("Campus Rooms backend starting up...")
    if settings.CREATE_TABLES_ON_STARTUP:
        create_tables()
        logger.info("Database tables ready")
    logger.info(f"Listening on http://{settings.BACKEND_IP}:{settings.BACKEND_PORT}{settings.API_PREFIX}")


@app.on_event("shutdown")
async def shutdown():
    logger.info("Campus Rooms backend shutting down...")
