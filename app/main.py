import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from . import models  # noqa: F401  (registers tables on Base.metadata)
from .config import ALLOWED_ORIGINS, APP_VERSION
from .database import Base, engine, get_db
from .domain.analytics.router import router as analytics_router
from .domain.bookings.router import router as bookings_router
from .domain.notifications.router import router as notifications_router
from .domain.payments.router import router as payments_router
from .domain.pets.router import router as pets_router
from .domain.reviews.router import router as reviews_router
from .domain.search.router import router as search_router
from .domain.sessions.router import router as sessions_router
from .domain.users.router import router as users_router
from .metrics import BusinessMetrics, get_metrics

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

# Reduce verbosity of third-party libraries
logging.getLogger("httpx").setLevel(logging.WARNING)
logging.getLogger("httpcore").setLevel(logging.WARNING)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Application starting up...")
    try:
        Base.metadata.create_all(bind=engine, checkfirst=True)
        logger.info("Database tables created successfully")
    except Exception as e:
        # Ignore "already exists" errors from race conditions between workers
        error_msg = str(e)
        if "already exists" in error_msg or "duplicate key" in error_msg:
            logger.info("Database tables already exist (created by another worker)")
        else:
            logger.error(f"Failed to create database tables: {e}")

    yield
    app.state.metrics.reset()
    logger.info("Application shutting down...")


app = FastAPI(title="PetSitting API", version=APP_VERSION, lifespan=lifespan)
app.state.metrics = BusinessMetrics()


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.warning(f"Validation error for {request.url.path}: {exc.errors()}")
    return JSONResponse(status_code=422, content={"detail": exc.errors()})


@app.exception_handler(SQLAlchemyError)
async def database_exception_handler(request: Request, exc: SQLAlchemyError):
    logger.error(f"❌ Database error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(users_router)
app.include_router(pets_router)
app.include_router(bookings_router)
app.include_router(payments_router)
app.include_router(reviews_router)
app.include_router(notifications_router)
app.include_router(sessions_router)
app.include_router(analytics_router)
app.include_router(search_router)


@app.get("/")
def root():
    return {"message": "PetSitting API is running"}


@app.get("/health")
def health(db: Session = Depends(get_db)):
    """Liveness plus a database round-trip"""
    try:
        db.execute(text("SELECT 1"))
        database = "connected"
    except SQLAlchemyError as e:
        logger.error(f"❌ Health check database ping failed: {e}")
        database = "disconnected"

    return {
        "status": "healthy" if database == "connected" else "unhealthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "services": {"database": database},
        "version": APP_VERSION,
    }


@app.get("/metrics/business")
def business_metrics(metrics: BusinessMetrics = Depends(get_metrics)):
    return metrics.snapshot()
