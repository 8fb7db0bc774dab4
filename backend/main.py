import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from app.config import settings, get_cors_origins
from app.database import engine, Base
from app.errors import register_exception_handlers
from app.routers import (
    auth_router,
    assignments_router,
    classes_router,
    dashboard_router,
    attachments_router,
    availability_router,
    cron_router,
    health_router,
    tutor_router
)

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)
logger = logging.getLogger("assignment_copilot")


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Create database tables
    Base.metadata.create_all(bind=engine)
    logger.info("%s %s started (%s)", settings.APP_NAME, settings.APP_VERSION, settings.NODE_ENV)
    yield


# Create FastAPI app
app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Track coursework, classes and availability, and talk to an AI tutor",
    lifespan=lifespan
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=get_cors_origins(),
    allow_origin_regex=r"^http://localhost:\d+$|^http://127\.0\.0\.1:\d+$",
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Include routers
app.include_router(auth_router)
app.include_router(assignments_router)
app.include_router(classes_router)
app.include_router(dashboard_router)
app.include_router(attachments_router)
app.include_router(availability_router)
app.include_router(cron_router)
app.include_router(health_router)
app.include_router(tutor_router)


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": "Welcome to the Assignment Copilot API",
        "version": settings.APP_VERSION,
        "docs": "/docs"
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=True)
