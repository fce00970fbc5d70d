from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException
from contextlib import asynccontextmanager
import logging

from app.core.database import init_db, close_db
from app.core.config import settings
from app.core.exceptions import (
    http_exception_handler,
    validation_exception_handler,
    catch_unhandled_errors,
)
from app.core.logging_config import setup_logging
from app.modules.users.router import router as users_router
from app.modules.loans.router import router as loans_router
from app.modules.chat.router import router as chat_router
from app.modules.chat.services import ConnectionManager

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown events"""
    # Startup
    setup_logging()
    await init_db()
    logger.info(f"{settings.APP_NAME} started ({settings.ENVIRONMENT})")

    yield

    # Shutdown
    await close_db()


app = FastAPI(
    title=settings.APP_NAME,
    description="Peer-to-peer lending: accounts, loan offers and room chat",
    version=settings.APP_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan
)

# Room membership for the chat socket, one registry per process
app.state.chat_manager = ConnectionManager()

# Unexpected errors become 500s inside the CORS layer
app.middleware("http")(catch_unhandled_errors)

# CORS Configuration
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
    allow_methods=["GET", "POST", "PUT", "DELETE"],
    allow_headers=["*"],
)

# Error bodies are always {"message": ...}
app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)

# Include routers
app.include_router(users_router)
app.include_router(loans_router)
app.include_router(chat_router)


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {
        "status": "ok",
        "version": settings.APP_VERSION,
        "environment": settings.ENVIRONMENT
    }


@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "message": f"Welcome to the {settings.APP_NAME}",
        "version": settings.APP_VERSION,
        "docs": "/docs"
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())
