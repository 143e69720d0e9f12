"""
SecondChance Auth API - Main Application

Credential service of the secondChance backend: registration, login and
profile updates backed by MongoDB.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from secondchance.config import settings
from secondchance.database import database
from secondchance.auth import auth_router
from secondchance.auth.hashing import PasswordHasher
from secondchance.auth.repository import MongoUserRepository
from secondchance.auth.tokens import TokenIssuer
from secondchance.security import validate_security_config

import logging

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown events."""
    # Startup: a missing signing secret aborts here
    validate_security_config()
    app.state.token_issuer = TokenIssuer.from_settings(settings)
    app.state.password_hasher = PasswordHasher(rounds=settings.BCRYPT_ROUNDS)

    # Startup: Connect to MongoDB and make sure emails stay unique
    await database.connect()
    await MongoUserRepository(database.get_database()).ensure_indexes()

    yield

    # Shutdown: Disconnect from MongoDB
    await database.disconnect()


app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Registration, login and profile updates for secondChance",
    docs_url="/docs" if settings.DEBUG else None,
    redoc_url="/redoc" if settings.DEBUG else None,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "OPTIONS"],
    allow_headers=["Authorization", "Content-Type", "Email"],
)


@app.get("/health", tags=["Health"])
async def health_check() -> dict:
    """
    Health check endpoint.

    Returns the service status and version information.
    """
    return {
        "status": "healthy",
        "service": settings.APP_NAME,
        "version": settings.APP_VERSION,
    }


@app.get("/", tags=["Root"])
async def root() -> dict:
    """Root endpoint with service information."""
    return {
        "service": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "docs": "/docs" if settings.DEBUG else "disabled",
    }


app.include_router(auth_router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("secondchance.main:app", host=settings.HOST, port=settings.PORT)
