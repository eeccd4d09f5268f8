"""Main FastAPI application entry point."""
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import settings
from app.routes import ai_chat, auth, profile
from core.database.db import init_db
from core.utils.logger import logger


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create tables and log configuration on startup."""
    logger.info("Fruitie Marketplace API Starting...")
    init_db()
    logger.info(f"Database: {settings.DATABASE_URL.split('://')[0]}")
    logger.info(f"OpenAI: {'Configured' if settings.OPENAI_API_KEY else 'Not Configured'}")
    logger.info(f"Azure OpenAI: {'Configured' if settings.AZURE_OPENAI_ENDPOINT and settings.AZURE_OPENAI_API_KEY else 'Not Configured'}")
    yield
    logger.info("Fruitie Marketplace API stopped")


app = FastAPI(
    title=settings.API_TITLE,
    version=settings.API_VERSION,
    debug=settings.DEBUG,
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(auth.router, prefix="/api/auth", tags=["Authentication"])
app.include_router(profile.router, prefix="/api/profile", tags=["Profile"])
app.include_router(ai_chat.router, prefix="/api/ai-chat", tags=["AI Chat"])


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": "Fruitie Marketplace API",
        "version": settings.API_VERSION,
        "status": "running"
    }


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
