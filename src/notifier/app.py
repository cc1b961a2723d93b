"""
Notifier Application

FastAPI application exposing the notifier bridges over HTTP.
"""
import logging
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

from fastapi import FastAPI

from .config import Config
from .services.notifier_service import close_notifier_service, init_notifier_service
from .routes import health_router, messages_router

# Configure logging
logging.basicConfig(
    level=getattr(logging, Config.LOG_LEVEL, logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger("notifier.app")

# Suppress noisy loggers
logging.getLogger("httpx").setLevel(logging.WARNING)

# Create FastAPI application
app = FastAPI(
    title="Notifier API",
    description="SMS and chat notification bridges (GatewayApi, Telegram)",
    version="0.1.0"
)


@app.on_event("startup")
async def startup_event():
    """Build transports on startup"""
    logger.info("Starting Notifier...")

    try:
        init_notifier_service()
        logger.info("Notifier started successfully")
    except Exception as e:
        logger.error(f"Failed to start Notifier: {e}")
        raise


@app.on_event("shutdown")
async def shutdown_event():
    """Cleanup on shutdown"""
    logger.info("Shutting down Notifier...")
    close_notifier_service()
    logger.info("Notifier shutdown complete")


# Include routers
app.include_router(health_router, prefix="/api/v1", tags=["health"])
app.include_router(messages_router, prefix="/api/v1", tags=["messages"])


@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "service": "Notifier",
        "version": "0.1.0",
        "status": "running"
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        app,
        host=Config.API_HOST,
        port=Config.API_PORT
    )
