"""
Notifier Runner

Entry point for running the notifier API.
"""
import uvicorn
import logging

from .config import Config

# Configure logging
logging.basicConfig(
    level=getattr(logging, Config.LOG_LEVEL, logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger("notifier")


def run():
    """Run the notifier API"""
    logger.info(f"Starting Notifier on {Config.API_HOST}:{Config.API_PORT}")

    uvicorn.run(
        "notifier.app:app",
        host=Config.API_HOST,
        port=Config.API_PORT,
        reload=Config.DEBUG
    )


if __name__ == "__main__":
    run()
