from fastapi import FastAPI
from model_compare.api.endpoints import compare
from model_compare.config import settings
from contextlib import asynccontextmanager
import logging

# Configure logging
logging.basicConfig(level=settings.LOG_LEVEL,  # Set LOG_LEVEL=DEBUG in .env for response previews
                    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Handles application startup and shutdown events.
    """
    logger.info("API is starting up...")
    yield
    logger.info("API is shutting down...")


app = FastAPI(
    title="Model Response Comparison API",
    description="Sends one prompt to two language-model endpoints and compares the replies.",
    version="1.0.0",
    lifespan=lifespan
)

# Include all routes from the compare endpoint module
app.include_router(compare.router, prefix="/api/v1")


@app.get("/")
def health_check():
    """A simple health check endpoint."""
    return {"status": "ok"}
