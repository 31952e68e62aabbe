"""BioAge Calculator API - FastAPI application entry point."""
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import get_settings
from .routes import calculator, lead

logger = logging.getLogger(__name__)

settings = get_settings()

app = FastAPI(
    title="BioAge Calculator API",
    description="Biological age scoring and lead capture",
    version="1.0.0",
)

# Configure CORS for frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)

# Include routers
app.include_router(calculator.router)
app.include_router(lead.router)

if settings.leads_db_path is None:
    logger.warning("[LEAD] BIOAGE_LEADS_DB_NAME is empty, leads will only be logged")


@app.get("/health")
async def health_check():
    """Health check endpoint for the API."""
    return {"status": "healthy", "service": "bioage-api"}


if __name__ == "__main__":
    import uvicorn

    logging.basicConfig(level=logging.INFO)
    uvicorn.run(
        "server.bioage_api.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=True,
    )
