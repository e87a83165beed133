#!/usr/bin/env python3
"""
Affinity Match API - FastAPI Application

Serves compatibility-ranked recommendations plus the like, reject and
respond actions that feed the exclusion list.

Usage:
    uv run python -m web.backend.app

Then open:
    - http://localhost:8080/docs - API Documentation (Swagger UI)
    - http://localhost:8080/redoc - Alternative API Documentation
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException

from core.errors import RecommendationError
from .config import get_config
from .exceptions import (
    ServiceException,
    service_exception_handler,
    recommendation_exception_handler,
    http_exception_handler,
    general_exception_handler
)
from .routers import matches_router

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

config = get_config()


@asynccontextmanager
async def lifespan(app: FastAPI):
    rec = config.recommender
    logger.info(
        f"Recommender: max_workers={rec.max_workers} limit={rec.default_limit}/{rec.max_limit} "
        f"min_score={rec.default_min_score} exclusion_failure_policy={rec.exclusion_failure_policy} "
        f"timeout={rec.timeout_seconds}s"
    )
    yield
    logger.info("Affinity Match API shutting down")


app = FastAPI(
    title="Affinity Match API",
    description="Compatibility-ranked match recommendations",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan
)

# Core errors map to 404/503/500; service errors to 400/404/500
app.add_exception_handler(ServiceException, service_exception_handler)
app.add_exception_handler(RecommendationError, recommendation_exception_handler)
app.add_exception_handler(HTTPException, http_exception_handler)
app.add_exception_handler(Exception, general_exception_handler)

app.include_router(matches_router)


@app.get("/health")
def health_check():
    """Liveness check; does not touch the database."""
    return {"status": "healthy", "service": "affinity-match"}


def main():
    """Run the API server."""
    import uvicorn

    logger.info(f"Starting Affinity Match API on {config.web.host}:{config.web.port}")
    logger.info(f"API Docs: http://{config.web.host}:{config.web.port}/docs")

    uvicorn.run(
        "web.backend.app:app",
        host=config.web.host,
        port=config.web.port,
        reload=False,
        log_level="info"
    )


if __name__ == "__main__":
    main()
