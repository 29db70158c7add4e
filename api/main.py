"""
prefixeval API - FastAPI Application

Run with: uvicorn api.main:app --reload
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from prefixeval import __version__
from api.routes.evaluate import router as evaluate_router
from api.routes.operators import router as operators_router
from api.routes.health import router as health_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    logger.info("prefixeval API starting...")
    yield
    logger.info("prefixeval API shutting down...")


app = FastAPI(
    title="prefixeval API",
    description="Evaluate prefix expressions against the operator registry",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health_router, tags=["Health"])
app.include_router(evaluate_router, prefix="/api/v1", tags=["Evaluation"])
app.include_router(operators_router, prefix="/api/v1", tags=["Operators"])


@app.get("/")
async def root():
    """API root endpoint."""
    return {
        "name": "prefixeval API",
        "version": __version__,
        "docs": "/docs",
        "health": "/health",
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
