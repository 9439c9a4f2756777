"""FastAPI application for serving workflow mapper projects."""

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from server.db import init_all
from server.project_db import MAPPER_DB_PATH
from server.project_routes import router as project_router

from dotenv import load_dotenv
load_dotenv()  # load environment variables from .env file

logger = logging.getLogger(__name__)

# CORS origins - configurable via environment variable
# Use comma-separated values for multiple origins, or "*" for all (development only)
CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*").split(",")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialize database tables on startup."""
    init_all()
    logger.info("project store ready at %s", MAPPER_DB_PATH)
    yield


app = FastAPI(
    title="Workflow Mapper API",
    description="API server for workflow mapper projects and their node graphs",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# include routes
app.include_router(project_router, prefix="/api")


@app.get("/")
def root():
    """Health check endpoint."""
    return {
        "status": "ok",
        "version": "0.1.0",
        "endpoints": {
            "projects": "/api/projects",
            "mindmap": "/api/mindmap/{project_id}",
        },
    }


if __name__ == "__main__":
    import uvicorn
    logging.basicConfig(level=logging.INFO)
    uvicorn.run(app, host="0.0.0.0", port=8000)
