"""Blender Building Assistant FastAPI Application"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from dotenv import load_dotenv
load_dotenv()  # Load .env file

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .routes import generate, health

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator:
    """Application lifespan handler."""
    logger.info("Starting Blender Building Assistant API...")
    yield
    logger.info("Shutting down Blender Building Assistant API...")


app = FastAPI(
    title="Blender Building Assistant",
    description="Generate Blender Python building scripts from natural language",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS middleware for frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        "http://localhost:3000",
        "http://localhost:3001",
        "http://127.0.0.1:3000",
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(health.router, tags=["Health"])
app.include_router(generate.router, prefix="/api/generate", tags=["Generate"])


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "name": "Blender Building Assistant",
        "version": "0.1.0",
        "status": "running",
        "docs": "/docs",
    }
