"""
Creator Dashboard - Backend API
Seller revenue statistics for the admin panel
"""
import logging
import time
from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Load environment variables
env_path = Path(__file__).parent.parent / '.env'
load_dotenv(env_path)

from creator_dashboard.api import dashboard
from creator_dashboard.core.config import settings
from creator_dashboard.core.database import check_database

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

# Create FastAPI application
app = FastAPI(
    title=settings.API_TITLE,
    version=settings.API_VERSION,
    description=settings.API_DESCRIPTION,
    debug=settings.API_DEBUG,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_allowed_origins(),
    allow_credentials=True,
    allow_methods=["GET", "OPTIONS"],
    allow_headers=["*"],
)

# Include API routers
app.include_router(dashboard.router, prefix="/api/v1/dashboard", tags=["Dashboard"])


@app.get("/")
async def root():
    """Root endpoint - API status"""
    return {
        "message": settings.API_TITLE,
        "status": "online",
        "version": settings.API_VERSION,
        "docs": "/docs",
    }


@app.get("/health")
async def health():
    """Health check endpoint - tests database connectivity"""
    start_time = time.time()
    database = check_database()
    total_latency_ms = round((time.time() - start_time) * 1000, 2)

    return {
        "status": "healthy" if database["status"] == "connected" else "degraded",
        "service": "creator-dashboard-api",
        "version": settings.API_VERSION,
        "database": database,
        "total_latency_ms": total_latency_ms
    }
