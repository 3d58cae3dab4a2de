"""
PostgreSQL connection helpers

Repositories open one short-lived psycopg2 connection per query and close it
in a ``finally`` block. Connections use RealDictCursor so rows come back as
dictionaries ready to feed the pydantic domain models.
"""
import logging
import time

import psycopg2
from psycopg2.extras import RealDictCursor

from .config import settings

logger = logging.getLogger(__name__)


def get_db_connection():
    """
    Get a direct psycopg2 database connection (returns tuples)

    Returns:
        psycopg2 connection object

    Raises:
        RuntimeError if DATABASE_URL is not configured
    """
    database_url = settings.DATABASE_URL
    if not database_url:
        raise RuntimeError("DATABASE_URL not configured")

    return psycopg2.connect(database_url)


def get_db_connection_dict():
    """
    Get a database connection with RealDictCursor (returns dictionaries)

    Example:
        conn = get_db_connection_dict()
        cursor = conn.cursor()
        cursor.execute("SELECT * FROM product_orders")
        results = cursor.fetchall()  # Returns list of dicts
        cursor.close()
        conn.close()
    """
    database_url = settings.DATABASE_URL
    if not database_url:
        raise RuntimeError("DATABASE_URL not configured")

    return psycopg2.connect(database_url, cursor_factory=RealDictCursor)


def check_database() -> dict:
    """
    Run ``SELECT 1`` and report connectivity and latency.

    Used by the /health endpoint; never raises.
    """
    start = time.time()
    try:
        conn = get_db_connection()
        try:
            cursor = conn.cursor()
            cursor.execute("SELECT 1")
            cursor.fetchone()
            cursor.close()
        finally:
            conn.close()
    except (psycopg2.Error, RuntimeError) as e:
        logger.warning(f"Database health check failed: {e}")
        return {"status": "disconnected", "latency_ms": None, "error": str(e)}

    return {
        "status": "connected",
        "latency_ms": round((time.time() - start) * 1000, 2),
        "error": None,
    }
