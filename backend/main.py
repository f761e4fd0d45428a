from fastapi import FastAPI, Request, Depends
from contextlib import asynccontextmanager
from sqlalchemy import text
from sqlalchemy.orm import Session
from database import get_db
from init_db import init_database
from api import orders
from config.app_config import LOG_DIR, LOG_LEVEL
from constants import Headers, ServerConfig
from utils.query_counter import count_queries
import logging
from logging.handlers import RotatingFileHandler
import sys

# Configure logging with rotating file handler
LOG_DIR.mkdir(parents=True, exist_ok=True)
LOG_FILE = LOG_DIR / "order-api.log"

log_formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')

# File handler with rotation (10MB per file, keep 5 backups)
file_handler = RotatingFileHandler(
    LOG_FILE,
    maxBytes=10 * 1024 * 1024,  # 10MB
    backupCount=5,
    encoding='utf-8'
)
file_handler.setFormatter(log_formatter)

console_handler = logging.StreamHandler(sys.stdout)
console_handler.setFormatter(log_formatter)

root_logger = logging.getLogger()
root_logger.setLevel(LOG_LEVEL)
root_logger.addHandler(file_handler)
root_logger.addHandler(console_handler)

logger = logging.getLogger(__name__)
logger.info(f"Logging initialized: {LOG_FILE}")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifespan - startup and shutdown"""
    logger.info("Initializing database...")
    init_database()
    logger.info("✅ Order API ready")
    yield
    logger.info("Order API shutting down")


app = FastAPI(
    title="Order API",
    description="Order listings demonstrating N+1 query mitigation strategies",
    version="1.0.0",
    lifespan=lifespan
)


@app.middleware("http")
async def count_sql_statements(request: Request, call_next):
    """Count SQL statements per request and expose the total as a header."""
    with count_queries() as counter:
        response = await call_next(request)
    response.headers[Headers.QUERY_COUNT] = str(counter.count)
    logger.info(f"{request.method} {request.url.path} executed {counter.count} SQL statement(s)")
    return response


app.include_router(orders.router, prefix="/api", tags=["orders"])


@app.get("/api/health")
def health_check(db: Session = Depends(get_db)):
    """Liveness check including database reachability"""
    try:
        db.execute(text("SELECT 1"))
        database = "ok"
    except Exception as e:
        logger.error(f"Health check database probe failed: {e}")
        database = "unavailable"
    return {"status": "healthy" if database == "ok" else "degraded", "database": database}


if __name__ == "__main__":
    import uvicorn

    logger.info(f"🚀 Starting Order API on {ServerConfig.url()}...")
    uvicorn.run(app, host=ServerConfig.HOST, port=ServerConfig.PORT)
