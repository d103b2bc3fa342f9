"""
Production server runner for the store API.

Applies pending Alembic migrations, then starts Uvicorn with several workers.
"""
import logging
import multiprocessing
import os
import subprocess
import sys

import uvicorn

from config.logging_config import setup_logging

logger = logging.getLogger("run_production")

# Formula: (2 x $num_cores) + 1, kept between 4 and 8 workers
CPU_COUNT = multiprocessing.cpu_count()
DEFAULT_WORKERS = min(max(2 * CPU_COUNT + 1, 4), 8)

WORKERS = int(os.getenv('UVICORN_WORKERS', DEFAULT_WORKERS))
HOST = os.getenv('API_HOST', '0.0.0.0')
PORT = int(os.getenv('API_PORT', '8000'))
RELOAD = os.getenv('RELOAD', 'false').lower() == 'true'

BACKLOG = int(os.getenv('BACKLOG', '2048'))
TIMEOUT_KEEP_ALIVE = int(os.getenv('TIMEOUT_KEEP_ALIVE', '5'))
LIMIT_CONCURRENCY = int(os.getenv('LIMIT_CONCURRENCY', '1000'))
LIMIT_MAX_REQUESTS = int(os.getenv('LIMIT_MAX_REQUESTS', '10000'))


def run_migrations():
    """Run `alembic upgrade head` with the interpreter of the current environment."""
    logger.info("Running database migrations...")
    subprocess.run([sys.executable, "-m", "alembic", "upgrade", "head"], check=True)
    logger.info("Database migrations applied")


if __name__ == "__main__":
    setup_logging()
    try:
        run_migrations()
    except subprocess.CalledProcessError as e:
        logger.error("Error applying database migrations: %s", e)
        sys.exit(1)

    logger.info(
        "Starting store API on %s:%s with %d workers (CPU cores: %d, backlog: %d, max concurrency: %d)",
        HOST, PORT, WORKERS, CPU_COUNT, BACKLOG, LIMIT_CONCURRENCY,
    )

    uvicorn.run(
        "main:create_fastapi_app",
        factory=True,
        host=HOST,
        port=PORT,
        workers=WORKERS,
        reload=RELOAD,
        backlog=BACKLOG,
        timeout_keep_alive=TIMEOUT_KEEP_ALIVE,
        limit_concurrency=LIMIT_CONCURRENCY,
        limit_max_requests=LIMIT_MAX_REQUESTS,
        log_level="info",
        access_log=True,
    )
