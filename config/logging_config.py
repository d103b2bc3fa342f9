import logging
import os

LOG_FORMAT = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"


def setup_logging(level: str = None):
    """Configure the root logger from LOG_LEVEL (default INFO)."""
    level_name = (level or os.getenv('LOG_LEVEL', 'INFO')).upper()
    logging.basicConfig(level=getattr(logging, level_name, logging.INFO), format=LOG_FORMAT)
    # SQLAlchemy's engine logger is controlled by DB_ECHO instead
    logging.getLogger('sqlalchemy.engine').setLevel(logging.WARNING)
