from sqlalchemy import Column, Integer, MetaData
from sqlalchemy.orm import declarative_base

# Deterministic constraint names so Alembic revisions match the models
NAMING_CONVENTION = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}

base = declarative_base(metadata=MetaData(naming_convention=NAMING_CONVENTION))


class BaseModel(base):
    """Abstract base for tables keyed by an auto-incremented integer ``id_key``."""

    __abstract__ = True

    id_key = Column(Integer, primary_key=True, autoincrement=True)
