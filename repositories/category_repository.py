"""Category data access: the store contract and its SQLAlchemy implementation."""
import logging
from abc import ABC, abstractmethod
from typing import Iterator, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from models.category import CategoryModel
from repositories.exceptions import translate_errors

logger = logging.getLogger(__name__)


class CategoryStore(ABC):
    """Contract for category persistence."""

    @abstractmethod
    def save(self, category: CategoryModel) -> CategoryModel:
        """Insert or update a category and return the persisted record."""

    @abstractmethod
    def find_by_id(self, key: int) -> Optional[CategoryModel]:
        """Return the category with ``key`` or None."""

    @abstractmethod
    def find_all(self) -> Iterator[CategoryModel]:
        """Lazily iterate over every category."""

    @abstractmethod
    def delete_by_id(self, key: int) -> None:
        """Remove the category with ``key``; absent keys are ignored."""


class CategoryRepository(CategoryStore):
    """
    SQLAlchemy-backed category store.

    Writes are flushed, never committed: the caller owns the transaction.
    """

    def __init__(self, session: Session):
        self.session = session

    def save(self, category: CategoryModel) -> CategoryModel:
        with translate_errors(self.session, "saving category"):
            if category.id_key is None:
                self.session.add(category)
            else:
                category = self.session.merge(category)
            self.session.flush()
            self.session.refresh(category)
        return category

    def find_by_id(self, key: int) -> Optional[CategoryModel]:
        with translate_errors(self.session, f"reading category {key}"):
            return self.session.get(CategoryModel, key)

    def find_all(self) -> Iterator[CategoryModel]:
        # Rows are fetched as the caller iterates; the query runs on first next()
        with translate_errors(self.session, "listing categories"):
            result = self.session.scalars(select(CategoryModel).order_by(CategoryModel.id_key))
            try:
                yield from result
            finally:
                result.close()

    def delete_by_id(self, key: int) -> None:
        with translate_errors(self.session, f"deleting category {key}"):
            category = self.session.get(CategoryModel, key)
            if category is None:
                logger.debug("Category %s already absent, nothing to delete", key)
                return
            self.session.delete(category)
            self.session.flush()
