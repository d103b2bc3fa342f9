"""Category service: pagination, not-found handling and transaction boundaries."""
import logging
from itertools import islice
from typing import List

from sqlalchemy.orm import Session

from models.category import CategoryModel
from repositories.category_repository import CategoryRepository, CategoryStore
from repositories.exceptions import InstanceNotFoundError, translate_errors
from schemas.category_schema import CategorySchema

logger = logging.getLogger(__name__)


class CategoryService:

    def __init__(self, db: Session, repository: CategoryStore = None):
        self.db = db
        self.repository = repository or CategoryRepository(db)

    def _commit(self, action: str):
        with translate_errors(self.db, action):
            self.db.commit()

    def get_all(self, skip: int = 0, limit: int = 100) -> List[CategorySchema]:
        categories = islice(self.repository.find_all(), skip, skip + limit)
        return [CategorySchema.model_validate(c) for c in categories]

    def get_one(self, id_key: int) -> CategorySchema:
        category = self.repository.find_by_id(id_key)
        if category is None:
            raise InstanceNotFoundError(f"Category with id {id_key} not found")
        return CategorySchema.model_validate(category)

    def save(self, schema: CategorySchema) -> CategorySchema:
        category = self.repository.save(CategoryModel(**schema.model_dump(exclude_unset=True)))
        self._commit("saving category")
        logger.info("Saved category %s (%s)", category.id_key, category.name)
        return CategorySchema.model_validate(category)

    def update(self, id_key: int, schema: CategorySchema) -> CategorySchema:
        category = self.repository.find_by_id(id_key)
        if category is None:
            raise InstanceNotFoundError(f"Category with id {id_key} not found")

        for field, value in schema.model_dump(exclude={"id_key"}, exclude_unset=True).items():
            setattr(category, field, value)
        category = self.repository.save(category)
        self._commit(f"updating category {id_key}")
        logger.info("Updated category %s", id_key)
        return CategorySchema.model_validate(category)

    def delete(self, id_key: int) -> None:
        """Delete a category. Deleting an absent key succeeds silently."""
        self.repository.delete_by_id(id_key)
        self._commit(f"deleting category {id_key}")
        logger.info("Deleted category %s", id_key)
