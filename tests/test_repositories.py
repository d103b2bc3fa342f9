"""Unit tests for repository layer."""
from decimal import Decimal
from unittest.mock import Mock

import pytest
from sqlalchemy.exc import OperationalError

from models.category import CategoryModel
from models.product import ProductModel
from repositories.category_repository import CategoryRepository, CategoryStore
from repositories.exceptions import ConstraintViolationError, PersistenceError, StorageUnavailableError
from repositories.product_repository import ProductRepository


class TestCategoryStore:
    """Tests for the CategoryStore contract."""

    def test_store_is_abstract(self):
        with pytest.raises(TypeError):
            CategoryStore()

    def test_repository_implements_store(self, db_session_factory):
        assert isinstance(CategoryRepository(db_session_factory()), CategoryStore)


class TestCategoryRepository:
    """Tests for CategoryRepository."""

    def test_save_generates_key(self, db_session_factory):
        """Test saving a category without a key."""
        db_session = db_session_factory()
        repo = CategoryRepository(db_session)

        saved = repo.save(CategoryModel(name="Electronics"))
        db_session.commit()

        assert saved.id_key is not None
        assert 0 <= saved.id_key <= 255

    def test_save_then_find_round_trip(self, db_session_factory):
        """Test that a saved category reads back equal from a new session."""
        db_session = db_session_factory()
        saved = CategoryRepository(db_session).save(CategoryModel(name="Books"))
        db_session.commit()
        key = saved.id_key

        other_session = db_session_factory()
        found = CategoryRepository(other_session).find_by_id(key)

        assert found is not None
        assert (found.id_key, found.name) == (key, "Books")

    def test_save_with_explicit_key(self, db_session_factory):
        """Test inserting a category with a caller-chosen key."""
        db_session = db_session_factory()
        repo = CategoryRepository(db_session)

        saved = repo.save(CategoryModel(id_key=42, name="Garden"))
        db_session.commit()

        assert saved.id_key == 42
        assert repo.find_by_id(42).name == "Garden"

    def test_save_existing_key_updates(self, db_session_factory):
        """Test that saving with an existing key updates the record."""
        db_session = db_session_factory()
        repo = CategoryRepository(db_session)
        saved = repo.save(CategoryModel(name="Electronics"))
        db_session.commit()

        updated = repo.save(CategoryModel(id_key=saved.id_key, name="Updated Electronics"))
        db_session.commit()

        assert updated.id_key == saved.id_key
        assert repo.find_by_id(saved.id_key).name == "Updated Electronics"
        assert len(list(repo.find_all())) == 1

    def test_find_by_id_absent_returns_none(self, db_session_factory):
        """Test that a missing key is a normal empty result."""
        repo = CategoryRepository(db_session_factory())

        assert repo.find_by_id(99) is None

    def test_find_all_is_lazy_and_ordered(self, db_session_factory):
        """Test that find_all yields every category ordered by key."""
        db_session = db_session_factory()
        repo = CategoryRepository(db_session)
        repo.save(CategoryModel(id_key=7, name="Toys"))
        repo.save(CategoryModel(id_key=3, name="Books"))
        db_session.commit()

        result = repo.find_all()

        assert iter(result) is result
        assert [c.name for c in result] == ["Books", "Toys"]

    def test_find_all_is_not_restartable(self, db_session_factory):
        """Test that an exhausted find_all iterator stays exhausted."""
        db_session = db_session_factory()
        repo = CategoryRepository(db_session)
        repo.save(CategoryModel(name="Books"))
        db_session.commit()

        result = repo.find_all()
        assert len(list(result)) == 1
        assert list(result) == []

    def test_find_all_empty(self, db_session_factory):
        repo = CategoryRepository(db_session_factory())

        assert list(repo.find_all()) == []

    def test_delete_by_id(self, db_session_factory):
        """Test removing a category."""
        db_session = db_session_factory()
        repo = CategoryRepository(db_session)
        saved = repo.save(CategoryModel(name="Electronics"))
        db_session.commit()

        repo.delete_by_id(saved.id_key)
        db_session.commit()

        assert repo.find_by_id(saved.id_key) is None

    def test_delete_twice_is_idempotent(self, db_session_factory):
        """Test that deleting the same key twice does not fail."""
        db_session = db_session_factory()
        repo = CategoryRepository(db_session)
        saved = repo.save(CategoryModel(name="Electronics"))
        db_session.commit()

        repo.delete_by_id(saved.id_key)
        repo.delete_by_id(saved.id_key)
        db_session.commit()

        assert repo.find_by_id(saved.id_key) is None

    def test_delete_absent_key(self, db_session_factory):
        """Test removing a non-existent category."""
        repo = CategoryRepository(db_session_factory())

        assert repo.delete_by_id(123) is None

    def test_delete_category_detaches_products(self, seeded_db):
        """Test that products outlive their deleted category."""
        session = seeded_db["db_session"]
        repo = CategoryRepository(session)
        category = seeded_db["category"]
        product = seeded_db["product"]

        repo.delete_by_id(category.id_key)
        session.commit()

        assert session.get(ProductModel, product.id_key).category_id is None

    def test_save_key_out_of_range(self, db_session_factory):
        """Test that keys beyond one byte surface as constraint violations."""
        repo = CategoryRepository(db_session_factory())

        with pytest.raises(ConstraintViolationError):
            repo.save(CategoryModel(id_key=256, name="Overflow"))

    def test_save_duplicate_name(self, db_session_factory):
        """Test that the unique name constraint surfaces as PersistenceError."""
        db_session = db_session_factory()
        repo = CategoryRepository(db_session)
        repo.save(CategoryModel(name="Books"))

        with pytest.raises(PersistenceError):
            repo.save(CategoryModel(name="Books"))

    def test_connection_loss_is_storage_unavailable(self):
        """Test that an invalidated connection maps to StorageUnavailableError."""
        session = Mock()
        session.get.side_effect = OperationalError(
            "SELECT", {}, Exception("server closed the connection"), connection_invalidated=True
        )
        repo = CategoryRepository(session)

        with pytest.raises(StorageUnavailableError):
            repo.find_by_id(1)
        session.rollback.assert_called_once()

    def test_other_database_errors_are_persistence_errors(self):
        session = Mock()
        session.get.side_effect = OperationalError("SELECT", {}, Exception("disk I/O error"))
        repo = CategoryRepository(session)

        with pytest.raises(PersistenceError) as excinfo:
            repo.find_by_id(1)
        assert not isinstance(excinfo.value, StorageUnavailableError)


class TestProductRepository:
    """Tests for ProductRepository."""

    def test_find_product(self, seeded_db):
        """Test finding a product by ID."""
        session = seeded_db["db_session"]
        product = seeded_db["product"]

        result = ProductRepository(session).find_by_id(product.id_key)

        assert result.name == "Widget"
        assert result.price == Decimal("9.99")

    def test_find_product_absent(self, db_session_factory):
        assert ProductRepository(db_session_factory()).find_by_id(999) is None
