"""Base controller implementation module with FastAPI dependency injection."""
from typing import Any, Callable, Dict, List, Set, Type, Union

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from starlette.responses import Response

from config.database import get_db
from schemas.base_schema import BaseSchema


class BaseControllerImpl:
    """
    Base controller implementation using FastAPI dependency injection.

    Creates the standard CRUD endpoints for one schema. The service built by
    ``service_factory`` must expose get_all, get_one, save, update and delete.
    """

    def __init__(
        self,
        schema: Type[BaseSchema],
        service_factory: Callable[[Session], Any],
        tags: List[str] = None,
        exclude_on_get: Union[Set[str], Dict[str, Any]] = None,
    ):
        """
        Initialize the controller with dependency injection support.

        Args:
            schema: The Pydantic schema class for validation
            service_factory: A callable that creates a service instance given a DB session
            tags: Optional list of tags for API documentation
            exclude_on_get: A set or dict of field names to exclude from the response on get requests
        """
        self.schema = schema
        self.service_factory = service_factory
        self.router = APIRouter(tags=tags or [])
        self.exclude_on_get = exclude_on_get

        self._register_routes()

    def _register_routes(self):
        """Register all CRUD routes with proper dependency injection."""

        @self.router.get(
            "/",
            response_model=List[self.schema],
            status_code=status.HTTP_200_OK,
            response_model_exclude=self.exclude_on_get,
        )
        async def get_all(
            skip: int = Query(0, ge=0),
            limit: int = Query(100, ge=0),
            db: Session = Depends(get_db)
        ):
            """Get all records with pagination."""
            service = self.service_factory(db)
            return service.get_all(skip=skip, limit=limit)

        @self.router.get(
            "/{id_key}",
            response_model=self.schema,
            status_code=status.HTTP_200_OK,
            response_model_exclude=self.exclude_on_get,
        )
        async def get_one(id_key: int, db: Session = Depends(get_db)):
            """Get a single record by its key."""
            service = self.service_factory(db)
            return service.get_one(id_key)

        @self.router.post("/", response_model=self.schema, status_code=status.HTTP_201_CREATED)
        async def create(
            schema_in: self.schema,
            db: Session = Depends(get_db)
        ):
            """Create a new record."""
            service = self.service_factory(db)
            return service.save(schema_in)

        @self.router.put("/{id_key}", response_model=self.schema, status_code=status.HTTP_200_OK)
        async def update(
            id_key: int,
            schema_in: self.schema,
            db: Session = Depends(get_db)
        ):
            """Update an existing record."""
            service = self.service_factory(db)
            return service.update(id_key, schema_in)

        @self.router.delete("/{id_key}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
        async def delete(
            id_key: int,
            db: Session = Depends(get_db)
        ):
            """Delete a record. Deleting a missing record is not an error."""
            service = self.service_factory(db)
            service.delete(id_key)
            return Response(status_code=status.HTTP_204_NO_CONTENT)
