"""FastAPI application factory."""
import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from config.logging_config import setup_logging
from controllers import auth_controller, cart_controller
from controllers.category_controller import CategoryController
from repositories.exceptions import ConstraintViolationError, InstanceNotFoundError, PersistenceError
from schemas.login_schema import ValidationError

logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI):
    """Translate domain errors into HTTP responses."""

    @app.exception_handler(ValidationError)
    async def validation_error_handler(request: Request, exc: ValidationError):
        return JSONResponse(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, content={"detail": exc.to_dict()})

    @app.exception_handler(InstanceNotFoundError)
    async def not_found_handler(request: Request, exc: InstanceNotFoundError):
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(exc)})

    @app.exception_handler(PersistenceError)
    async def persistence_error_handler(request: Request, exc: PersistenceError):
        if isinstance(exc, ConstraintViolationError):
            return JSONResponse(status_code=status.HTTP_409_CONFLICT, content={"detail": str(exc)})
        logger.error("Storage failure on %s %s: %s", request.method, request.url.path, exc)
        return JSONResponse(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, content={"detail": str(exc)})


def create_fastapi_app() -> FastAPI:
    setup_logging()

    app = FastAPI(title="Store API", version="1.0.0")

    app.include_router(CategoryController().router, prefix="/categories")
    app.include_router(cart_controller.router, prefix="/cart")
    app.include_router(auth_controller.router, prefix="/auth")

    register_exception_handlers(app)

    @app.get("/health_check")
    async def health_check():
        return {"status": "ok"}

    logger.debug("Application created with %d routes", len(app.routes))
    return app
