"""Builds cart-facing product projections."""
from sqlalchemy.orm import Session

from repositories.exceptions import InstanceNotFoundError
from repositories.product_repository import ProductRepository
from schemas.cart_product_dto import CartProductDto


class CartService:

    def __init__(self, db: Session):
        self.db = db
        self.product_repository = ProductRepository(db)

    def get_cart_product(self, product_id: int) -> CartProductDto:
        product = self.product_repository.find_by_id(product_id)
        if product is None:
            raise InstanceNotFoundError(f"Product with id {product_id} not found")
        return CartProductDto.model_validate(product)
