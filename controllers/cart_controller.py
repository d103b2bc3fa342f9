"""Cart read endpoints."""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from config.database import get_db
from schemas.cart_product_dto import CartProductDto
from services.cart_service import CartService

router = APIRouter(tags=["Cart"])


@router.get("/products/{product_id}", response_model=CartProductDto, status_code=status.HTTP_200_OK)
async def get_cart_product(product_id: int, db: Session = Depends(get_db)):
    """Return the cart view (id, name, price) of a product."""
    return CartService(db).get_cart_product(product_id)
