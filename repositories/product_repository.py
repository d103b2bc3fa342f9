"""Read-only product access used to build cart projections."""
from typing import Optional

from sqlalchemy.orm import Session

from models.product import ProductModel
from repositories.exceptions import translate_errors


class ProductRepository:

    def __init__(self, session: Session):
        self.session = session

    def find_by_id(self, key: int) -> Optional[ProductModel]:
        with translate_errors(self.session, f"reading product {key}"):
            return self.session.get(ProductModel, key)
