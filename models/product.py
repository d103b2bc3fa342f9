from sqlalchemy import Column, ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import relationship

from models.base_model import BaseModel
from models.category import CategoryKey


class ProductModel(BaseModel):
    __tablename__ = "products"

    name = Column(String, index=True, nullable=False)
    price = Column(Numeric(10, 2, asdecimal=True), nullable=False)
    stock = Column(Integer, nullable=False, default=0)
    category_id = Column(CategoryKey, ForeignKey('categories.id_key'), index=True, nullable=True)

    category = relationship("CategoryModel", back_populates="products", lazy="select")
