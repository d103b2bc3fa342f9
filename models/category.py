from sqlalchemy import CheckConstraint, Column, Integer, SmallInteger, String
from sqlalchemy.orm import relationship

from models.base_model import BaseModel

CATEGORY_KEY_MIN = 0
CATEGORY_KEY_MAX = 255

# One-byte unsigned key. SQLite needs INTEGER for the column to alias ROWID.
CategoryKey = SmallInteger().with_variant(Integer(), "sqlite")


class CategoryModel(BaseModel):
    __tablename__ = "categories"
    __table_args__ = (
        CheckConstraint(
            f"id_key >= {CATEGORY_KEY_MIN} AND id_key <= {CATEGORY_KEY_MAX}",
            name="ck_categories_id_key_range",
        ),
    )

    id_key = Column(CategoryKey, primary_key=True, autoincrement=True)
    name = Column(String(100), unique=True, index=True, nullable=False)

    products = relationship("ProductModel", back_populates="category", lazy="select")

    def __repr__(self):
        return f"<CategoryModel id_key={self.id_key} name={self.name!r}>"
