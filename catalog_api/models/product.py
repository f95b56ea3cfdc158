"""Product database model."""

from sqlalchemy import Column, Float, Integer, String

from catalog_api.models.database import Base


class Product(Base):
    """Product model.

    ``category_id`` is a plain integer column. It is not a foreign key and
    is never checked against the categories table.
    """

    __tablename__ = "products"

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    name = Column(String, nullable=True)
    price = Column(Float, nullable=True)
    category_id = Column(Integer, nullable=True)

    def __repr__(self):
        return f"<Product(id={self.id}, name='{self.name}', price={self.price})>"
