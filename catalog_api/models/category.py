"""Category database model."""

from sqlalchemy import Column, Integer, String

from catalog_api.models.database import Base


class Category(Base):
    """Category model: a named bucket products may point at."""

    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    name = Column(String, nullable=True)

    def __repr__(self):
        return f"<Category(id={self.id}, name='{self.name}')>"
