"""Attribute database model."""

from sqlalchemy import Column, Integer, String

from catalog_api.models.database import Base


class Attribute(Base):
    """Free-standing name/value pair, not linked to products or categories."""

    __tablename__ = "attributes"

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    attribute_name = Column(String, nullable=True)
    attribute_value = Column(String, nullable=True)

    def __repr__(self):
        return (
            f"<Attribute(id={self.id}, attribute_name='{self.attribute_name}', "
            f"attribute_value='{self.attribute_value}')>"
        )
