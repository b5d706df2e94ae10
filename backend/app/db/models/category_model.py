# backend/app/db/models/category_model.py
"""
Se encarga de definir el modelo de categoría para la aplicación.
"""

from sqlalchemy import Column, Integer, String, Text, Boolean
from app.db.database import Base

class Category(Base):
    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, index=True, autoincrement=False)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    active = Column(Boolean, nullable=False, default=True)
