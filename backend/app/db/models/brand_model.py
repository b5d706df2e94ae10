# backend/app/db/models/brand_model.py
"""
Se encarga de definir el modelo de marca para la aplicación.
"""

from sqlalchemy import Column, Integer, String, Text, Boolean
from app.db.database import Base

class Brand(Base):
    __tablename__ = "brands"

    id = Column(Integer, primary_key=True, index=True, autoincrement=False)
    name = Column(String(255), nullable=False)
    country = Column(String(100), nullable=False)
    description = Column(Text, nullable=False)
    active = Column(Boolean, nullable=False, default=True)
