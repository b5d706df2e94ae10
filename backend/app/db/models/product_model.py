# backend/app/db/models/product_model.py
from sqlalchemy import Column, Integer, String, ForeignKey, Text, Float, Boolean

from app.db.database import Base

class Product(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, index=True, autoincrement=False)
    name = Column(String(255), nullable=False, index=True)
    description = Column(Text, nullable=False)
    price = Column(Float, nullable=False)
    stock = Column(Integer, nullable=False, default=0)
    image = Column(Text, nullable=False)
    # Las referencias las valida el servicio antes de escribir; la FK no propaga borrados
    category_id = Column(Integer, ForeignKey("categories.id"), nullable=False, index=True)
    brand_id = Column(Integer, ForeignKey("brands.id"), nullable=False, index=True)
    active = Column(Boolean, nullable=False, default=True)
