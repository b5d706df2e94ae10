# backend/app/db/models/user_model.py
from sqlalchemy import Column, Integer, String

from app.db.database import Base

class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True, autoincrement=False)
    name = Column(String(255), nullable=False)
    username = Column(String(100), nullable=False, unique=True)
    email = Column(String(255), nullable=False, unique=True)
    avatar = Column(String(500), nullable=False)
    password = Column(String(255), nullable=False)
