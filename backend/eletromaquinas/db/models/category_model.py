# backend/eletromaquinas/db/models/category_model.py
"""
Se encarga de definir los modelos de categoría para la aplicación.
"""

from sqlalchemy import Column, Integer, String
from eletromaquinas.db.database import Base

class Category(Base):
    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, autoincrement=True)
    # Los productos guardan el nombre de la categoría, no su id
    name = Column(String(100), unique=True, nullable=False)
