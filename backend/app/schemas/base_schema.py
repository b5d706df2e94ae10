# backend/app/schemas/base_schema.py
"""
Base común para los esquemas Pydantic de la API.

Los atributos en Python usan snake_case (category_id) y el JSON de la API
camelCase (categoryId). Se aceptan ambas formas en la entrada.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )
