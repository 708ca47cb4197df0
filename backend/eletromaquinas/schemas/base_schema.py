# backend/eletromaquinas/schemas/base_schema.py
"""
Modelo base de los esquemas de la API.

La API expone los campos en camelCase (createdAt, orderNumber...) mientras que
en Python se usan nombres snake_case. El alias_generator hace la traducción en
ambos sentidos: las peticiones aceptan cualquiera de los dos nombres y las
respuestas se serializan siempre con el alias.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )
