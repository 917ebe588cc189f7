"""Shared base for API models"""

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Serializes with camelCase keys, accepts camelCase or snake_case"""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True
