# schemas/common.py
"""
Shared Pydantic configuration: camelCase on the wire, snake_case in Python.
"""
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
     """Base schema; accepts either field names or camelCase aliases and reads ORM objects."""
     model_config = ConfigDict(
          alias_generator=to_camel,
          populate_by_name=True,
          from_attributes=True,
     )


class Coordinates(CamelModel):
     longitude: float
     latitude: float
