"""
schemas/base.py
---------------
Shared pydantic base for all request/response models.

Python attributes are snake_case; the JSON the browser sends and receives is
camelCase (logoUrl, brandColor, jobType, ...). Both spellings are accepted on
input so tests and scripts can build models with keyword arguments.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )
