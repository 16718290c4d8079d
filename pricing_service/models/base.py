"""Shared pydantic configuration for API models"""

from decimal import Decimal
from typing import Annotated

from pydantic import BaseModel, ConfigDict, PlainSerializer
from pydantic.alias_generators import to_camel

# Decimals go over the wire as JSON numbers
JsonDecimal = Annotated[
    Decimal,
    PlainSerializer(float, return_type=float, when_used="json"),
]


class ApiModel(BaseModel):
    """Base model with camelCase JSON field names"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
