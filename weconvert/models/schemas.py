"""Request and response bodies of the HTTP API."""

from typing import List

from pydantic import BaseModel, Field


class CategoryInfo(BaseModel):
    category: str
    base_unit: str
    units: List[str]


class UnitChoices(BaseModel):
    category: str
    input_unit: str
    input_units: List[str]
    output_units: List[str]


class ConversionRequest(BaseModel):
    category: str = Field(..., description="Conversion category, e.g. Temperature")
    from_unit: str = Field(..., description="Unit the value is expressed in, e.g. Celsius")
    to_unit: str = Field(..., description="Unit to convert to, e.g. Fahrenheit")
    value: float = Field(..., allow_inf_nan=False, description="Finite number to convert")


class ConversionResult(ConversionRequest):
    result: float
