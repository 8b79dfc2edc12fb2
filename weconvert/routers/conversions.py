import numpy as np
from fastapi import APIRouter, HTTPException, Query

from weconvert.models.schemas import ConversionRequest, ConversionResult
from weconvert.models.units import InvalidUnitSelection
from weconvert.services.category_registry import registry
from weconvert.utils.conversions import conversion_table, convert_by_name

router = APIRouter(prefix="/conversions", tags=["Conversions"])


@router.post("", response_model=ConversionResult)
def run_conversion(request: ConversionRequest):
    if registry.get(request.category) is None:
        raise HTTPException(404, "Category not found")

    try:
        result = convert_by_name(request.value, request.category, request.from_unit, request.to_unit)
    except InvalidUnitSelection as e:
        raise HTTPException(status_code=400, detail=str(e))

    return ConversionResult(**request.model_dump(), result=result)


@router.get("/table")
def run_conversion_table(
    category: str = Query(..., description="Conversion category, e.g. Length"),
    unit: str = Query(..., description="Unit the value is expressed in"),
    value: float = Query(..., allow_inf_nan=False, description="Finite number to convert"),
):
    """
    Express *value* in every unit of *category*.

    Returns:
        list: ``{"unit": ..., "value": ...}`` records in declaration order.
    """
    if registry.get(category) is None:
        raise HTTPException(404, "Category not found")

    try:
        df = conversion_table(value, category, unit)
    except InvalidUnitSelection as e:
        raise HTTPException(status_code=400, detail=str(e))

    # Overflowing values (inf) are not valid JSON
    df["value"] = df["value"].astype(object).where(np.isfinite(df["value"]), None)
    return df.to_dict(orient="records")
