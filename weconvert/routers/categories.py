from typing import Optional

from fastapi import APIRouter, HTTPException, Query

from weconvert.models.schemas import CategoryInfo, UnitChoices
from weconvert.models.units import InvalidUnitSelection
from weconvert.services.category_registry import registry
from weconvert.services.selection import default_selection, input_units, output_units, select_input_unit

router = APIRouter(prefix="/categories", tags=["Categories"])


@router.get("", response_model=list[CategoryInfo])
def list_categories():
    return [
        CategoryInfo(
            category=category.value,
            base_unit=registry.base_unit(category).value,
            units=registry.unit_names(category),
        )
        for category in registry.list_categories()
    ]


@router.get("/{category}/units", response_model=UnitChoices)
def unit_choices(
    category: str,
    input_unit: Optional[str] = Query(None, description="Selected input unit, defaults to the category's first unit"),
):
    """
    Unit lists for the selection pickers.

    ``output_units`` is ``input_units`` without the selected input unit.
    """
    if registry.get(category) is None:
        raise HTTPException(404, "Category not found")

    state = default_selection(category)
    if input_unit is not None:
        try:
            state = select_input_unit(state, input_unit)
        except InvalidUnitSelection as e:
            raise HTTPException(status_code=400, detail=str(e))

    return UnitChoices(
        category=state.category.value,
        input_unit=state.input_unit,
        input_units=input_units(state),
        output_units=output_units(state),
    )
