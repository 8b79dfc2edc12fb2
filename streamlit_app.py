import logging

import streamlit as st

from weconvert.config.constants import APP_TITLE, DEFAULT_INPUT_VALUE, RESULT_DISPLAY_DIGITS
from weconvert.services.category_registry import registry
from weconvert.services.selection import (
    default_selection,
    output_units,
    parse_input_value,
    recompute,
    select_category,
    select_input_unit,
    select_output_unit,
    set_input_value,
)
from weconvert.utils.conversions import conversion_table
from weconvert.utils.log import configure_logging

configure_logging()
logger = logging.getLogger(__name__)

st.set_page_config(page_title=APP_TITLE, layout="centered")


def format_result(value: float) -> str:
    """Format a converted value for display, dropping trailing zeros."""
    return f"{value:.{RESULT_DISPLAY_DIGITS}f}".rstrip("0").rstrip(".")


def main():
    """
    Render the single-screen converter.

    The selection lives in ``st.session_state.selection`` and every widget
    change goes through a ``select_*`` helper followed by ``recompute``.
    """
    if 'selection' not in st.session_state:
        st.session_state.selection = default_selection()
    state = st.session_state.selection

    st.title(APP_TITLE)

    st.subheader("Select your conversion type")
    categories = [c.value for c in registry.list_categories()]
    category = st.radio(
        "Conversion type", categories,
        index=categories.index(state.category.value), horizontal=True,
    )
    state = select_category(state, category)

    st.subheader("Select your unit")
    view = recompute(state)
    input_unit = st.radio(
        "Input Unit", view.input_units,
        index=view.input_units.index(state.input_unit), horizontal=True,
    )
    state = select_input_unit(state, input_unit)

    choices = output_units(state)
    output_unit = st.radio(
        "Output Unit", choices,
        index=choices.index(state.output_unit), horizontal=True,
    )
    state = select_output_unit(state, output_unit)

    st.subheader("The number you want to convert")
    amount = st.text_input("Amount", value=format_result(DEFAULT_INPUT_VALUE), key="amount")
    try:
        state = set_input_value(state, parse_input_value(amount))
    except ValueError as e:
        logger.debug("Rejected amount %r: %s", amount, e)
        st.error(str(e))
        st.session_state.selection = state
        return

    st.session_state.selection = state
    view = recompute(state)

    st.subheader("The Result of conversion:")
    st.metric(label=f"{state.input_unit} → {state.output_unit}", value=format_result(view.result))

    with st.expander(f"{state.input_unit} in every {state.category.value.lower()} unit"):
        st.dataframe(conversion_table(state.input_value, state.category, state.input_unit), hide_index=True)


main()
