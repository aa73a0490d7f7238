#
# Copyright (c) 2024 LateGenXer
#
# SPDX-License-Identifier: AGPL-3.0-or-later
#


import math

import streamlit as st
import pandas as pd

import environ

from burden import Row, EXPENSE


# https://docs.streamlit.io/library/api-reference/utilities/st.set_page_config
def set_page_config(page_title, page_icon=":material/savings:", layout="centered", initial_sidebar_state="auto"):
    st.set_page_config(
        page_title=page_title,
        page_icon=page_icon,
        layout=layout,
        initial_sidebar_state=initial_sidebar_state,
        menu_items={
            "About": f"""Japanese household tax burden estimator.

Version {environ.get_version()}.
""",
        }
    )


def format_value(value) -> str:
    return f'{value:,.0f}'


def format_ratio(ratio) -> str:
    return f'{math.floor(ratio * 100)}%'


def dataframe(rows:list[Row]) -> pd.DataFrame:
    return pd.DataFrame(rows, columns=['Group', 'Label', 'Value', 'Ratio'])


def expenses_chart(df:pd.DataFrame):
    import altair as alt

    expenses = df[df['Group'] == EXPENSE].reset_index(drop=True)
    expenses = expenses.assign(Order=expenses.index)

    labels = list(expenses['Label'])

    chart = (
        alt.Chart(expenses)
        .mark_arc()
        .encode(
            alt.Theta("Value:Q"),
            alt.Color("Label:N", sort=labels, title=None),
            alt.Order("Order:Q"),
            tooltip=[
                alt.Tooltip("Label:N", title="項目"),
                alt.Tooltip("Value:Q", title="金額", format=",.0f"),
                alt.Tooltip("Ratio:Q", title="割合", format=".0%"),
            ],
        )
    )
    return chart


def plot_expenses(df:pd.DataFrame):
    st.altair_chart(expenses_chart(df), width='stretch')
