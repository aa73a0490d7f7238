#
# Copyright (c) 2020-2025 LateGenXer
#
# SPDX-License-Identifier: AGPL-3.0-or-later
#


import logging

import streamlit as st

import common

from burden import Household, validate, estimate, rows
from tax.jp import get_rates

import environ


logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s %(name)s %(levelname)s %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S',
    force=True,
)


common.set_page_config(
    page_title="税金等の推定",
    layout="centered",
)

st.title("税金等の推定")

st.markdown('''年間収入・家賃・貯蓄額から、社会保険料・所得税・住民税・消費税のおおよその負担額を推定します。

税額は簡略化した概算であり、確定申告などには使用できません。
''')


#
# Inputs
#

with st.form(key='form'):
    st.number_input('年間収入（給与・賞与）', min_value=0, step=10000, value=5000000, key='income')
    st.number_input('年間支払家賃', min_value=0, step=10000, value=1000000, key='rent')
    st.number_input('年間貯蓄額', min_value=0, step=10000, value=500000, key='savings')
    st.form_submit_button(label='計算', type='primary')


#
# Calculation
#

household = Household(st.session_state.income, st.session_state.rent, st.session_state.savings)

try:
    rates = get_rates(environ.tax_year)
    validate(household)
except ValueError as ex:
    st.error(str(ex))
    st.stop()

breakdown = estimate(household, rates)
df = common.dataframe(rows(breakdown))


#
# Output
#

st.divider()

table = df.assign(Value=df["Value"].map(common.format_value), Ratio=df["Ratio"].map(common.format_ratio))

st.dataframe(
    table,
    width='stretch',
    hide_index=True,
    column_config={
        "Group": None,
        "Label": st.column_config.TextColumn(label="項目"),
        "Value": st.column_config.TextColumn(label="金額"),
        "Ratio": st.column_config.TextColumn(label="割合"),
    },
)

common.plot_expenses(df)

st.metric(label="事業主負担の社会保険料", value=common.format_value(breakdown.employer_social_insurance))
