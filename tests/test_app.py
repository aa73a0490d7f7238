#
# Copyright (c) 2024-2025 LateGenXer
#
# SPDX-License-Identifier: AGPL-3.0-or-later
#


import os.path

import pytest

try:
    from streamlit.testing.v1 import AppTest
except ImportError:
    pytest.skip("No Streamlit; skipping.", allow_module_level=True)

import environ


default_timeout = 30


@pytest.fixture(scope="function")
def at(root_dir):
    at = AppTest.from_file(os.path.join(root_dir, "Home.py"), default_timeout=default_timeout)
    at.run()
    assert not at.exception
    return at


@pytest.fixture(scope="function")
def submit(at):
    assert len(at.button) == 1
    return at.button[0]


def test_run(at):
    # Ensure no state corruption
    at.run()
    assert not at.exception
    assert len(at.error) == 0
    assert len(at.dataframe) == 1
    df = at.dataframe[0].value
    assert list(df['Label']) == ['収入', '家賃', '貯蓄額', '推定消費金額', '社会保険料', '所得税', '住民税', '推定消費税額', '税金等合計']
    assert list(df['Value'])[:3] == ['5,000,000', '1,000,000', '500,000']
    assert list(df['Ratio'])[:3] == ['100%', '20%', '10%']


@pytest.mark.skipif(environ.ci, reason="frequent timeouts")
@pytest.mark.parametrize("income,rent,savings", [
    (8000000, 1200000, 1000000),
    (1000000, 600000, 400000),
    (1, 0, 0),
])
def test_submit(at, submit, income, rent, savings):
    at.number_input(key="income").set_value(income)
    at.number_input(key="rent").set_value(rent)
    at.number_input(key="savings").set_value(savings)
    submit.click()
    at.run()
    assert not at.exception
    assert len(at.error) == 0
    assert len(at.dataframe) == 1


@pytest.mark.parametrize("income,rent,savings", [
    (0, 0, 0),
    (1000000, 600000, 400001),
])
def test_error(at, submit, income, rent, savings):
    assert len(at.error) == 0
    at.number_input(key="income").set_value(income)
    at.number_input(key="rent").set_value(rent)
    at.number_input(key="savings").set_value(savings)
    submit.click()
    at.run()
    assert not at.exception
    assert len(at.error) == 1
    assert len(at.dataframe) == 0


@pytest.mark.parametrize("tax_year", ['R2', '1900'])
def test_tax_year_error(root_dir, monkeypatch, tax_year):
    monkeypatch.setattr(environ, 'tax_year', tax_year)
    at = AppTest.from_file(os.path.join(root_dir, "Home.py"), default_timeout=default_timeout)
    at.run()
    assert not at.exception
    assert len(at.error) == 1
    assert 'tax year' in at.error[0].value
    assert len(at.dataframe) == 0
