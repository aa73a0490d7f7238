#
# Copyright (c) 2020-2025 LateGenXer
#
# SPDX-License-Identifier: AGPL-3.0-or-later
#

"""Japanese tax constants and functions."""


import math
import typing


class Band(typing.NamedTuple):

    upper: int|None  # inclusive; None for the open-ended top band
    slope: float
    intercept: float

    def __call__(self, x:float|int) -> float:
        return x * self.slope + self.intercept


Bands = tuple[Band, ...]


def evaluate(bands:Bands, x:float|int) -> float:
    for band in bands:
        if band.upper is None or x <= band.upper:
            return band(x)
    raise ValueError(f'{x} is beyond the last band')


def check_bands(bands:Bands) -> None:
    assert bands and bands[-1].upper is None
    uppers = [band.upper for band in bands[:-1]]
    assert None not in uppers
    assert uppers == sorted(set(uppers))  # type: ignore[type-var]


# https://www.nta.go.jp/taxes/shiraberu/taxanswer/shotoku/1410.htm
employment_income_deduction_bands_2020: Bands = (
    Band(   1625000, 0.0,   550000),
    Band(   1800000, 0.4,  -100000),
    Band(   3600000, 0.3,    80000),
    Band(   6600000, 0.2,   440000),
    Band(   8500000, 0.1,  1100000),
    Band(      None, 0.0,  1950000),
)


# https://www.nta.go.jp/taxes/shiraberu/taxanswer/shotoku/2260.htm
income_tax_bands_2015: Bands = (
    Band(   1949000, 0.05,        0),
    Band(   3299000, 0.10,   -97500),
    Band(   6949000, 0.20,  -427500),
    Band(   8999000, 0.23,  -636000),
    Band(  17999000, 0.33, -1536000),
    Band(  39999000, 0.40, -2796000),
    Band(      None, 0.45, -4796000),
)


class Rates(typing.NamedTuple):
    """Every constant needed to estimate one tax year."""

    # Social insurance, as total rates split evenly between worker and employer
    pension: float
    health: float
    employment_worker: float
    employment_employer: float
    workers_accident: float

    # Fixed deductions
    life_insurance_deduction: int
    dependent_deduction: int
    basic_deduction: int

    employment_income_deduction_bands: Bands
    income_tax_bands: Bands

    surtax: float
    resident_tax: float

    consumption_tax_reduced: float
    consumption_tax_standard: float
    engel_coefficient: float

    def consumption_tax(self) -> float:
        """Blend of reduced and standard consumption tax rates."""
        return self.engel_coefficient * self.consumption_tax_reduced + (1 - self.engel_coefficient) * self.consumption_tax_standard


rates_2020 = Rates(
    # Osaka, Japan Health Insurance Association
    # https://www.kyoukaikenpo.or.jp/~/media/Files/shared/hokenryouritu/r2/ippan_3/r20927osaka.pdf
    pension = 18.300 / 100,
    health = 10.22 / 100,
    # https://www.mhlw.go.jp/content/000617016.pdf
    employment_worker = 3 / 1000,
    employment_employer = 6 / 1000,
    # https://www.mhlw.go.jp/content/11200000/000489156.pdf
    workers_accident = 3 / 1000,

    life_insurance_deduction = 120000,
    dependent_deduction = 380000,
    basic_deduction = 380000,

    employment_income_deduction_bands = employment_income_deduction_bands_2020,
    income_tax_bands = income_tax_bands_2015,

    # https://www.nta.go.jp/taxes/shiraberu/taxanswer/shotoku/2260.htm
    surtax = 0.021,
    # Flat approximation, without local deductions
    resident_tax = 0.10,

    consumption_tax_reduced = 0.08,
    consumption_tax_standard = 0.10,
    engel_coefficient = 0.25,
)


tax_years: dict[int, Rates] = {
    2020: rates_2020,
}

default_tax_year = max(tax_years)


for _rates in tax_years.values():
    check_bands(_rates.employment_income_deduction_bands)
    check_bands(_rates.income_tax_bands)


def get_rates(tax_year:int|str|None=None) -> Rates:
    if tax_year is None:
        tax_year = default_tax_year
    elif isinstance(tax_year, str):
        try:
            tax_year = int(tax_year)
        except ValueError:
            raise ValueError(f'invalid tax year {tax_year!r}') from None
    try:
        return tax_years[tax_year]
    except KeyError:
        supported = ', '.join(str(year) for year in sorted(tax_years))
        raise ValueError(f'unsupported tax year {tax_year}; supported years are {supported}') from None


def floor_to(x:float|int, unit:int) -> int:
    return math.floor(x / unit) * unit


def employment_income_deduction(income:float|int, rates:Rates=rates_2020) -> float:
    if income < 0:
        raise ValueError(f'negative income {income}')
    deduction = evaluate(rates.employment_income_deduction_bands, income)
    # The minimum deduction can't exceed the income itself
    return min(deduction, income)


def income_tax(taxable:float|int, rates:Rates=rates_2020) -> float:
    taxable = floor_to(taxable, 1000)
    return evaluate(rates.income_tax_bands, taxable)
