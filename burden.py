#!/usr/bin/env python3
#
# Copyright (c) 2020-2025 LateGenXer
#
# SPDX-License-Identifier: AGPL-3.0-or-later
#

"""Estimate a Japanese salaried household's yearly tax and social insurance
burden from gross income, rent, and savings."""


import argparse
import dataclasses
import logging
import math
import numbers
import sys
import typing

from tax.jp import Rates, get_rates, floor_to, employment_income_deduction, income_tax

from report import Report, TextReport

import environ


logger = logging.getLogger('burden')


INCOME = '収入'
EXPENSE = '支出'
TAX = '税金等'


class Household(typing.NamedTuple):

    income: float|int
    rent: float|int = 0
    savings: float|int = 0


class Row(typing.NamedTuple):

    group: str
    label: str
    value: float|int
    ratio: float


def validate(household:Household) -> None:
    """Raise ValueError with a user facing message on invalid input."""

    for name, value in household._asdict().items():
        if value is None:
            raise ValueError(f'{name} is required')
        if isinstance(value, bool) or not isinstance(value, numbers.Real):
            raise ValueError(f'{name} must be a number, got {value!r}')
        if not math.isfinite(value):
            raise ValueError(f'{name} must be finite, got {value!r}')

    if household.income < 1:
        raise ValueError('income must be at least 1')
    if household.rent < 0:
        raise ValueError('rent must not be negative')
    if household.savings < 0:
        raise ValueError('savings must not be negative')
    if household.income < household.rent + household.savings:
        raise ValueError('rent plus savings must not exceed income')


@dataclasses.dataclass(frozen=True)
class Breakdown:

    household: Household

    # Social insurance premiums; pension and health are split evenly
    pension: int
    health: int
    employment_worker: int
    employment_employer: int
    workers_accident: int

    social_insurance_deduction: int
    employment_income_deduction: float
    employment_income: float
    deductions: float
    taxable_income: int

    income_tax: float
    surtax: float
    income_tax_liability: int
    resident_tax: float

    direct_tax: float
    consumption: float
    consumption_tax_rate: float
    consumption_excluding_tax: int
    consumption_tax: float
    total: float

    @property
    def employer_social_insurance(self) -> int:
        return self.pension + self.health + self.employment_employer + self.workers_accident


def estimate(household:Household, rates:Rates|None=None) -> Breakdown:
    """Run the whole estimation pipeline.

    Each step consumes the rounded results of the previous ones, so the order
    matters.  The input is assumed to have been validated.
    """

    if rates is None:
        rates = get_rates(environ.tax_year)

    income, rent, savings = household

    def premium(rate:float) -> int:
        return math.floor(income * rate / 2)

    pension = premium(rates.pension)
    health = premium(rates.health)
    employment_worker = premium(rates.employment_worker)
    employment_employer = premium(rates.employment_employer)
    workers_accident = premium(rates.workers_accident)

    social_insurance_deduction = pension + health + employment_worker

    employment_income_deduction_ = employment_income_deduction(income, rates)
    employment_income = income - employment_income_deduction_

    deductions = social_insurance_deduction + rates.life_insurance_deduction + rates.dependent_deduction + rates.basic_deduction

    taxable_income = max(floor_to(employment_income - deductions, 1000), 0)

    income_tax_ = income_tax(taxable_income, rates)
    surtax = income_tax_ * rates.surtax
    income_tax_liability = floor_to(income_tax_ + surtax, 100)

    resident_tax = taxable_income * rates.resident_tax

    direct_tax = income_tax_ + resident_tax + social_insurance_deduction

    # Includes consumption tax
    consumption = income - direct_tax - rent - savings

    consumption_tax_rate = rates.consumption_tax()
    consumption_excluding_tax = math.floor(consumption / (1 + consumption_tax_rate))
    consumption_tax = consumption - consumption_excluding_tax

    total = consumption_tax + direct_tax

    breakdown = Breakdown(
        household = household,
        pension = pension,
        health = health,
        employment_worker = employment_worker,
        employment_employer = employment_employer,
        workers_accident = workers_accident,
        social_insurance_deduction = social_insurance_deduction,
        employment_income_deduction = employment_income_deduction_,
        employment_income = employment_income,
        deductions = deductions,
        taxable_income = taxable_income,
        income_tax = income_tax_,
        surtax = surtax,
        income_tax_liability = income_tax_liability,
        resident_tax = resident_tax,
        direct_tax = direct_tax,
        consumption = consumption,
        consumption_tax_rate = consumption_tax_rate,
        consumption_excluding_tax = consumption_excluding_tax,
        consumption_tax = consumption_tax,
        total = total,
    )

    if logger.isEnabledFor(logging.DEBUG):
        for field in dataclasses.fields(breakdown):
            logger.debug('%s = %r', field.name, getattr(breakdown, field.name))

    return breakdown


def rows(breakdown:Breakdown) -> list[Row]:
    income = breakdown.household.income

    entries = [
        (INCOME,  '収入',         income),
        (EXPENSE, '家賃',         breakdown.household.rent),
        (EXPENSE, '貯蓄額',       breakdown.household.savings),
        (EXPENSE, '推定消費金額', breakdown.consumption_excluding_tax),
        (TAX,     '社会保険料',   breakdown.social_insurance_deduction),
        (TAX,     '所得税',       breakdown.income_tax_liability),
        (TAX,     '住民税',       breakdown.resident_tax),
        (TAX,     '推定消費税額', breakdown.consumption_tax),
        (TAX,     '税金等合計',   breakdown.total),
    ]

    return [Row(group, label, value, value / income) for group, label, value in entries]


def calculate(household:Household, rates:Rates|None=None) -> list[Row]:
    return rows(estimate(household, rates))


def write(breakdown:Breakdown, report:Report) -> None:
    report.write_heading('税金等の推定')

    table = [(row.label, f'{row.value:,.0f}', f'{math.floor(row.ratio * 100)}%') for row in rows(breakdown)]
    report.write_table(table, header=['', '金額', '割合'], just='lrr', indent='  ')

    report.write_paragraph(f'事業主負担の社会保険料: {breakdown.employer_social_insurance:,}')


def main():
    logging.basicConfig(format='%(asctime)s %(name)s %(levelname)s %(message)s', level=logging.INFO)

    argparser = argparse.ArgumentParser(description=__doc__)
    argparser.add_argument('-y', '--tax-year', metavar='TAX_YEAR', type=int, default=environ.tax_year, help='tax year of the rates table')
    argparser.add_argument('-v', '--verbose', action='store_true', help='log intermediate values')
    argparser.add_argument('income', metavar='INCOME', type=int, help='yearly gross salary and bonuses')
    argparser.add_argument('rent', metavar='RENT', type=int, help='yearly rent')
    argparser.add_argument('savings', metavar='SAVINGS', type=int, help='yearly savings')
    args = argparser.parse_args()

    if args.verbose:
        logger.setLevel(logging.DEBUG)

    try:
        rates = get_rates(args.tax_year)
    except ValueError as e:
        argparser.error(str(e))

    household = Household(args.income, args.rent, args.savings)
    try:
        validate(household)
    except ValueError as e:
        argparser.error(str(e))

    breakdown = estimate(household, rates)
    write(breakdown, TextReport(sys.stdout))


if __name__ == '__main__':
    main()
