# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import pandas as pd
import pytest

from tesoro.core.primitives import BucketSettings, GlobalSettings
from tesoro.reporting import CashflowScheduleReport
from tests.conftest import cashflow, tbill


@pytest.fixture
def report(reference_date):
    items = [
        cashflow("2025-03-15", coupon_amount=45_000_000, capital=0),
        cashflow("2034-03-15", coupon_amount=45_000_000, capital=1_000_000_000),
        tbill("2025-04-04", 250_000_000),
        cashflow("2036-09-01", coupon_amount=5_000, capital=20_000),
    ]
    return CashflowScheduleReport(items, reference_date=reference_date)


def test_annual_schedule_layout(report):
    frame = report.generate(granularity="annual")

    assert isinstance(frame, pd.DataFrame)
    assert frame.index.name == "Period"
    assert list(frame.index) == ["2025", "2034", "After 2034", "Total"]
    assert list(frame.columns) == ["Coupon", "Capital", "T-Bill Capital", "Total", "Items"]

    assert frame.loc["2025", "Coupon"] == 45_000_000
    assert frame.loc["2025", "T-Bill Capital"] == 250_000_000
    assert frame.loc["2025", "Capital"] == 0
    assert frame.loc["2034", "Capital"] == 1_000_000_000
    assert frame.loc["Total", "Total"] == pytest.approx(1_340_025_000)
    assert frame.loc["Total", "Items"] == 4


def test_instrument_filter_and_no_totals(report):
    frame = report.generate(granularity="annual", instrument="tbill", include_totals=False)
    assert list(frame.index) == ["2025"]
    assert frame.loc["2025", "Coupon"] == 0


def test_weekly_schedule_has_every_week(report):
    frame = report.generate(granularity="weekly")
    assert len(frame) == 13
    assert frame.loc["Week 11", "Coupon"] == 45_000_000


def test_currency_format(report):
    frame = report.generate(granularity="annual", currency_format=True)
    assert frame.loc["2034", "Capital"] == "LKR 1.0Bn"
    assert frame.loc["2025", "Coupon"] == "LKR 45.0M"
    assert frame.loc["After 2034", "Total"] == "LKR 25.0K"
    assert frame.loc["Total", "Items"] == 4


def test_empty_schedule_totals_row(reference_date):
    frame = CashflowScheduleReport([], reference_date).generate(granularity="annual")
    assert list(frame.index) == ["Total"]
    assert frame.loc["Total", "Total"] == 0


def test_summary(report):
    totals = report.summary()
    assert totals.tbill_capital == 250_000_000
    assert report.summary("tbill").coupon == 0


def test_tbill_columns_follow_configured_marker(reference_date):
    settings = GlobalSettings(buckets=BucketSettings(tbill_coupon_marker="BILL"))
    items = [cashflow("2025-02-10", capital=500, coupon="BILL")]

    report = CashflowScheduleReport(items, reference_date, settings)

    frame = report.generate(granularity="annual", include_totals=False)
    assert frame.loc["2025", "T-Bill Capital"] == 500
    assert frame.loc["2025", "Capital"] == 0

    bills = report.generate(granularity="annual", instrument="tbill", include_totals=False)
    assert list(bills.index) == ["2025"]
    assert report.summary().tbill_capital == 500
