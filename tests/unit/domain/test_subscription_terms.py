from datetime import date, datetime

import pytest

from acetrack.domain.entities import SubscriptionDuration
from acetrack.domain.subscription_terms import add_months, calculate_end_date


@pytest.mark.parametrize(
    "start,duration,expected",
    [
        (date(2024, 1, 15), SubscriptionDuration.six_months, date(2024, 7, 15)),
        (date(2024, 1, 15), SubscriptionDuration.one_year, date(2025, 1, 15)),
        (date(2024, 1, 15), SubscriptionDuration.two_years, date(2026, 1, 15)),
        (date(2024, 2, 29), SubscriptionDuration.one_year, date(2025, 2, 28)),
        (date(2024, 2, 29), SubscriptionDuration.two_years, date(2026, 2, 28)),
        (date(2024, 8, 31), SubscriptionDuration.six_months, date(2025, 2, 28)),
        (date(2023, 8, 31), SubscriptionDuration.six_months, date(2024, 2, 29)),
    ],
)
def test_calculate_end_date(start, duration, expected):
    assert calculate_end_date(start, duration) == expected


def test_calculate_end_date_accepts_raw_value_and_keeps_time():
    start = datetime(2024, 3, 31, 14, 30)

    assert calculate_end_date(start, "6months") == datetime(2024, 9, 30, 14, 30)


def test_calculate_end_date_rejects_unknown_duration():
    with pytest.raises(ValueError):
        calculate_end_date(date(2024, 1, 1), "3months")


def test_add_months_crosses_year():
    assert add_months(date(2024, 11, 30), 3) == date(2025, 2, 28)
