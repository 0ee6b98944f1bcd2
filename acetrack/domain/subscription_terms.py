"""
Subscription Terms

Calendar arithmetic for subscription periods.
"""

import calendar
from datetime import date, datetime
from typing import TypeVar, Union

from acetrack.domain.entities import SubscriptionDuration

D = TypeVar("D", date, datetime)

MONTHS_BY_DURATION = {
    SubscriptionDuration.six_months: 6,
    SubscriptionDuration.one_year: 12,
    SubscriptionDuration.two_years: 24,
}


def add_months(value: D, months: int) -> D:
    """Shift by calendar months, clamping to the last day of the target month"""
    month_index = value.month - 1 + months
    year = value.year + month_index // 12
    month = month_index % 12 + 1
    day = min(value.day, calendar.monthrange(year, month)[1])
    return value.replace(year=year, month=month, day=day)


def calculate_end_date(start: D, duration: Union[SubscriptionDuration, str]) -> D:
    """
    End of a subscription term starting at `start`.

    2024-02-29 + 1year -> 2025-02-28; 2024-08-31 + 6months -> 2025-02-28.
    Raises ValueError for an unknown duration.
    """
    return add_months(start, MONTHS_BY_DURATION[SubscriptionDuration(duration)])
