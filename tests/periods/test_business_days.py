from datetime import date, timedelta

import pytest

from src.payout_engine.payout_engine.core.enums import Weekday
from src.payout_engine.payout_engine.core.exceptions import ValidationError
from src.payout_engine.payout_engine.periods.business_days import business_days, days_elapsed, parse_weekdays
from src.payout_engine.payout_engine.periods.model import PayPeriod


def _weekdays_brute_force(start: date, end: date) -> int:
    count = 0
    day = start
    while day <= end:
        if day.weekday() < 5:
            count += 1
        day += timedelta(days=1)
    return count


def test_full_week_excludes_weekend_by_default():
    # 2024-01-01 is a Monday
    assert business_days(date(2024, 1, 1), date(2024, 1, 7)) == 5


def test_both_endpoints_are_inclusive():
    assert business_days(date(2024, 1, 1), date(2024, 1, 1)) == 1
    assert business_days(date(2024, 1, 5), date(2024, 1, 8)) == 2


def test_single_weekend_day_counts_zero():
    assert business_days(date(2024, 1, 6), date(2024, 1, 6)) == 0


def test_start_after_end_is_zero_not_error():
    assert business_days(date(2024, 1, 10), date(2024, 1, 1)) == 0
    assert business_days(date(2024, 1, 10), date(2024, 1, 1), {Weekday.SUNDAY}) == 0


def test_empty_exclusion_counts_every_day():
    assert business_days(date(2024, 1, 1), date(2024, 1, 7), set()) == 7


def test_job_specific_exclusion():
    assert business_days(date(2024, 1, 1), date(2024, 1, 14), {Weekday.SUNDAY}) == 12


@pytest.mark.parametrize("offset", range(0, 7))
@pytest.mark.parametrize("length", [0, 1, 5, 6, 13, 30, 45])
def test_default_matches_monday_to_friday_count(offset, length):
    start = date(2024, 2, 26) + timedelta(days=offset)
    end = start + timedelta(days=length)
    assert business_days(start, end) == _weekdays_brute_force(start, end)


def test_month_of_january_2024():
    period = PayPeriod.month_of(date(2024, 1, 17))
    assert business_days(period.start, period.end) == 23


def test_days_elapsed_stops_at_today():
    period = PayPeriod.month_of(date(2024, 1, 1))
    assert days_elapsed(period, date(2024, 1, 10)) == 8


def test_days_elapsed_before_period_start_is_zero():
    period = PayPeriod.month_of(date(2024, 1, 1))
    assert days_elapsed(period, date(2023, 12, 31)) == 0


def test_days_elapsed_after_period_uses_full_period():
    period = PayPeriod.month_of(date(2024, 1, 1))
    assert days_elapsed(period, date(2024, 3, 1)) == 23


def test_parse_weekdays_accepts_stored_names():
    assert parse_weekdays(["Sunday", "sat", "someday"]) == {Weekday.SUNDAY, Weekday.SATURDAY}


def test_parse_weekdays_none_means_weekend_and_empty_means_none():
    assert parse_weekdays(None) == {Weekday.SATURDAY, Weekday.SUNDAY}
    assert parse_weekdays([]) == frozenset()


def test_month_of_handles_leap_february():
    period = PayPeriod.month_of(date(2024, 2, 15))
    assert period.start == date(2024, 2, 1)
    assert period.end == date(2024, 2, 29)


def test_parse_rejects_bad_dates():
    with pytest.raises(ValidationError):
        PayPeriod.parse("2024-13-01", "2024-12-31")
