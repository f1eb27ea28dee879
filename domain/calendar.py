import calendar
from datetime import UTC, date, datetime


def utc_today() -> date:
	"""Current calendar date in UTC. Every wall-clock read in the service goes through here."""
	return datetime.now(UTC).date()


def add_months(value: date, months: int) -> date:
	"""Shift a date by whole calendar months, clamping the day to the target month's length.

	>>> add_months(date(2024, 8, 31), -6)
	datetime.date(2024, 2, 29)
	"""
	month_index = value.year * 12 + (value.month - 1) + months
	year, month = divmod(month_index, 12)
	month += 1
	last_day = calendar.monthrange(year, month)[1]
	return date(year, month, min(value.day, last_day))
