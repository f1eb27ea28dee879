import uuid
from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from domain.calendar import add_months, utc_today
from domain.exceptions.transaction import (
	FutureDateError,
	InvalidArgumentError,
	InvalidDescriptionError,
)
from domain.models.exchange_rate import ExchangeRate
from domain.models.money import Money

DESCRIPTION_MAX_LENGTH = 50
RATE_WINDOW_MONTHS = 6
SOURCE_CURRENCY = 'USD'


def normalize_description(description: str | None) -> str:
	if description is None or not description.strip():
		raise InvalidDescriptionError('Description cannot be empty')
	trimmed = description.strip()
	if len(trimmed) > DESCRIPTION_MAX_LENGTH:
		raise InvalidDescriptionError(
			f'Description cannot exceed {DESCRIPTION_MAX_LENGTH} characters'
		)
	return trimmed


def rate_window_start(transaction_date: date) -> date:
	return add_months(transaction_date, -RATE_WINDOW_MONTHS)


def is_rate_valid(transaction: 'PurchaseTransaction', rate: ExchangeRate) -> bool:
	"""True when the rate is dated on or before the purchase and at most six calendar months earlier."""
	if rate.effective_date > transaction.transaction_date:
		return False
	return rate.effective_date >= rate_window_start(transaction.transaction_date)


@dataclass(frozen=True)
class PurchaseTransaction:
	id: uuid.UUID
	description: str
	transaction_date: date
	amount: Money

	@classmethod
	def create(
		cls,
		description: str,
		transaction_date: date,
		amount: Decimal | int | str,
		*,
		currency: str = SOURCE_CURRENCY,
		today: date | None = None,
	) -> 'PurchaseTransaction':
		if transaction_date is None:
			raise InvalidArgumentError('Transaction date is required')

		text = normalize_description(description)
		money = Money.create(amount, currency)

		if transaction_date > (today or utc_today()):
			raise FutureDateError('Transaction date cannot be in the future')

		return cls(id=uuid.uuid4(), description=text, transaction_date=transaction_date, amount=money)

	@classmethod
	def reconstitute(
		cls,
		transaction_id: uuid.UUID,
		description: str,
		transaction_date: date,
		amount: Decimal,
		currency: str = SOURCE_CURRENCY,
	) -> 'PurchaseTransaction':
		return cls(
			id=transaction_id,
			description=normalize_description(description),
			transaction_date=transaction_date,
			amount=Money.create(amount, currency),
		)

	def is_rate_valid(self, rate: ExchangeRate) -> bool:
		return is_rate_valid(self, rate)

	def __str__(self) -> str:
		return f'Transaction {self.id}: {self.description} on {self.transaction_date} for {self.amount}'
