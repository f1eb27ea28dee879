from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal, InvalidOperation

from domain.exceptions.transaction import CurrencyMismatchError, InvalidRateError
from domain.models.money import Money, normalize_currency_code


@dataclass(frozen=True)
class ExchangeRate:
	rate: Decimal
	source_currency: str
	target_currency: str
	effective_date: date
	provider: str = field(default='unknown', compare=False)

	@classmethod
	def create(
		cls,
		rate: Decimal | int | float | str,
		source_currency: str,
		target_currency: str,
		effective_date: date,
		provider: str = 'unknown',
	) -> 'ExchangeRate':
		try:
			value = rate if isinstance(rate, Decimal) else Decimal(str(rate))
		except (InvalidOperation, ValueError) as e:
			raise InvalidRateError(f'Exchange rate {rate!r} is not a number') from e

		if not value.is_finite() or value <= 0:
			raise InvalidRateError('Exchange rate must be positive')

		return cls(
			rate=value,
			source_currency=normalize_currency_code(source_currency),
			target_currency=normalize_currency_code(target_currency),
			effective_date=effective_date,
			provider=provider,
		)

	def convert(self, money: Money) -> Money:
		if money.currency != self.source_currency:
			raise CurrencyMismatchError(
				f'Cannot convert {money.currency} with exchange rate from '
				f'{self.source_currency} to {self.target_currency}'
			)
		return Money.create(money.amount * self.rate, self.target_currency)

	def __str__(self) -> str:
		return (
			f'1 {self.source_currency} = {self.rate:.4f} {self.target_currency} '
			f'(effective {self.effective_date.isoformat()})'
		)
