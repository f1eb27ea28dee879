from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from domain.exceptions.transaction import InvalidAmountError, InvalidCurrencyCodeError

CENTS = Decimal('0.01')
# largest value a DECIMAL(18, 2) column holds
MAX_AMOUNT = Decimal('9999999999999999.99')
CURRENCY_CODE_LENGTH = 3


def normalize_currency_code(code: str | None) -> str:
	if code is None or not code.strip():
		raise InvalidCurrencyCodeError('Currency code cannot be empty')
	if len(code) != CURRENCY_CODE_LENGTH:
		raise InvalidCurrencyCodeError(
			f'Currency code must be {CURRENCY_CODE_LENGTH} characters (ISO 4217), got {code!r}'
		)
	return code.upper()


@dataclass(frozen=True)
class Money:
	amount: Decimal
	currency: str

	@classmethod
	def create(cls, amount: Decimal | int | float | str, currency: str) -> 'Money':
		try:
			value = amount if isinstance(amount, Decimal) else Decimal(str(amount))
		except (InvalidOperation, ValueError) as e:
			raise InvalidAmountError(f'Amount {amount!r} is not a number') from e

		if not value.is_finite():
			raise InvalidAmountError(f'Amount {amount!r} is not a finite number')
		if value < 0:
			raise InvalidAmountError('Amount cannot be negative')

		code = normalize_currency_code(currency)
		try:
			# ROUND_HALF_UP on Decimal rounds ties away from zero
			rounded = value.quantize(CENTS, rounding=ROUND_HALF_UP)
		except InvalidOperation as e:
			raise InvalidAmountError(f'Amount {amount!r} is too large') from e

		if rounded > MAX_AMOUNT:
			raise InvalidAmountError(f'Amount cannot exceed {MAX_AMOUNT}')
		return cls(amount=rounded, currency=code)

	@classmethod
	def usd(cls, amount: Decimal | int | float | str) -> 'Money':
		return cls.create(amount, 'USD')

	def __str__(self) -> str:
		return f'{self.amount:.2f} {self.currency}'
