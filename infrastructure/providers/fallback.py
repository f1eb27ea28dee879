import logging
from datetime import date, timedelta
from decimal import Decimal

from domain.calendar import add_months, utc_today
from domain.models.exchange_rate import ExchangeRate
from infrastructure.providers.base import ExchangeRateProvider

logger = logging.getLogger(__name__)

# Approximate USD rates, used only when the primary source has no data
FALLBACK_RATES: dict[str, Decimal] = {
	'USD': Decimal('1.0'),
	'EUR': Decimal('0.92'),
	'GBP': Decimal('0.79'),
	'JPY': Decimal('149.50'),
	'CAD': Decimal('1.36'),
	'AUD': Decimal('1.52'),
	'CHF': Decimal('0.88'),
	'CNY': Decimal('7.24'),
	'INR': Decimal('83.12'),
	'MXN': Decimal('17.15'),
	'BRL': Decimal('4.97'),
	'KRW': Decimal('1305.50'),
	'SEK': Decimal('10.35'),
	'NZD': Decimal('1.65'),
	'SGD': Decimal('1.34'),
	'NOK': Decimal('10.72'),
	'DKK': Decimal('6.87'),
	'PLN': Decimal('3.98'),
	'THB': Decimal('34.85'),
	'MYR': Decimal('4.48'),
	'ZAR': Decimal('18.25'),
}


class FallbackRateProvider(ExchangeRateProvider):
	"""Synthetic rates from a fixed table, dated five months before the purchase."""

	def __init__(
		self,
		source_currency: str = 'USD',
		rates: dict[str, Decimal] | None = None,
		today=utc_today,
	):
		self.source_currency = source_currency
		self.rates = rates if rates is not None else FALLBACK_RATES
		self._today = today

	@property
	def name(self) -> str:
		return 'fallback'

	async def fetch_rate(self, target_currency: str, transaction_date: date) -> ExchangeRate | None:
		rate = self.rates.get(target_currency.upper())
		if rate is None:
			return None

		effective_date = add_months(transaction_date, -5)
		today = self._today()
		if effective_date > today:
			effective_date = today - timedelta(days=30)

		logger.warning(
			f'Using synthetic fallback rate {rate} for {self.source_currency}->{target_currency.upper()} '
			f'(effective {effective_date})'
		)
		return ExchangeRate.create(
			rate, self.source_currency, target_currency, effective_date, provider=self.name
		)
