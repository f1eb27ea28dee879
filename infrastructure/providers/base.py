from abc import ABC, abstractmethod
from datetime import date

from domain.models.exchange_rate import ExchangeRate


class ExchangeRateProvider(ABC):
	"""A source of historical rates from the source currency into a target currency."""

	@property
	@abstractmethod
	def name(self) -> str: ...

	@abstractmethod
	async def fetch_rate(self, target_currency: str, transaction_date: date) -> ExchangeRate | None:
		"""Most recent rate on or before ``transaction_date``, or None when the source has none.

		Raises ProviderError when the source cannot be reached or answers garbage.
		"""

	async def close(self) -> None:
		return None
