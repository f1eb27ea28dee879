import logging
from datetime import date
from decimal import Decimal, InvalidOperation

import httpx

from domain.exceptions.currency import ProviderError, ProviderUnavailableError
from domain.exceptions.transaction import ValidationFailure
from domain.models.exchange_rate import ExchangeRate
from domain.models.transaction import rate_window_start
from infrastructure.providers.base import ExchangeRateProvider

logger = logging.getLogger(__name__)


class TreasuryProvider(ExchangeRateProvider):
	BASE_URL = 'https://api.fiscaldata.treasury.gov/services/api/fiscal_service'
	ENDPOINT = 'v1/accounting/od/rates_of_exchange'

	def __init__(
		self,
		base_url: str | None = None,
		source_currency: str = 'USD',
		client: httpx.AsyncClient | None = None,
		timeout: int = 10,
	):
		self.base_url = (base_url or self.BASE_URL).rstrip('/')
		self.source_currency = source_currency
		self._client = client or httpx.AsyncClient(timeout=timeout)

	@property
	def name(self) -> str:
		return 'treasury'

	def _build_params(self, target_currency: str, transaction_date: date) -> dict:
		window_start = rate_window_start(transaction_date)
		return {
			'filter': (
				f'currency:eq:{target_currency.upper()},'
				f'record_date:gte:{window_start.isoformat()},'
				f'record_date:lte:{transaction_date.isoformat()}'
			),
			'sort': '-record_date',
			'page[size]': '1',
		}

	async def _request(self, params: dict) -> dict:
		url = f'{self.base_url}/{self.ENDPOINT}'

		try:
			response = await self._client.get(url, params=params)
			response.raise_for_status()
			return response.json()

		except httpx.HTTPStatusError as e:
			error_class = ProviderUnavailableError if e.response.status_code >= 500 else ProviderError
			raise error_class(
				f'Treasury HTTP error {e.response.status_code}: {e.response.text[:200]}'
			) from e
		except httpx.RequestError as e:
			raise ProviderUnavailableError(f'Treasury request failed: {e.__class__.__name__}') from e
		except ValueError as e:
			raise ProviderError(f'Treasury response parsing error: {str(e)}') from e

	async def fetch_rate(self, target_currency: str, transaction_date: date) -> ExchangeRate | None:
		data = await self._request(self._build_params(target_currency, transaction_date))

		if not isinstance(data, dict):
			raise ProviderError('Treasury response parsing error: expected a JSON object')

		records = data.get('data') or []
		if not isinstance(records, list):
			raise ProviderError('Treasury response parsing error: expected a list of records')

		if not records:
			logger.info(f'Treasury has no {target_currency} rate on or before {transaction_date}')
			return None

		record = records[0]
		try:
			if not isinstance(record, dict):
				raise TypeError('record is not an object')
			rate = Decimal(str(record['exchange_rate']))
			effective_date = date.fromisoformat(record['record_date'])
			return ExchangeRate.create(
				rate, self.source_currency, target_currency, effective_date, provider=self.name
			)
		except (KeyError, TypeError, ValueError, InvalidOperation, ValidationFailure) as e:
			logger.warning(f'Discarding malformed Treasury record {record!r}: {e}')
			return None

	async def close(self) -> None:
		await self._client.aclose()
