import uuid

from application.services.rate_service import RateService
from application.services.transaction_service import TransactionService
from domain.exceptions.transaction import RateUnavailableError
from domain.models.converted_transaction import ConvertedTransaction
from domain.models.money import normalize_currency_code
from domain.services.conversion import CurrencyConversionService


class ConversionService:
	def __init__(
		self,
		transaction_service: TransactionService,
		rate_service: RateService,
		conversion_engine: CurrencyConversionService | None = None,
	):
		self.transaction_service = transaction_service
		self.rate_service = rate_service
		self.conversion_engine = conversion_engine or CurrencyConversionService()

	async def convert(self, transaction_id: uuid.UUID, target_currency: str) -> ConvertedTransaction:
		target_currency = normalize_currency_code(target_currency)
		transaction = await self.transaction_service.get_transaction(transaction_id)

		rate = await self.rate_service.get_rate(target_currency, transaction.transaction_date)
		if rate is None:
			raise RateUnavailableError(target_currency, transaction.transaction_date)

		return self.conversion_engine.convert_transaction(transaction, rate)
