import logging

from domain.exceptions.transaction import InvalidArgumentError, RateNotApplicableError
from domain.models.converted_transaction import ConvertedTransaction
from domain.models.exchange_rate import ExchangeRate
from domain.models.transaction import PurchaseTransaction, is_rate_valid

logger = logging.getLogger(__name__)


class CurrencyConversionService:
	"""Applies an exchange rate to a stored purchase.

	Holds no state, so one instance can be shared across requests.
	"""

	def convert_transaction(
		self, transaction: PurchaseTransaction | None, rate: ExchangeRate | None
	) -> ConvertedTransaction:
		if transaction is None:
			raise InvalidArgumentError('transaction is required')
		if rate is None:
			raise InvalidArgumentError('exchange rate is required')

		if not is_rate_valid(transaction, rate):
			logger.info(
				f'Rejected {rate.target_currency} rate dated {rate.effective_date} '
				f'for transaction {transaction.id} dated {transaction.transaction_date}'
			)
			raise RateNotApplicableError(
				rate_date=rate.effective_date, transaction_date=transaction.transaction_date
			)

		converted_amount = rate.convert(transaction.amount)

		return ConvertedTransaction(
			transaction_id=transaction.id,
			description=transaction.description,
			transaction_date=transaction.transaction_date,
			original_amount=transaction.amount,
			converted_amount=converted_amount,
			rate_used=rate.rate,
		)
