from datetime import date


class TransactionError(Exception):
	pass


class InvalidArgumentError(TransactionError):
	pass


class ValidationFailure(TransactionError):
	pass


class InvalidAmountError(ValidationFailure):
	pass


class InvalidCurrencyCodeError(ValidationFailure):
	pass


class InvalidDescriptionError(ValidationFailure):
	pass


class InvalidRateError(ValidationFailure):
	pass


class FutureDateError(ValidationFailure):
	pass


class TransactionNotFoundError(TransactionError):
	def __init__(self, transaction_id):
		self.transaction_id = transaction_id
		super().__init__(f'Transaction with ID {transaction_id} not found')


class RateUnavailableError(TransactionError):
	def __init__(self, target_currency: str, transaction_date: date):
		self.target_currency = target_currency
		self.transaction_date = transaction_date
		super().__init__(
			f'No exchange rate available for {target_currency} within 6 months '
			f'of transaction date {transaction_date.isoformat()}'
		)


class RateNotApplicableError(TransactionError):
	def __init__(self, rate_date: date, transaction_date: date):
		self.rate_date = rate_date
		self.transaction_date = transaction_date
		super().__init__(
			f'Exchange rate dated {rate_date.isoformat()} is not valid for transaction dated '
			f'{transaction_date.isoformat()}; rate must be on or before the transaction date '
			'and within 6 months'
		)


class CurrencyMismatchError(TransactionError):
	pass
