import uuid
from datetime import date, datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from domain.models.converted_transaction import ConvertedTransaction
from domain.models.transaction import PurchaseTransaction


class CreateTransactionResponse(BaseModel):
	transaction_id: uuid.UUID = Field(..., description='Identifier of the stored transaction')


class TransactionResponse(BaseModel):
	transaction_id: uuid.UUID
	description: str
	transaction_date: date
	amount: Decimal
	currency: str

	@classmethod
	def from_domain(cls, transaction: PurchaseTransaction) -> 'TransactionResponse':
		return cls(
			transaction_id=transaction.id,
			description=transaction.description,
			transaction_date=transaction.transaction_date,
			amount=transaction.amount.amount,
			currency=transaction.amount.currency,
		)


class ConvertedTransactionResponse(BaseModel):
	transaction_id: uuid.UUID
	description: str
	transaction_date: date
	original_amount: Decimal = Field(..., description='Amount in the source currency')
	original_currency: str = Field(..., description='Source currency code')
	target_currency: str = Field(..., description='Target currency code')
	exchange_rate: Decimal = Field(..., description='Exchange rate used for conversion')
	converted_amount: Decimal = Field(..., description='Converted amount, rounded to cents')

	model_config = ConfigDict(
		json_schema_extra={
			'example': {
				'transaction_id': '3fa85f64-5717-4562-b3fc-2c963f66afa6',
				'description': 'Office supplies',
				'transaction_date': '2024-06-15',
				'original_amount': '100.00',
				'original_currency': 'USD',
				'target_currency': 'EUR',
				'exchange_rate': '0.85',
				'converted_amount': '85.00',
			}
		}
	)

	@classmethod
	def from_domain(cls, converted: ConvertedTransaction) -> 'ConvertedTransactionResponse':
		return cls(
			transaction_id=converted.transaction_id,
			description=converted.description,
			transaction_date=converted.transaction_date,
			original_amount=converted.original_amount.amount,
			original_currency=converted.original_amount.currency,
			target_currency=converted.converted_amount.currency,
			exchange_rate=converted.rate_used,
			converted_amount=converted.converted_amount.amount,
		)


class HealthResponse(BaseModel):
	status: str
	timestamp: datetime
