from datetime import date
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class CreateTransactionRequest(BaseModel):
	description: str = Field(..., description='What was purchased, at most 50 characters')
	transaction_date: date = Field(..., description='Purchase date, not in the future')
	purchase_amount: Decimal = Field(..., description='Amount in the source currency')

	model_config = ConfigDict(
		json_schema_extra={
			'example': {
				'description': 'Office supplies',
				'transaction_date': '2024-06-15',
				'purchase_amount': 100.00,
			}
		}
	)
